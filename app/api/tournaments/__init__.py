"""Tournaments API package: assembles sub-routers into a single router."""

from fastapi import APIRouter

from app.api.tournaments.router import router as _base_router
from app.api.tournaments.schedule import router as _schedule_router
from app.api.tournaments.matches import router as _matches_router
from app.api.tournaments.table import router as _table_router
from app.api.tournaments.penalties import router as _penalties_router

router = APIRouter()
router.include_router(_base_router)
router.include_router(_schedule_router)
router.include_router(_matches_router)
router.include_router(_table_router)
router.include_router(_penalties_router)
