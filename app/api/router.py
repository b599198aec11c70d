from fastapi import APIRouter

from app.api.tournaments import router as tournaments_router

api_router = APIRouter()

# Tournaments: setup, schedule, results, points table, penalties
api_router.include_router(tournaments_router)
