"""Penalty endpoints: add and remove point deductions."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.tournaments.errors import http_error
from app.schemas.common import OkResponse
from app.schemas.tournament import PenaltyCreate, PenaltyRecord
from app.services.errors import TournamentError
from app.services.tournament_store import get_tournament_or_404, save_tournament
from app.services.tournaments import add_penalty, remove_penalty

router = APIRouter(prefix="/tournaments", tags=["penalties"])


@router.get("/{tournament_id}/penalties", response_model=list[PenaltyRecord])
async def get_penalties(tournament_id: str, db: AsyncSession = Depends(get_db)):
    tournament = await get_tournament_or_404(db, tournament_id)
    return tournament.penalties


@router.post("/{tournament_id}/penalties", response_model=PenaltyRecord, status_code=201)
async def add_penalty_endpoint(
    tournament_id: str,
    body: PenaltyCreate,
    db: AsyncSession = Depends(get_db),
):
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = add_penalty(tournament, body.team_id, body.points, body.reason, body.added_by)
    except TournamentError as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return tournament.penalties[-1]


@router.delete("/{tournament_id}/penalties/{penalty_id}", response_model=OkResponse)
async def remove_penalty_endpoint(
    tournament_id: str,
    penalty_id: str,
    db: AsyncSession = Depends(get_db),
):
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = remove_penalty(tournament, penalty_id)
    except TournamentError as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return OkResponse(ok=True)
