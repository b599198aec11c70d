"""Base tournament endpoints: create, list, detail, delete, team edits."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.tournaments.errors import http_error
from app.schemas.common import OkResponse
from app.schemas.tournament import (
    Team,
    TeamUpdate,
    Tournament,
    TournamentCreate,
    TournamentListResponse,
)
from app.services.errors import TournamentError
from app.services.tournament_store import (
    delete_tournament,
    get_tournament_or_404,
    list_tournaments,
    save_tournament,
)
from app.services.tournaments import create_tournament, update_team
from app.utils.error_messages import get_error_message

router = APIRouter(prefix="/tournaments", tags=["tournaments"])


@router.post("", response_model=Tournament, status_code=201)
async def create_tournament_endpoint(
    body: TournamentCreate,
    db: AsyncSession = Depends(get_db),
):
    try:
        tournament = create_tournament(body)
    except TournamentError as exc:
        raise http_error(exc)
    return await save_tournament(db, tournament)


@router.get("", response_model=TournamentListResponse)
async def get_tournaments(db: AsyncSession = Depends(get_db)):
    items = await list_tournaments(db)
    return TournamentListResponse(items=items, total=len(items))


@router.get("/{tournament_id}", response_model=Tournament)
async def get_tournament(tournament_id: str, db: AsyncSession = Depends(get_db)):
    return await get_tournament_or_404(db, tournament_id)


@router.delete("/{tournament_id}", response_model=OkResponse)
async def delete_tournament_endpoint(tournament_id: str, db: AsyncSession = Depends(get_db)):
    if not await delete_tournament(db, tournament_id):
        raise HTTPException(status_code=404, detail=get_error_message("tournament_not_found"))
    return OkResponse(ok=True)


@router.patch("/{tournament_id}/teams/{team_id}", response_model=Team)
async def update_team_endpoint(
    tournament_id: str,
    team_id: str,
    body: TeamUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Edit a team's name, short code, owner or logo."""
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = update_team(tournament, team_id, body)
    except TournamentError as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return next(t for t in tournament.teams if t.id == team_id)
