"""Points table endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.standings import StandingsResponse
from app.services.standings import compute_standings
from app.services.tournament_store import get_tournament_or_404

router = APIRouter(prefix="/tournaments", tags=["standings"])


@router.get("/{tournament_id}/table", response_model=StandingsResponse)
async def get_points_table(tournament_id: str, db: AsyncSession = Depends(get_db)):
    """Points table, recomputed from every match, series and penalty on each call."""
    tournament = await get_tournament_or_404(db, tournament_id)
    return StandingsResponse(tournament_id=tournament.id, table=compute_standings(tournament))
