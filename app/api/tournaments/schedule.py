"""Schedule endpoints: generate, regenerate, browse rounds."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.tournaments.errors import http_error
from app.schemas.schedule import (
    ScheduleGenerateRequest,
    ScheduleRegenerateRequest,
    ScheduleResponse,
)
from app.schemas.tournament import Tournament
from app.services.errors import ScheduleError, TournamentError
from app.services.tournament_store import get_tournament_or_404, save_tournament
from app.services.tournaments import regenerate_schedule, start_season
from app.utils.schedule_grouping import group_schedule_by_round
from app.utils.series_length import expected_series_count

router = APIRouter(prefix="/tournaments", tags=["schedule"])


def _schedule_response(tournament: Tournament, round_no: int | None = None) -> ScheduleResponse:
    return ScheduleResponse(
        tournament_id=tournament.id,
        status=tournament.status,
        total_rounds=max((s.round for s in tournament.series), default=0),
        total_series=len(tournament.series),
        expected_series=expected_series_count(tournament.teams_count, tournament.config.schedule_format),
        total_matches=len(tournament.matches),
        rounds=group_schedule_by_round(tournament, round_no),
    )


@router.get("/{tournament_id}/schedule", response_model=ScheduleResponse)
async def get_schedule(
    tournament_id: str,
    round: int | None = Query(default=None, ge=1, description="Only this round"),
    db: AsyncSession = Depends(get_db),
):
    tournament = await get_tournament_or_404(db, tournament_id)
    return _schedule_response(tournament, round)


@router.post("/{tournament_id}/schedule", response_model=ScheduleResponse, status_code=201)
async def generate_schedule_endpoint(
    tournament_id: str,
    body: ScheduleGenerateRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Generate the season's fixtures. Refused when matches already exist."""
    body = body or ScheduleGenerateRequest()
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = start_season(tournament, body.manual_draft, body.seed)
    except (TournamentError, ScheduleError) as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return _schedule_response(tournament)


@router.post("/{tournament_id}/schedule/regenerate", response_model=ScheduleResponse)
async def regenerate_schedule_endpoint(
    tournament_id: str,
    body: ScheduleRegenerateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Discard all matches and series and generate a new schedule."""
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = regenerate_schedule(tournament, body.confirm_name, body.manual_draft, body.seed)
    except (TournamentError, ScheduleError) as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return _schedule_response(tournament)
