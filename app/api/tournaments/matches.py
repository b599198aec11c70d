"""Match endpoints: start, commit result, unlock, result log."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.tournaments.errors import http_error
from app.schemas.results import (
    MatchResponse,
    MatchUnlockRequest,
    ResultCommitRequest,
    ResultLogListResponse,
)
from app.schemas.tournament import Tournament
from app.services.errors import ResultError
from app.services.results import commit_result, start_match, unlock_match
from app.services.tournament_store import get_tournament_or_404, save_tournament

router = APIRouter(prefix="/tournaments", tags=["matches"])


def _match_response(tournament: Tournament, match_id: str) -> MatchResponse:
    match = next(m for m in tournament.matches if m.id == match_id)
    series = next((s for s in tournament.series if s.id == match.series_id), None)
    return MatchResponse(match=match, series=series)


@router.post("/{tournament_id}/matches/{match_id}/start", response_model=MatchResponse)
async def start_match_endpoint(
    tournament_id: str,
    match_id: str,
    db: AsyncSession = Depends(get_db),
):
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = start_match(tournament, match_id)
    except ResultError as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return _match_response(tournament, match_id)


@router.post("/{tournament_id}/matches/{match_id}/result", response_model=MatchResponse)
async def commit_result_endpoint(
    tournament_id: str,
    match_id: str,
    body: ResultCommitRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Record or edit a match result.

    Send either `result_type` or `winner_id`; a draw/tie must be marked
    explicitly with `result_type`.
    """
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = commit_result(
            tournament,
            match_id,
            result_type=body.result_type,
            winner_id=body.winner_id,
            notes=body.notes,
            edited_by=body.edited_by,
            reason=body.reason,
        )
    except ResultError as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return _match_response(tournament, match_id)


@router.post("/{tournament_id}/matches/{match_id}/unlock", response_model=MatchResponse)
async def unlock_match_endpoint(
    tournament_id: str,
    match_id: str,
    body: MatchUnlockRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    body = body or MatchUnlockRequest()
    tournament = await get_tournament_or_404(db, tournament_id)
    try:
        tournament = unlock_match(tournament, match_id, edited_by=body.edited_by, reason=body.reason)
    except ResultError as exc:
        raise http_error(exc)
    await save_tournament(db, tournament)
    return _match_response(tournament, match_id)


@router.get("/{tournament_id}/logs", response_model=ResultLogListResponse)
async def get_result_logs(tournament_id: str, db: AsyncSession = Depends(get_db)):
    tournament = await get_tournament_or_404(db, tournament_id)
    items = list(reversed(tournament.logs))
    return ResultLogListResponse(items=items, total=len(items))
