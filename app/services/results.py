"""Match result commits and unlocks.

Every function takes a Tournament and returns a new one; the input value
is never modified, so a rejected operation leaves prior state untouched.
"""

import logging
import uuid

from app.schemas.tournament import (
    DECIDED_RESULTS,
    Match,
    MatchResultType,
    MatchStatus,
    ResultLog,
    Tournament,
)
from app.services.errors import MatchNotFoundError, ResultError
from app.utils.error_messages import get_error_message
from app.utils.series_status import compute_series_status, compute_tournament_status
from app.utils.timestamps import utcnow

logger = logging.getLogger(__name__)

SYSTEM_EDITOR = "ADMIN"


def _find_match(tournament: Tournament, match_id: str) -> Match:
    for match in tournament.matches:
        if match.id == match_id:
            return match
    raise MatchNotFoundError(get_error_message("match_not_found"))


def _describe(match: Match) -> str:
    if match.status != MatchStatus.COMPLETED or match.result_type is None:
        return match.status.value
    return match.result_type.value


def _resolve_result(
    match: Match,
    result_type: MatchResultType | None,
    winner_id: str | None,
) -> tuple[MatchResultType, str | None]:
    if winner_id is not None and winner_id not in (match.team1_id, match.team2_id):
        raise ResultError(f"Team {winner_id} does not play in match {match.id}")

    if result_type is None:
        if winner_id is None:
            raise ResultError("Select a winner or mark the match as a draw/tie")
        result_type = (
            MatchResultType.T1_WIN if winner_id == match.team1_id else MatchResultType.T2_WIN
        )

    if result_type == MatchResultType.T1_WIN:
        expected = match.team1_id
    elif result_type == MatchResultType.T2_WIN:
        expected = match.team2_id
    else:
        expected = None

    if winner_id is not None and winner_id != expected:
        raise ResultError(f"Winner {winner_id} contradicts result {result_type.value}")
    return result_type, expected


def _with_match(tournament: Tournament, updated: Match, log: ResultLog | None = None) -> Tournament:
    """Replace one match and re-derive its series and the tournament status."""
    matches = [updated if m.id == updated.id else m for m in tournament.matches]

    series_matches = [m for m in matches if m.series_id == updated.series_id]
    series = [
        s.model_copy(update={"status": compute_series_status(series_matches)})
        if s.id == updated.series_id else s
        for s in tournament.series
    ]

    update = {
        "matches": matches,
        "series": series,
        "status": compute_tournament_status(matches),
    }
    if log is not None:
        update["logs"] = [*tournament.logs, log]
    return tournament.model_copy(update=update)


def _log_entry(match_id: str, old: str, new: str, edited_by: str | None, reason: str | None) -> ResultLog:
    return ResultLog(
        id=uuid.uuid4().hex,
        match_id=match_id,
        old_result=old,
        new_result=new,
        edited_by=edited_by or SYSTEM_EDITOR,
        timestamp=utcnow(),
        reason=reason or "",
    )


def commit_result(
    tournament: Tournament,
    match_id: str,
    result_type: MatchResultType | None = None,
    winner_id: str | None = None,
    notes: str | None = None,
    edited_by: str | None = None,
    reason: str | None = None,
) -> Tournament:
    """Record (or edit) the result of a match.

    The result is either given explicitly or derived from the winner.

    Raises:
        MatchNotFoundError: unknown match id
        ResultError: no result chosen, or a winner that does not fit the result
    """
    match = _find_match(tournament, match_id)
    result_type, resolved_winner = _resolve_result(match, result_type, winner_id)

    updated = match.model_copy(update={
        "status": MatchStatus.COMPLETED,
        "result_type": result_type,
        "winner_id": resolved_winner if result_type in DECIDED_RESULTS else None,
        "notes": notes,
    })
    log = _log_entry(match_id, _describe(match), _describe(updated), edited_by, reason)

    logger.info("Result committed for match %s: %s -> %s", match_id, log.old_result, log.new_result)
    return _with_match(tournament, updated, log)


def start_match(tournament: Tournament, match_id: str) -> Tournament:
    match = _find_match(tournament, match_id)
    if match.status != MatchStatus.NOT_STARTED:
        raise ResultError(f"Match {match_id} has already started")

    updated = match.model_copy(update={"status": MatchStatus.IN_PROGRESS})
    return _with_match(tournament, updated)


def unlock_match(
    tournament: Tournament,
    match_id: str,
    edited_by: str | None = None,
    reason: str | None = None,
) -> Tournament:
    """Revert a completed match to NOT_STARTED and clear its result."""
    match = _find_match(tournament, match_id)
    if match.status != MatchStatus.COMPLETED:
        raise ResultError(f"Match {match_id} has no result to unlock")

    updated = match.model_copy(update={
        "status": MatchStatus.NOT_STARTED,
        "result_type": None,
        "winner_id": None,
        "notes": None,
    })
    log = _log_entry(match_id, _describe(match), _describe(updated), edited_by, reason)

    logger.info("Match %s unlocked (was %s)", match_id, log.old_result)
    return _with_match(tournament, updated, log)
