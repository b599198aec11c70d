"""Shared series/tournament status computation."""

from typing import Iterable

from app.schemas.tournament import Match, MatchStatus, SeriesStatus, TournamentStatus


def compute_series_status(matches: Iterable[Match]) -> SeriesStatus:
    """Compute series status from its matches.

    Returns:
        COMPLETED - every match is completed
        IN_PROGRESS - at least one, but not every, match is completed
        NOT_STARTED - no match is completed (or the series is empty)
    """
    statuses = [m.status for m in matches]
    completed = sum(1 for s in statuses if s == MatchStatus.COMPLETED)

    if statuses and completed == len(statuses):
        return SeriesStatus.COMPLETED
    elif completed:
        return SeriesStatus.IN_PROGRESS
    else:
        return SeriesStatus.NOT_STARTED


def compute_tournament_status(matches: list[Match]) -> TournamentStatus:
    if not matches:
        return TournamentStatus.UPCOMING
    if all(m.status == MatchStatus.COMPLETED for m in matches):
        return TournamentStatus.COMPLETED
    return TournamentStatus.ONGOING
