"""Schedule grouping: matches -> series -> rounds for display."""

from collections import defaultdict

from app.schemas.schedule import ScheduleRound, ScheduleSeries
from app.schemas.tournament import MatchStatus, Tournament


def group_schedule_by_round(
    tournament: Tournament,
    round_no: int | None = None,
) -> list[ScheduleRound]:
    """
    Group a tournament's series by round, each series carrying its matches.

    Args:
        tournament: Tournament with a generated schedule
        round_no: Only return this round when given

    Returns:
        Rounds in ascending order; series keep generation order
    """
    team_names = {t.id: t.name for t in tournament.teams}
    matches_by_id = {m.id: m for m in tournament.matches}

    grouped: dict[int, list[ScheduleSeries]] = defaultdict(list)
    for series in tournament.series:
        if round_no is not None and series.round != round_no:
            continue
        matches = [matches_by_id[mid] for mid in series.match_ids if mid in matches_by_id]
        grouped[series.round].append(
            ScheduleSeries(
                id=series.id,
                team1_id=series.team1_id,
                team1_name=team_names.get(series.team1_id),
                team2_id=series.team2_id,
                team2_name=team_names.get(series.team2_id),
                status=series.status,
                match_count=series.match_count,
                completed_count=sum(1 for m in matches if m.status == MatchStatus.COMPLETED),
                matches=matches,
            )
        )

    return [ScheduleRound(round=r, series=grouped[r]) for r in sorted(grouped)]
