"""Standings calculation: points table folded from the full match history."""

import logging

from app.schemas.standings import TeamStanding
from app.schemas.tournament import (
    DECIDED_RESULTS,
    LEVEL_RESULTS,
    VOID_RESULTS,
    MatchResultType,
    MatchStatus,
    SeriesStatus,
    Tournament,
)

logger = logging.getLogger(__name__)

FORM_LENGTH = 5

_FORM_CODES = {
    MatchResultType.DRAW: "D",
    MatchResultType.TIE: "T",
    MatchResultType.NO_RESULT: "NR",
    MatchResultType.ABANDONED: "NR",
}


def _empty_stats() -> dict:
    return {
        "series_played": 0,
        "matches_played": 0,
        "matches_won": 0,
        "matches_lost": 0,
        "matches_drawn": 0,
        "matches_tied": 0,
        "matches_no_result": 0,
        "base_points": 0,
        "bonus_points": 0,
        "penalty_points": 0,
        "max_points": 0,
        "form_list": [],
    }


def _apply_matches(tournament: Tournament, team_stats: dict[str, dict]) -> None:
    config = tournament.config

    for match in tournament.matches:
        if match.status != MatchStatus.COMPLETED or match.result_type is None:
            continue

        if match.team1_id not in team_stats or match.team2_id not in team_stats:
            logger.debug("Match %s references an unknown team, ignored", match.id)
            continue

        res = match.result_type
        sides = [
            (team_stats[match.team1_id], res == MatchResultType.T1_WIN),
            (team_stats[match.team2_id], res == MatchResultType.T2_WIN),
        ]
        for stats, won in sides:
            stats["matches_played"] += 1
            if res in DECIDED_RESULTS:
                stats["max_points"] += config.points_for_win
                if won:
                    stats["matches_won"] += 1
                    stats["base_points"] += config.points_for_win
                    stats["form_list"].append("W")
                else:
                    stats["matches_lost"] += 1
                    stats["base_points"] += config.points_for_loss
                    stats["form_list"].append("L")
            elif res in LEVEL_RESULTS:
                stats["max_points"] += config.points_for_win
                stats["base_points"] += config.points_for_draw
                stats["matches_drawn"] += 1
                if res == MatchResultType.TIE:
                    stats["matches_tied"] += 1
                stats["form_list"].append(_FORM_CODES[res])
            elif res in VOID_RESULTS:
                # Played, but no points on offer
                stats["matches_no_result"] += 1
                stats["form_list"].append(_FORM_CODES[res])


def _apply_series_bonus(tournament: Tournament, team_stats: dict[str, dict]) -> None:
    config = tournament.config
    matches_by_id = {m.id: m for m in tournament.matches}

    for series in tournament.series:
        if series.status != SeriesStatus.COMPLETED:
            continue

        completed = [
            m for m in (matches_by_id.get(mid) for mid in series.match_ids)
            if m is not None and m.status == MatchStatus.COMPLETED
        ]
        if not completed:
            continue

        stats1 = team_stats.get(series.team1_id)
        stats2 = team_stats.get(series.team2_id)
        if stats1 is None or stats2 is None:
            continue

        wins1 = sum(1 for m in completed if m.result_type == MatchResultType.T1_WIN)
        wins2 = sum(1 for m in completed if m.result_type == MatchResultType.T2_WIN)

        stats1["max_points"] += config.points_for_series_win
        stats2["max_points"] += config.points_for_series_win

        if wins1 > wins2:
            awarded = [(stats1, config.points_for_series_win)]
        elif wins2 > wins1:
            awarded = [(stats2, config.points_for_series_win)]
        else:
            awarded = [
                (stats1, config.points_for_series_draw),
                (stats2, config.points_for_series_draw),
            ]
        for stats, points in awarded:
            stats["bonus_points"] += points


def _apply_penalties(tournament: Tournament, team_stats: dict[str, dict]) -> None:
    for penalty in tournament.penalties:
        stats = team_stats.get(penalty.team_id)
        if stats is None:
            logger.debug("Penalty %s references unknown team %s, ignored", penalty.id, penalty.team_id)
            continue
        stats["penalty_points"] += abs(penalty.points)


def compute_standings(tournament: Tournament) -> list[TeamStanding]:
    """
    Recompute the points table from scratch.

    Ranking: pct descending, then total points descending, then fewer
    penalty points. Teams still level keep their roster order.
    """
    team_stats: dict[str, dict] = {}
    for team in tournament.teams:
        team_stats.setdefault(team.id, _empty_stats())

    for series in tournament.series:
        for team_id in {series.team1_id, series.team2_id}:
            if team_id in team_stats:
                team_stats[team_id]["series_played"] += 1

    _apply_matches(tournament, team_stats)
    if tournament.config.count_series_bonus:
        _apply_series_bonus(tournament, team_stats)
    _apply_penalties(tournament, team_stats)

    table_list = []
    seen: set[str] = set()
    for team in tournament.teams:
        if team.id in seen:
            continue
        seen.add(team.id)

        stats = team_stats[team.id]
        total = stats["base_points"] + stats["bonus_points"] - stats["penalty_points"]
        max_points = stats["max_points"]
        form = stats.pop("form_list")[-FORM_LENGTH:][::-1]
        table_list.append({
            **stats,
            "team_id": team.id,
            "team_name": team.name,
            "short_code": team.short_code,
            "logo_url": team.logo_url,
            "total_points": total,
            "pct": (total / max_points * 100) if max_points else 0.0,
            "form": form,
        })

    table_list.sort(key=lambda x: (-x["pct"], -x["total_points"], x["penalty_points"]))

    return [TeamStanding(position=i, **entry) for i, entry in enumerate(table_list, 1)]
