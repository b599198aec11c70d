"""Tournament lifecycle: creation, schedule (re)generation, team edits, penalties."""

import logging
import random
import uuid

from app.config import get_settings
from app.schemas.tournament import (
    ManualSeriesDraft,
    PenaltyRecord,
    Stadium,
    Team,
    Tournament,
    TournamentConfig,
    TournamentCreate,
    TournamentHeader,
    TournamentStatus,
    TeamUpdate,
)
from app.services.errors import (
    PenaltyNotFoundError,
    ScheduleExistsError,
    TeamNotFoundError,
    TournamentError,
)
from app.services.schedule import DEFAULT_VENUE, ScheduleConfig, generate_schedule
from app.utils.error_messages import get_error_message
from app.utils.timestamps import utc_today

logger = logging.getLogger(__name__)


def default_config() -> TournamentConfig:
    settings = get_settings()
    return TournamentConfig(
        series_length=settings.default_series_length,
        schedule_format=settings.default_schedule_format,
        playoff_system=settings.default_playoff_system,
        points_for_win=settings.default_points_for_win,
        points_for_draw=settings.default_points_for_draw,
        points_for_loss=settings.default_points_for_loss,
        count_series_bonus=settings.default_count_series_bonus,
        points_for_series_win=settings.default_points_for_series_win,
        points_for_series_draw=settings.default_points_for_series_draw,
    )


def _new_id() -> str:
    return uuid.uuid4().hex


def create_tournament(payload: TournamentCreate) -> Tournament:
    if not payload.name.strip():
        raise TournamentError("Tournament name is required")
    if len(payload.teams) < 2:
        raise TournamentError("At least 2 teams are required")
    if any(not t.name.strip() for t in payload.teams):
        raise TournamentError("All team names are required")

    teams = [
        Team(
            id=t.id or f"team-{i}",
            name=t.name.strip(),
            short_code=t.short_code,
            owner=t.owner,
            logo_url=t.logo_url,
        )
        for i, t in enumerate(payload.teams)
    ]
    if len({t.id for t in teams}) != len(teams):
        raise TournamentError("Team ids must be unique")

    stadiums = [
        Stadium(id=s.id or _new_id(), name=s.name.strip())
        for s in payload.stadiums
        if s.name.strip()
    ]

    tournament = Tournament(
        id=_new_id(),
        name=payload.name.strip(),
        created_date=utc_today(),
        season=payload.season,
        status=TournamentStatus.UPCOMING,
        teams=teams,
        stadiums=stadiums,
        config=payload.config or default_config(),
        header=payload.header or TournamentHeader(tournament_name=payload.name.strip()),
    )
    logger.info("Tournament %s created with %d teams", tournament.id, len(teams))
    return tournament


def start_season(
    tournament: Tournament,
    manual_draft: list[ManualSeriesDraft] | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Tournament:
    """Generate the fixture list for a tournament that has none yet."""
    if tournament.matches:
        raise ScheduleExistsError(get_error_message("schedule_exists"))

    config = ScheduleConfig.from_tournament_config(tournament.config, manual_draft, seed)
    result = generate_schedule(tournament.teams, tournament.stadiums, config, rng=rng)

    stadiums = list(tournament.stadiums)
    if result.uses_default_venue and all(s.id != DEFAULT_VENUE.id for s in stadiums):
        stadiums.append(DEFAULT_VENUE)

    return tournament.model_copy(update={
        "matches": result.matches,
        "series": result.series,
        "stadiums": stadiums,
        "status": TournamentStatus.ONGOING,
    })


def regenerate_schedule(
    tournament: Tournament,
    confirm_name: str,
    manual_draft: list[ManualSeriesDraft] | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Tournament:
    """Throw away every match and series and generate a fresh schedule.

    The caller must type the tournament name exactly to confirm.
    """
    if confirm_name != tournament.name:
        raise TournamentError(get_error_message("regenerate_confirmation_failed"))

    logger.info(
        "Regenerating schedule for tournament %s (%d matches discarded)",
        tournament.id, len(tournament.matches),
    )
    cleared = tournament.model_copy(update={"matches": [], "series": []})
    return start_season(cleared, manual_draft, seed, rng=rng)


def _find_team(tournament: Tournament, team_id: str) -> Team:
    for team in tournament.teams:
        if team.id == team_id:
            return team
    raise TeamNotFoundError(get_error_message("team_not_found"))


def update_team(tournament: Tournament, team_id: str, changes: TeamUpdate) -> Tournament:
    team = _find_team(tournament, team_id)
    update = changes.model_dump(exclude_unset=True)
    if "name" in update:
        if not (update["name"] or "").strip():
            raise TournamentError("Team name is required")
        update["name"] = update["name"].strip()

    updated = team.model_copy(update=update)
    return tournament.model_copy(update={
        "teams": [updated if t.id == team_id else t for t in tournament.teams],
    })


def add_penalty(
    tournament: Tournament,
    team_id: str,
    points: int,
    reason: str = "",
    added_by: str | None = None,
) -> Tournament:
    _find_team(tournament, team_id)
    if points <= 0:
        raise TournamentError("Penalty points must be positive")
    penalty = PenaltyRecord(
        id=_new_id(),
        team_id=team_id,
        points=points,
        reason=reason,
        date=utc_today(),
        added_by=added_by,
    )
    logger.info("Penalty of %d points recorded for team %s", points, team_id)
    return tournament.model_copy(update={"penalties": [*tournament.penalties, penalty]})


def remove_penalty(tournament: Tournament, penalty_id: str) -> Tournament:
    remaining = [p for p in tournament.penalties if p.id != penalty_id]
    if len(remaining) == len(tournament.penalties):
        raise PenaltyNotFoundError(get_error_message("penalty_not_found"))
    return tournament.model_copy(update={"penalties": remaining})
