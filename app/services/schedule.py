"""Round-robin schedule generation: pairings grouped into series grouped into rounds."""

import logging
import random
from collections import Counter, defaultdict
from dataclasses import dataclass, field

from app.schemas.tournament import (
    ManualSeriesDraft,
    Match,
    MatchStatus,
    SchedulingMode,
    Series,
    SeriesStatus,
    Stadium,
    Team,
    TournamentConfig,
)
from app.services.errors import ScheduleError
from app.utils.series_length import parse_series_length, round_robin_passes

logger = logging.getLogger(__name__)

# Placeholder opponent for odd team counts; never equal to a team id
BYE = object()
DEFAULT_VENUE = Stadium(id="neutral", name="Neutral Venue")


@dataclass(frozen=True)
class ScheduleConfig:
    min_series_len: int = 1
    max_series_len: int = 1
    mode: SchedulingMode = SchedulingMode.AUTO
    manual_draft: tuple[ManualSeriesDraft, ...] = ()
    is_double_round_robin: bool = False
    seed: int | None = None

    @classmethod
    def from_tournament_config(
        cls,
        config: TournamentConfig,
        manual_draft: list[ManualSeriesDraft] | None = None,
        seed: int | None = None,
    ) -> "ScheduleConfig":
        low, high = parse_series_length(config.series_length)
        return cls(
            min_series_len=low,
            max_series_len=high,
            mode=config.scheduling_mode,
            manual_draft=tuple(manual_draft or ()),
            is_double_round_robin=round_robin_passes(config.schedule_format) == 2,
            seed=seed,
        )


@dataclass
class ScheduleResult:
    matches: list[Match] = field(default_factory=list)
    series: list[Series] = field(default_factory=list)
    rounds: int = 0

    @property
    def uses_default_venue(self) -> bool:
        return any(m.venue_id == DEFAULT_VENUE.id for m in self.matches)


@dataclass(frozen=True)
class _Placement:
    round: int
    team1_id: str
    team2_id: str
    match_count: int | None = None  # None -> drawn from the configured range


class _RoundBook:
    """Tracks which teams already play in each round."""

    def __init__(self) -> None:
        self._used: dict[int, set[str]] = defaultdict(set)

    def is_free(self, round_no: int, team1_id: str, team2_id: str) -> bool:
        used = self._used[round_no]
        return team1_id not in used and team2_id not in used

    def first_free(self, start: int, team1_id: str, team2_id: str) -> int:
        round_no = start
        while not self.is_free(round_no, team1_id, team2_id):
            round_no += 1
        return round_no

    def reserve(self, round_no: int, team1_id: str, team2_id: str) -> None:
        self._used[round_no].update((team1_id, team2_id))


def _pair_key(team1_id: str, team2_id: str) -> frozenset[str]:
    return frozenset((team1_id, team2_id))


def circle_pairings(team_ids: list) -> list[list[tuple]]:
    """
    Pairings per round using the circle method.

    Position 0 stays fixed while the rest rotate one step per round;
    position i meets position n-1-i. Expects an even number of ids.
    """
    ids = list(team_ids)
    n = len(ids)
    rounds = []
    for _ in range(n - 1):
        rounds.append([(ids[i], ids[n - 1 - i]) for i in range(n // 2)])
        ids = [ids[0]] + [ids[-1]] + ids[1:-1]
    return rounds


def _place_manual_entries(
    draft: tuple[ManualSeriesDraft, ...],
    known_ids: set[str],
    book: _RoundBook,
) -> list[_Placement]:
    placements = []
    for entry in draft:
        if entry.team1_id == entry.team2_id:
            raise ScheduleError(f"Team {entry.team1_id} cannot play against itself")
        for team_id in (entry.team1_id, entry.team2_id):
            if team_id not in known_ids:
                raise ScheduleError(f"Team {team_id} is not part of this tournament")

        round_no = book.first_free(entry.round_hint or 1, entry.team1_id, entry.team2_id)
        book.reserve(round_no, entry.team1_id, entry.team2_id)
        placements.append(
            _Placement(round_no, entry.team1_id, entry.team2_id, entry.match_count)
        )
    return placements


def _place_round_robin(
    pool: list,
    passes: int,
    reserved: Counter,
    book: _RoundBook,
) -> list[_Placement]:
    rounds = circle_pairings(pool)
    placements = []
    for pass_no in range(passes):
        offset = pass_no * len(rounds)
        for index, pairings in enumerate(rounds, start=1):
            for team1_id, team2_id in pairings:
                if team1_id is BYE or team2_id is BYE:
                    continue
                if pass_no % 2 == 1:
                    # Second leg: swap sides
                    team1_id, team2_id = team2_id, team1_id

                key = _pair_key(team1_id, team2_id)
                if reserved[key]:
                    reserved[key] -= 1
                    logger.debug("Pairing %s vs %s already drafted manually, skipping", team1_id, team2_id)
                    continue

                round_no = book.first_free(offset + index, team1_id, team2_id)
                book.reserve(round_no, team1_id, team2_id)
                placements.append(_Placement(round_no, team1_id, team2_id))
    return placements


def _materialize(
    placement: _Placement,
    seq: int,
    venue_ids: list[str],
    config: ScheduleConfig,
    rng: random.Random,
) -> tuple[Series, list[Match]]:
    count = placement.match_count
    if count is None:
        count = rng.randint(config.min_series_len, config.max_series_len)

    series_id = f"S{placement.round}-{seq}"
    matches = [
        Match(
            id=f"{series_id}-M{i + 1}",
            round=placement.round,
            series_id=series_id,
            team1_id=placement.team1_id,
            team2_id=placement.team2_id,
            venue_id=venue_ids[i % len(venue_ids)],
            match_number=i + 1,
            status=MatchStatus.NOT_STARTED,
        )
        for i in range(count)
    ]
    series = Series(
        id=series_id,
        round=placement.round,
        team1_id=placement.team1_id,
        team2_id=placement.team2_id,
        status=SeriesStatus.NOT_STARTED,
        match_ids=[m.id for m in matches],
        match_count=count,
    )
    return series, matches


def generate_schedule(
    teams: list[Team],
    venues: list[Stadium],
    config: ScheduleConfig,
    rng: random.Random | None = None,
) -> ScheduleResult:
    """
    Build every series and match of a season.

    AUTO pairs all teams with the circle method, MANUAL uses only the
    drafted pairings, HYBRID places the drafted pairings first and lets
    the rotation fill in the rest. A team never plays twice in one round.

    AUTO always uses (N - 1) rounds per pass, N rounded up to even. In
    HYBRID a rotation pairing that clashes with a drafted one moves to the
    next round where both teams are free, which can add rounds.

    Raises:
        ScheduleError: fewer than 2 teams, an invalid series length range,
            an invalid manual draft entry or no pairings at all.
    """
    team_ids = list(dict.fromkeys(team.id for team in teams))
    if len(team_ids) < 2:
        raise ScheduleError("At least 2 teams are required to generate a schedule")
    if config.min_series_len < 1 or config.min_series_len > config.max_series_len:
        raise ScheduleError(
            f"Invalid series length range {config.min_series_len}-{config.max_series_len}"
        )

    if rng is None:
        rng = random.Random(config.seed)

    venue_ids = [venue.id for venue in venues] or [DEFAULT_VENUE.id]

    pool = list(team_ids)
    if len(pool) % 2:
        pool.append(BYE)

    book = _RoundBook()
    reserved: Counter = Counter()
    placements: list[_Placement] = []

    if config.mode in (SchedulingMode.MANUAL, SchedulingMode.HYBRID):
        manual = _place_manual_entries(config.manual_draft, set(team_ids), book)
        for p in manual:
            reserved[_pair_key(p.team1_id, p.team2_id)] += 1
        placements.extend(manual)

    if config.mode in (SchedulingMode.AUTO, SchedulingMode.HYBRID):
        passes = 2 if config.is_double_round_robin else 1
        placements.extend(_place_round_robin(pool, passes, reserved, book))

    if not placements:
        raise ScheduleError("The schedule has no pairings to play")
    placements.sort(key=lambda p: p.round)

    result = ScheduleResult()
    for seq, placement in enumerate(placements, start=1):
        series, matches = _materialize(placement, seq, venue_ids, config, rng)
        result.series.append(series)
        result.matches.extend(matches)
    result.rounds = max((p.round for p in placements), default=0)

    logger.info(
        "Generated schedule: %d teams, %d rounds, %d series, %d matches (mode=%s)",
        len(team_ids), result.rounds, len(result.series), len(result.matches), config.mode.value,
    )
    return result
