"""Tournament aggregate: the whole document persisted per tournament."""

import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, computed_field


class MatchStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


# Series progress uses the same three states, derived from its matches.
SeriesStatus = MatchStatus


class MatchResultType(str, Enum):
    T1_WIN = "T1_WIN"
    T2_WIN = "T2_WIN"
    DRAW = "DRAW"
    TIE = "TIE"
    NO_RESULT = "NO_RESULT"
    ABANDONED = "ABANDONED"


DECIDED_RESULTS = {MatchResultType.T1_WIN, MatchResultType.T2_WIN}
LEVEL_RESULTS = {MatchResultType.DRAW, MatchResultType.TIE}
VOID_RESULTS = {MatchResultType.NO_RESULT, MatchResultType.ABANDONED}


class SchedulingMode(str, Enum):
    AUTO = "AUTO"
    MANUAL = "MANUAL"
    HYBRID = "HYBRID"


class TournamentStatus(str, Enum):
    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"


class Team(BaseModel):
    id: str
    name: str
    short_code: str | None = None
    owner: str | None = None
    logo_url: str | None = None


class Stadium(BaseModel):
    id: str
    name: str


class Match(BaseModel):
    id: str
    round: int
    series_id: str
    team1_id: str
    team2_id: str
    venue_id: str
    match_number: int = 1
    status: MatchStatus = MatchStatus.NOT_STARTED
    winner_id: str | None = None
    result_type: MatchResultType | None = None
    notes: str | None = None


class Series(BaseModel):
    id: str
    round: int
    team1_id: str
    team2_id: str
    status: SeriesStatus = SeriesStatus.NOT_STARTED
    match_ids: list[str] = Field(default_factory=list)
    match_count: int


class PenaltyRecord(BaseModel):
    id: str
    team_id: str
    points: int = Field(..., gt=0, description="Points deducted from the team")
    reason: str = ""
    date: datetime.date
    added_by: str | None = None


class ResultLog(BaseModel):
    id: str
    match_id: str
    old_result: str
    new_result: str
    edited_by: str
    timestamp: datetime.datetime
    reason: str = ""


class ManualSeriesDraft(BaseModel):
    """A hand-picked pairing consumed once by the schedule generator."""

    team1_id: str
    team2_id: str
    match_count: int = Field(..., ge=1)
    round_hint: int | None = Field(None, ge=1)


class TournamentConfig(BaseModel):
    series_length: str = "3-5"
    schedule_format: str = "SINGLE ROUND ROBIN (SRR)"
    scheduling_mode: SchedulingMode = SchedulingMode.AUTO
    playoff_system: str = "SEMI-FINAL SYSTEM (TOP 4)"
    points_for_win: int = 12
    points_for_draw: int = 6
    points_for_loss: int = 4
    count_series_bonus: bool = True
    points_for_series_win: int = 4
    points_for_series_draw: int = 2
    officials: list[str] = Field(default_factory=list)


class TournamentHeader(BaseModel):
    site_logo_url: str = ""
    tournament_name: str = ""
    tournament_logo_url: str = ""
    confirmed: bool = False


class Tournament(BaseModel):
    id: str
    name: str
    type: Literal["TEST"] = "TEST"
    created_date: datetime.date
    season: str | None = None
    status: TournamentStatus = TournamentStatus.UPCOMING
    teams: list[Team] = Field(default_factory=list)
    stadiums: list[Stadium] = Field(default_factory=list)
    matches: list[Match] = Field(default_factory=list)
    series: list[Series] = Field(default_factory=list)
    penalties: list[PenaltyRecord] = Field(default_factory=list)
    logs: list[ResultLog] = Field(default_factory=list)
    config: TournamentConfig = Field(default_factory=TournamentConfig)
    header: TournamentHeader = Field(default_factory=TournamentHeader)

    @computed_field
    @property
    def teams_count(self) -> int:
        return len(self.teams)


# --- Request bodies ---

class TeamInput(BaseModel):
    id: str | None = None
    name: str
    short_code: str | None = None
    owner: str | None = None
    logo_url: str | None = None


class StadiumInput(BaseModel):
    id: str | None = None
    name: str


class TournamentCreate(BaseModel):
    name: str
    season: str | None = None
    teams: list[TeamInput] = Field(default_factory=list)
    stadiums: list[StadiumInput] = Field(default_factory=list)
    config: TournamentConfig | None = None
    header: TournamentHeader | None = None


class TeamUpdate(BaseModel):
    name: str | None = None
    short_code: str | None = None
    owner: str | None = None
    logo_url: str | None = None


class PenaltyCreate(BaseModel):
    team_id: str
    points: int = Field(..., gt=0)
    reason: str = ""
    added_by: str | None = None


class TournamentListResponse(BaseModel):
    items: list[Tournament]
    total: int
