from pydantic import BaseModel, Field

from app.schemas.tournament import Match, ManualSeriesDraft, SeriesStatus, TournamentStatus


class ScheduleGenerateRequest(BaseModel):
    manual_draft: list[ManualSeriesDraft] = Field(default_factory=list)
    seed: int | None = Field(None, description="Fix the random series lengths for a reproducible schedule")


class ScheduleRegenerateRequest(ScheduleGenerateRequest):
    confirm_name: str = Field(..., description="Must equal the tournament name")


class ScheduleSeries(BaseModel):
    id: str
    team1_id: str
    team1_name: str | None = None
    team2_id: str
    team2_name: str | None = None
    status: SeriesStatus
    match_count: int
    completed_count: int
    matches: list[Match]


class ScheduleRound(BaseModel):
    round: int
    series: list[ScheduleSeries]


class ScheduleResponse(BaseModel):
    tournament_id: str
    status: TournamentStatus
    total_rounds: int
    total_series: int
    expected_series: int = Field(..., description="Series a full round robin produces for this roster and format")
    total_matches: int
    rounds: list[ScheduleRound]
