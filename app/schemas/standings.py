from pydantic import BaseModel, Field


class TeamStanding(BaseModel):
    position: int
    team_id: str
    team_name: str
    short_code: str | None = None
    logo_url: str | None = None
    series_played: int = 0
    matches_played: int = 0
    matches_won: int = 0
    matches_lost: int = 0
    matches_drawn: int = 0
    matches_tied: int = 0
    matches_no_result: int = 0
    base_points: int = 0
    bonus_points: int = 0
    penalty_points: int = 0
    total_points: int = 0
    max_points: int = 0
    pct: float = 0.0
    form: list[str] = Field(default_factory=list)


class StandingsResponse(BaseModel):
    tournament_id: str
    table: list[TeamStanding]
