from app.schemas.tournament import (
    Match,
    MatchResultType,
    MatchStatus,
    PenaltyRecord,
    ResultLog,
    Series,
    SeriesStatus,
    Stadium,
    Team,
    Tournament,
    TournamentConfig,
    TournamentStatus,
)
from app.schemas.standings import TeamStanding, StandingsResponse
from app.schemas.schedule import ScheduleResponse, ScheduleRound, ScheduleSeries
from app.schemas.results import MatchResponse, ResultLogListResponse

__all__ = [
    "Match",
    "MatchResultType",
    "MatchStatus",
    "PenaltyRecord",
    "ResultLog",
    "Series",
    "SeriesStatus",
    "Stadium",
    "Team",
    "Tournament",
    "TournamentConfig",
    "TournamentStatus",
    "TeamStanding",
    "StandingsResponse",
    "ScheduleResponse",
    "ScheduleRound",
    "ScheduleSeries",
    "MatchResponse",
    "ResultLogListResponse",
]
