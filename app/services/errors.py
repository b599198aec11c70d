"""Domain errors raised by the tournament core.

The API layer maps these onto HTTP responses; the core itself never
touches FastAPI.
"""


class TournamentError(ValueError):
    """Validation failure on tournament data."""


class TeamNotFoundError(TournamentError):
    pass


class PenaltyNotFoundError(TournamentError):
    pass


class ScheduleExistsError(TournamentError):
    """Schedule generation requested while matches already exist."""


class ScheduleError(ValueError):
    """The schedule generator refused its input."""


class ResultError(ValueError):
    """A result commit/unlock was rejected."""


class MatchNotFoundError(ResultError):
    pass
