"""Translate core errors into HTTP responses."""

from fastapi import HTTPException

from app.services.errors import (
    MatchNotFoundError,
    PenaltyNotFoundError,
    ScheduleExistsError,
    TeamNotFoundError,
)


def http_error(exc: ValueError) -> HTTPException:
    if isinstance(exc, (MatchNotFoundError, TeamNotFoundError, PenaltyNotFoundError)):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, ScheduleExistsError):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))
