from pydantic import BaseModel

from app.schemas.tournament import Match, MatchResultType, ResultLog, Series


class ResultCommitRequest(BaseModel):
    result_type: MatchResultType | None = None
    winner_id: str | None = None
    notes: str | None = None
    edited_by: str | None = None
    reason: str | None = None


class MatchUnlockRequest(BaseModel):
    edited_by: str | None = None
    reason: str | None = None


class MatchResponse(BaseModel):
    match: Match
    series: Series | None = None


class ResultLogListResponse(BaseModel):
    items: list[ResultLog]
    total: int
