"""Tournament persistence: whole-aggregate load/save keyed by tournament id."""

import logging

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import TournamentRecord
from app.schemas.tournament import Tournament
from app.utils.error_messages import get_error_message

logger = logging.getLogger(__name__)


async def load_tournament(db: AsyncSession, tournament_id: str) -> Tournament | None:
    record = await db.get(TournamentRecord, tournament_id)
    if record is None:
        return None
    return Tournament.model_validate(record.payload)


async def get_tournament_or_404(db: AsyncSession, tournament_id: str) -> Tournament:
    tournament = await load_tournament(db, tournament_id)
    if tournament is None:
        raise HTTPException(status_code=404, detail=get_error_message("tournament_not_found"))
    return tournament


async def list_tournaments(db: AsyncSession) -> list[Tournament]:
    result = await db.execute(
        select(TournamentRecord).order_by(TournamentRecord.created_at, TournamentRecord.id)
    )
    return [Tournament.model_validate(r.payload) for r in result.scalars().all()]


async def save_tournament(db: AsyncSession, tournament: Tournament) -> Tournament:
    """Replace the stored document with ``tournament`` (insert when new)."""
    payload = tournament.model_dump(mode="json")

    record = await db.get(TournamentRecord, tournament.id)
    if record is None:
        record = TournamentRecord(id=tournament.id)
        db.add(record)
    record.name = tournament.name
    record.status = tournament.status.value
    record.payload = payload

    await db.commit()
    logger.debug("Tournament %s saved (%d matches)", tournament.id, len(tournament.matches))
    return tournament


async def delete_tournament(db: AsyncSession, tournament_id: str) -> bool:
    record = await db.get(TournamentRecord, tournament_id)
    if record is None:
        return False
    await db.delete(record)
    await db.commit()
    return True
