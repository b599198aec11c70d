"""UTC clock helpers for logs, penalties and stored records."""

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utcnow().date()
