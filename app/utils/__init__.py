"""Utility functions."""

from app.utils.series_length import parse_series_length, round_robin_passes
from app.utils.series_status import compute_series_status, compute_tournament_status
from app.utils.timestamps import utcnow, utc_today

__all__ = [
    "parse_series_length",
    "round_robin_passes",
    "compute_series_status",
    "compute_tournament_status",
    "utcnow",
    "utc_today",
]
