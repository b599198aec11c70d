"""Parsing of the free-form schedule settings entered on the setup form."""

import re


def parse_series_length(value: str | None) -> tuple[int, int]:
    """
    Parse a series length range such as "3-5" into (min, max).

    Examples:
    - "3-5" -> (3, 5)
    - "10 MATCH SERIES" -> (10, 10)
    - "5-3" -> (3, 5)
    - "abc" / "" / None -> (1, 1)
    """
    if not value:
        return 1, 1

    cleaned = re.sub(r"[^\d-]", "", value)
    numbers = [int(part) for part in cleaned.split("-") if part]
    if not numbers:
        return 1, 1

    low = numbers[0]
    high = numbers[1] if len(numbers) > 1 else low
    if low > high:
        low, high = high, low
    if low < 1:
        return 1, 1
    return low, high


def round_robin_passes(schedule_format: str | None) -> int:
    """Number of round-robin passes: 2 for a DOUBLE format, otherwise 1."""
    if schedule_format and "DOUBLE" in schedule_format.upper():
        return 2
    return 1


def expected_series_count(team_count: int, schedule_format: str | None) -> int:
    """Series a full round robin produces for the given team count."""
    if team_count < 2:
        return 0
    return team_count * (team_count - 1) // 2 * round_robin_passes(schedule_format)
