"""Fixed error messages for API responses."""

ERROR_MESSAGES = {
    "tournament_not_found": "Tournament not found",
    "match_not_found": "Match not found",
    "team_not_found": "Team not found",
    "penalty_not_found": "Penalty not found",
    "schedule_exists": "Schedule already generated. Use regenerate to replace it.",
    "regenerate_confirmation_failed": "Validation failed! Type the tournament name exactly.",
}


def get_error_message(error_key: str) -> str:
    """Get the message for an error key.

    Args:
        error_key: Key for the error message

    Returns:
        The message, or the key itself if it is unknown
    """
    return ERROR_MESSAGES.get(error_key, error_key)
