"""Words-per-minute calculation."""

MILLIS_PER_MINUTE = 60000


def wpm(typed_count: int, started_at: int, now: int) -> float:
    """Calculate words per minute.

    Args:
        typed_count: Number of correctly typed words
        started_at: Session start time in milliseconds
        now: Current time in milliseconds

    Returns:
        Unrounded WPM, or 0.0 if no time has elapsed
    """
    elapsed_minutes = (now - started_at) / MILLIS_PER_MINUTE
    if elapsed_minutes <= 0:
        return 0.0
    return typed_count / elapsed_minutes
