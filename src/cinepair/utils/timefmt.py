"""Conversions between "HH:MM" strings and minute offsets."""

import re

TIME_PATTERN = r"^\d{1,2}:\d{2}$"

_TIME_RE = re.compile(TIME_PATTERN)


def time_to_minutes(value: str) -> int:
    """
    Convert a wall-clock "HH:MM" string into minutes after midnight.

    Args:
        value: Time of day such as "09:30"

    Returns:
        Minutes after midnight (e.g. 570)

    Raises:
        ValueError: If the string is not in H:MM / HH:MM form
    """
    value = value.strip()
    if not _TIME_RE.match(value):
        raise ValueError(f"Invalid time format: {value!r}")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes after midnight back into "HH:MM".

    Values past midnight are not wrapped, so 1530 becomes "25:30".
    """
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def format_duration(minutes: int) -> str:
    """Human-readable duration, e.g. 240 -> "4h 0m"."""
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"
