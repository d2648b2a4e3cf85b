"""Display formatting for paces, durations and rounded figures."""

import math


def format_pace(seconds_per_km: float) -> str:
    """Format a pace as M'SS".

    Args:
        seconds_per_km: Pace in seconds per kilometer (fractions are truncated)

    Returns:
        Pace string, e.g. 5'30" for 330
    """
    minutes = math.floor(seconds_per_km / 60)
    seconds = math.floor(seconds_per_km % 60)
    return f"{minutes}'{seconds:02d}\""


def format_duration(total_seconds: int) -> str:
    """Format a duration as H:MM:SS, or M:SS when under an hour."""
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def round_half_up(value: float, digits: int = 2) -> float:
    """Round with halves going up, unlike the built-in banker's rounding."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
