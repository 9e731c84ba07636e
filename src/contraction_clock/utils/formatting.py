"""Formatting utilities for durations and clock times."""

import math

from datetime import datetime

from contraction_clock.constants import EMPTY_METRIC_DISPLAY, MILLISECONDS_PER_SECOND


def format_duration(ms: float) -> str:
    """
    Format a duration in milliseconds to a short human-readable string.

    Seconds are rounded half-up before splitting into minutes.

    Args:
        ms: Duration in milliseconds

    Returns:
        Formatted string (e.g., "1m 5s" or "42s")
    """
    total_seconds = math.floor(ms / MILLISECONDS_PER_SECOND + 0.5)
    minutes = total_seconds // 60

    if minutes > 0:
        return f"{minutes}m {total_seconds % 60}s"
    return f"{total_seconds}s"


def format_optional_duration(ms: float | None) -> str:
    """Format a duration, or a dash placeholder when absent or zero."""
    if not ms:
        return EMPTY_METRIC_DISPLAY
    return format_duration(ms)


def format_time(timestamp_ms: int) -> str:
    """
    Format an epoch timestamp as local wall-clock time.

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        Formatted string (e.g., "14:05:09")
    """
    return datetime.fromtimestamp(timestamp_ms / MILLISECONDS_PER_SECOND).strftime(
        "%H:%M:%S"
    )
