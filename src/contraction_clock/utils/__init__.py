"""Shared helpers for contraction_clock."""

from contraction_clock.utils.clock import now_ms
from contraction_clock.utils.formatting import (
    format_duration,
    format_optional_duration,
    format_time,
)

__all__ = ["format_duration", "format_optional_duration", "format_time", "now_ms"]
