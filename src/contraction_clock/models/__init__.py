"""Pydantic models for contraction_clock."""

from contraction_clock.models.events import ContractionEvent, InProgressEvent
from contraction_clock.models.frame import Frame
from contraction_clock.models.rule import RuleBadge, RuleConfig, StreakResult
from contraction_clock.models.segments import (
    BumpSegment,
    GapSegment,
    Segment,
    TimelineLayout,
)
from contraction_clock.models.stats import LogEntry, SessionStats

__all__ = [
    "BumpSegment",
    "ContractionEvent",
    "Frame",
    "GapSegment",
    "InProgressEvent",
    "LogEntry",
    "RuleBadge",
    "RuleConfig",
    "Segment",
    "SessionStats",
    "StreakResult",
    "TimelineLayout",
]
