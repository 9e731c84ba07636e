"""Pydantic models for contraction timing rule evaluation."""

from pydantic import BaseModel, ConfigDict, Field

from contraction_clock.constants import RuleConstants as RC


class RuleConfig(BaseModel):
    """
    Thresholds for a contraction timing rule.

    Uses the 5-1-1 values from RuleConstants as defaults.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    name: str = Field(description="Rule name (e.g., '511')")
    title: str = Field(description="Display title (e.g., '5-1-1 Rule')")
    description: str = Field(description="Rule description")

    # Thresholds
    max_interval_ms: int = Field(
        default=RC.MAX_INTERVAL_MS,
        gt=0,
        description="Maximum start-to-start spacing (ms)",
    )
    min_duration_ms: int = Field(
        default=RC.MIN_DURATION_MS, gt=0, description="Minimum contraction length (ms)"
    )
    min_sustain_ms: int = Field(
        default=RC.MIN_SUSTAIN_MS,
        gt=0,
        description="How long the pattern must hold (ms)",
    )


class StreakResult(BaseModel):
    """
    Outcome of evaluating the event history at a point in time.

    ``qualifying_start`` and ``streak_duration_ms`` describe the trailing
    streak only. ``avg_interval_ms`` and ``avg_duration_ms`` are computed over
    the whole session, not just the streak.

    Attributes:
        qualifying_start: Start of the earliest event in the streak
        streak_duration_ms: Time from qualifying_start to now
        threshold_met: Whether the streak has lasted long enough
        avg_interval_ms: Mean start-to-start spacing over all events
        avg_duration_ms: Mean duration over all events
        streak_count: Number of events in the streak
    """

    model_config = ConfigDict(frozen=True)

    qualifying_start: int | None = Field(
        default=None, description="Start of the earliest streak event"
    )
    streak_duration_ms: int = Field(default=0, description="Live streak length (ms)")
    threshold_met: bool = Field(default=False, description="Rule satisfied")
    avg_interval_ms: float | None = Field(
        default=None, description="Session-wide mean interval (ms)"
    )
    avg_duration_ms: float | None = Field(
        default=None, description="Session-wide mean duration (ms)"
    )
    streak_count: int = Field(default=0, ge=0, description="Events in the streak")


class RuleBadge(BaseModel):
    """One progress indicator of the rule panel (Frequency, Duration, Ongoing)."""

    model_config = ConfigDict(frozen=True)

    label: str
    target: str
    met: bool
    display: str
