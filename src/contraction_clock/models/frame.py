"""Per-tick snapshot handed to renderers."""

from pydantic import BaseModel, ConfigDict, Field

from contraction_clock.models.rule import RuleBadge, StreakResult
from contraction_clock.models.segments import TimelineLayout
from contraction_clock.models.stats import LogEntry, SessionStats


class Frame(BaseModel):
    """
    Everything a renderer needs for one tick.

    Recomputed from scratch on every tick; holds no state of its own.
    """

    model_config = ConfigDict(frozen=True)

    now: int = Field(description="Tick time (Unix milliseconds)")
    layout: TimelineLayout
    streak: StreakResult
    badges: list[RuleBadge] = Field(default_factory=list)
    pan_offset: float = Field(default=0.0, description="Horizontal shift (px)")
    stats: SessionStats
    log: list[LogEntry] = Field(default_factory=list, description="Newest first")
    intensity: int = Field(description="Current intensity setting (1-10)")
    active_duration_ms: int | None = Field(
        default=None, description="Elapsed time of the in-progress contraction"
    )

    @property
    def is_active(self) -> bool:
        return self.active_duration_ms is not None

    @property
    def is_empty(self) -> bool:
        return self.stats.count == 0 and not self.is_active
