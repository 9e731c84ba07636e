"""
Timeline layout primitives.

A layout is an ordered list of gap and bump segments positioned along the
chart's x axis. ``Segment`` is a closed union discriminated on ``kind`` so a
renderer can match exhaustively.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from contraction_clock.utils.formatting import format_duration


class GapSegment(BaseModel):
    """
    Idle stretch of baseline between bumps (or before the first / after the last).

    Attributes:
        x: Left edge (px)
        width: Width (px)
        label_ms: Rest duration shown under the gap, if labelled
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["gap"] = "gap"
    x: float = Field(description="Left edge (px)")
    width: float = Field(ge=0, description="Width (px)")
    label_ms: float | None = Field(default=None, description="Rest duration (ms)")

    @property
    def label(self) -> str | None:
        if self.label_ms is None:
            return None
        return format_duration(self.label_ms)


class BumpSegment(BaseModel):
    """
    One contraction drawn as an amplitude curve.

    Attributes:
        x: Left edge (px)
        width: Width (px)
        intensity: Normalized peak height (0-1)
        active: True for the in-progress contraction
        reveal_fraction: Fraction of the curve to draw (0-1)
        duration_ms: Duration represented by this bump
        event_id: Recorded event id, None while in progress
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["bump"] = "bump"
    x: float = Field(description="Left edge (px)")
    width: float = Field(ge=0, description="Width (px)")
    intensity: float = Field(ge=0, le=1, description="Normalized intensity")
    active: bool = Field(default=False, description="In-progress contraction")
    reveal_fraction: float = Field(default=1.0, description="Fraction drawn")
    duration_ms: int = Field(description="Duration represented (ms)")
    event_id: int | None = Field(default=None, description="Recorded event id")


Segment = Annotated[GapSegment | BumpSegment, Field(discriminator="kind")]


class TimelineLayout(BaseModel):
    """Ordered segments plus the cursor position after the last one."""

    model_config = ConfigDict(frozen=True)

    segments: list[Segment] = Field(default_factory=list)
    total_extent: float = Field(description="Cursor after the last segment (px)")

    @property
    def origin(self) -> float:
        """Left edge of the first segment."""
        return self.segments[0].x if self.segments else self.total_extent

    @property
    def span(self) -> float:
        """Sum of all segment widths."""
        return sum(seg.width for seg in self.segments)

    @property
    def bumps(self) -> list[BumpSegment]:
        return [seg for seg in self.segments if isinstance(seg, BumpSegment)]

    @property
    def gaps(self) -> list[GapSegment]:
        return [seg for seg in self.segments if isinstance(seg, GapSegment)]

    def segment_at(self, x: float) -> Segment | None:
        """Return the segment covering chart coordinate ``x``, if any."""
        for seg in self.segments:
            if seg.x <= x < seg.x + seg.width:
                return seg
        return None
