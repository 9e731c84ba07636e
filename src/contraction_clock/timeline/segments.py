"""
Segment layout for the contraction timeline.

Turns the recorded history plus the optional in-progress contraction into
positioned gap and bump segments. Widths scale with elapsed time and are
clamped to a minimum so very short rests and contractions stay visible.
"""

import logging

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from contraction_clock.constants import MILLISECONDS_PER_SECOND
from contraction_clock.constants import TimelineLayoutConstants as TLC
from contraction_clock.models.events import ContractionEvent, InProgressEvent
from contraction_clock.models.segments import (
    BumpSegment,
    GapSegment,
    Segment,
    TimelineLayout,
)

logger = logging.getLogger(__name__)

__all__ = ["SegmentBuilder", "TimelineGeometry", "seconds_to_pixels"]


class TimelineGeometry(BaseModel):
    """Fixed layout constants for the segment builder."""

    model_config = ConfigDict(frozen=True)

    axis_width: float = Field(default=TLC.Y_AXIS_WIDTH, ge=0)
    axis_inset: float = Field(default=TLC.AXIS_INSET, ge=0)
    lead_width: float = Field(default=TLC.LEAD_WIDTH, ge=0)
    min_gap_width: float = Field(default=TLC.MIN_GAP_WIDTH, ge=0)
    min_bump_width: float = Field(default=TLC.MIN_BUMP_WIDTH, ge=0)
    px_per_second: float = Field(default=TLC.PX_PER_SECOND, gt=0)

    @property
    def content_origin(self) -> float:
        """x coordinate where the first contraction's bump begins."""
        return self.axis_width + self.axis_inset


def seconds_to_pixels(ms: float, px_per_second: float = TLC.PX_PER_SECOND) -> float:
    """Convert a duration in milliseconds to a horizontal pixel distance."""
    return (ms / MILLISECONDS_PER_SECOND) * px_per_second


class SegmentBuilder:
    """
    Builds the timeline layout from a contraction history.

    Example:
        >>> builder = SegmentBuilder()
        >>> layout = builder.build(events, in_progress=None, now=now, intensity=0.5)
        >>> layout.total_extent
    """

    def __init__(self, geometry: TimelineGeometry | None = None):
        self.geometry = geometry or TimelineGeometry()

    def build(
        self,
        events: Sequence[ContractionEvent],
        in_progress: InProgressEvent | None,
        now: int,
        intensity: float,
    ) -> TimelineLayout:
        """
        Lay out gaps and bumps left to right.

        Args:
            events: Recorded contractions in chronological order
            in_progress: Contraction currently being timed, if any
            now: Current tick time (Unix milliseconds)
            intensity: Current normalized intensity, used for the in-progress bump

        Returns:
            TimelineLayout whose total_extent is the cursor after the last segment
        """
        geo = self.geometry
        segments: list[Segment] = []
        cursor = geo.content_origin

        segments.append(GapSegment(x=cursor - geo.lead_width, width=geo.lead_width))

        previous: ContractionEvent | None = None
        for event in events:
            if previous is not None:
                rest_ms = event.start - previous.end
                gap = GapSegment(
                    x=cursor, width=self._gap_width(rest_ms), label_ms=rest_ms
                )
                segments.append(gap)
                cursor += gap.width

            bump = BumpSegment(
                x=cursor,
                width=self._bump_width(event.duration),
                intensity=event.intensity,
                duration_ms=event.duration,
                event_id=event.id,
            )
            segments.append(bump)
            cursor += bump.width
            previous = event

        if in_progress is not None:
            if previous is not None:
                rest_ms = in_progress.started_at - previous.end
                gap = GapSegment(x=cursor, width=self._gap_width(rest_ms))
                segments.append(gap)
                cursor += gap.width

            elapsed_ms = in_progress.elapsed_ms(now)
            bump = BumpSegment(
                x=cursor,
                width=self._bump_width(elapsed_ms),
                intensity=intensity,
                active=True,
                reveal_fraction=1.0,
                duration_ms=elapsed_ms,
            )
            segments.append(bump)
            cursor += bump.width

        segments.append(GapSegment(x=cursor, width=geo.lead_width))
        cursor += geo.lead_width

        logger.debug(
            f"Laid out {len(segments)} segments for {len(events)} events, "
            f"extent={cursor:.1f}px"
        )
        return TimelineLayout(segments=segments, total_extent=cursor)

    def _gap_width(self, rest_ms: float) -> float:
        return max(
            self.geometry.min_gap_width,
            seconds_to_pixels(rest_ms, self.geometry.px_per_second),
        )

    def _bump_width(self, duration_ms: float) -> float:
        return max(
            self.geometry.min_bump_width,
            seconds_to_pixels(duration_ms, self.geometry.px_per_second),
        )
