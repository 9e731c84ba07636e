"""Horizontal panning that keeps the latest contraction in view."""

from contraction_clock.constants import TimelineLayoutConstants as TLC


def pan_offset(
    total_extent: float,
    viewport_width: float | None,
    follow: bool,
    axis_width: float = TLC.Y_AXIS_WIDTH,
) -> float:
    """
    Compute the horizontal shift applied to the chart's data layer.

    In follow mode the rightmost content is aligned to the right edge of the
    viewport. The offset never pans right of the origin and never scrolls the
    content so far left that it disappears under the axis.

    Args:
        total_extent: Layout extent (px)
        viewport_width: Measured viewport width (px); None or <= 0 if unmeasured
        follow: Whether follow mode is on
        axis_width: Width of the fixed axis overlay (px)

    Returns:
        Offset in px (always <= 0); 0 when not following
    """
    if not follow:
        return 0.0

    if viewport_width is None or viewport_width <= 0:
        viewport_width = total_extent

    return max(-(total_extent - axis_width), min(0.0, viewport_width - total_extent))
