"""Timeline layout: amplitude curves, segments, and viewport panning."""

from .curve import BellPath, build_path, intensity_ticks, intensity_to_y, shape
from .segments import SegmentBuilder, TimelineGeometry, seconds_to_pixels
from .viewport import pan_offset

__all__ = [
    "BellPath",
    "SegmentBuilder",
    "TimelineGeometry",
    "build_path",
    "intensity_ticks",
    "intensity_to_y",
    "pan_offset",
    "seconds_to_pixels",
    "shape",
]
