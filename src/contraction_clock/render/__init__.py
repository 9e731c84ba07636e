"""Terminal rendering of timeline frames."""

from .ascii import AsciiTimelineRenderer
from .panels import render_log, render_status

__all__ = ["AsciiTimelineRenderer", "render_log", "render_status"]
