"""
Bell-shaped amplitude profile for drawing contractions.

The profile is a Gaussian centred at t=0.5, rescaled so it is exactly 0 at
both ends and exactly 1 at the peak. ``build_path`` samples it into chart
coordinates for a single bump.
"""

import math

import numpy as np

from pydantic import BaseModel, ConfigDict, Field

from contraction_clock.constants import AmplitudeCurveConstants as ACC
from contraction_clock.constants import TimelineLayoutConstants as TLC

__all__ = [
    "BellPath",
    "build_path",
    "intensity_ticks",
    "intensity_to_y",
    "shape",
]

Point = tuple[float, float]


def _gaussian(t: float | np.ndarray) -> float | np.ndarray:
    return np.exp(-((t - ACC.CENTER) ** 2) / (2 * ACC.SIGMA**2))


# Value of the raw Gaussian at the ends of [0, 1]
_FLOOR = float(_gaussian(0.0))
_PEAK = float(_gaussian(ACC.CENTER))


def shape(t: float | np.ndarray) -> float | np.ndarray:
    """
    Normalized amplitude at position ``t``.

    Args:
        t: Position within the bump (0-1), scalar or array

    Returns:
        Amplitude (0-1); an array when ``t`` is an array
    """
    values = np.maximum(0.0, (_gaussian(t) - _FLOOR) / (_PEAK - _FLOOR))
    if np.ndim(values) == 0:
        return float(values)
    return values


class BellPath(BaseModel):
    """
    Sampled outline and fill polygon for one bump.

    Attributes:
        outline: Open polyline along the curve
        fill: Closed polygon under the curve, down to the baseline
    """

    model_config = ConfigDict(frozen=True)

    outline: list[Point] = Field(default_factory=list)
    fill: list[Point] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.outline

    @property
    def outline_d(self) -> str:
        """SVG path data for the outline."""
        if not self.outline:
            return ""
        return "M" + "L".join(f"{x:.1f},{y:.1f}" for x, y in self.outline)

    @property
    def fill_d(self) -> str:
        """SVG path data for the filled region."""
        if not self.fill:
            return ""
        closing = self.fill[len(self.outline) :]
        tail = " ".join(f"L{x:.1f},{y:.1f}" for x, y in closing)
        return f"{self.outline_d} {tail} Z"


def build_path(
    x0: float,
    width: float,
    intensity: float,
    reveal_fraction: float = 1.0,
    baseline: float = TLC.PLOT_HEIGHT,
    plot_scale: float = TLC.PLOT_HEIGHT - TLC.PEAK_PADDING,
) -> BellPath:
    """
    Sample the amplitude profile into chart coordinates.

    Args:
        x0: Left edge of the bump (px)
        width: Bump width (px)
        intensity: Normalized peak height (0-1)
        reveal_fraction: Portion of the curve to draw, from the left (0-1)
        baseline: y coordinate of zero amplitude
        plot_scale: Vertical extent of a full-intensity peak

    Returns:
        BellPath; empty when fewer than two points would be drawn
    """
    reveal = min(max(reveal_fraction, 0.0), 1.0)
    max_step = math.floor(ACC.PATH_STEPS * reveal)
    if max_step < 1:
        return BellPath()

    t = np.arange(max_step + 1) / ACC.PATH_STEPS
    xs = x0 + t * width
    ys = baseline - shape(t) * intensity * plot_scale
    outline = [(float(x), float(y)) for x, y in zip(xs, ys, strict=True)]

    fill = outline + [(x0 + reveal * width, baseline), (x0, baseline)]
    return BellPath(outline=outline, fill=fill)


def intensity_to_y(level: float) -> float:
    """Map an intensity axis level (0-10) to a chart y coordinate."""
    norm = level / 10
    return TLC.PLOT_HEIGHT - norm * (TLC.PLOT_HEIGHT - TLC.PEAK_PADDING)


def intensity_ticks() -> list[tuple[int, float]]:
    """Intensity axis ticks with their y coordinates."""
    return [(tick, intensity_to_y(tick)) for tick in TLC.INTENSITY_TICKS]
