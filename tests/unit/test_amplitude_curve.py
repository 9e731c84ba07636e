"""
Tests for the bell-shaped amplitude profile and path sampling.
"""

import numpy as np
import pytest

from contraction_clock.constants import TimelineLayoutConstants as TLC
from contraction_clock.timeline.curve import (
    build_path,
    intensity_ticks,
    intensity_to_y,
    shape,
)

BASELINE = TLC.PLOT_HEIGHT
PLOT_SCALE = TLC.PLOT_HEIGHT - TLC.PEAK_PADDING


class TestShape:
    """Test the normalized amplitude profile."""

    def test_endpoints_are_zero(self):
        assert shape(0.0) == pytest.approx(0.0, abs=1e-12)
        assert shape(1.0) == pytest.approx(0.0, abs=1e-12)

    def test_peak_is_one(self):
        assert shape(0.5) == 1.0

    def test_symmetric_about_centre(self):
        for t in (0.1, 0.25, 0.4):
            assert shape(t) == pytest.approx(shape(1 - t))

    def test_non_negative_and_unimodal(self):
        ts = np.linspace(0, 1, 1001)
        values = shape(ts)

        assert np.all(values >= 0)
        rising = np.diff(values[:501])
        falling = np.diff(values[500:])
        assert np.all(rising >= -1e-12)
        assert np.all(falling <= 1e-12)
        assert np.argmax(values) == 500

    def test_scalar_input_returns_float(self):
        assert isinstance(shape(0.3), float)

    def test_array_input_returns_array(self):
        values = shape(np.array([0.0, 0.5, 1.0]))

        assert isinstance(values, np.ndarray)
        assert values.shape == (3,)

    def test_outside_unit_interval_clamped_to_zero(self):
        assert shape(-0.2) == 0.0
        assert shape(1.3) == 0.0


class TestBuildPath:
    """Test sampling the profile into chart coordinates."""

    def test_full_reveal_point_count(self):
        path = build_path(52.0, 100.0, 0.5)

        assert len(path.outline) == 81
        assert len(path.fill) == 83

    def test_curve_starts_and_ends_on_baseline(self):
        path = build_path(52.0, 100.0, 0.8)

        assert path.outline[0] == pytest.approx((52.0, BASELINE))
        assert path.outline[-1] == pytest.approx((152.0, BASELINE))

    def test_peak_height_scales_with_intensity(self):
        path = build_path(0.0, 80.0, 0.5)

        x, y = path.outline[40]
        assert x == pytest.approx(40.0)
        assert y == pytest.approx(BASELINE - 0.5 * PLOT_SCALE)

    def test_full_intensity_peak_stays_below_top_padding(self):
        path = build_path(0.0, 80.0, 1.0)

        assert min(y for _, y in path.outline) == pytest.approx(TLC.PEAK_PADDING)

    def test_fill_closes_to_baseline(self):
        path = build_path(10.0, 60.0, 0.7)

        assert path.fill[: len(path.outline)] == path.outline
        assert path.fill[-2] == pytest.approx((70.0, BASELINE))
        assert path.fill[-1] == pytest.approx((10.0, BASELINE))

    def test_partial_reveal(self):
        path = build_path(0.0, 100.0, 0.5, reveal_fraction=0.5)

        assert len(path.outline) == 41
        assert path.outline[-1][0] == pytest.approx(50.0)
        assert path.fill[-2] == pytest.approx((50.0, BASELINE))

    def test_reveal_above_one_is_clamped(self):
        path = build_path(0.0, 100.0, 0.5, reveal_fraction=2.0)

        assert len(path.outline) == 81
        assert path.fill[-2] == pytest.approx((100.0, BASELINE))

    @pytest.mark.parametrize("reveal", [0.0, 0.01, -0.5])
    def test_too_little_reveal_is_empty(self, reveal):
        path = build_path(0.0, 100.0, 0.5, reveal_fraction=reveal)

        assert path.is_empty
        assert path.outline == []
        assert path.fill == []
        assert path.outline_d == ""
        assert path.fill_d == ""

    def test_svg_path_data(self):
        path = build_path(52.0, 100.0, 0.5)

        assert path.outline_d.startswith("M52.0,198.0L")
        assert path.outline_d.endswith("L152.0,198.0")
        assert path.fill_d.endswith(" L152.0,198.0 L52.0,198.0 Z")
        assert path.fill_d.startswith(path.outline_d)


class TestIntensityAxis:
    """Test intensity axis mapping."""

    def test_axis_extremes(self):
        assert intensity_to_y(0) == pytest.approx(BASELINE)
        assert intensity_to_y(10) == pytest.approx(TLC.PEAK_PADDING)

    def test_ticks(self):
        ticks = intensity_ticks()

        assert [tick for tick, _ in ticks] == [0, 2, 4, 6, 8, 10]
        ys = [y for _, y in ticks]
        assert ys == sorted(ys, reverse=True)
