"""
Constants for contraction timing, timeline layout, and the 5-1-1 rule.

All timestamps and durations are in milliseconds unless a name says otherwise.
Pixel values describe the chart coordinate space consumed by renderers.
"""

from pathlib import Path

# ============================================================================
# Time
# ============================================================================

MILLISECONDS_PER_SECOND = 1000
ONE_MINUTE_MS = 60 * MILLISECONDS_PER_SECOND
FIVE_MINUTES_MS = 5 * ONE_MINUTE_MS
ONE_HOUR_MS = 60 * ONE_MINUTE_MS


# ============================================================================
# Session Behaviour
# ============================================================================


class SessionConstants:
    """Constants for the contraction session state machine (tracker.py)."""

    # Shorter presses are treated as accidental triggers and discarded
    MIN_EVENT_DURATION_MS = 1000

    INTENSITY_MIN = 1
    INTENSITY_MAX = 10
    DEFAULT_INTENSITY = 5

    # Host tick cadence
    TICK_MS = 100


# ============================================================================
# Timeline Geometry
# ============================================================================


class TimelineLayoutConstants:
    """Chart geometry for segment layout (segments.py, viewport.py)."""

    Y_AXIS_WIDTH = 44.0
    X_LABEL_HEIGHT = 22.0
    CHART_HEIGHT = 220.0
    PLOT_HEIGHT = CHART_HEIGHT - X_LABEL_HEIGHT
    PEAK_PADDING = 16.0  # curves never touch the top of the plot

    AXIS_INSET = 8.0
    LEAD_WIDTH = 24.0
    PX_PER_SECOND = 4.0
    MIN_GAP_WIDTH = 32.0
    MIN_BUMP_WIDTH = 8.0

    INTENSITY_TICKS = (0, 2, 4, 6, 8, 10)


class AmplitudeCurveConstants:
    """Constants for the bell-shaped amplitude profile (curve.py)."""

    SIGMA = 0.15
    CENTER = 0.5
    PATH_STEPS = 80


# ============================================================================
# Rule Thresholds
# ============================================================================


class RuleConstants:
    """
    Thresholds for the contraction timing rules (rule.py).

    The 5-1-1 rule: contractions at most 5 minutes apart (start to start),
    each lasting at least 1 minute, sustained for at least 1 hour.
    """

    MAX_INTERVAL_MS = FIVE_MINUTES_MS
    MIN_DURATION_MS = ONE_MINUTE_MS
    MIN_SUSTAIN_MS = ONE_HOUR_MS

    # 4-1-1 variant, commonly advised for a second or later labor
    FOUR_ONE_ONE_MAX_INTERVAL_MS = 4 * ONE_MINUTE_MS


DEFAULT_RULE_NAME = "511"

# ============================================================================
# Default Settings
# ============================================================================

APP_DIR = Path.home() / ".contraction-clock"

DEFAULT_DATABASE_PATH = APP_DIR / "clock.db"

# Key-value store keys
STORAGE_KEY = "contraction-clock-session"
CONTROLS_KEY = "contraction-clock-controls"

# Logging configuration
DEFAULT_LOG_DIR = APP_DIR / "logs"
DEFAULT_LOG_FILE = "contraction-clock.log"
DEFAULT_LOG_MAX_SIZE_MB = 10
DEFAULT_LOG_LEVEL = "DEBUG"
DEFAULT_LOG_BACKUP_COUNT = 5

# Placeholder for metrics that cannot be computed yet
EMPTY_METRIC_DISPLAY = "—"
