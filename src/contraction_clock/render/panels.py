"""Plain-text panels for the rule status, session stats and contraction log."""

from contraction_clock.constants import EMPTY_METRIC_DISPLAY
from contraction_clock.models.frame import Frame
from contraction_clock.models.rule import RuleConfig
from contraction_clock.utils.formatting import (
    format_duration,
    format_optional_duration,
    format_time,
)


def render_status(frame: Frame, rule: RuleConfig) -> str:
    """
    Render the rule panel, the current contraction and the session stats.

    Args:
        frame: Frame to describe
        rule: Rule the frame was evaluated against

    Returns:
        Multi-line string
    """
    answer = "YES" if frame.streak.threshold_met else "NOT YET"
    lines = [
        f"{rule.title}: {rule.description}",
        f"Is it time? {answer}",
        "",
    ]

    for badge in frame.badges:
        mark = "✓" if badge.met else " "
        lines.append(
            f"  [{mark}] {badge.label:<10} {badge.display:>8}   target {badge.target}"
        )

    lines.append("")
    if frame.active_duration_ms is not None:
        lines.append(
            f"Contraction in progress: {format_duration(frame.active_duration_ms)}"
        )
    else:
        lines.append("No contraction in progress")
    lines.append(f"Intensity: {frame.intensity}/10")

    stats = frame.stats
    if stats.count:
        lines.append("")
        lines.append(f"  Count          {stats.count}")
        lines.append(
            f"  Avg Duration   {format_optional_duration(stats.avg_duration_ms)}"
        )
        lines.append(
            f"  Last Interval  {format_optional_duration(stats.last_interval_ms)}"
        )
        lines.append(
            f"  Last Duration  {format_optional_duration(stats.last_duration_ms)}"
        )

    return "\n".join(lines)


def render_log(frame: Frame) -> str:
    """Render the contraction log, newest first."""
    if not frame.log:
        return "No contractions recorded."

    header = f"{'#':>4}  {'Start Time':<10}  {'Duration':>9}  {'Frequency':>9}  {'Intensity':>9}"
    lines = [header, "─" * len(header)]
    for row in frame.log:
        frequency = (
            format_duration(row.frequency_ms)
            if row.frequency_ms
            else EMPTY_METRIC_DISPLAY
        )
        marker = "*" if row.is_latest else " "
        lines.append(
            f"{'#' + str(row.number):>4}{marker} {format_time(row.start):<10}  "
            f"{format_duration(row.duration_ms):>9}  {frequency:>9}  "
            f"{str(row.intensity_level) + ' / 10':>9}"
        )
    return "\n".join(lines)
