"""
Contraction timing rule evaluation.

Finds the trailing streak of contractions that each last long enough and
follow one another closely enough, and measures how long that streak has
been running. Frequency and duration averages are reported over the whole
session, independently of the streak.
"""

import logging

from collections.abc import Sequence

import numpy as np

from contraction_clock.analysis.rules import FIVE_ONE_ONE
from contraction_clock.constants import EMPTY_METRIC_DISPLAY
from contraction_clock.models.events import ContractionEvent
from contraction_clock.models.rule import RuleBadge, RuleConfig, StreakResult
from contraction_clock.utils.formatting import format_duration

logger = logging.getLogger(__name__)

__all__ = ["RuleEvaluator", "StreakResult"]


def _format_threshold(ms: int) -> str:
    minutes = ms // 60_000
    if minutes and minutes % 60 == 0:
        hours = minutes // 60
        return f"{hours} hour" if hours == 1 else f"{hours} hours"
    return f"{minutes} min"


class RuleEvaluator:
    """
    Evaluates a contraction history against a timing rule.

    Example:
        >>> evaluator = RuleEvaluator()
        >>> result = evaluator.evaluate(events, now)
        >>> if result.threshold_met:
        ...     print("Time to call")
    """

    def __init__(self, config: RuleConfig = FIVE_ONE_ONE):
        """
        Initialize the evaluator.

        Args:
            config: Rule thresholds (default: 5-1-1)
        """
        self.config = config

    def qualifies_alone(self, event: ContractionEvent) -> bool:
        """Whether a single contraction lasts long enough."""
        return event.duration >= self.config.min_duration_ms

    def transition_qualifies(
        self, earlier: ContractionEvent, later: ContractionEvent
    ) -> bool:
        """Whether two consecutive contractions start close enough together."""
        return later.start - earlier.start <= self.config.max_interval_ms

    def find_streak_start(self, events: Sequence[ContractionEvent]) -> int | None:
        """
        Index of the earliest contraction in the trailing streak.

        Walks backward from the most recent contraction and stops at the
        first earlier one that is too short or too far from its successor.

        Returns:
            Index into ``events``, or None when the last contraction does not
            qualify (or there are none)
        """
        if not events or not self.qualifies_alone(events[-1]):
            return None

        begin = len(events) - 1
        for i in range(len(events) - 2, -1, -1):
            if self.qualifies_alone(events[i]) and self.transition_qualifies(
                events[i], events[i + 1]
            ):
                begin = i
            else:
                break
        return begin

    def evaluate(self, events: Sequence[ContractionEvent], now: int) -> StreakResult:
        """
        Evaluate the rule at time ``now``.

        The streak duration is measured to ``now`` rather than to the last
        recorded end, so it keeps growing between contractions.

        Args:
            events: Recorded contractions in chronological order
            now: Current tick time (Unix milliseconds)

        Returns:
            StreakResult
        """
        begin = self.find_streak_start(events)

        if begin is None:
            qualifying_start = None
            streak_duration_ms = 0
            streak_count = 0
        else:
            qualifying_start = events[begin].start
            streak_duration_ms = now - qualifying_start
            streak_count = len(events) - begin

        return StreakResult(
            qualifying_start=qualifying_start,
            streak_duration_ms=streak_duration_ms,
            threshold_met=streak_duration_ms >= self.config.min_sustain_ms,
            avg_interval_ms=self._mean_interval(events),
            avg_duration_ms=self._mean_duration(events),
            streak_count=streak_count,
        )

    def badges(self, result: StreakResult) -> list[RuleBadge]:
        """
        Build the Frequency, Duration and Ongoing indicators.

        Frequency and Duration use the session-wide averages; Ongoing uses
        the streak.
        """
        cfg = self.config
        avg_interval = result.avg_interval_ms
        avg_duration = result.avg_duration_ms

        return [
            RuleBadge(
                label="Frequency",
                target=f"≤ {_format_threshold(cfg.max_interval_ms)}",
                met=avg_interval is not None and avg_interval <= cfg.max_interval_ms,
                display=format_duration(avg_interval)
                if avg_interval
                else EMPTY_METRIC_DISPLAY,
            ),
            RuleBadge(
                label="Duration",
                target=f"≥ {_format_threshold(cfg.min_duration_ms)}",
                met=avg_duration is not None and avg_duration >= cfg.min_duration_ms,
                display=format_duration(avg_duration)
                if avg_duration
                else EMPTY_METRIC_DISPLAY,
            ),
            RuleBadge(
                label="Ongoing",
                target=f"≥ {_format_threshold(cfg.min_sustain_ms)}",
                met=result.streak_duration_ms >= cfg.min_sustain_ms,
                display=format_duration(result.streak_duration_ms)
                if result.qualifying_start is not None
                else EMPTY_METRIC_DISPLAY,
            ),
        ]

    @staticmethod
    def _mean_interval(events: Sequence[ContractionEvent]) -> float | None:
        if len(events) < 2:
            return None
        starts = np.array([e.start for e in events], dtype=np.int64)
        return float(np.mean(np.diff(starts)))

    @staticmethod
    def _mean_duration(events: Sequence[ContractionEvent]) -> float | None:
        if not events:
            return None
        return float(np.mean([e.duration for e in events]))
