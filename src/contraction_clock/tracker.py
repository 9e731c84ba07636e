"""
Contraction session state machine.

Holds the append-only contraction history, the optional in-progress
contraction, the intensity setting, and the latest tick time. Every derived
view (layout, rule evaluation, panning, statistics) is recomputed from this
state by ``frame()``; nothing derived is cached between ticks.
"""

import logging

from collections.abc import Iterable

from contraction_clock.analysis.rule import RuleEvaluator
from contraction_clock.analysis.stats import build_log, calculate_session_stats
from contraction_clock.constants import SessionConstants as SC
from contraction_clock.models.events import ContractionEvent, InProgressEvent
from contraction_clock.models.frame import Frame
from contraction_clock.timeline.segments import SegmentBuilder
from contraction_clock.timeline.viewport import pan_offset

logger = logging.getLogger(__name__)


def validate_intensity(level: int) -> int:
    """
    Validate an intensity setting.

    Raises:
        ValueError: If level is outside 1-10
    """
    if not SC.INTENSITY_MIN <= level <= SC.INTENSITY_MAX:
        raise ValueError(
            f"Intensity must be between {SC.INTENSITY_MIN} and {SC.INTENSITY_MAX}, "
            f"got {level}"
        )
    return level


class ContractionTracker:
    """
    Single-session contraction timer.

    Commands (``begin``, ``end``, ``toggle``, ``clear``, ``set_intensity``,
    ``tick``) mutate the session; ``frame`` derives renderer output. Time is
    never read from the system clock: callers supply it through ``tick`` or
    the ``now`` argument of each command.

    Example:
        >>> tracker = ContractionTracker(now=start_ms)
        >>> tracker.begin(start_ms)
        >>> tracker.end(start_ms + 65_000)
        >>> tracker.frame().streak.qualifying_start
    """

    def __init__(
        self,
        events: Iterable[ContractionEvent] = (),
        in_progress: InProgressEvent | None = None,
        intensity: int = SC.DEFAULT_INTENSITY,
        now: int = 0,
        evaluator: RuleEvaluator | None = None,
        builder: SegmentBuilder | None = None,
    ):
        self._events: list[ContractionEvent] = list(events)
        self._in_progress = in_progress
        self._intensity = validate_intensity(intensity)
        self._now = now
        self.evaluator = evaluator or RuleEvaluator()
        self.builder = builder or SegmentBuilder()

    @property
    def events(self) -> tuple[ContractionEvent, ...]:
        return tuple(self._events)

    @property
    def in_progress(self) -> InProgressEvent | None:
        return self._in_progress

    @property
    def intensity(self) -> int:
        return self._intensity

    @property
    def now(self) -> int:
        return self._now

    @property
    def is_active(self) -> bool:
        return self._in_progress is not None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def tick(self, now: int) -> None:
        """Advance the session clock. Older ticks are ignored."""
        if now < self._now:
            logger.debug(f"Ignoring tick {now} older than {self._now}")
            return
        self._now = now

    def begin(self, now: int | None = None) -> InProgressEvent:
        """
        Start timing a contraction.

        A second begin while one is already running leaves the running one
        untouched.

        Returns:
            The in-progress contraction
        """
        if now is not None:
            self.tick(now)

        if self._in_progress is not None:
            logger.debug("begin() ignored: a contraction is already in progress")
            return self._in_progress

        self._in_progress = InProgressEvent(started_at=self._now)
        logger.info(f"Contraction started at {self._now}")
        return self._in_progress

    def end(self, now: int | None = None) -> ContractionEvent | None:
        """
        Stop timing the current contraction.

        Contractions shorter than one second are discarded as accidental
        triggers.

        Returns:
            The recorded contraction, or None if nothing was recorded
        """
        if now is not None:
            self.tick(now)

        active = self._in_progress
        if active is None:
            return None
        self._in_progress = None

        duration = active.elapsed_ms(self._now)
        if duration < SC.MIN_EVENT_DURATION_MS:
            logger.info(f"Discarded contraction shorter than 1s ({duration}ms)")
            return None

        event = ContractionEvent.from_span(
            start=active.started_at, end=self._now, intensity=self._intensity / 10
        )
        self._events.append(event)
        logger.info(
            f"Recorded contraction #{len(self._events)}: {duration}ms "
            f"at intensity {self._intensity}"
        )
        return event

    def toggle(self, now: int | None = None) -> ContractionEvent | InProgressEvent | None:
        """Begin if idle, otherwise end (single-button control)."""
        if self._in_progress is None:
            return self.begin(now)
        return self.end(now)

    def clear(self) -> None:
        """Drop the whole history and any in-progress contraction."""
        logger.info(f"Clearing session ({len(self._events)} contractions)")
        self._events.clear()
        self._in_progress = None

    def set_intensity(self, level: int) -> None:
        """Set the intensity applied to contractions recorded from now on."""
        self._intensity = validate_intensity(level)

    # ------------------------------------------------------------------
    # Derived output
    # ------------------------------------------------------------------

    def frame(self, viewport_width: float | None = None, follow: bool = True) -> Frame:
        """
        Derive everything a renderer needs at the current tick.

        Args:
            viewport_width: Measured viewport width in px, None if unmeasured
            follow: Keep the latest contraction aligned to the right edge

        Returns:
            Frame
        """
        events = self._events
        layout = self.builder.build(
            events, self._in_progress, self._now, self._intensity / 10
        )
        streak = self.evaluator.evaluate(events, self._now)

        return Frame(
            now=self._now,
            layout=layout,
            streak=streak,
            badges=self.evaluator.badges(streak),
            pan_offset=pan_offset(
                layout.total_extent,
                viewport_width,
                follow,
                axis_width=self.builder.geometry.axis_width,
            ),
            stats=calculate_session_stats(events),
            log=build_log(events),
            intensity=self._intensity,
            active_duration_ms=(
                self._in_progress.elapsed_ms(self._now)
                if self._in_progress is not None
                else None
            ),
        )
