"""
Contraction session service.

Connects the pure session state machine to the repository: every command
loads the stored session, applies the command at the current time, and
saves the result. Frames are derived on demand and never stored.
"""

import logging

from collections.abc import Callable

from contraction_clock.analysis.rule import RuleEvaluator
from contraction_clock.analysis.rules import get_rule
from contraction_clock.constants import SessionConstants as SC
from contraction_clock.database.repository import SessionControls, SessionRepository
from contraction_clock.models.events import ContractionEvent, InProgressEvent
from contraction_clock.models.frame import Frame
from contraction_clock.tracker import ContractionTracker
from contraction_clock.utils.clock import now_ms

logger = logging.getLogger(__name__)


class ClockService:
    """
    Runs session commands against persistent storage.

    Example:
        >>> service = ClockService(SessionRepository())
        >>> service.begin()
        >>> frame = service.frame(viewport_width=600)
    """

    def __init__(
        self,
        repository: SessionRepository,
        clock: Callable[[], int] = now_ms,
        rule_name: str | None = None,
        default_intensity: int = SC.DEFAULT_INTENSITY,
    ):
        """
        Initialize the service.

        Args:
            repository: Session storage
            clock: Returns the current time in Unix milliseconds
            rule_name: Timing rule registry name (default: 5-1-1)
            default_intensity: Intensity for a session with no stored controls

        Raises:
            ValueError: If rule_name is not registered
        """
        self.repository = repository
        self.clock = clock
        self.rule = get_rule(rule_name)
        self.default_intensity = default_intensity

    def load(self) -> ContractionTracker:
        """Build a tracker from stored state, ticked to the current time."""
        events = self.repository.load_events()
        controls = self.repository.load_controls(self.default_intensity)

        in_progress = None
        if controls.active_start is not None:
            in_progress = InProgressEvent(started_at=controls.active_start)

        tracker = ContractionTracker(
            events=events,
            in_progress=in_progress,
            intensity=controls.intensity,
            evaluator=RuleEvaluator(self.rule),
        )
        tracker.tick(self.clock())
        return tracker

    def save(self, tracker: ContractionTracker) -> None:
        """Persist the tracker's history and controls."""
        self.repository.save_events(list(tracker.events))
        self.repository.save_controls(
            SessionControls(
                active_start=tracker.in_progress.started_at
                if tracker.in_progress is not None
                else None,
                intensity=tracker.intensity,
            )
        )

    def begin(self) -> InProgressEvent:
        tracker = self.load()
        active = tracker.begin()
        self.save(tracker)
        return active

    def end(self) -> ContractionEvent | None:
        tracker = self.load()
        event = tracker.end()
        self.save(tracker)
        return event

    def toggle(self) -> ContractionEvent | InProgressEvent | None:
        tracker = self.load()
        result = tracker.toggle()
        self.save(tracker)
        return result

    def set_intensity(self, level: int) -> None:
        """
        Change the intensity for future contractions.

        Raises:
            ValueError: If level is outside 1-10
        """
        tracker = self.load()
        tracker.set_intensity(level)
        self.save(tracker)

    def clear(self) -> None:
        """Empty the session and remove the stored record; intensity is kept."""
        tracker = self.load()
        tracker.clear()
        self.repository.clear()
        self.repository.save_controls(SessionControls(intensity=tracker.intensity))

    def frame(self, viewport_width: float | None = None, follow: bool = True) -> Frame:
        """Derive a frame at the current time without modifying storage."""
        return self.load().frame(viewport_width=viewport_width, follow=follow)
