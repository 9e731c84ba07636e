"""Session statistics and log rows computed directly over the history."""

from collections.abc import Sequence

import numpy as np

from contraction_clock.models.events import ContractionEvent
from contraction_clock.models.stats import LogEntry, SessionStats


def calculate_session_stats(events: Sequence[ContractionEvent]) -> SessionStats:
    """
    Summarize the recorded contractions.

    Args:
        events: Recorded contractions in chronological order

    Returns:
        SessionStats with count, mean duration, and the most recent
        interval and duration (None where not enough data)
    """
    if not events:
        return SessionStats()

    last = events[-1]
    last_interval = last.start - events[-2].start if len(events) >= 2 else None

    return SessionStats(
        count=len(events),
        avg_duration_ms=float(np.mean([e.duration for e in events])),
        last_interval_ms=last_interval,
        last_duration_ms=last.duration,
    )


def build_log(events: Sequence[ContractionEvent]) -> list[LogEntry]:
    """
    Build contraction log rows, newest first.

    Frequency is the start-to-start spacing from the preceding contraction.
    """
    rows = []
    for index, event in enumerate(events):
        frequency = None if index == 0 else event.start - events[index - 1].start
        rows.append(
            LogEntry(
                number=index + 1,
                start=event.start,
                duration_ms=event.duration,
                frequency_ms=frequency,
                intensity_level=event.intensity_level,
                is_latest=index == len(events) - 1,
            )
        )
    rows.reverse()
    return rows
