"""
Session repository backed by the key-value table.

The contraction history lives under a single fixed key as a JSON array of
``{id, start, end, duration, intensity}`` records. Host controls that must
survive between command-line invocations (the in-progress start time and the
intensity setting) live under a second key.
"""

import logging

from typing import Any

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.dialects.sqlite import insert

from contraction_clock.constants import CONTROLS_KEY, STORAGE_KEY
from contraction_clock.constants import SessionConstants as SC
from contraction_clock.database.models import KeyValueEntry, utc_now
from contraction_clock.database.session import session_scope
from contraction_clock.models.events import ContractionEvent

logger = logging.getLogger(__name__)


class SessionControls(BaseModel):
    """Host state persisted alongside the history."""

    active_start: int | None = Field(
        default=None, description="In-progress start (Unix milliseconds)"
    )
    intensity: int = Field(
        default=SC.DEFAULT_INTENSITY, ge=SC.INTENSITY_MIN, le=SC.INTENSITY_MAX
    )


class SessionRepository:
    """
    Load, save and clear a contraction session.

    Unreadable data is never raised to the caller: it is logged and treated
    as an empty session.
    """

    def __init__(self, key: str = STORAGE_KEY, controls_key: str = CONTROLS_KEY):
        self.key = key
        self.controls_key = controls_key

    def load_events(self) -> list[ContractionEvent]:
        """Load the recorded contractions, or an empty list if absent or malformed."""
        try:
            raw = self._read(self.key)
        except ValueError as e:
            logger.warning(f"Stored session under '{self.key}' is unreadable: {e}")
            return []

        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning(
                f"Stored session under '{self.key}' is not a list "
                f"({type(raw).__name__}); starting empty"
            )
            return []

        try:
            return [ContractionEvent.model_validate(record) for record in raw]
        except ValidationError as e:
            logger.warning(f"Stored session under '{self.key}' is malformed: {e}")
            return []

    def save_events(self, events: list[ContractionEvent]) -> None:
        """Replace the stored history."""
        self._write(self.key, [event.model_dump() for event in events])
        logger.debug(f"Saved {len(events)} contractions under '{self.key}'")

    def load_controls(
        self, default_intensity: int = SC.DEFAULT_INTENSITY
    ) -> SessionControls:
        """Load host controls, falling back to defaults when absent or unreadable."""
        defaults = SessionControls(intensity=default_intensity)
        try:
            raw = self._read(self.controls_key)
            if raw is None:
                return defaults
            return SessionControls.model_validate(raw)
        except ValueError as e:
            logger.warning(f"Stored controls are unreadable, using defaults: {e}")
            return defaults

    def save_controls(self, controls: SessionControls) -> None:
        self._write(self.controls_key, controls.model_dump())

    def clear(self) -> None:
        """Remove the stored history record."""
        with session_scope() as session:
            session.query(KeyValueEntry).filter(KeyValueEntry.key == self.key).delete(
                synchronize_session=False
            )
        logger.info(f"Removed stored session '{self.key}'")

    def _read(self, key: str) -> Any:
        with session_scope() as session:
            entry = session.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    def _write(self, key: str, value: Any) -> None:
        # Upsert without loading the old value, which may not be valid JSON
        stmt = insert(KeyValueEntry).values(key=key, value=value, updated_at=utc_now())
        stmt = stmt.on_conflict_do_update(
            index_elements=[KeyValueEntry.key],
            set_={
                "value": stmt.excluded["value"],
                "updated_at": stmt.excluded["updated_at"],
            },
        )
        with session_scope() as session:
            session.execute(stmt)
