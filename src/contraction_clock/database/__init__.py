"""Database layer for contraction_clock."""

from contraction_clock.database.repository import SessionControls, SessionRepository

__all__ = [
    "SessionControls",
    "SessionRepository",
]
