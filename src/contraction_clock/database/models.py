"""
SQLAlchemy ORM models for the contraction_clock database.

The store is a plain key-value table; each key holds one JSON document.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import CheckConstraint, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from contraction_clock.database.types import ValidatedJSON


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def utc_now() -> datetime:
    """Return current UTC timestamp for database defaults."""
    return datetime.now(UTC)


class KeyValueEntry(Base):
    """One JSON document stored under a fixed key."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[Any] = mapped_column(ValidatedJSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    __table_args__ = (CheckConstraint("length(key) > 0", name="chk_key"),)

    def __repr__(self) -> str:
        return f"<KeyValueEntry(key={self.key})>"
