"""
SQLite store lifecycle.

The clock keeps one database open per process. The CLI opens it once per
invocation with ``init_database``; tests swap it between cases with
``cleanup_database``.
"""

import logging
import threading

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from contraction_clock.constants import DEFAULT_DATABASE_PATH
from contraction_clock.database.models import Base

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None
_database_path: Path | None = None
_lock = threading.Lock()


def init_database(database_path: str | Path | None = None) -> Path:
    """
    Open the store, creating the file and the key-value table if needed.

    Only the first call opens anything; later calls return the path that is
    already open, whatever they are passed.

    Args:
        database_path: SQLite file (default: ~/.contraction-clock/clock.db)

    Returns:
        Path of the open database

    Raises:
        ValueError: If database_path is empty
        PermissionError: If the parent directory cannot be created
    """
    global _engine, _session_factory, _database_path

    with _lock:
        if _database_path is not None:
            return _database_path

        if database_path is None:
            database_path = DEFAULT_DATABASE_PATH
        if not str(database_path):
            raise ValueError("Database path must not be empty")

        path = Path(database_path).expanduser()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise PermissionError(
                f"Cannot create database directory {path.parent}: {e}"
            ) from e

        _engine = create_engine(f"sqlite:///{path}")
        Base.metadata.create_all(_engine)
        _session_factory = sessionmaker(bind=_engine)
        _database_path = path

        logger.debug(f"Opened contraction store at {path}")
        return path


@contextmanager
def session_scope() -> Generator[Session]:
    """
    Run one transaction against the open store.

    Commits when the block finishes, rolls back and re-raises on error.

    Raises:
        RuntimeError: If init_database() has not been called
    """
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def cleanup_database() -> None:
    """Close the open store so the next init_database() opens a fresh one."""
    global _engine, _session_factory, _database_path

    with _lock:
        if _engine is not None:
            _engine.dispose()
        _engine = None
        _session_factory = None
        _database_path = None
