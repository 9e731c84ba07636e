"""Pytest configuration and fixtures for contraction_clock tests."""

import tempfile

from datetime import datetime
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that do not require external dependencies"
    )
    config.addinivalue_line(
        "markers", "business_logic: Tests for core layout and rule algorithms"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests combining multiple components"
    )


@pytest.fixture(autouse=True)
def isolated_app_dir(tmp_path, monkeypatch):
    """Point config and log files at a per-test directory."""
    app_dir = tmp_path / "app"
    monkeypatch.setattr("contraction_clock.config.APP_DIR", app_dir)
    monkeypatch.setattr(
        "contraction_clock.logging_config.DEFAULT_LOG_DIR", app_dir / "logs"
    )
    return app_dir


# =============================================================================
# Database Test Fixtures
# =============================================================================


@pytest.fixture
def temp_db():
    """Create a temporary database path for testing."""
    temp_dir = Path(tempfile.gettempdir())
    db_path = temp_dir / f"test_clock_{datetime.now().timestamp()}.db"

    yield db_path

    if db_path.exists():
        db_path.unlink()
    for ext in ["-wal", "-shm", "-journal"]:
        extra = Path(str(db_path) + ext)
        if extra.exists():
            extra.unlink()


@pytest.fixture
def initialized_db(temp_db):
    """Initialize the global database for the duration of a test."""
    from contraction_clock.database.session import cleanup_database, init_database

    cleanup_database()
    init_database(str(temp_db))

    yield temp_db

    cleanup_database()


# =============================================================================
# Clock Fixtures
# =============================================================================


class FakeClock:
    """Manually advanced clock returning Unix milliseconds."""

    def __init__(self, now: int):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


@pytest.fixture
def fake_clock():
    """A clock starting at a fixed instant (2025-03-01 08:00:00 UTC)."""
    return FakeClock(1_740_816_000_000)
