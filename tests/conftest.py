"""Shared test fixtures for dailydo tests.

This module provides common fixtures used across all test modules:
- Database isolation with temporary files
- A fixed clock so "now" and "today" are deterministic
- Standard user ids and statistics snapshots

Usage:
    def test_something(task_store, fixed_clock):
        task_store.create_task("alice", "Submit report at 3pm", clock=fixed_clock)
"""

import os
import tempfile
from collections.abc import Generator
from datetime import date, datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from dailydo.achievements import CompletionEvent, UserStatistics
from dailydo.clock import FixedClock


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "dailydo"


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_db() -> Generator[Path, None, None]:
    """Create a temporary database file for testing.

    The database file is automatically deleted after the test completes.

    Yields:
        Path to the temporary database file
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    # Cleanup
    if db_path.exists():
        os.unlink(db_path)


@pytest.fixture
def task_store(temp_db):
    """Task manager module pointed at a temporary database."""
    with (
        patch("dailydo.tasks.manager.DB_PATH", temp_db),
        patch("dailydo.tasks.DB_PATH", temp_db),
    ):
        from dailydo.tasks import manager

        # Force table creation
        conn = manager.get_connection()
        conn.close()

        yield manager


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def fixed_now() -> datetime:
    """Monday 2024-01-01, 10:00 local time."""
    return datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> FixedClock:
    return FixedClock(fixed_now)


# ─────────────────────────────────────────────────────────────────────────────
# User Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_user_id() -> str:
    """Standard test user ID."""
    return "test_user_123"


@pytest.fixture
def other_user_id() -> str:
    return "someone_else_456"


# ─────────────────────────────────────────────────────────────────────────────
# Statistics Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def fresh_stats() -> UserStatistics:
    """Statistics for a user who has never completed anything."""
    return UserStatistics()


@pytest.fixture
def three_day_streak() -> UserStatistics:
    """A three-day streak ending Wednesday 2024-01-03."""
    return UserStatistics(
        total_completed=3,
        current_streak=3,
        longest_streak=3,
        max_daily_tasks=1,
        last_completion_date="2024-01-03",
        daily_completions={"2024-01-01": 1, "2024-01-02": 1, "2024-01-03": 1},
    )


@pytest.fixture
def make_event():
    """Factory for completion events; defaults to 14:00 on 2024-01-01."""

    def _make(
        occurred_on: date = date(2024, 1, 1),
        completion_hour: int = 14,
        was_early_completion: bool = False,
    ) -> CompletionEvent:
        return CompletionEvent(
            completion_hour=completion_hour,
            was_early_completion=was_early_completion,
            occurred_on=occurred_on,
        )

    return _make
