"""
Calendar-date helpers and the injectable clock.

Every "what day is it" question in dailydo goes through here, so tests can pin
"now" with FixedClock and streak arithmetic is done on calendar dates rather
than elapsed seconds (a 23-hour DST day is still one day).

Date keys are ISO ``YYYY-MM-DD`` strings; that is how days are stored in
UserStatistics.daily_completions and the todos.created_date column.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo

from dailydo.config import load_config


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time, optionally in a fixed timezone."""

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now()
        return datetime.now(self.tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz!r})"


class FixedClock:
    """A clock that always returns the same moment. Used in tests."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> None:
        """Move the clock forward by a timedelta built from ``kwargs``."""
        self.moment = self.moment + timedelta(**kwargs)

    def __repr__(self) -> str:
        return f"FixedClock({self.moment.isoformat()})"


def get_clock(config: dict | None = None) -> Clock:
    """Build the system clock for the configured timezone."""
    if config is None:
        config = load_config()
    tz_name = config.get("timezone")
    return SystemClock(ZoneInfo(tz_name) if tz_name else None)


def date_key(d: date | datetime) -> str:
    if isinstance(d, datetime):
        d = d.date()
    return d.isoformat()


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key. Raises ValueError for anything else."""
    if not isinstance(key, str) or len(key) != 10:
        raise ValueError(f"Invalid date key: {key!r}")
    return date.fromisoformat(key)


def today(clock: Clock) -> date:
    return clock.now().date()


def previous_day(d: date) -> date:
    return d - timedelta(days=1)


def is_next_day(prev: date, current: date) -> bool:
    """True when ``current`` is exactly one calendar day after ``prev``."""
    return previous_day(current) == prev


def is_weekend(d: date) -> bool:
    # Saturday=5, Sunday=6
    return d.weekday() >= 5


def to_millis(dt: datetime) -> int:
    """Epoch milliseconds. Naive datetimes are taken as host local time."""
    return int(round(dt.timestamp() * 1000))


def from_millis(ms: int, tz: tzinfo | None = None) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz)


def end_of_day(dt: datetime) -> datetime:
    """Last representable moment of ``dt``'s calendar day, keeping its tzinfo."""
    return datetime.combine(dt.date(), time(23, 59, 59, 999000), tzinfo=dt.tzinfo)


__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "date_key",
    "end_of_day",
    "from_millis",
    "get_clock",
    "is_next_day",
    "is_weekend",
    "parse_date_key",
    "previous_day",
    "to_millis",
    "today",
]
