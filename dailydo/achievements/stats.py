"""
Per-user completion statistics and the rule that advances them.

UserStatistics is a snapshot; update_statistics() never mutates its input and
returns a new snapshot with one completion applied.

Streaks are counted in calendar days: completing on consecutive dates extends
the streak, a second completion on the same date leaves it alone, and any
gap (or a last date in the future, i.e. clock skew) starts over at 1.

Time-of-day bands:
    early bird    00:00 - 05:59
    (neither)     06:00 - 22:59
    late          23:00 - 23:59
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

from dailydo.clock import date_key, is_next_day, is_weekend, parse_date_key


LATE_COMPLETION_HOUR = 23
EARLY_BIRD_BEFORE_HOUR = 6


class InvalidInputError(ValueError):
    """Raised when a completion event or statistics snapshot is out of range."""


@dataclass(frozen=True)
class CompletionEvent:
    """A user marking a task done."""

    completion_hour: int
    was_early_completion: bool
    occurred_on: date

    def to_dict(self) -> dict[str, Any]:
        return {
            "completion_hour": self.completion_hour,
            "was_early_completion": self.was_early_completion,
            "occurred_on": date_key(self.occurred_on),
        }


@dataclass
class UserStatistics:
    total_completed: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    max_daily_tasks: int = 0
    early_completions: int = 0
    late_completions: int = 0
    early_bird_completions: int = 0
    weekend_completions: int = 0
    last_completion_date: str | None = None
    daily_completions: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_completed": self.total_completed,
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "max_daily_tasks": self.max_daily_tasks,
            "early_completions": self.early_completions,
            "late_completions": self.late_completions,
            "early_bird_completions": self.early_bird_completions,
            "weekend_completions": self.weekend_completions,
            "last_completion_date": self.last_completion_date,
            "daily_completions": dict(self.daily_completions),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserStatistics:
        return cls(
            total_completed=int(data.get("total_completed", 0)),
            current_streak=int(data.get("current_streak", 0)),
            longest_streak=int(data.get("longest_streak", 0)),
            max_daily_tasks=int(data.get("max_daily_tasks", 0)),
            early_completions=int(data.get("early_completions", 0)),
            late_completions=int(data.get("late_completions", 0)),
            early_bird_completions=int(data.get("early_bird_completions", 0)),
            weekend_completions=int(data.get("weekend_completions", 0)),
            last_completion_date=data.get("last_completion_date"),
            daily_completions={k: int(v) for k, v in (data.get("daily_completions") or {}).items()},
        )


def validate(stats: UserStatistics, event: CompletionEvent) -> None:
    hour = event.completion_hour
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidInputError(f"completion_hour must be an integer in 0..23, got {hour!r}")

    for day, count in stats.daily_completions.items():
        if count < 0:
            raise InvalidInputError(f"daily_completions[{day}] is negative: {count}")


def next_streak(current_streak: int, last_completion_date: str | None, today: date) -> int:
    if last_completion_date is None:
        return current_streak + 1

    last = parse_date_key(last_completion_date)
    if last == today:
        return current_streak
    if is_next_day(last, today):
        return current_streak + 1
    return 1


def update_statistics(stats: UserStatistics, event: CompletionEvent) -> UserStatistics:
    """Apply one completion. Raises InvalidInputError for out-of-range input."""
    validate(stats, event)

    today = event.occurred_on
    key = date_key(today)
    hour = event.completion_hour

    daily_completions = dict(stats.daily_completions)
    daily_completions[key] = daily_completions.get(key, 0) + 1

    current_streak = next_streak(stats.current_streak, stats.last_completion_date, today)

    return replace(
        stats,
        total_completed=stats.total_completed + 1,
        current_streak=current_streak,
        longest_streak=max(stats.longest_streak, current_streak),
        max_daily_tasks=max(stats.max_daily_tasks, daily_completions[key]),
        early_completions=stats.early_completions + (1 if event.was_early_completion else 0),
        late_completions=stats.late_completions + (1 if hour >= LATE_COMPLETION_HOUR else 0),
        early_bird_completions=stats.early_bird_completions + (1 if hour < EARLY_BIRD_BEFORE_HOUR else 0),
        weekend_completions=stats.weekend_completions + (1 if is_weekend(today) else 0),
        last_completion_date=key,
        daily_completions=daily_completions,
    )


__all__ = [
    "CompletionEvent",
    "EARLY_BIRD_BEFORE_HOUR",
    "InvalidInputError",
    "LATE_COMPLETION_HOUR",
    "UserStatistics",
    "next_streak",
    "update_statistics",
    "validate",
]
