"""
Tool: Productivity Ledger
Purpose: Fold a task completion into a user's statistics and decide which
achievements it unlocks

    prior UserStatistics + CompletionEvent + already-unlocked ids
        → updated UserStatistics + newly unlocked definitions (catalog order)

The ledger does no I/O. The caller loads the snapshot and unlock ids, calls
apply_completion(), then writes the new snapshot and one unlock record per
newly unlocked achievement in a single transaction per user.

Unlocking is one-way: an id in ``already_unlocked`` is never evaluated again,
whatever the statistics say.

Usage:
    from dailydo.achievements.ledger import AchievementLedger

    ledger = AchievementLedger()          # built-in catalog
    result = ledger.apply_completion(stats, event, already_unlocked={"first_task"})
    for achievement in result.newly_unlocked:
        print(achievement.title)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from dailydo.achievements.catalog import (
    AchievementCatalog,
    AchievementDefinition,
    ConditionType,
    default_catalog,
)
from dailydo.achievements.stats import CompletionEvent, UserStatistics, update_statistics


logger = logging.getLogger(__name__)


_PROGRESS_READERS: dict[ConditionType, Callable[[UserStatistics], int]] = {
    ConditionType.TOTAL_COMPLETED: lambda s: s.total_completed,
    ConditionType.STREAK: lambda s: s.longest_streak,
    ConditionType.EARLY_COMPLETION: lambda s: s.early_completions,
    ConditionType.LATE_COMPLETION: lambda s: s.late_completions,
    ConditionType.EARLY_BIRD: lambda s: s.early_bird_completions,
    ConditionType.DAILY_TASKS: lambda s: s.max_daily_tasks,
    ConditionType.WEEKEND_COMPLETION: lambda s: 1 if s.weekend_completions > 0 else 0,
}

_missing = set(ConditionType) - set(_PROGRESS_READERS)
if _missing:
    raise RuntimeError(f"No progress reader for condition types: {sorted(t.value for t in _missing)}")


@dataclass(frozen=True)
class AchievementUnlockRecord:
    user_id: str
    achievement_id: str
    unlocked_at: int
    is_unlocked: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "achievement_id": self.achievement_id,
            "is_unlocked": self.is_unlocked,
            "unlocked_at": self.unlocked_at,
        }


@dataclass(frozen=True)
class AchievementProgress:
    """Read-only view of one achievement for display."""

    achievement: AchievementDefinition
    progress: int
    max_progress: int
    is_unlocked: bool = False
    unlocked_at: int | None = None

    @property
    def progress_percentage(self) -> int:
        return progress_percentage(self.progress, self.max_progress)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.achievement.to_dict(),
            "is_unlocked": self.is_unlocked,
            "unlocked_at": self.unlocked_at,
            "progress": self.progress,
            "max_progress": self.max_progress,
            "progress_percentage": self.progress_percentage,
        }


@dataclass
class LedgerResult:
    updated_stats: UserStatistics
    newly_unlocked: list[AchievementDefinition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "updated_stats": self.updated_stats.to_dict(),
            "newly_unlocked": [a.to_dict() for a in self.newly_unlocked],
        }


def compute_progress(achievement: AchievementDefinition, stats: UserStatistics) -> tuple[int, int]:
    """Return ``(current, max)`` for an achievement against a snapshot."""
    condition = achievement.condition
    return _PROGRESS_READERS[condition.type](stats), condition.target


def progress_percentage(current: int, maximum: int) -> int:
    """Whole-number percentage, capped at 100. A non-positive max counts as done."""
    if maximum <= 0:
        return 100
    # Half-up rounding; round() would send 12.5 to 12
    return min(100, math.floor(100 * current / maximum + 0.5))


def is_satisfied(achievement: AchievementDefinition, stats: UserStatistics) -> bool:
    current, maximum = compute_progress(achievement, stats)
    return current >= maximum


class AchievementLedger:
    """Applies completions and evaluates one injected achievement catalog."""

    def __init__(self, catalog: AchievementCatalog | None = None):
        self.catalog = catalog if catalog is not None else default_catalog()

    def evaluate(
        self,
        stats: UserStatistics,
        already_unlocked: Iterable[str] = (),
    ) -> list[AchievementDefinition]:
        """Achievements satisfied by ``stats`` and not yet unlocked, in catalog order."""
        unlocked = set(already_unlocked)
        return [
            achievement
            for achievement in self.catalog
            if achievement.id not in unlocked and is_satisfied(achievement, stats)
        ]

    def apply_completion(
        self,
        stats: UserStatistics,
        event: CompletionEvent,
        already_unlocked: Iterable[str] = (),
    ) -> LedgerResult:
        updated = update_statistics(stats, event)
        newly_unlocked = self.evaluate(updated, already_unlocked)

        if newly_unlocked:
            logger.info(
                "Achievements unlocked: %s",
                ", ".join(a.id for a in newly_unlocked),
            )

        return LedgerResult(updated_stats=updated, newly_unlocked=newly_unlocked)

    def progress(
        self,
        stats: UserStatistics,
        records: Iterable[AchievementUnlockRecord] = (),
    ) -> list[AchievementProgress]:
        """Progress for every achievement in the catalog, for display."""
        by_id = {record.achievement_id: record for record in records}
        views = []
        for achievement in self.catalog:
            current, maximum = compute_progress(achievement, stats)
            record = by_id.get(achievement.id)
            views.append(AchievementProgress(
                achievement=achievement,
                progress=current,
                max_progress=maximum,
                is_unlocked=bool(record and record.is_unlocked),
                unlocked_at=record.unlocked_at if record else None,
            ))
        return views


def unlock_records(
    user_id: str,
    newly_unlocked: Iterable[AchievementDefinition],
    unlocked_at: int,
) -> list[AchievementUnlockRecord]:
    return [
        AchievementUnlockRecord(user_id=user_id, achievement_id=a.id, unlocked_at=unlocked_at)
        for a in newly_unlocked
    ]


def apply_completion(
    stats: UserStatistics,
    event: CompletionEvent,
    already_unlocked: Iterable[str] = (),
    catalog: AchievementCatalog | None = None,
) -> LedgerResult:
    """Module-level shortcut for ``AchievementLedger(catalog).apply_completion``."""
    return AchievementLedger(catalog).apply_completion(stats, event, already_unlocked)


__all__ = [
    "AchievementLedger",
    "AchievementProgress",
    "AchievementUnlockRecord",
    "LedgerResult",
    "apply_completion",
    "compute_progress",
    "is_satisfied",
    "progress_percentage",
    "unlock_records",
]
