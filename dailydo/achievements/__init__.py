"""Achievements - streak bookkeeping and one-time unlocks

Components:
    catalog.py: The 13 built-in achievements and catalog loading
    stats.py: UserStatistics and the per-completion update rule
    ledger.py: Progress, evaluation, and apply_completion

Usage:
    from dailydo.achievements import CompletionEvent, UserStatistics, apply_completion

    result = apply_completion(
        UserStatistics(),
        CompletionEvent(completion_hour=14, was_early_completion=False, occurred_on=date(2024, 1, 1)),
    )
    result.newly_unlocked[0].id   # "first_task"
"""

from dailydo.achievements.catalog import (
    AchievementCatalog,
    AchievementDefinition,
    CatalogError,
    Category,
    Condition,
    ConditionType,
    catalog_from_config,
    default_catalog,
    load_catalog,
)
from dailydo.achievements.ledger import (
    AchievementLedger,
    AchievementProgress,
    AchievementUnlockRecord,
    LedgerResult,
    apply_completion,
    compute_progress,
    progress_percentage,
    unlock_records,
)
from dailydo.achievements.stats import (
    CompletionEvent,
    InvalidInputError,
    UserStatistics,
    update_statistics,
)

__all__ = [
    "AchievementCatalog",
    "AchievementDefinition",
    "AchievementLedger",
    "AchievementProgress",
    "AchievementUnlockRecord",
    "CatalogError",
    "Category",
    "CompletionEvent",
    "Condition",
    "ConditionType",
    "InvalidInputError",
    "LedgerResult",
    "UserStatistics",
    "apply_completion",
    "catalog_from_config",
    "compute_progress",
    "default_catalog",
    "load_catalog",
    "progress_percentage",
    "unlock_records",
    "update_statistics",
]
