"""
Achievement catalog.

The catalog is an immutable, ordered set of AchievementDefinitions. Order
matters: the ledger evaluates in declaration order, so "first newly unlocked"
is stable. Ids are persisted in unlock records and must never change.

Usage:
    from dailydo.achievements.catalog import default_catalog, load_catalog

    catalog = default_catalog()
    catalog.get("first_task").title      # "First Task Done"

    custom = load_catalog(Path("args/achievements.yaml"))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from dailydo import PROJECT_ROOT


class CatalogError(ValueError):
    """Raised for a malformed achievement catalog."""


class Category(str, Enum):
    MILESTONE = "milestone"
    STREAK = "streak"
    DAILY = "daily"
    SPECIAL = "special"


class ConditionType(str, Enum):
    """What statistic an achievement is measured against."""

    TOTAL_COMPLETED = "total_completed"
    STREAK = "streak"
    EARLY_COMPLETION = "early_completion"
    LATE_COMPLETION = "late_completion"
    EARLY_BIRD = "early_bird"
    DAILY_TASKS = "daily_tasks"
    WEEKEND_COMPLETION = "weekend_completion"


@dataclass(frozen=True)
class Condition:
    type: ConditionType
    target: int

    def __post_init__(self):
        if not isinstance(self.type, ConditionType):
            object.__setattr__(self, "type", ConditionType(self.type))
        if isinstance(self.target, bool) or not isinstance(self.target, int) or self.target <= 0:
            raise CatalogError(f"Condition target must be a positive integer, got {self.target!r}")
        # Weekend progress is a yes/no flag, so only a target of 1 is reachable
        if self.type is ConditionType.WEEKEND_COMPLETION and self.target != 1:
            raise CatalogError("weekend_completion conditions must have target 1")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "target": self.target}


@dataclass(frozen=True)
class AchievementDefinition:
    id: str
    title: str
    description: str
    icon: str
    category: Category
    condition: Condition

    def __post_init__(self):
        if not isinstance(self.category, Category):
            object.__setattr__(self, "category", Category(self.category))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AchievementDefinition:
        try:
            condition = data["condition"]
            return cls(
                id=str(data["id"]),
                title=data["title"],
                description=data["description"],
                icon=data.get("icon", ""),
                category=Category(data["category"]),
                condition=Condition(ConditionType(condition["type"]), condition["target"]),
            )
        except KeyError as e:
            raise CatalogError(f"Achievement definition missing field: {e}") from e
        except ValueError as e:
            if isinstance(e, CatalogError):
                raise
            raise CatalogError(f"Invalid achievement definition {data.get('id')!r}: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "category": self.category.value,
            "condition": self.condition.to_dict(),
        }


class AchievementCatalog:
    """Ordered, read-only collection of achievement definitions."""

    def __init__(self, definitions: list[AchievementDefinition] | tuple[AchievementDefinition, ...]):
        self._definitions = tuple(definitions)
        self._by_id: dict[str, AchievementDefinition] = {}
        for definition in self._definitions:
            if definition.id in self._by_id:
                raise CatalogError(f"Duplicate achievement id: {definition.id}")
            self._by_id[definition.id] = definition

    def __iter__(self) -> Iterator[AchievementDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, achievement_id: object) -> bool:
        return achievement_id in self._by_id

    def get(self, achievement_id: str) -> AchievementDefinition | None:
        return self._by_id.get(achievement_id)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(d.id for d in self._definitions)

    def to_list(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in self._definitions]

    def __repr__(self) -> str:
        return f"AchievementCatalog({len(self)} achievements)"


def _define(id, title, description, icon, category, condition_type, target):
    return AchievementDefinition(
        id=id,
        title=title,
        description=description,
        icon=icon,
        category=Category(category),
        condition=Condition(ConditionType(condition_type), target),
    )


def default_catalog() -> AchievementCatalog:
    """The built-in 13 achievements. Ids and targets are persisted; don't edit."""
    return AchievementCatalog([
        _define("first_task", "First Task Done", "Complete your first to-do", "🥇", "milestone", "total_completed", 1),
        _define("task_master_10", "Task Master", "Complete 10 tasks", "⭐", "milestone", "total_completed", 10),
        _define("task_champion_50", "Task Champion", "Complete 50 tasks", "🏆", "milestone", "total_completed", 50),
        _define("task_legend_100", "Task Legend", "Complete 100 tasks", "👑", "milestone", "total_completed", 100),
        _define("streak_3", "Getting Started", "Complete at least 1 task for 3 days in a row", "🔥", "streak", "streak", 3),
        _define("streak_7", "Weekly Warrior", "Complete at least 1 task for 7 days in a row", "📅", "streak", "streak", 7),
        _define("streak_30", "Consistency Master", "Complete at least 1 task for 30 days in a row", "💎", "streak", "streak", 30),
        _define("beat_the_clock", "Beat the Clock", "Complete a task before its due time", "⏰", "special", "early_completion", 1),
        _define("night_owl", "Night Owl", "Complete a task after 11 PM", "🌙", "special", "late_completion", 1),
        _define("early_bird", "Early Bird", "Complete a task before 6 AM", "🌅", "special", "early_bird", 1),
        _define("productive_day_5", "Productive Day", "Complete 5 tasks in a single day", "📈", "daily", "daily_tasks", 5),
        _define("productive_day_10", "Super Productive", "Complete 10 tasks in a single day", "🚀", "daily", "daily_tasks", 10),
        _define("weekend_warrior", "Weekend Warrior", "Complete tasks on both Saturday and Sunday", "🏖️", "special", "weekend_completion", 1),
    ])


def load_catalog(path: Path) -> AchievementCatalog:
    """
    Load a catalog from YAML.

    Expected shape:
        achievements:
          - id: first_task
            title: First Task Done
            description: Complete your first to-do
            icon: "🥇"
            category: milestone
            condition: {type: total_completed, target: 1}
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    entries = raw.get("achievements") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise CatalogError(f"No achievement list found in {path}")

    return AchievementCatalog([AchievementDefinition.from_dict(entry) for entry in entries])


def catalog_from_config(config: dict[str, Any]) -> AchievementCatalog:
    """Use ``achievements.catalog_path`` when configured, else the built-in catalog."""
    catalog_path = (config.get("achievements") or {}).get("catalog_path")
    if catalog_path:
        path = Path(catalog_path)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return load_catalog(path)
    return default_catalog()


__all__ = [
    "AchievementCatalog",
    "AchievementDefinition",
    "CatalogError",
    "Category",
    "Condition",
    "ConditionType",
    "catalog_from_config",
    "default_catalog",
    "load_catalog",
]
