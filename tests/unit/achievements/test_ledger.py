"""Tests for achievement evaluation, progress and apply_completion."""

from datetime import date

import pytest

from dailydo.achievements import (
    AchievementCatalog,
    AchievementDefinition,
    AchievementLedger,
    AchievementUnlockRecord,
    Category,
    Condition,
    ConditionType,
    UserStatistics,
    apply_completion,
    compute_progress,
    default_catalog,
    progress_percentage,
    unlock_records,
)


def ids(definitions):
    return [d.id for d in definitions]


class TestApplyCompletion:
    def test_first_completion_unlocks_first_task(self, fresh_stats, make_event):
        result = apply_completion(fresh_stats, make_event(date(2024, 1, 1), completion_hour=14))

        assert ids(result.newly_unlocked) == ["first_task"]
        assert result.updated_stats.total_completed == 1
        assert result.updated_stats.current_streak == 1

    def test_streak_extension(self, three_day_streak, make_event):
        result = apply_completion(
            three_day_streak,
            make_event(date(2024, 1, 4)),
            already_unlocked={"first_task", "streak_3"},
        )
        assert result.updated_stats.current_streak == 4
        assert result.newly_unlocked == []

    def test_gap_on_saturday(self, three_day_streak, make_event):
        result = apply_completion(
            three_day_streak,
            make_event(date(2024, 1, 6)),
            already_unlocked={"first_task", "streak_3"},
        )
        assert result.updated_stats.current_streak == 1
        assert result.updated_stats.longest_streak == 3
        assert ids(result.newly_unlocked) == ["weekend_warrior"]

    def test_several_unlocks_in_catalog_order(self, fresh_stats, make_event):
        result = apply_completion(
            fresh_stats,
            make_event(date(2024, 1, 6), completion_hour=2, was_early_completion=True),
        )
        assert ids(result.newly_unlocked) == [
            "first_task",
            "beat_the_clock",
            "early_bird",
            "weekend_warrior",
        ]

    def test_night_owl(self, fresh_stats, make_event):
        result = apply_completion(fresh_stats, make_event(completion_hour=23))
        assert ids(result.newly_unlocked) == ["first_task", "night_owl"]

    def test_productive_day(self, make_event):
        stats = UserStatistics()
        unlocked = set()
        per_call = []
        for _ in range(5):
            result = apply_completion(stats, make_event(), already_unlocked=unlocked)
            stats = result.updated_stats
            unlocked |= set(ids(result.newly_unlocked))
            per_call.append(ids(result.newly_unlocked))

        assert per_call == [["first_task"], [], [], [], ["productive_day_5"]]

    def test_seven_day_streak(self, make_event):
        stats = UserStatistics()
        unlocked = set()
        for day in range(1, 8):
            result = apply_completion(stats, make_event(date(2024, 1, day)), already_unlocked=unlocked)
            stats = result.updated_stats
            unlocked |= set(ids(result.newly_unlocked))

        assert {"streak_3", "streak_7", "weekend_warrior"} <= unlocked
        assert "streak_30" not in unlocked

    def test_unlocks_are_never_repeated(self, make_event):
        stats = UserStatistics()
        unlocked: list[str] = []
        for day in range(1, 15):
            result = apply_completion(stats, make_event(date(2024, 1, day)), already_unlocked=unlocked)
            stats = result.updated_stats
            unlocked.extend(ids(result.newly_unlocked))

        assert len(unlocked) == len(set(unlocked))

    def test_already_unlocked_is_never_re_evaluated(self, make_event):
        # Even when the stats no longer satisfy it
        stats = UserStatistics(total_completed=0)
        result = apply_completion(stats, make_event(), already_unlocked={"first_task"})
        assert "first_task" not in ids(result.newly_unlocked)

    def test_invalid_event_raises(self, fresh_stats, make_event):
        with pytest.raises(ValueError):
            apply_completion(fresh_stats, make_event(completion_hour=24))


class TestCustomCatalog:
    def test_injected_catalog_is_used(self, fresh_stats, make_event):
        catalog = AchievementCatalog([
            AchievementDefinition(
                id="double",
                title="Double",
                description="Two tasks",
                icon="",
                category=Category.MILESTONE,
                condition=Condition(ConditionType.TOTAL_COMPLETED, 2),
            ),
        ])
        ledger = AchievementLedger(catalog)

        first = ledger.apply_completion(fresh_stats, make_event())
        second = ledger.apply_completion(first.updated_stats, make_event())

        assert first.newly_unlocked == []
        assert ids(second.newly_unlocked) == ["double"]

    def test_default_catalog_when_none(self):
        assert AchievementLedger().catalog.ids == default_catalog().ids


# ─────────────────────────────────────────────────────────────────────────────
# Progress
# ─────────────────────────────────────────────────────────────────────────────


class TestProgressPercentage:
    @pytest.mark.parametrize("current,maximum,expected", [
        (0, 10, 0),
        (1, 8, 13),
        (2, 3, 67),
        (1, 3, 33),
        (5, 10, 50),
        (10, 10, 100),
        (15, 10, 100),
        (3, 0, 100),
        (0, -1, 100),
    ])
    def test_values(self, current, maximum, expected):
        assert progress_percentage(current, maximum) == expected


class TestComputeProgress:
    def test_streak_uses_longest(self):
        stats = UserStatistics(current_streak=1, longest_streak=5)
        assert compute_progress(default_catalog().get("streak_7"), stats) == (5, 7)

    def test_daily_tasks_uses_max(self):
        stats = UserStatistics(max_daily_tasks=4)
        assert compute_progress(default_catalog().get("productive_day_5"), stats) == (4, 5)

    def test_weekend_is_a_flag(self):
        stats = UserStatistics(weekend_completions=6)
        assert compute_progress(default_catalog().get("weekend_warrior"), stats) == (1, 1)

    def test_every_condition_type_has_a_reader(self):
        stats = UserStatistics()
        for achievement in default_catalog():
            current, maximum = compute_progress(achievement, stats)
            assert current == 0
            assert maximum == achievement.condition.target


class TestProgressViews:
    def test_views_cover_catalog(self, three_day_streak):
        records = unlock_records(
            "test_user_123",
            [default_catalog().get("first_task"), default_catalog().get("streak_3")],
            unlocked_at=1704100000000,
        )
        views = AchievementLedger().progress(three_day_streak, records)

        assert [v.achievement.id for v in views] == list(default_catalog().ids)
        by_id = {v.achievement.id: v for v in views}
        assert by_id["streak_3"].is_unlocked
        assert by_id["streak_3"].unlocked_at == 1704100000000
        assert by_id["streak_7"].is_unlocked is False
        assert by_id["streak_7"].progress_percentage == 43
        assert by_id["task_master_10"].progress_percentage == 30

    def test_view_to_dict(self, fresh_stats):
        view = AchievementLedger().progress(fresh_stats)[0]
        data = view.to_dict()
        assert data["id"] == "first_task"
        assert data["progress"] == 0
        assert data["max_progress"] == 1
        assert data["progress_percentage"] == 0
        assert data["unlocked_at"] is None

    def test_unlock_record_fields(self):
        record = AchievementUnlockRecord("u1", "night_owl", unlocked_at=5)
        assert record.is_unlocked
        assert record.to_dict()["achievement_id"] == "night_owl"
