"""
Tool: Task Manager
Purpose: sqlite storage for to-dos, user settings, statistics and unlocks

This is the persistence side of dailydo:
- Create tasks from natural-language input ("Call mom tomorrow at 7pm")
- List with filters (today, overdue, past, ...) and sort orders
- Toggle completion; completing runs the achievements ledger atomically
- Snooze, rename, re-date and delete tasks
- Daily reset: carry yesterday's unfinished tasks over to today

Usage:
    from dailydo.tasks.manager import create_task, list_tasks, toggle_task

    create_task(user_id="alice", text="Submit report at 3pm")
    list_tasks(user_id="alice", filter="today")

Dependencies:
    - sqlite3 (stdlib)
    - uuid (stdlib)

Output:
    dict results with success status and data, as every dailydo tool returns
"""

from __future__ import annotations

import json
import logging
import sqlite3
import uuid
from datetime import datetime
from typing import Any

from dailydo.achievements import (
    AchievementLedger,
    AchievementUnlockRecord,
    CompletionEvent,
    UserStatistics,
    catalog_from_config,
    unlock_records,
)
from dailydo.clock import Clock, date_key, end_of_day, from_millis, get_clock, to_millis
from dailydo.config import load_config
from dailydo.logging_config import user_context
from dailydo.parser import extract

from . import DB_PATH, SORT_OPTIONS, TASK_FILTERS


logger = logging.getLogger(__name__)

_STAT_COLUMNS = (
    "total_completed",
    "current_streak",
    "longest_streak",
    "max_daily_tasks",
    "early_completions",
    "late_completions",
    "early_bird_completions",
    "weekend_completions",
)


def get_connection() -> sqlite3.Connection:
    """Get database connection, creating tables if needed."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(DB_PATH))
    conn.row_factory = sqlite3.Row

    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS todos (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            text TEXT NOT NULL,
            due_time INTEGER,
            is_completed INTEGER NOT NULL DEFAULT 0,
            created_date TEXT,
            sort_order INTEGER,
            created_at INTEGER NOT NULL,
            completed_at INTEGER
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS user_settings (
            user_id TEXT PRIMARY KEY,
            roll_over_tasks INTEGER NOT NULL DEFAULT 0,
            last_reset_date TEXT NOT NULL,
            last_active_time INTEGER NOT NULL
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS user_stats (
            user_id TEXT PRIMARY KEY,
            total_completed INTEGER NOT NULL DEFAULT 0,
            current_streak INTEGER NOT NULL DEFAULT 0,
            longest_streak INTEGER NOT NULL DEFAULT 0,
            max_daily_tasks INTEGER NOT NULL DEFAULT 0,
            early_completions INTEGER NOT NULL DEFAULT 0,
            late_completions INTEGER NOT NULL DEFAULT 0,
            early_bird_completions INTEGER NOT NULL DEFAULT 0,
            weekend_completions INTEGER NOT NULL DEFAULT 0,
            last_completion_date TEXT,
            daily_completions TEXT NOT NULL DEFAULT '{}'
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS user_achievements (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            achievement_id TEXT NOT NULL,
            is_unlocked INTEGER NOT NULL DEFAULT 1,
            unlocked_at INTEGER NOT NULL,
            UNIQUE(user_id, achievement_id)
        )
    """)

    cursor.execute("CREATE INDEX IF NOT EXISTS idx_todos_user ON todos(user_id)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_todos_user_due ON todos(user_id, due_time)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_todos_user_completed ON todos(user_id, is_completed)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_todos_user_date ON todos(user_id, created_date)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_achievements_user ON user_achievements(user_id)")

    conn.commit()
    return conn


def generate_id() -> str:
    """Generate a short unique ID."""
    return uuid.uuid4().hex[:12]


def _resolve_clock(clock: Clock | None) -> Clock:
    return clock if clock is not None else get_clock()


def _task_to_dict(row: sqlite3.Row, now_ms: int) -> dict[str, Any]:
    task = dict(row)
    task["is_completed"] = bool(task["is_completed"])
    # Overdue is derived on read, never stored
    task["is_overdue"] = (
        not task["is_completed"]
        and task["due_time"] is not None
        and task["due_time"] < now_ms
    )
    return task


def _fetch_owned_task(conn: sqlite3.Connection, task_id: str, user_id: str) -> sqlite3.Row | None:
    row = conn.execute("SELECT * FROM todos WHERE id = ?", (task_id,)).fetchone()
    if row is None or row["user_id"] != user_id:
        return None
    return row


def _touch_activity(conn: sqlite3.Connection, user_id: str, now: datetime) -> None:
    conn.execute("""
        INSERT INTO user_settings (user_id, roll_over_tasks, last_reset_date, last_active_time)
        VALUES (?, 0, ?, ?)
        ON CONFLICT(user_id) DO UPDATE SET last_active_time = excluded.last_active_time
    """, (user_id, date_key(now), to_millis(now)))


# ─────────────────────────────────────────────────────────────────────────────
# Tasks
# ─────────────────────────────────────────────────────────────────────────────


def create_task(
    user_id: str,
    text: str,
    due_time: int | None = None,
    clock: Clock | None = None,
) -> dict[str, Any]:
    """
    Create a task from raw input.

    Args:
        user_id: Owner of the task
        text: Raw input; a date/time phrase in it becomes the due time
        due_time: Explicit due time (epoch ms); skips phrase extraction
        clock: Reference clock for "now" and "today"

    Returns:
        dict with success status and task data
    """
    now = _resolve_clock(clock).now()
    now_ms = to_millis(now)

    if due_time is None:
        parsed = extract(text, now=now)
        task_text, due_time = parsed.text, parsed.due_time
    else:
        task_text = text.strip()

    if not task_text:
        return {"success": False, "error": "Task text cannot be empty"}

    task_id = generate_id()

    conn = get_connection()
    conn.execute("""
        INSERT INTO todos (id, user_id, text, due_time, is_completed, created_date, sort_order, created_at)
        VALUES (?, ?, ?, ?, 0, ?, ?, ?)
    """, (task_id, user_id, task_text, due_time, date_key(now), now_ms, now_ms))
    _touch_activity(conn, user_id, now)
    conn.commit()

    row = conn.execute("SELECT * FROM todos WHERE id = ?", (task_id,)).fetchone()
    task = _task_to_dict(row, now_ms)
    conn.close()

    with user_context(user_id):
        logger.info("Task created: %s (due=%s)", task_id, due_time)

    return {
        "success": True,
        "data": {"task_id": task_id, "task": task},
        "message": f"Task created with ID {task_id}",
    }


def get_task(task_id: str, user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    now_ms = to_millis(_resolve_clock(clock).now())

    conn = get_connection()
    row = _fetch_owned_task(conn, task_id, user_id)
    conn.close()

    if row is None:
        return {"success": False, "error": "Todo not found"}

    return {"success": True, "data": _task_to_dict(row, now_ms)}


def _matches_filter(task: dict[str, Any], filter: str, today: str, tz) -> bool:
    created = task["created_date"]
    due = task["due_time"]

    if filter == "today":
        # Legacy rows without created_date always show up
        return (
            created == today
            or (due is not None and date_key(from_millis(due, tz)) == today)
            or not created
        )
    if filter == "overdue":
        return task["is_overdue"]
    if filter == "completed":
        return task["is_completed"]
    if filter == "unscheduled":
        return due is None
    if filter == "past":
        return bool(created) and created < today and not task["is_completed"]

    # "all" hides unscheduled leftovers from earlier days; see filter="past"
    return not created or created == today or task["is_completed"] or due is not None


def _sort_tasks(tasks: list[dict[str, Any]], sort_by: str) -> list[dict[str, Any]]:
    if sort_by == "createdTime":
        return sorted(tasks, key=lambda t: -t["created_at"])
    if sort_by == "manual":
        return sorted(tasks, key=lambda t: t["sort_order"] or 0)
    # dueTime: soonest first, unscheduled last, creation order within ties
    return sorted(tasks, key=lambda t: (
        t["due_time"] is None,
        t["due_time"] or 0,
        t["created_at"],
    ))


def list_tasks(
    user_id: str,
    filter: str = "all",
    sort_by: str = "dueTime",
    clock: Clock | None = None,
) -> dict[str, Any]:
    """
    List a user's tasks.

    Args:
        user_id: Owner of the tasks
        filter: One of TASK_FILTERS
        sort_by: One of SORT_OPTIONS

    Returns:
        dict with task list
    """
    if filter not in TASK_FILTERS:
        return {"success": False, "error": f"Invalid filter. Must be one of: {TASK_FILTERS}"}
    if sort_by not in SORT_OPTIONS:
        return {"success": False, "error": f"Invalid sort. Must be one of: {SORT_OPTIONS}"}

    now = _resolve_clock(clock).now()
    now_ms = to_millis(now)
    today = date_key(now)

    conn = get_connection()
    rows = conn.execute(
        "SELECT * FROM todos WHERE user_id = ? ORDER BY created_at, rowid",
        (user_id,),
    ).fetchall()
    conn.close()

    tasks = [_task_to_dict(row, now_ms) for row in rows]
    tasks = [t for t in tasks if _matches_filter(t, filter, today, now.tzinfo)]
    tasks = _sort_tasks(tasks, sort_by)

    return {
        "success": True,
        "data": {"tasks": tasks, "total": len(tasks), "filter": filter, "sort_by": sort_by},
    }


def get_incoming(user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    """The next few incomplete tasks that are due now or later."""
    limit = int(load_config()["tasks"]["incoming_limit"])
    now_ms = to_millis(_resolve_clock(clock).now())

    conn = get_connection()
    rows = conn.execute("""
        SELECT * FROM todos
        WHERE user_id = ? AND is_completed = 0 AND due_time IS NOT NULL AND due_time >= ?
        ORDER BY due_time ASC
        LIMIT ?
    """, (user_id, now_ms, limit)).fetchall()
    conn.close()

    return {"success": True, "data": [_task_to_dict(row, now_ms) for row in rows]}


def get_past_tasks(user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    """Incomplete tasks created before today."""
    now = _resolve_clock(clock).now()
    now_ms = to_millis(now)

    conn = get_connection()
    rows = conn.execute("""
        SELECT * FROM todos
        WHERE user_id = ? AND is_completed = 0
          AND created_date IS NOT NULL AND created_date < ?
        ORDER BY created_at, rowid
    """, (user_id, date_key(now))).fetchall()
    conn.close()

    return {"success": True, "data": [_task_to_dict(row, now_ms) for row in rows]}


def toggle_task(
    task_id: str,
    user_id: str,
    clock: Clock | None = None,
    ledger: AchievementLedger | None = None,
) -> dict[str, Any]:
    """
    Flip a task between done and not done.

    Completing a task also records the completion in the user's statistics
    and unlocks any achievements it earns. Both happen in one IMMEDIATE
    transaction so concurrent completions for a user are serialized.
    Un-completing does not roll statistics back.

    Returns:
        dict with the updated task, and on completion the new statistics and
        the newly unlocked achievements (catalog order)
    """
    now = _resolve_clock(clock).now()
    now_ms = to_millis(now)
    if ledger is None:
        ledger = AchievementLedger(catalog_from_config(load_config()))

    conn = get_connection()
    try:
        conn.execute("BEGIN IMMEDIATE")

        row = _fetch_owned_task(conn, task_id, user_id)
        if row is None:
            conn.rollback()
            return {"success": False, "error": "Todo not found"}

        completing = not row["is_completed"]
        conn.execute(
            "UPDATE todos SET is_completed = ?, completed_at = ? WHERE id = ?",
            (int(completing), now_ms if completing else None, task_id),
        )

        data: dict[str, Any] = {"completed": completing}

        if completing:
            event = CompletionEvent(
                completion_hour=now.hour,
                was_early_completion=row["due_time"] is not None and now_ms < row["due_time"],
                occurred_on=now.date(),
            )
            stats = _load_stats(conn, user_id)
            already_unlocked = _unlocked_ids(conn, user_id)

            result = ledger.apply_completion(stats, event, already_unlocked)

            _save_stats(conn, user_id, result.updated_stats)
            for record in unlock_records(user_id, result.newly_unlocked, now_ms):
                _insert_unlock(conn, record)

            data["stats"] = result.updated_stats.to_dict()
            data["newly_unlocked"] = [a.to_dict() for a in result.newly_unlocked]

        _touch_activity(conn, user_id, now)
        conn.commit()

        task_row = conn.execute("SELECT * FROM todos WHERE id = ?", (task_id,)).fetchone()
        data["task"] = _task_to_dict(task_row, now_ms)
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()

    with user_context(user_id):
        logger.info("Task %s %s", task_id, "completed" if completing else "reopened")

    return {"success": True, "data": data}


def snooze_task(task_id: str, user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    """Push the due time back, but never past the end of today."""
    minutes = int(load_config()["tasks"]["snooze_minutes"])
    now = _resolve_clock(clock).now()
    now_ms = to_millis(now)

    conn = get_connection()
    row = _fetch_owned_task(conn, task_id, user_id)
    if row is None:
        conn.close()
        return {"success": False, "error": "Todo not found"}

    if row["due_time"] is None:
        conn.close()
        return {"success": False, "error": "Cannot snooze task without due time"}

    new_due = min(row["due_time"] + minutes * 60 * 1000, to_millis(end_of_day(now)))
    conn.execute("UPDATE todos SET due_time = ? WHERE id = ?", (new_due, task_id))
    conn.commit()

    task = _task_to_dict(conn.execute("SELECT * FROM todos WHERE id = ?", (task_id,)).fetchone(), now_ms)
    conn.close()

    with user_context(user_id):
        logger.info("Task %s snoozed until %s", task_id, new_due)

    return {"success": True, "data": task, "message": f"Task snoozed for {minutes} minutes"}


def update_text(task_id: str, user_id: str, text: str) -> dict[str, Any]:
    if not text.strip():
        return {"success": False, "error": "Task text cannot be empty"}

    conn = get_connection()
    if _fetch_owned_task(conn, task_id, user_id) is None:
        conn.close()
        return {"success": False, "error": "Todo not found"}

    conn.execute("UPDATE todos SET text = ? WHERE id = ?", (text.strip(), task_id))
    conn.commit()
    conn.close()

    return {"success": True, "message": f"Task {task_id} updated"}


def update_due_time(
    task_id: str,
    user_id: str,
    due_time: int,
    clock: Clock | None = None,
) -> dict[str, Any]:
    now_ms = to_millis(_resolve_clock(clock).now())

    conn = get_connection()
    if _fetch_owned_task(conn, task_id, user_id) is None:
        conn.close()
        return {"success": False, "error": "Todo not found"}

    conn.execute("UPDATE todos SET due_time = ? WHERE id = ?", (due_time, task_id))
    conn.commit()
    task = _task_to_dict(conn.execute("SELECT * FROM todos WHERE id = ?", (task_id,)).fetchone(), now_ms)
    conn.close()

    return {"success": True, "data": task}


def delete_task(task_id: str, user_id: str) -> dict[str, Any]:
    conn = get_connection()
    if _fetch_owned_task(conn, task_id, user_id) is None:
        conn.close()
        return {"success": False, "error": "Todo not found"}

    conn.execute("DELETE FROM todos WHERE id = ?", (task_id,))
    conn.commit()
    conn.close()

    return {"success": True, "message": f"Task {task_id} deleted"}


def carry_over_tasks(user_id: str, task_ids: list[str], clock: Clock | None = None) -> dict[str, Any]:
    """Move tasks onto today's list. Ids owned by someone else are skipped."""
    today = date_key(_resolve_clock(clock).now())

    conn = get_connection()
    placeholders = ", ".join("?" for _ in task_ids)
    if task_ids:
        cursor = conn.execute(
            f"UPDATE todos SET created_date = ? WHERE user_id = ? AND id IN ({placeholders})",
            [today, user_id, *task_ids],
        )
        carried = cursor.rowcount
    else:
        carried = 0
    conn.commit()
    conn.close()

    return {
        "success": True,
        "data": {"carried_over": carried},
        "message": f"Carried over {carried} task{'s' if carried != 1 else ''}",
    }


# ─────────────────────────────────────────────────────────────────────────────
# User settings and daily reset
# ─────────────────────────────────────────────────────────────────────────────


def get_user_settings(user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    now = _resolve_clock(clock).now()

    conn = get_connection()
    row = conn.execute("SELECT * FROM user_settings WHERE user_id = ?", (user_id,)).fetchone()
    conn.close()

    if row is None:
        settings = {
            "roll_over_tasks": False,
            "last_reset_date": date_key(now),
            "last_active_time": to_millis(now),
        }
    else:
        settings = dict(row)
        settings.pop("user_id")
        settings["roll_over_tasks"] = bool(settings["roll_over_tasks"])

    return {"success": True, "data": settings}


def update_user_settings(
    user_id: str,
    roll_over_tasks: bool | None = None,
    last_reset_date: str | None = None,
    last_active_time: int | None = None,
    clock: Clock | None = None,
) -> dict[str, Any]:
    current = get_user_settings(user_id, clock)["data"]

    if roll_over_tasks is not None:
        current["roll_over_tasks"] = roll_over_tasks
    if last_reset_date is not None:
        current["last_reset_date"] = last_reset_date
    if last_active_time is not None:
        current["last_active_time"] = last_active_time

    conn = get_connection()
    conn.execute("""
        INSERT INTO user_settings (user_id, roll_over_tasks, last_reset_date, last_active_time)
        VALUES (?, ?, ?, ?)
        ON CONFLICT(user_id) DO UPDATE SET
            roll_over_tasks = excluded.roll_over_tasks,
            last_reset_date = excluded.last_reset_date,
            last_active_time = excluded.last_active_time
    """, (user_id, int(current["roll_over_tasks"]), current["last_reset_date"], current["last_active_time"]))
    conn.commit()
    conn.close()

    return {"success": True, "data": current}


def needs_daily_reset(user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    """True when the last daily reset happened before today."""
    clock = _resolve_clock(clock)
    settings = get_user_settings(user_id, clock)["data"]
    return {
        "success": True,
        "data": {"needs_reset": settings["last_reset_date"] < date_key(clock.now())},
    }


def check_daily_reset(user_id: str, clock: Clock | None = None) -> dict[str, Any]:
    """
    Decide what to do with unfinished tasks from earlier days.

    Returns one of these actions in ``data["action"]``:
        none:          nothing pending, or already reset today
        carried_over:  roll_over_tasks is on, so tasks were moved to today
        prompt:        ask the user which tasks to carry over
    """
    clock = _resolve_clock(clock)
    today = date_key(clock.now())

    past = get_past_tasks(user_id, clock)["data"]
    settings = get_user_settings(user_id, clock)["data"]

    if not past or not needs_daily_reset(user_id, clock)["data"]["needs_reset"]:
        return {"success": True, "data": {"action": "none", "past_tasks": past}}

    if settings["roll_over_tasks"]:
        carry_over_tasks(user_id, [t["id"] for t in past], clock)
        update_user_settings(user_id, last_reset_date=today, clock=clock)
        return {"success": True, "data": {"action": "carried_over", "past_tasks": past}}

    return {"success": True, "data": {"action": "prompt", "past_tasks": past}}


def finish_daily_reset(
    user_id: str,
    carry_over_ids: list[str] | None = None,
    clock: Clock | None = None,
) -> dict[str, Any]:
    """Carry the chosen tasks over (if any) and mark today as reset."""
    clock = _resolve_clock(clock)
    carried = 0
    if carry_over_ids:
        carried = carry_over_tasks(user_id, carry_over_ids, clock)["data"]["carried_over"]
    update_user_settings(user_id, last_reset_date=date_key(clock.now()), clock=clock)
    return {"success": True, "data": {"carried_over": carried}}


# ─────────────────────────────────────────────────────────────────────────────
# Statistics and achievements
# ─────────────────────────────────────────────────────────────────────────────


def _load_stats(conn: sqlite3.Connection, user_id: str) -> UserStatistics:
    row = conn.execute("SELECT * FROM user_stats WHERE user_id = ?", (user_id,)).fetchone()
    if row is None:
        return UserStatistics()
    data = dict(row)
    data["daily_completions"] = json.loads(data["daily_completions"] or "{}")
    return UserStatistics.from_dict(data)


def _save_stats(conn: sqlite3.Connection, user_id: str, stats: UserStatistics) -> None:
    values = stats.to_dict()
    columns = [*_STAT_COLUMNS, "last_completion_date", "daily_completions"]
    params = [values[c] for c in _STAT_COLUMNS]
    params += [values["last_completion_date"], json.dumps(values["daily_completions"], sort_keys=True)]

    assignments = ", ".join(f"{c} = excluded.{c}" for c in columns)
    conn.execute(f"""
        INSERT INTO user_stats (user_id, {", ".join(columns)})
        VALUES (?, {", ".join("?" for _ in columns)})
        ON CONFLICT(user_id) DO UPDATE SET {assignments}
    """, [user_id, *params])


def _unlocked_ids(conn: sqlite3.Connection, user_id: str) -> set[str]:
    rows = conn.execute(
        "SELECT achievement_id FROM user_achievements WHERE user_id = ?",
        (user_id,),
    ).fetchall()
    return {row["achievement_id"] for row in rows}


def _insert_unlock(conn: sqlite3.Connection, record: AchievementUnlockRecord) -> None:
    # The unique index makes a duplicate unlock a no-op
    conn.execute("""
        INSERT OR IGNORE INTO user_achievements (id, user_id, achievement_id, is_unlocked, unlocked_at)
        VALUES (?, ?, ?, ?, ?)
    """, (generate_id(), record.user_id, record.achievement_id, int(record.is_unlocked), record.unlocked_at))


def _unlock_records_for(conn: sqlite3.Connection, user_id: str) -> list[AchievementUnlockRecord]:
    rows = conn.execute(
        "SELECT * FROM user_achievements WHERE user_id = ? ORDER BY unlocked_at DESC, rowid DESC",
        (user_id,),
    ).fetchall()
    return [
        AchievementUnlockRecord(
            user_id=row["user_id"],
            achievement_id=row["achievement_id"],
            unlocked_at=row["unlocked_at"],
            is_unlocked=bool(row["is_unlocked"]),
        )
        for row in rows
    ]


def get_user_stats(user_id: str) -> dict[str, Any]:
    conn = get_connection()
    stats = _load_stats(conn, user_id)
    conn.close()
    return {"success": True, "data": stats.to_dict()}


def get_user_achievements(user_id: str, ledger: AchievementLedger | None = None) -> dict[str, Any]:
    """Every achievement in the catalog with the user's progress toward it."""
    if ledger is None:
        ledger = AchievementLedger(catalog_from_config(load_config()))

    conn = get_connection()
    stats = _load_stats(conn, user_id)
    records = _unlock_records_for(conn, user_id)
    conn.close()

    return {"success": True, "data": [view.to_dict() for view in ledger.progress(stats, records)]}


def get_recent_achievements(user_id: str, ledger: AchievementLedger | None = None) -> dict[str, Any]:
    """Most recent unlocks, newest first."""
    if ledger is None:
        ledger = AchievementLedger(catalog_from_config(load_config()))
    limit = int(load_config()["tasks"]["recent_achievements_limit"])

    conn = get_connection()
    records = [r for r in _unlock_records_for(conn, user_id) if r.is_unlocked]
    conn.close()

    recent = []
    for record in records:
        achievement = ledger.catalog.get(record.achievement_id)
        # Unlocks for achievements dropped from the catalog are kept but not shown
        if achievement is None:
            continue
        recent.append({**achievement.to_dict(), "unlocked_at": record.unlocked_at})
        if len(recent) >= limit:
            break

    return {"success": True, "data": recent}


__all__ = [
    "carry_over_tasks",
    "check_daily_reset",
    "create_task",
    "delete_task",
    "finish_daily_reset",
    "get_connection",
    "get_incoming",
    "get_past_tasks",
    "get_recent_achievements",
    "get_task",
    "get_user_achievements",
    "get_user_settings",
    "get_user_stats",
    "list_tasks",
    "needs_daily_reset",
    "snooze_task",
    "toggle_task",
    "update_due_time",
    "update_text",
    "update_user_settings",
]
