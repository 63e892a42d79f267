"""Task store - to-dos, daily reset, and completion bookkeeping

Components:
    manager.py: Task CRUD, the completion transaction, user settings
    reminders.py: Hourly "you have N pending tasks" sweep

A completed task feeds the achievements ledger inside a single sqlite
transaction (read stats → apply completion → write stats and unlock records),
so two completions for the same user cannot interleave.

Usage:
    from dailydo.tasks.manager import create_task, toggle_task

    task = create_task(user_id="alice", text="Submit report at 3pm")
    toggle_task(task["data"]["task_id"], user_id="alice")
"""

from dailydo import DB_PATH

# List filters and sort orders
TASK_FILTERS = ("all", "today", "overdue", "completed", "unscheduled", "past")
SORT_OPTIONS = ("dueTime", "createdTime", "manual")

__all__ = [
    "DB_PATH",
    "SORT_OPTIONS",
    "TASK_FILTERS",
]
