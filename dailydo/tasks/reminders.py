"""
Tool: Pending Task Reminders
Purpose: Hourly nudge for users who still have unfinished tasks

Meant to be run once an hour by an external scheduler (cron, systemd timer):

    dailydo sweep

Users who have not been active for ``reminders.inactive_after_days`` are left
alone. How a reminder is delivered is up to the NotificationSink; the default
one only logs.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Protocol

from dailydo.clock import Clock, get_clock, to_millis
from dailydo.config import load_config
from dailydo.logging_config import user_context

from . import manager


logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    def send(self, user_id: str, message: str) -> None: ...


class LoggingNotificationSink:
    """Writes reminders to the log instead of delivering them."""

    def send(self, user_id: str, message: str) -> None:
        with user_context(user_id):
            logger.info("Reminder: %s", message)


def pending_counts() -> dict[str, int]:
    """Number of incomplete tasks per user, for users that have any."""
    conn = manager.get_connection()
    rows = conn.execute("""
        SELECT user_id, COUNT(*) AS pending
        FROM todos
        WHERE is_completed = 0
        GROUP BY user_id
        ORDER BY user_id
    """).fetchall()
    conn.close()
    return {row["user_id"]: row["pending"] for row in rows}


def _last_active(user_id: str) -> int | None:
    conn = manager.get_connection()
    row = conn.execute(
        "SELECT last_active_time FROM user_settings WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    conn.close()
    return row["last_active_time"] if row else None


def run_hourly_sweep(
    sink: NotificationSink | None = None,
    clock: Clock | None = None,
) -> dict[str, Any]:
    """
    Send one reminder to every recently active user with pending tasks.

    Returns:
        dict with the notified users and the ones skipped as inactive
    """
    config = load_config()["reminders"]
    sink = sink or LoggingNotificationSink()
    now_ms = to_millis((clock or get_clock()).now())
    inactive_after_ms = int(timedelta(days=config["inactive_after_days"]).total_seconds() * 1000)

    notified = []
    skipped = []

    for user_id, count in pending_counts().items():
        last_active = _last_active(user_id)
        # Users with no recorded activity are still reminded
        if last_active is not None and now_ms - last_active > inactive_after_ms:
            skipped.append(user_id)
            continue

        sink.send(user_id, config["message"].format(count=count))
        notified.append({"user_id": user_id, "pending": count})

    logger.info("Reminder sweep: %d notified, %d inactive", len(notified), len(skipped))

    return {"success": True, "data": {"notified": notified, "skipped": skipped}}


__all__ = [
    "LoggingNotificationSink",
    "NotificationSink",
    "pending_counts",
    "run_hourly_sweep",
]
