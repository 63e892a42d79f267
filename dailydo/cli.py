#!/usr/bin/env python3
"""
dailydo Command Line Interface

Main entry point for the `dailydo` command. Every subcommand prints a JSON
result and exits non-zero when ``success`` is false.

Usage:
    dailydo parse "Submit report at 3pm"
    dailydo add --user alice "Buy groceries tomorrow at 7pm"
    dailydo list --user alice --filter today
    dailydo toggle --user alice --task-id abc123
    dailydo snooze --user alice --task-id abc123
    dailydo delete --user alice --task-id abc123
    dailydo stats --user alice
    dailydo achievements --user alice [--recent]
    dailydo reset --user alice [--carry-over ID ...]
    dailydo sweep                      # run from an hourly cron
    dailydo --version
"""

import argparse
import json
import sys
from datetime import datetime

from dailydo import __version__
from dailydo.logging_config import setup_logging


def cmd_parse(args):
    from dailydo.parser import extract

    now = datetime.fromisoformat(args.now) if args.now else None
    parsed = extract(args.text, now=now)
    return {"success": True, "data": parsed.to_dict()}


def cmd_add(args):
    from dailydo.tasks.manager import create_task

    return create_task(user_id=args.user, text=args.text, due_time=args.due)


def cmd_list(args):
    from dailydo.tasks.manager import get_incoming, list_tasks

    if args.incoming:
        return get_incoming(args.user)
    return list_tasks(user_id=args.user, filter=args.filter, sort_by=args.sort)


def cmd_toggle(args):
    from dailydo.tasks.manager import toggle_task

    return toggle_task(args.task_id, args.user)


def cmd_snooze(args):
    from dailydo.tasks.manager import snooze_task

    return snooze_task(args.task_id, args.user)


def cmd_delete(args):
    from dailydo.tasks.manager import delete_task

    return delete_task(args.task_id, args.user)


def cmd_stats(args):
    from dailydo.tasks.manager import get_user_stats

    return get_user_stats(args.user)


def cmd_achievements(args):
    from dailydo.tasks.manager import get_recent_achievements, get_user_achievements

    if args.recent:
        return get_recent_achievements(args.user)
    return get_user_achievements(args.user)


def cmd_reset(args):
    from dailydo.tasks.manager import check_daily_reset, finish_daily_reset

    if args.carry_over is not None:
        return finish_daily_reset(args.user, args.carry_over)
    return check_daily_reset(args.user)


def cmd_sweep(args):
    from dailydo.tasks.reminders import run_hourly_sweep

    return run_hourly_sweep()


def build_parser() -> argparse.ArgumentParser:
    from dailydo.tasks import SORT_OPTIONS, TASK_FILTERS

    parser = argparse.ArgumentParser(
        prog="dailydo",
        description="dailydo - to-dos with streaks and achievements",
    )
    parser.add_argument("--version", action="version", version=f"dailydo {__version__}")
    parser.add_argument("--log-level", help="Override DAILYDO_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    parse_parser = subparsers.add_parser("parse", help="Show how task text would be parsed")
    parse_parser.add_argument("text", help="Task input")
    parse_parser.add_argument("--now", help="Reference time (ISO 8601)")
    parse_parser.set_defaults(func=cmd_parse)

    add_parser = subparsers.add_parser("add", help="Create a task")
    add_parser.add_argument("--user", required=True, help="User ID")
    add_parser.add_argument("--due", type=int, help="Explicit due time (epoch ms)")
    add_parser.add_argument("text", help="Task input, e.g. 'Call mom tomorrow at 7pm'")
    add_parser.set_defaults(func=cmd_add)

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument("--user", required=True, help="User ID")
    list_parser.add_argument("--filter", choices=TASK_FILTERS, default="all")
    list_parser.add_argument("--sort", choices=SORT_OPTIONS, default="dueTime")
    list_parser.add_argument("--incoming", action="store_true", help="Only the next upcoming tasks")
    list_parser.set_defaults(func=cmd_list)

    for name, func, help_text in (
        ("toggle", cmd_toggle, "Mark a task done / not done"),
        ("snooze", cmd_snooze, "Push a task's due time back"),
        ("delete", cmd_delete, "Delete a task"),
    ):
        task_parser = subparsers.add_parser(name, help=help_text)
        task_parser.add_argument("--user", required=True, help="User ID")
        task_parser.add_argument("--task-id", required=True, help="Task ID")
        task_parser.set_defaults(func=func)

    stats_parser = subparsers.add_parser("stats", help="Show completion statistics")
    stats_parser.add_argument("--user", required=True, help="User ID")
    stats_parser.set_defaults(func=cmd_stats)

    achievements_parser = subparsers.add_parser("achievements", help="Show achievement progress")
    achievements_parser.add_argument("--user", required=True, help="User ID")
    achievements_parser.add_argument("--recent", action="store_true", help="Only recent unlocks")
    achievements_parser.set_defaults(func=cmd_achievements)

    reset_parser = subparsers.add_parser("reset", help="Daily reset of unfinished tasks")
    reset_parser.add_argument("--user", required=True, help="User ID")
    reset_parser.add_argument(
        "--carry-over", nargs="*", metavar="TASK_ID",
        help="Finish the reset, carrying these tasks over to today",
    )
    reset_parser.set_defaults(func=cmd_reset)

    sweep_parser = subparsers.add_parser("sweep", help="Send hourly pending-task reminders")
    sweep_parser.set_defaults(func=cmd_sweep)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    setup_logging(level=args.log_level)

    result = args.func(args)
    print(json.dumps(result, indent=2, default=str, ensure_ascii=False))
    return 0 if result.get("success") else 1


if __name__ == "__main__":
    sys.exit(main())
