"""
Tool: Task Text Extractor
Purpose: Split free-form task input into a clean description and a due time

Examples:
    "Submit report at 3pm"             -> "Submit report", today 15:00
    "Buy groceries tomorrow at 7pm"    -> "Buy groceries", tomorrow 19:00
    "Call mom in 1 hour"               -> "Call mom", now + 1h
    "Meeting next Tuesday at 2:30pm"   -> "Meeting", next Tuesday 14:30
    "Water the plants"                 -> "Water the plants", no due time

The first phrase the recognizer reports is cut out of the text, the two
remaining halves are joined, and a dangling "at"/"in"/"on"/"by" is dropped
from each end. If nothing is left the whole input is kept as the task text.

Usage:
    python -m dailydo.parser.extractor "Submit report at 3pm"
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from datetime import datetime

from dailydo.clock import Clock, get_clock, to_millis
from dailydo.config import load_config
from dailydo.parser.models import ParsedTask
from dailydo.parser.recognizer import RecognizerSettings, find_temporal_phrases


logger = logging.getLogger(__name__)

PREPOSITIONS = ("at", "in", "on", "by")

_TRAILING_PREPOSITION = re.compile(r"\s+(?:" + "|".join(PREPOSITIONS) + r")\s*$", re.IGNORECASE)
_LEADING_PREPOSITION = re.compile(r"^(?:" + "|".join(PREPOSITIONS) + r")(?:\s+|$)", re.IGNORECASE)


def extract(
    text: str,
    now: datetime | None = None,
    clock: Clock | None = None,
    settings: RecognizerSettings | None = None,
) -> ParsedTask:
    """
    Parse task input into text and an optional due time.

    Args:
        text: Raw user input
        now: Reference time for relative phrases; defaults to ``clock.now()``
        clock: Clock used when ``now`` is not given
        settings: Recognizer defaults; read from config when omitted

    Returns:
        ParsedTask with ``due_time`` in epoch milliseconds, or None
    """
    trimmed = text.strip()
    if not trimmed:
        return ParsedTask(text=trimmed)

    if now is None:
        now = (clock or get_clock()).now()
    if settings is None:
        settings = RecognizerSettings.from_config(load_config())

    matches = find_temporal_phrases(text, now, settings)
    if not matches:
        return ParsedTask(text=trimmed)

    first = matches[0]
    cleaned = clean_remainder(text[:first.start], text[first.end:])

    logger.debug("Parsed %r: phrase=%r due=%s", text, first.text, first.value.isoformat())

    return ParsedTask(text=cleaned or trimmed, due_time=to_millis(first.value))


def clean_remainder(before: str, after: str) -> str:
    """Join the text around a removed phrase and drop dangling prepositions.

    Runs of whitespace collapse to a single space.
    """
    combined = " ".join(f"{before} {after}".split())
    combined = _TRAILING_PREPOSITION.sub("", combined, count=1)
    combined = _LEADING_PREPOSITION.sub("", combined, count=1)
    return combined.strip()


def main():
    parser = argparse.ArgumentParser(description="Extract task text and due time from free-form input")
    parser.add_argument("text", help="Task input, e.g. 'Submit report at 3pm'")
    parser.add_argument("--now", help="Reference time (ISO 8601) instead of the current time")
    args = parser.parse_args()

    now = datetime.fromisoformat(args.now) if args.now else None
    parsed = extract(args.text, now=now)
    print(json.dumps({"success": True, "data": parsed.to_dict()}, indent=2))


if __name__ == "__main__":
    sys.exit(main())
