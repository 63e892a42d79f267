"""Date/time phrase recognition.

Scans free text for date and time phrases and resolves each one to an
absolute datetime against a reference "now".

Handles:
    days:      "today", "tonight", "tomorrow morning", "this afternoon",
               "next tuesday", "on friday", "Jan 5th", "5 March 2025",
               "2025-03-05", "3/5"
    times:     "3pm", "at 2:30 p.m.", "15:00", "noon", "midnight"
    offsets:   "in 1 hour", "in an hour", "2 days from now", "next week"

A day phrase directly followed or preceded by a time phrase is reported as
one match ("tomorrow at 7pm", "7pm tomorrow", "in 2 days at 5pm"). Results are ordered left to
right and never overlap; when two candidates start at the same place the
longer one wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from dateutil.relativedelta import relativedelta

from dailydo.parser.models import TemporalMatch


WEEKDAYS = {
    "monday": 0, "tuesday": 1, "wednesday": 2, "thursday": 3,
    "friday": 4, "saturday": 5, "sunday": 6,
}

# Keyed by the first three letters of the month name
MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

NUMBER_WORDS = {
    "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11,
    "twelve": 12,
}

_MONTH = (
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_DAY_PART = r"(?:\s+(morning|afternoon|evening|night))?"
_AMOUNT = r"(\d+|an?|one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve|a\s+couple\s+of|half\s+an?)"
_UNIT = r"(minutes?|mins?|hours?|hrs?|days?|weeks?|months?|years?)"

_RELATIVE_DAY = re.compile(r"\b(today|tonight|tomorrow|tmrw|yesterday)\b" + _DAY_PART, re.IGNORECASE)
_THIS_PART = re.compile(r"\bthis\s+(morning|afternoon|evening)\b", re.IGNORECASE)
_WEEKDAY = re.compile(
    r"\b(?:(next|this|on)\s+)?(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b" + _DAY_PART,
    re.IGNORECASE,
)
_MONTH_DAY = re.compile(
    r"\b(?:on\s+)?" + _MONTH + r"\b\.?\s+(\d{1,2})(?:st|nd|rd|th)?\b(?:,?\s+(\d{4})\b)?",
    re.IGNORECASE,
)
_DAY_MONTH = re.compile(
    r"\b(?:on\s+)?(\d{1,2})(?:st|nd|rd|th)?\s+(?:of\s+)?" + _MONTH + r"\b\.?(?:,?\s+(\d{4})\b)?",
    re.IGNORECASE,
)
_ISO_DATE = re.compile(r"\b(?:on\s+)?(\d{4})-(\d{1,2})-(\d{1,2})\b", re.IGNORECASE)
_NUMERIC_DATE = re.compile(r"\b(?:on\s+)?(\d{1,2})/(\d{1,2})(?:/(\d{4}|\d{2}))?\b", re.IGNORECASE)
_NEXT_PERIOD = re.compile(r"\bnext\s+(week|month|year)\b", re.IGNORECASE)

_MERIDIEM_TIME = re.compile(
    r"\b(?:at\s+)?(\d{1,2})(?::([0-5]\d))?\s*(a\.?m\.?|p\.?m\.?)(?!\w)",
    re.IGNORECASE,
)
_CLOCK_TIME = re.compile(
    r"\b(?:at\s+)?([01]?\d|2[0-3]):([0-5]\d)\b(?!\s*[ap]\.?m)",
    re.IGNORECASE,
)
_NAMED_TIME = re.compile(r"\b(?:at\s+)?(noon|midday|midnight)\b", re.IGNORECASE)
# "at 9" is only trusted next to a day phrase ("tonight at 9")
_BARE_HOUR = re.compile(r"\bat\s+(\d{1,2})\b(?![:/.]?\d|\s*[ap]\.?m)", re.IGNORECASE)

_IN_OFFSET = re.compile(r"\bin\s+" + _AMOUNT + r"\s+" + _UNIT + r"\b", re.IGNORECASE)
_FROM_NOW = re.compile(r"\b" + _AMOUNT + r"\s+" + _UNIT + r"\s+from\s+now\b", re.IGNORECASE)

_JOINER = re.compile(r"[\s,]*")


@dataclass
class RecognizerSettings:
    """Resolution defaults. See the ``parser`` section of args/dailydo.yaml."""

    default_hour: int = 12
    forward_dates: bool = False
    day_parts: dict[str, int] = field(default_factory=lambda: {
        "morning": 9,
        "afternoon": 14,
        "evening": 18,
        "night": 20,
    })

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> RecognizerSettings:
        parser_config = config.get("parser") or {}
        defaults = cls()
        day_parts = dict(defaults.day_parts)
        day_parts.update(parser_config.get("day_parts") or {})
        return cls(
            default_hour=int(parser_config.get("default_hour", defaults.default_hour)),
            forward_dates=bool(parser_config.get("forward_dates", defaults.forward_dates)),
            day_parts=day_parts,
        )


@dataclass
class _DayFragment:
    start: int
    end: int
    day: date
    implied: time | None = None  # from "tonight", "friday evening", ...
    exact: datetime | None = None  # "in 2 days" alone keeps the time of now


@dataclass
class _TimeFragment:
    start: int
    end: int
    clock: time
    rollover: bool = False  # midnight belongs to the following day
    bare: bool = False


def find_temporal_phrases(
    text: str,
    now: datetime,
    settings: RecognizerSettings | None = None,
) -> list[TemporalMatch]:
    """Find every date/time phrase in ``text``, left to right.

    Phrases that resolve outside the representable date range are dropped.
    """
    if settings is None:
        settings = RecognizerSettings()

    days = _day_fragments(text, now, settings)
    times = _time_fragments(text)

    candidates: list[TemporalMatch] = []

    for day in days:
        value = _on_day(day, None, settings, now)
        if value is not None:
            candidates.append(_match(text, day.start, day.end, value))
        for clock in times:
            if _adjacent(text, day, clock) or _adjacent(text, clock, day):
                value = _on_day(day, clock, settings, now)
                if value is None:
                    continue
                start = min(day.start, clock.start)
                end = max(day.end, clock.end)
                candidates.append(_match(text, start, end, value))

    for clock in times:
        if clock.bare:
            continue
        value = datetime.combine(now.date(), clock.clock, tzinfo=now.tzinfo)
        if clock.rollover or (settings.forward_dates and value < now):
            value = _shift(value, timedelta(days=1))
        if value is not None:
            candidates.append(_match(text, clock.start, clock.end, value))

    candidates.extend(_offset_matches(text, now))

    return _select(candidates)


def _match(text: str, start: int, end: int, value: datetime) -> TemporalMatch:
    return TemporalMatch(start=start, end=end, text=text[start:end], value=value)


def _shift(value, delta):
    """``value + delta``, or None when the result is out of range."""
    try:
        return value + delta
    except (OverflowError, ValueError):
        return None


def _adjacent(text: str, first: Any, second: Any) -> bool:
    if first.end > second.start:
        return False
    return _JOINER.fullmatch(text[first.end:second.start]) is not None


def _select(candidates: list[TemporalMatch]) -> list[TemporalMatch]:
    """Left-most first, longest on ties, dropping anything overlapping a pick."""
    chosen: list[TemporalMatch] = []
    for candidate in sorted(candidates, key=lambda m: (m.start, -m.length)):
        if chosen and candidate.overlaps(chosen[-1]):
            continue
        chosen.append(candidate)
    return chosen


def _on_day(
    day: _DayFragment,
    clock: _TimeFragment | None,
    settings: RecognizerSettings,
    now: datetime,
) -> datetime | None:
    if clock is None:
        if day.exact is not None:
            return day.exact
        at = day.implied or time(settings.default_hour)
        return datetime.combine(day.day, at, tzinfo=now.tzinfo)

    at = clock.clock
    if clock.bare and day.implied is not None and day.implied.hour >= 12 and at.hour < 12:
        # "tonight at 9" means 21:00
        at = at.replace(hour=at.hour + 12)

    value = datetime.combine(day.day, at, tzinfo=now.tzinfo)
    if clock.rollover:
        return _shift(value, timedelta(days=1))
    return value


# ─────────────────────────────────────────────────────────────────────────────
# Day phrases
# ─────────────────────────────────────────────────────────────────────────────


def _day_fragments(text: str, now: datetime, settings: RecognizerSettings) -> list[_DayFragment]:
    fragments: list[_DayFragment] = []
    current = now.date()
    parts = settings.day_parts

    def part_time(name: str | None) -> time | None:
        if not name:
            return None
        return time(parts[name.lower()])

    for match in _RELATIVE_DAY.finditer(text):
        word = match.group(1).lower()
        offset = {"today": 0, "tonight": 0, "tomorrow": 1, "tmrw": 1, "yesterday": -1}[word]
        implied = part_time(match.group(2))
        if implied is None and word == "tonight":
            implied = part_time("night")
        day = _shift(current, timedelta(days=offset))
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day, implied))

    for match in _THIS_PART.finditer(text):
        fragments.append(_DayFragment(match.start(), match.end(), current, part_time(match.group(1))))

    for match in _WEEKDAY.finditer(text):
        modifier = (match.group(1) or "").lower()
        days_ahead = (WEEKDAYS[match.group(2).lower()] - current.weekday()) % 7
        if days_ahead == 0 and modifier == "next":
            days_ahead = 7
        day = _shift(current, timedelta(days=days_ahead))
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day, part_time(match.group(3))))

    for match in _MONTH_DAY.finditer(text):
        day = _calendar_day(current, MONTHS[match.group(1)[:3].lower()], int(match.group(2)), match.group(3))
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day))

    for match in _DAY_MONTH.finditer(text):
        day = _calendar_day(current, MONTHS[match.group(2)[:3].lower()], int(match.group(1)), match.group(3))
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day))

    for match in _ISO_DATE.finditer(text):
        day = _calendar_day(current, int(match.group(2)), int(match.group(3)), match.group(1))
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day))

    for match in _NUMERIC_DATE.finditer(text):
        year = match.group(3)
        if year is not None and len(year) == 2:
            year = f"20{year}"
        day = _calendar_day(current, int(match.group(1)), int(match.group(2)), year)
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day))

    for match in _NEXT_PERIOD.finditer(text):
        unit = match.group(1).lower()
        if unit == "week":
            day = _shift(current, timedelta(weeks=1))
        elif unit == "month":
            day = _shift(current, relativedelta(months=1))
        else:
            day = _shift(current, relativedelta(years=1))
        if day is not None:
            fragments.append(_DayFragment(match.start(), match.end(), day))

    # Whole-day offsets act as a day so "in 2 days at 5pm" reads as one phrase
    for pattern in (_IN_OFFSET, _FROM_NOW):
        for match in pattern.finditer(text):
            if not _is_day_unit(match.group(2)):
                continue
            delta = _offset(match.group(1), match.group(2))
            exact = _shift(now, delta) if delta is not None else None
            if exact is not None:
                fragments.append(_DayFragment(match.start(), match.end(), exact.date(), exact=exact))

    return fragments


def _calendar_day(current: date, month: int, day: int, year: str | None) -> date | None:
    """Build a date, picking the year closest to ``current`` when none is given."""
    if year is not None:
        try:
            return date(int(year), month, day)
        except ValueError:
            return None

    candidates = []
    for candidate_year in (current.year - 1, current.year, current.year + 1):
        try:
            candidates.append(date(candidate_year, month, day))
        except ValueError:
            continue
    if not candidates:
        return None
    # Ties go to the later date
    return min(candidates, key=lambda d: (abs((d - current).days), -d.toordinal()))


# ─────────────────────────────────────────────────────────────────────────────
# Time-of-day phrases
# ─────────────────────────────────────────────────────────────────────────────


def _time_fragments(text: str) -> list[_TimeFragment]:
    fragments: list[_TimeFragment] = []

    for match in _MERIDIEM_TIME.finditer(text):
        hour = int(match.group(1))
        minute = int(match.group(2) or 0)
        meridiem = match.group(3).replace(".", "").lower()
        if not 1 <= hour <= 12:
            continue
        if meridiem == "pm" and hour < 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
        fragments.append(_TimeFragment(match.start(), match.end(), time(hour, minute)))

    for match in _CLOCK_TIME.finditer(text):
        fragments.append(_TimeFragment(
            match.start(), match.end(),
            time(int(match.group(1)), int(match.group(2))),
        ))

    for match in _NAMED_TIME.finditer(text):
        if match.group(1).lower() == "midnight":
            fragments.append(_TimeFragment(match.start(), match.end(), time(0), rollover=True))
        else:
            fragments.append(_TimeFragment(match.start(), match.end(), time(12)))

    for match in _BARE_HOUR.finditer(text):
        hour = int(match.group(1))
        if hour <= 23:
            fragments.append(_TimeFragment(match.start(), match.end(), time(hour), bare=True))

    return fragments


# ─────────────────────────────────────────────────────────────────────────────
# Relative offsets
# ─────────────────────────────────────────────────────────────────────────────


def _offset_matches(text: str, now: datetime) -> list[TemporalMatch]:
    """Minute and hour offsets, counted as elapsed time."""
    matches: list[TemporalMatch] = []
    for pattern in (_IN_OFFSET, _FROM_NOW):
        for match in pattern.finditer(text):
            if _is_day_unit(match.group(2)):
                continue
            delta = _offset(match.group(1), match.group(2))
            value = _elapsed(now, delta) if delta is not None else None
            if value is not None:
                matches.append(_match(text, match.start(), match.end(), value))
    return matches


def _elapsed(now: datetime, delta: timedelta) -> datetime | None:
    # Aware clocks step through UTC so "in 1 hour" is an hour across DST changes
    if now.tzinfo is None:
        return _shift(now, delta)
    try:
        return (now.astimezone(timezone.utc) + delta).astimezone(now.tzinfo)
    except (OverflowError, ValueError):
        return None


def _is_day_unit(unit_text: str) -> bool:
    return unit_text.lower().rstrip("s") not in ("minute", "min", "hour", "hr")


def _offset(amount_text: str, unit_text: str) -> timedelta | relativedelta | None:
    amount_text = " ".join(amount_text.lower().split())
    if amount_text.isdigit():
        amount: float = int(amount_text)
    elif amount_text.startswith("half"):
        amount = 0.5
    elif amount_text == "a couple of":
        amount = 2
    else:
        amount = NUMBER_WORDS[amount_text]

    unit = unit_text.lower().rstrip("s")
    try:
        if unit in ("minute", "min"):
            return timedelta(minutes=amount)
        if unit in ("hour", "hr"):
            return timedelta(hours=amount)
        if unit == "day":
            return timedelta(days=amount)
        if unit == "week":
            return timedelta(weeks=amount)
    except OverflowError:
        return None

    # Calendar units need whole numbers
    if amount != int(amount):
        return None
    if unit == "month":
        return relativedelta(months=int(amount))
    return relativedelta(years=int(amount))


__all__ = [
    "MONTHS",
    "NUMBER_WORDS",
    "RecognizerSettings",
    "WEEKDAYS",
    "find_temporal_phrases",
]
