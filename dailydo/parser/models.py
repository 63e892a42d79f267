"""Parser data models.

    raw text → TemporalMatch (span + resolved datetime) → ParsedTask
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TemporalMatch:
    """A date/time phrase found in the input, with its ``[start, end)`` span."""

    start: int
    end: int
    text: str
    value: datetime

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: TemporalMatch) -> bool:
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "value": self.value.isoformat(),
        }


@dataclass(frozen=True)
class ParsedTask:
    """Task text with the temporal phrase removed, plus the due time if any."""

    text: str
    due_time: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"text": self.text}
        if self.due_time is not None:
            result["due_time"] = self.due_time
        return result
