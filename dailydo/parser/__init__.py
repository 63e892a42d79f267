"""Natural-language task parsing: find the date/time phrase, keep the rest."""

from dailydo.parser.extractor import clean_remainder, extract
from dailydo.parser.models import ParsedTask, TemporalMatch
from dailydo.parser.recognizer import RecognizerSettings, find_temporal_phrases

__all__ = [
    "ParsedTask",
    "RecognizerSettings",
    "TemporalMatch",
    "clean_remainder",
    "extract",
    "find_temporal_phrases",
]
