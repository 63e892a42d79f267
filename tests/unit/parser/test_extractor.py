"""Tests for task text extraction.

Verifies that the first date/time phrase becomes the due time, that the rest
of the text is cleaned up, and that a task description is never empty.
"""

from datetime import datetime

import pytest

from dailydo.clock import FixedClock, to_millis
from dailydo.parser import ParsedTask, clean_remainder, extract


MIDNIGHT = datetime(2024, 1, 1, 0, 0)
MORNING = datetime(2024, 1, 1, 10, 0)


def ms(*args) -> int:
    return to_millis(datetime(*args))


class TestExamples:
    """The examples the parser is documented with."""

    def test_submit_report_at_3pm(self):
        parsed = extract("Submit report at 3pm", now=MIDNIGHT)
        assert parsed == ParsedTask(text="Submit report", due_time=ms(2024, 1, 1, 15, 0))

    def test_groceries_tomorrow_evening(self):
        parsed = extract("Buy groceries tomorrow at 7pm", now=MORNING)
        assert parsed.text == "Buy groceries"
        assert parsed.due_time == ms(2024, 1, 2, 19, 0)

    def test_call_mom_in_one_hour(self):
        parsed = extract("Call mom in 1 hour", now=MORNING)
        assert parsed.text == "Call mom"
        assert parsed.due_time == ms(2024, 1, 1, 11, 0)

    def test_meeting_next_tuesday(self):
        parsed = extract("Meeting next Tuesday at 2:30pm", now=MORNING)
        assert parsed.text == "Meeting"
        assert parsed.due_time == ms(2024, 1, 2, 14, 30)

    def test_day_offset_with_time(self):
        parsed = extract("Call mom in 2 days at 5pm", now=MORNING)
        assert parsed.text == "Call mom"
        assert parsed.due_time == ms(2024, 1, 3, 17, 0)

    def test_day_offset_alone_keeps_time_of_now(self):
        assert extract("Call mom in 2 days", now=MORNING).due_time == ms(2024, 1, 3, 10, 0)


class TestNoTemporalPhrase:
    @pytest.mark.parametrize("text", [
        "Water the plants",
        "  Water the plants  ",
        "Read chapter 4",
        "Email Sam about the budget",
    ])
    def test_text_is_trimmed_input(self, text):
        parsed = extract(text, now=MORNING)
        assert parsed.text == text.strip()
        assert parsed.due_time is None

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input(self, text):
        assert extract(text, now=MORNING) == ParsedTask(text="")


class TestCleanup:
    def test_trailing_preposition_removed(self):
        parsed = extract("Finish essay by Friday", now=MORNING)
        assert parsed.text == "Finish essay"
        assert parsed.due_time == ms(2024, 1, 5, 12, 0)

    def test_leading_preposition_removed(self):
        assert extract("By tomorrow finish slides", now=MORNING).text == "finish slides"

    def test_only_one_trailing_preposition_removed(self):
        assert extract("Meet on by 5pm", now=MORNING).text == "Meet on"

    def test_preposition_match_is_case_insensitive(self):
        assert extract("Finish essay BY Friday", now=MORNING).text == "Finish essay"

    def test_phrase_in_the_middle(self):
        parsed = extract("Call tomorrow the plumber", now=MORNING)
        assert parsed.text == "Call the plumber"

    def test_prepositions_inside_words_are_kept(self):
        assert extract("Review onboarding at 3pm", now=MORNING).text == "Review onboarding"

    def test_clean_remainder_joins_halves(self):
        assert clean_remainder("Pay rent ", " please") == "Pay rent please"

    def test_clean_remainder_lone_preposition(self):
        assert clean_remainder("at", "") == ""

    def test_clean_remainder_only_prepositions(self):
        assert clean_remainder("by", "at") == ""

    def test_clean_remainder_keeps_words_starting_with_preposition(self):
        assert clean_remainder("Onboarding call", "") == "Onboarding call"

    def test_internal_whitespace_collapsed(self):
        assert extract("Call   mom at 3pm", now=MORNING).text == "Call mom"

    def test_clean_remainder_collapses_whitespace(self):
        assert clean_remainder("Pay \t rent  ", "  and\nwater ") == "Pay rent and water"


class TestFallback:
    """Removing the phrase must never leave an empty description."""

    @pytest.mark.parametrize("text", [
        "tomorrow at 7pm",
        "at 3pm",
        "  in 2 hours  ",
        "on Friday",
    ])
    def test_phrase_only_input_keeps_full_text(self, text):
        parsed = extract(text, now=MORNING)
        assert parsed.text == text.strip()
        assert parsed.due_time is not None

    @pytest.mark.parametrize("text", [
        "Submit report at 3pm",
        "tomorrow",
        "at noon",
        "by tomorrow",
        "x",
        "in 5 minutes",
    ])
    def test_never_empty(self, text):
        assert extract(text, now=MORNING).text != ""

    @pytest.mark.parametrize("text", [
        "Renew passport in 9999 years",
        "Renew passport in 99999999999 days",
        "Renew passport in 1000000000 hours",
    ])
    def test_out_of_range_offset_is_not_a_due_time(self, text):
        parsed = extract(text, now=MORNING)
        assert parsed.text == text.strip()
        assert parsed.due_time is None


class TestReferenceTime:
    def test_past_dates_are_returned_as_is(self):
        parsed = extract("Pay bill yesterday", now=MORNING)
        assert parsed.due_time == ms(2023, 12, 31, 12, 0)

    def test_clock_injection(self):
        clock = FixedClock(MORNING)
        assert extract("Call mom in 1 hour", clock=clock).due_time == ms(2024, 1, 1, 11, 0)

    def test_deterministic_for_same_now(self):
        first = extract("Standup tomorrow at 9am", now=MORNING)
        second = extract("Standup tomorrow at 9am", now=MORNING)
        assert first == second

    def test_relative_phrase_follows_now(self):
        later = datetime(2024, 1, 1, 18, 0)
        assert extract("Call mom in 1 hour", now=later).due_time == ms(2024, 1, 1, 19, 0)

    def test_due_time_is_integer_millis(self):
        parsed = extract("Submit report at 3pm", now=MIDNIGHT)
        assert isinstance(parsed.due_time, int)

    def test_to_dict_omits_missing_due_time(self):
        assert extract("Water the plants", now=MORNING).to_dict() == {"text": "Water the plants"}
