"""
Unit tests for the session scheduling window.

Dependencies: pytest, mentorship.validation.scheduling
System role: Lead-time boundary and parsing verification
"""

from datetime import datetime, timedelta, timezone

import pytest

from mentorship.validation.scheduling import (
    ISO_FORMAT_MESSAGE,
    PAST_MESSAGE,
    SchedulingWindow,
    check_scheduling_window,
    lead_time_message,
    parse_iso8601,
)
from tests.helpers import LEAD_TIME, NOW, iso, make_context

LEAD_MESSAGE = lead_time_message(LEAD_TIME)


class TestParseIso8601:
    """Tests for parse_iso8601."""

    def test_parses_zulu_suffix(self) -> None:
        assert parse_iso8601("2030-01-15T18:00:00Z") == datetime(2030, 1, 15, 18, tzinfo=timezone.utc)

    def test_parses_offset(self) -> None:
        parsed = parse_iso8601("2030-01-15T20:00:00+02:00")
        assert parsed == datetime(2030, 1, 15, 18, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self) -> None:
        assert parse_iso8601("2030-01-15T18:00:00").tzinfo == timezone.utc

    def test_date_only(self) -> None:
        assert parse_iso8601("2030-01-16") == datetime(2030, 1, 16, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["", "tomorrow", "2030-13-01T00:00:00", "15/01/2030", 1700000000, None])
    def test_rejects_unparseable(self, value) -> None:
        assert parse_iso8601(value) is None


class TestCheckSchedulingWindow:
    """Tests for the lead-time predicate."""

    def test_exactly_at_floor_passes(self) -> None:
        assert check_scheduling_window(iso(NOW + LEAD_TIME), NOW) is None

    def test_one_second_before_floor_fails(self) -> None:
        candidate = iso(NOW + LEAD_TIME - timedelta(seconds=1))
        assert check_scheduling_window(candidate, NOW) == LEAD_MESSAGE

    def test_far_future_passes(self) -> None:
        assert check_scheduling_window(iso(NOW + timedelta(days=30)), NOW) is None

    def test_past_fails_with_lead_time_message(self) -> None:
        """The floor check runs first and already rejects past instants."""
        assert check_scheduling_window(iso(NOW - timedelta(days=1)), NOW) == LEAD_MESSAGE

    def test_zero_lead_time_reports_floor_message_for_past(self) -> None:
        candidate = iso(NOW - timedelta(minutes=1))
        expected = lead_time_message(timedelta(0))
        assert check_scheduling_window(candidate, NOW, lead_time=timedelta(0)) == expected
        assert check_scheduling_window(
            candidate, NOW, lead_time=timedelta(0), forbid_past=False
        ) == expected

    def test_zero_lead_time_accepts_now(self) -> None:
        assert check_scheduling_window(iso(NOW), NOW, lead_time=timedelta(0)) is None

    def test_past_check_only_fires_below_now_with_negative_lead_time(self) -> None:
        candidate = iso(NOW - timedelta(minutes=1))
        lead_time = -timedelta(hours=1)
        assert check_scheduling_window(candidate, NOW, lead_time=lead_time) == PAST_MESSAGE
        assert check_scheduling_window(candidate, NOW, lead_time=lead_time, forbid_past=False) is None

    def test_unparseable_value(self) -> None:
        assert check_scheduling_window("next friday", NOW) == ISO_FORMAT_MESSAGE

    def test_offset_is_honoured(self) -> None:
        # 20:00+02:00 is 18:00Z, exactly six hours after NOW
        assert check_scheduling_window("2030-01-15T20:00:00+02:00", NOW) is None
        assert check_scheduling_window("2030-01-15T19:59:59+02:00", NOW) == LEAD_MESSAGE

    def test_floor_follows_now(self) -> None:
        candidate = iso(NOW + LEAD_TIME)
        assert check_scheduling_window(candidate, NOW) is None
        assert check_scheduling_window(candidate, NOW + timedelta(seconds=1)) == LEAD_MESSAGE


class TestSchedulingWindowCheck:
    """Tests for the rule-table wrapper reading the context clock."""

    def test_reads_now_from_context(self) -> None:
        check = SchedulingWindow()
        candidate = iso(NOW + LEAD_TIME)
        assert check(candidate, make_context()) is None
        assert check(candidate, make_context(now=NOW + timedelta(hours=1))) == LEAD_MESSAGE


def test_lead_time_message_wording() -> None:
    assert lead_time_message(timedelta(hours=6)) == "Session must be scheduled at least 6 hours in advance"
    assert lead_time_message(timedelta(hours=1)) == "Session must be scheduled at least 1 hour in advance"
