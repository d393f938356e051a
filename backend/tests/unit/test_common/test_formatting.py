"""
Display formatting helper tests
"""

from datetime import datetime, timedelta, timezone

import pytest

from gamelayer_proxy.common.formatting import (
    calculate_level,
    calculate_progress,
    days_remaining,
    format_credits,
    format_date,
    format_number,
    format_points,
    format_time_remaining,
    get_experience_for_level,
    progress_ratio_percent,
)
from gamelayer_proxy.common.time import parse_timestamp

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


class TestTimeRemaining:
    """Countdown labels"""

    def test_no_deadline(self):
        assert format_time_remaining(None, now=NOW) == "No time limit"
        assert format_time_remaining("not a date", now=NOW) == "No time limit"

    def test_expired(self):
        assert format_time_remaining(NOW - timedelta(seconds=1), now=NOW) == "Expired"
        assert format_time_remaining(NOW, now=NOW) == "Expired"

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(days=1, hours=3, minutes=20), "1d 3h"),
            (timedelta(hours=5, minutes=7), "5h 7m"),
            (timedelta(minutes=42, seconds=30), "42m"),
            (timedelta(seconds=30), "Less than 1m"),
        ],
    )
    def test_labels(self, delta, expected):
        assert format_time_remaining(NOW + delta, now=NOW) == expected

    def test_iso_string_with_z(self):
        assert format_time_remaining("2024-03-11T15:00:00Z", now=NOW) == "1d 3h"


class TestFormatDate:
    """Relative dates"""

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(hours=2), "Today"),
            (timedelta(days=1, hours=1), "Yesterday"),
            (timedelta(days=3), "3 days ago"),
        ],
    )
    def test_recent(self, delta, expected):
        assert format_date(NOW - delta, now=NOW) == expected

    def test_older_dates_are_absolute(self):
        assert format_date("2024-02-05T08:00:00Z", now=NOW) == "Feb 5, 2024"

    def test_unknown(self):
        assert format_date(None, now=NOW) == "Unknown"


class TestDaysRemaining:
    def test_rounds_up(self):
        assert days_remaining(NOW + timedelta(days=2, hours=1), now=NOW) == 3

    def test_exact_days(self):
        assert days_remaining(NOW + timedelta(days=2), now=NOW) == 2

    def test_no_deadline(self):
        assert days_remaining(None, now=NOW) == 0


class TestNumbers:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (999, "999"),
            (1500, "1.5K"),
            (2_000_000, "2.0M"),
            (12.5, "12.5"),
            (40.0, "40"),
        ],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_points_and_credits_pluralized(self):
        assert format_points(1) == "1 point"
        assert format_points(5) == "5 points"
        assert format_credits(1) == "1 credit"
        assert format_credits(0) == "0 credits"


class TestProgress:
    def test_calculate_progress_clamped(self):
        assert calculate_progress(5, 10) == 50
        assert calculate_progress(15, 10) == 100
        assert calculate_progress(-1, 10) == 0
        assert calculate_progress(3, 0) == 0

    def test_progress_ratio_percent(self):
        assert progress_ratio_percent(1, 3) == 33
        assert progress_ratio_percent(4, 3) == 100
        assert progress_ratio_percent(1, 0) == 0


class TestExperienceCurve:
    @pytest.mark.parametrize(
        "experience, level",
        [(0, 1), (99, 1), (100, 2), (249, 2), (250, 3), (475, 4)],
    )
    def test_calculate_level(self, experience, level):
        assert calculate_level(experience) == level

    def test_experience_for_level(self):
        assert get_experience_for_level(1) == 0
        assert get_experience_for_level(2) == 100
        assert get_experience_for_level(3) == 250
        assert get_experience_for_level(4) == 475

    def test_curve_is_consistent(self):
        for level in range(1, 8):
            assert calculate_level(get_experience_for_level(level)) == level


def test_parse_timestamp_naive_is_utc():
    parsed = parse_timestamp("2024-03-10T12:00:00")
    assert parsed == NOW
    assert parsed.tzinfo is not None
