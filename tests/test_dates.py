"""Tests for the shared date helpers."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
import pytz

from quickadd.services.dates import (
    add_minutes,
    at_time,
    calendar_date,
    format_clock,
    localize,
    next_weekday,
    shift_days,
)

TZ = pytz.timezone("Europe/Berlin")
NOW = TZ.localize(datetime(2024, 6, 3, 9, 0))  # Monday


class TestNextWeekday:
    def test_later_this_week(self):
        assert next_weekday(NOW, 4).date() == datetime(2024, 6, 7).date()

    def test_same_weekday_is_next_week(self):
        assert next_weekday(NOW, 0).date() == datetime(2024, 6, 10).date()

    def test_earlier_weekday_wraps(self):
        friday = TZ.localize(datetime(2024, 6, 7, 9, 0))
        assert next_weekday(friday, 1).date() == datetime(2024, 6, 11).date()

    def test_always_after_now(self):
        for target in range(7):
            assert next_weekday(NOW, target) > NOW


class TestShiftDays:
    def test_keeps_wall_clock_across_dst(self):
        before_switch = TZ.localize(datetime(2024, 3, 30, 10, 0))
        after = shift_days(before_switch, 1)
        assert (after.hour, after.minute) == (10, 0)
        assert after.utcoffset() == timedelta(hours=2)

    def test_zoneinfo_datetimes(self):
        now = datetime(2024, 6, 3, 9, 0, tzinfo=ZoneInfo("Europe/Berlin"))
        assert shift_days(now, 2) == datetime(2024, 6, 5, 9, 0, tzinfo=ZoneInfo("Europe/Berlin"))

    def test_naive_datetimes(self):
        assert shift_days(datetime(2024, 6, 3, 9), 1) == datetime(2024, 6, 4, 9)


class TestAddMinutes:
    def test_elapsed_minutes(self):
        assert add_minutes(NOW, 90) - NOW == timedelta(minutes=90)

    def test_normalizes_offset_across_dst(self):
        before_switch = TZ.localize(datetime(2024, 3, 31, 1, 30))
        after = add_minutes(before_switch, 60)
        assert (after.hour, after.minute) == (3, 30)
        assert after.utcoffset() == timedelta(hours=2)


class TestCalendarDate:
    def test_future_date_this_year(self):
        assert calendar_date(NOW, day=24, month=12, year=None) == TZ.localize(datetime(2024, 12, 24))

    def test_past_date_rolls_over(self):
        assert calendar_date(NOW, day=2, month=6, year=None).year == 2025

    def test_explicit_past_year_kept(self):
        assert calendar_date(NOW, day=2, month=6, year="2023").year == 2023

    def test_two_digit_year(self):
        assert calendar_date(NOW, day=1, month=1, year="26").year == 2026

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            calendar_date(NOW, day=31, month=4, year=None)

    def test_leap_day_rolls_into_march(self):
        """29 February already past rolls to 1 March of the common year after."""
        assert calendar_date(NOW, day=29, month=2, year=None) == TZ.localize(datetime(2025, 3, 1))

    def test_leap_day_with_common_year_raises(self):
        with pytest.raises(ValueError):
            calendar_date(NOW, day=29, month=2, year="2023")


class TestHelpers:
    def test_at_time(self):
        assert at_time(NOW, 18, 45) == TZ.localize(datetime(2024, 6, 3, 18, 45))

    def test_localize_pytz_and_naive(self):
        naive = datetime(2024, 1, 15, 12, 0)
        assert localize(naive, TZ).utcoffset() == timedelta(hours=1)
        assert localize(naive, None) is naive

    def test_format_clock(self):
        assert format_clock(7, 5) == "07:05"
