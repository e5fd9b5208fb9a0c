"""Tests for reporting window calculation."""

import pytest
from datetime import date, datetime, time, UTC

from dateutil import tz

from budgetkit.domain.entities import AlertPeriod, Window
from budgetkit.domain.periods import (
    compute_window,
    end_of_day,
    month_window,
    period_start,
    start_of_day,
    week_start,
)

STOCKHOLM = tz.gettz("Europe/Stockholm")


class TestWeekStart:
    def test_wednesday_goes_back_to_sunday(self):
        assert week_start(date(2024, 3, 13)) == date(2024, 3, 10)

    def test_sunday_is_its_own_week_start(self):
        assert week_start(date(2024, 3, 10)) == date(2024, 3, 10)

    def test_saturday_is_last_day_of_week(self):
        assert week_start(date(2024, 3, 16)) == date(2024, 3, 10)

    def test_week_spanning_month_boundary(self):
        assert week_start(date(2024, 3, 1)) == date(2024, 2, 25)


class TestMonthWindow:
    def test_regular_month(self):
        window = month_window(2024, 3, UTC)
        assert window.start == datetime(2024, 3, 1, tzinfo=UTC)
        assert window.end == datetime.combine(date(2024, 3, 31), time.max, tzinfo=UTC)

    def test_leap_february(self):
        window = month_window(2024, 2, UTC)
        assert window.end.date() == date(2024, 2, 29)

    def test_non_leap_february(self):
        window = month_window(2023, 2, UTC)
        assert window.end.date() == date(2023, 2, 28)

    def test_december_does_not_spill_into_next_year(self):
        window = month_window(2023, 12, UTC)
        assert window.start == datetime(2023, 12, 1, tzinfo=UTC)
        assert window.end.date() == date(2023, 12, 31)

    def test_last_second_of_month_is_inside(self):
        window = month_window(2024, 3, UTC)
        assert window.contains(datetime(2024, 3, 31, 23, 59, 59, tzinfo=UTC))
        assert not window.contains(datetime(2024, 4, 1, tzinfo=UTC))

    def test_boundaries_follow_reporting_timezone(self):
        window = month_window(2024, 4, STOCKHOLM)
        # Stockholm is UTC+2 in April
        assert window.start.astimezone(UTC) == datetime(2024, 3, 31, 22, 0, tzinfo=UTC)


class TestPeriodStart:
    reference = datetime(2024, 3, 13, 15, 30, tzinfo=UTC)

    def test_daily(self):
        assert period_start(AlertPeriod.DAILY, self.reference) == datetime(2024, 3, 13, tzinfo=UTC)

    def test_weekly_starts_on_sunday(self):
        assert period_start(AlertPeriod.WEEKLY, self.reference) == datetime(2024, 3, 10, tzinfo=UTC)

    def test_monthly(self):
        assert period_start(AlertPeriod.MONTHLY, self.reference) == datetime(2024, 3, 1, tzinfo=UTC)

    def test_unknown_period_is_rejected(self):
        with pytest.raises(AssertionError):
            period_start("yearly", self.reference)


class TestComputeWindow:
    def test_window_ends_at_reference(self):
        reference = datetime(2024, 3, 13, 15, 30, tzinfo=UTC)
        window = compute_window(AlertPeriod.WEEKLY, reference)
        assert window == Window(start=datetime(2024, 3, 10, tzinfo=UTC), end=reference)

    def test_reference_at_midnight_gives_instant_window(self):
        reference = datetime(2024, 3, 13, tzinfo=UTC)
        window = compute_window(AlertPeriod.DAILY, reference)
        assert window.start == window.end == reference

    def test_naive_reference_is_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            compute_window(AlertPeriod.DAILY, datetime(2024, 3, 13, 15, 30))

    def test_calendar_of_reference_timezone_is_used(self):
        # 23:30 UTC on March 31 is already April 1 in Stockholm
        reference = datetime(2024, 3, 31, 23, 30, tzinfo=UTC).astimezone(STOCKHOLM)
        window = compute_window(AlertPeriod.MONTHLY, reference)
        assert window.start.astimezone(UTC) == datetime(2024, 3, 31, 22, 0, tzinfo=UTC)


def test_day_bounds():
    day = date(2024, 3, 13)
    assert start_of_day(day, UTC) == datetime(2024, 3, 13, tzinfo=UTC)
    assert end_of_day(day, UTC) == datetime(2024, 3, 13, 23, 59, 59, 999999, tzinfo=UTC)
