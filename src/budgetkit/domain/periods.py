"""Reporting window calculation.

All boundaries are computed on the local calendar of the timezone carried by
the reference instant (or passed explicitly for fixed months), so callers
control the timezone policy by choosing that zone.
"""

from datetime import date, datetime, time, timedelta, tzinfo

from dateutil.relativedelta import relativedelta

from budgetkit.domain.entities import AlertPeriod, Window


def start_of_day(day: date, zone: tzinfo) -> datetime:
    """Return 00:00:00 of ``day`` in ``zone``."""
    return datetime.combine(day, time.min, tzinfo=zone)


def end_of_day(day: date, zone: tzinfo) -> datetime:
    """Return the last representable instant of ``day`` in ``zone``."""
    return datetime.combine(day, time.max, tzinfo=zone)


def week_start(day: date) -> date:
    """Return the Sunday on or before ``day``.

    Weeks begin on Sunday; ``date.weekday()`` counts Monday as 0.
    """
    days_since_sunday = (day.weekday() + 1) % 7
    return day - timedelta(days=days_since_sunday)


def month_window(year: int, month: int, zone: tzinfo) -> Window:
    """Compute the window covering a whole calendar month.

    Args:
        year: Calendar year
        month: Calendar month, 1-indexed
        zone: Reporting timezone

    Returns:
        Window from 00:00:00 on day 1 through the end of 23:59:59 on the
        last day of the month
    """
    first_day = date(year, month, 1)
    last_day = first_day + relativedelta(months=1) - timedelta(days=1)
    return Window(start=start_of_day(first_day, zone), end=end_of_day(last_day, zone))


def period_start(period: AlertPeriod, reference: datetime) -> datetime:
    """Return the first instant of the period containing ``reference``."""
    zone = reference.tzinfo
    today = reference.date()

    if period == AlertPeriod.DAILY:
        return start_of_day(today, zone)
    if period == AlertPeriod.WEEKLY:
        return start_of_day(week_start(today), zone)
    if period == AlertPeriod.MONTHLY:
        return start_of_day(today.replace(day=1), zone)

    raise AssertionError(f"Unhandled alert period: {period!r}")


def compute_window(period: AlertPeriod, reference: datetime) -> Window:
    """Compute the still-open window of ``period`` ending at ``reference``.

    Args:
        period: Daily, weekly or monthly period
        reference: Timezone-aware instant, usually "now"

    Returns:
        Window from the start of the period through ``reference``

    Raises:
        ValueError: If reference is a naive datetime
    """
    if reference.tzinfo is None:
        raise ValueError("Reference instant must be timezone-aware")
    return Window(start=period_start(period, reference), end=reference)
