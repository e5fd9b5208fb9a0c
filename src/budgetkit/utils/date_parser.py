"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from budgetkit.domain.periods import week_start


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this week", etc.

    Weeks start on Sunday.

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this/next" + time period
    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return week_start(today) - timedelta(days=7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return week_start(today)

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return (today + relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)
        elif period == "week":
            return week_start(today) + timedelta(days=7)

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_instant(value: str, zone: tzinfo, now: Optional[datetime] = None) -> datetime:
    """Parse a date or date-time string into an aware instant in ``zone``.

    - "now" returns the current instant.
    - Relative and date-only strings resolve to 00:00 of that day.
    - Strings containing a time ("2024-03-15 18:30", "09:30") go to dateutil.
      A time without a date falls on today in ``zone``. Those without an
      offset are read as wall-clock time in ``zone``; date-times with an
      explicit offset are converted to ``zone``.

    Raises:
        ValueError: If the string cannot be parsed
    """
    if now is None:
        now = datetime.now(zone)
    now = now.astimezone(zone)

    text = value.strip()
    if text.lower() == "now":
        return now

    if ":" in text:
        midnight = now.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)
        try:
            parsed = date_parser.parse(text, default=midnight)
        except (ValueError, TypeError, OverflowError) as e:
            raise ValueError(f"Could not parse date '{value}': {e}")
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=zone)
        return parsed.astimezone(zone)

    day = parse_date(text, today=now.date())
    return datetime.combine(day, time.min, tzinfo=zone)
