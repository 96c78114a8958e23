"""Calendar-day helpers shared by goal calculations."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

EM_DASH = "—"


def add_days(day: date, days: int) -> date:
    """Return the calendar day `days` after `day`."""
    return day + timedelta(days=days)


def parse_date_only(value: str | None) -> date | None:
    """Parse a date-only value, ignoring any time component.

    Weigh-ins are stored as plain dates; a timestamp such as
    "2025-01-03T00:00:00.000Z" is reduced to its date part so it never
    shifts to a neighbouring day.
    """
    if not value:
        return None
    date_part = value.split("T", maxsplit=1)[0].strip()
    try:
        return date.fromisoformat(date_part)
    except ValueError:
        return None


def local_date(value: date | datetime, timezone_name: str = "UTC") -> date:
    """Return the calendar day of `value` in the given timezone.

    Naive datetimes are treated as already local.
    """
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(ZoneInfo(timezone_name)).date()


def format_date_label(value: date | None) -> str:
    """Format a date like "Jan 3, 2025", or an em dash when missing."""
    if value is None:
        return EM_DASH
    return f"{value:%b} {value.day}, {value.year}"
