"""
Civil-date helpers shared by the contribution grid and the streak walkers.
Weeks start on Sunday; weekday ordinals are 0=Sunday .. 6=Saturday.
"""
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

ISO_DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD string, returning None when it is missing or malformed."""
    if not value:
        return None
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except ValueError:
        return None


def sunday_weekday(day: date) -> int:
    # date.weekday() is Monday=0
    return (day.weekday() + 1) % 7


def week_start(day: date) -> date:
    return day - timedelta(days=sunday_weekday(day))


def month_start(day: date) -> date:
    return day.replace(day=1)


def previous_month_start(day: date) -> date:
    return (month_start(day) - timedelta(days=1)).replace(day=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every civil date from start to end, both inclusive."""
    # counted, so an end of date.max never steps past the calendar
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)
