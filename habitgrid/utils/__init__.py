# App utilities
from .dates import (
    iter_days,
    month_start,
    parse_iso_date,
    previous_month_start,
    sunday_weekday,
    week_start,
)

__all__ = [
    "iter_days",
    "month_start",
    "parse_iso_date",
    "previous_month_start",
    "sunday_weekday",
    "week_start",
]
