"""
Projection of a habit's sparse completion dates onto a dense day-by-day grid.
"""
from datetime import date
from typing import Iterable, List

from ..schemas import ContributionDay
from ..utils.dates import iter_days


def build_contribution(completed_dates: Iterable[date], start: date, end: date) -> List[ContributionDay]:
    """
    One entry per day from ``start`` to ``end`` inclusive, ascending.

    ``completed`` only reflects membership in ``completed_dates``; cadence and
    schedule play no part. An inverted window yields an empty list.
    """
    if start > end:
        return []
    completed = set(completed_dates)
    return [ContributionDay(date=day, completed=day in completed) for day in iter_days(start, end)]
