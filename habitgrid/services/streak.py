"""
Current-streak computation for the three cadences.

Every walker turns the completion dates into a set of periods (days, Sunday
weeks or calendar months) and counts back from the period containing
``today`` until it finds one with no completion. The walk ends at the oldest
period in the set, so there is no need for a horizon cap.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, Sequence, Set, Union

from ..schemas import Cadence
from ..utils.dates import month_start, previous_month_start, week_start

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


def calculate_streak(cadence: Union[Cadence, str], today: date, dates: Sequence[date]) -> int:
    """Number of consecutive periods, ending with today's, holding at least one completion."""
    if not dates:
        return 0
    try:
        cadence = Cadence(cadence)
    except ValueError:
        logger.warning("Unknown cadence %r, streak is 0", cadence)
        return 0

    if cadence is Cadence.DAILY:
        return daily_streak(today, dates)
    if cadence is Cadence.WEEKLY:
        return weekly_streak(today, dates)
    return monthly_streak(today, dates)


def daily_streak(today: date, dates: Iterable[date]) -> int:
    """
    Length of the run today, today-1, today-2, ... found in ``dates``.

    Membership is checked against a set rather than walking ``dates`` in order
    and stopping at the first mismatch. Duplicate or unsorted dates therefore
    never cut the run short, and dates after ``today`` are skipped instead of
    ending it: ``[today+2, today, today-1]`` counts 2 where an ordered walk
    would stop at the first entry and count 0.
    """
    completed = set(dates)
    count = 0
    cursor = today
    while cursor in completed:
        count += 1
        cursor -= ONE_DAY
    return count


def weekly_streak(today: date, dates: Iterable[date]) -> int:
    # the habit's days-of-week schedule is not consulted
    weeks: Set[date] = {week_start(d) for d in dates}
    count = 0
    cursor = week_start(today)
    while cursor in weeks:
        count += 1
        cursor -= ONE_WEEK
    return count


def monthly_streak(today: date, dates: Iterable[date]) -> int:
    # months come from the calendar, so 28-31 day months all work
    months: Set[date] = {month_start(d) for d in dates}
    count = 0
    cursor = month_start(today)
    while cursor in months:
        count += 1
        cursor = previous_month_start(cursor)
    return count
