# habitgrid/views.py
"""
HTML fragment helpers. The Jinja2 environment is built once by
``create_templates`` when the application starts and kept on ``app.state``.
"""
from datetime import date
from pathlib import Path
from typing import Dict, List, Sequence

from fastapi.templating import Jinja2Templates

from .schemas import ContributionDay

TEMPLATES_DIR = Path(__file__).parent / "templates"

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTH_NAMES = ["", "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def format_date(value: date) -> str:
    return value.strftime("%b %d, %Y")


def iso_date(value: date) -> str:
    return value.isoformat()


def weekday_names(days: Sequence[int]) -> str:
    return ", ".join(WEEKDAY_NAMES[d] for d in days)


def create_templates(directory: Path = TEMPLATES_DIR) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(directory))
    env = templates.env
    env.filters["format_date"] = format_date
    env.filters["iso_date"] = iso_date
    env.filters["weekday_names"] = weekday_names
    env.filters["streak_label"] = streak_label
    env.globals["WEEKDAY_NAMES"] = WEEKDAY_NAMES
    return templates


def group_by_week(days: Sequence[ContributionDay]) -> List[List[ContributionDay]]:
    """Split an ascending day sequence into Sunday-to-Saturday columns."""
    weeks: List[List[ContributionDay]] = []
    current_start = None
    for day in days:
        # ordinal 7 is a Sunday, so ordinal // 7 numbers the weeks without date arithmetic
        start = day.date.toordinal() // 7
        if start != current_start:
            weeks.append([])
            current_start = start
        weeks[-1].append(day)
    return weeks


def month_headers(weeks: Sequence[Sequence[ContributionDay]]) -> List[Dict]:
    """Month labels placed at the grid column where each month begins."""
    headers = []
    last = None
    for column, week in enumerate(weeks, start=1):
        for day in week:
            key = (day.date.year, day.date.month)
            if key != last and day.date.day <= 7:
                headers.append({"column": column, "label": MONTH_NAMES[day.date.month]})
                last = key
    return headers


def streak_label(count: int) -> str:
    return "day streak" if count == 1 else "days streak"
