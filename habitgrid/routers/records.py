# habitgrid/routers/records.py
from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..config import CONTRIBUTION_DAYS
from ..dependencies import get_templates, get_tracker
from ..services.tracker import HabitTracker
from ..utils.dates import parse_iso_date
from ..views import group_by_week, month_headers
from .habits import render

router = APIRouter(
    prefix="/api/habits",
    tags=["Records"],
)


@router.post("/{habit_id}/done-today", response_class=HTMLResponse)
def mark_done_today(
    habit_id: int,
    request: Request,
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Mark the habit done for today and return the refreshed card"""
    tracker.mark_done_today(habit_id)
    return render(request, tracker, templates, "_marked.html", habit=tracker.get_habit(habit_id))


@router.get("/{habit_id}/contribution", response_class=HTMLResponse)
def get_contribution(
    habit_id: int,
    request: Request,
    start: Optional[str] = Query(None, alias="from"),
    end: Optional[str] = Query(None, alias="to"),
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    """
    Contribution grid for [from, to], one column per Sunday-started week.
    A missing or malformed bound falls back to the last CONTRIBUTION_DAYS days;
    a window longer than MAX_CONTRIBUTION_DAYS is rejected with 400.
    """
    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)
    if start_date is None or end_date is None:
        end_date = tracker.today()
        start_date = end_date - timedelta(days=CONTRIBUTION_DAYS)

    days = tracker.get_contribution(habit_id, start_date, end_date)
    weeks = group_by_week(days)
    return templates.TemplateResponse(
        request,
        "_contribution.html",
        {"habit_id": habit_id, "weeks": weeks, "headers": month_headers(weeks)},
    )
