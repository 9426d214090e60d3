# habitgrid/routers/streaks.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..dependencies import get_templates, get_tracker
from ..services.tracker import HabitTracker

router = APIRouter(
    prefix="/api/habits",
    tags=["Streaks"],
)


@router.get("/{habit_id}/streak", response_class=HTMLResponse)
def get_streak(
    habit_id: int,
    request: Request,
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    streak = tracker.get_streak(habit_id)
    return templates.TemplateResponse(request, "_streak.html", {"streak": streak})
