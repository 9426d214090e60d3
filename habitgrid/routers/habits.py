# habitgrid/routers/habits.py
from dataclasses import dataclass
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..dependencies import get_templates, get_tracker
from ..errors import InvalidInput
from ..schemas import Schedule
from ..services.tracker import HabitTracker
from ..utils.dates import parse_iso_date

router = APIRouter(
    prefix="/api/habits",
    tags=["Habits"],
)


# --- Form parsing ---
@dataclass
class HabitForm:
    description: str
    cadence: str
    schedule: Schedule
    start_date: date
    color: str


def _int_list(name: str, values: List[str]) -> List[int]:
    try:
        return [int(v) for v in values if v.strip()]
    except ValueError:
        raise InvalidInput(f"{name} must contain whole numbers")


def habit_form(
    description: str = Form(...),
    frequency: str = Form("daily"),
    start_date: str = Form(...),
    color: str = Form("#40c463"),
    days_of_week: List[str] = Form([]),
    days_of_month: List[str] = Form([]),
) -> HabitForm:
    """Form-encoded habit fields as posted by the create/edit forms."""
    parsed_start = parse_iso_date(start_date)
    if parsed_start is None:
        raise InvalidInput("start_date must be a YYYY-MM-DD date")
    try:
        schedule = Schedule(
            days_of_week=_int_list("days_of_week", days_of_week),
            days_of_month=_int_list("days_of_month", days_of_month),
        )
    except ValueError as e:
        raise InvalidInput(str(e))
    return HabitForm(
        description=description,
        cadence=frequency,
        schedule=schedule,
        start_date=parsed_start,
        color=color,
    )


def render(
    request: Request,
    tracker: HabitTracker,
    templates: Jinja2Templates,
    template_name: str,
    **context,
):
    """Render a fragment with the helpers every habit card needs."""
    today = tracker.today()
    context.setdefault("today", today)
    context["scheduled_today"] = lambda habit: tracker.is_valid_for_date(habit, today)
    return templates.TemplateResponse(request, template_name, context)


# --- CRUD Endpoints ---
@router.post("", response_class=HTMLResponse)
def create_habit(
    request: Request,
    form: HabitForm = Depends(habit_form),
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Create a habit and return its card"""
    habit_id = tracker.create_habit(
        form.description, form.cadence, form.schedule, form.start_date, form.color
    )
    return render(request, tracker, templates, "_habit_card.html", habit=tracker.get_habit(habit_id))


@router.get("", response_class=HTMLResponse)
def list_habits(
    request: Request,
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    """All habit cards, newest first"""
    return render(request, tracker, templates, "_habit_list.html", habits=tracker.list_habits())


@router.get("/{habit_id}", response_class=HTMLResponse)
def get_habit(
    habit_id: int,
    request: Request,
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    """One habit card"""
    return render(request, tracker, templates, "_habit_card.html", habit=tracker.get_habit(habit_id))


@router.put("/{habit_id}", response_class=HTMLResponse)
def update_habit(
    habit_id: int,
    request: Request,
    form: HabitForm = Depends(habit_form),
    tracker: HabitTracker = Depends(get_tracker),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Replace every editable field of a habit, schedule included"""
    tracker.update_habit(
        habit_id, form.description, form.cadence, form.schedule, form.start_date, form.color
    )
    return render(request, tracker, templates, "_habit_card.html", habit=tracker.get_habit(habit_id))


@router.delete("/{habit_id}", response_class=HTMLResponse)
def delete_habit(
    habit_id: int,
    tracker: HabitTracker = Depends(get_tracker),
):
    """Delete a habit and all its records; htmx drops the card on the empty reply"""
    tracker.delete_habit(habit_id)
    return HTMLResponse("")
