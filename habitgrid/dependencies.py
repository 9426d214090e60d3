# habitgrid/dependencies.py
from fastapi import Request
from fastapi.templating import Jinja2Templates

from .services.tracker import HabitTracker


def get_tracker(request: Request) -> HabitTracker:
    return request.app.state.tracker


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
