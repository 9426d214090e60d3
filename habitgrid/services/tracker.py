# habitgrid/services/tracker.py
"""
Service façade the HTTP layer talks to.

Each call opens its own session and reads the clock once, so a single
``HabitTracker`` can be shared by every request handler.
"""
import logging
from datetime import date, datetime
from typing import Callable, List, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker

from .. import crud, schemas
from ..config import MAX_CONTRIBUTION_DAYS, STREAK_RECORD_LIMIT
from ..database import session_scope
from ..errors import HabitTrackerError, Internal, InvalidInput
from .contribution import build_contribution
from .streak import calculate_streak

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class CompletedTodayProbe(Protocol):
    def is_completed_today(self, habit_id: int, today: date) -> bool:
        ...


class NoCompletionProbe:
    """Probe for callers that do not track completions; nothing is ever done."""

    def is_completed_today(self, habit_id: int, today: date) -> bool:
        return False


class RecordProbe:
    """Looks for a completion inside [start of today, end of today]."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def is_completed_today(self, habit_id: int, today: date) -> bool:
        with session_scope(self.session_factory) as db:
            return bool(crud.list_records_in_range(db, habit_id, today, today))


def _validate(model, **fields):
    try:
        return model(**fields)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise InvalidInput(messages) from e


def _to_read(habit) -> schemas.HabitRead:
    try:
        return schemas.HabitRead.model_validate(habit)
    except ValidationError as e:
        raise Internal(f"habit {habit.id} has an invalid stored value: {e}") from e


class HabitTracker:
    def __init__(
        self,
        session_factory: sessionmaker,
        probe: CompletedTodayProbe,
        clock: Clock = datetime.now,
        record_limit: int = STREAK_RECORD_LIMIT,
        max_contribution_days: int = MAX_CONTRIBUTION_DAYS,
    ):
        self.session_factory = session_factory
        self.probe = probe
        self.clock = clock
        self.record_limit = record_limit
        self.max_contribution_days = max_contribution_days

    def _session(self):
        return session_scope(self.session_factory)

    def today(self) -> date:
        return self.clock().date()

    # --- Habits ---

    def create_habit(
        self,
        description: str,
        cadence: str,
        schedule: Optional[schemas.Schedule],
        start_date: date,
        color: str,
    ) -> int:
        habit_data = _validate(
            schemas.HabitCreate,
            description=description,
            cadence=cadence,
            schedule=schedule or schemas.Schedule(),
            start_date=start_date,
            color=color,
        )
        with self._session() as db:
            return crud.create_habit(db, habit_data).id

    def update_habit(
        self,
        habit_id: int,
        description: str,
        cadence: str,
        schedule: Optional[schemas.Schedule],
        start_date: date,
        color: str,
    ) -> None:
        habit_data = _validate(
            schemas.HabitUpdate,
            description=description,
            cadence=cadence,
            schedule=schedule or schemas.Schedule(),
            start_date=start_date,
            color=color,
        )
        with self._session() as db:
            crud.update_habit(db, habit_id, habit_data)

    def delete_habit(self, habit_id: int) -> None:
        with self._session() as db:
            crud.delete_habit(db, habit_id)

    def get_habit(self, habit_id: int) -> schemas.HabitRead:
        today = self.today()
        with self._session() as db:
            habit = _to_read(crud.get_habit_by_id(db, habit_id))
        habit.completed_today = self.probe.is_completed_today(habit_id, today)
        return habit

    def list_habits(self) -> List[schemas.HabitRead]:
        """Every habit, newest first, each flagged with whether it was done today."""
        today = self.today()
        with self._session() as db:
            habits = [_to_read(h) for h in crud.get_habits(db)]

        for habit in habits:
            try:
                habit.completed_today = self.probe.is_completed_today(habit.id, today)
            except HabitTrackerError as e:
                logger.warning("Could not check today's completion for habit %s: %s", habit.id, e)
                habit.completed_today = False
        return habits

    def is_valid_for_date(self, habit: schemas.HabitRead, day: date) -> bool:
        return crud.is_valid_for_date(habit, day)

    # --- Completions ---

    def mark_done_today(self, habit_id: int) -> None:
        now = self.clock()
        with self._session() as db:
            crud.record_completion(db, habit_id, now.date(), now)

    def get_contribution(self, habit_id: int, start: date, end: date) -> List[schemas.ContributionDay]:
        if (end - start).days > self.max_contribution_days:
            raise InvalidInput(f"contribution window is longer than {self.max_contribution_days} days")
        with self._session() as db:
            crud.get_habit_by_id(db, habit_id)
            records = crud.list_records_in_range(db, habit_id, start, end)
            completed = [r.record_date for r in records]
        return build_contribution(completed, start, end)

    # --- Streaks ---

    def get_streak(self, habit_id: int) -> schemas.Streak:
        """Current streak; a failure loading records shows as a zero streak."""
        today = self.today()
        with self._session() as db:
            habit = crud.get_habit_by_id(db, habit_id)
            cadence = habit.cadence
            try:
                dates = crud.list_record_dates_desc(db, habit_id, self.record_limit)
            except HabitTrackerError as e:
                logger.warning("Could not load records for habit %s, streak shown as 0: %s", habit_id, e)
                return schemas.Streak(habit_id=habit_id, current_count=0)

        count = calculate_streak(cadence, today, dates)
        return schemas.Streak(habit_id=habit_id, current_count=count)
