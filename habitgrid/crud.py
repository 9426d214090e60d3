# habitgrid/crud.py
import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from . import models, schemas
from .errors import NotFound, StorageError
from .utils.dates import sunday_weekday

logger = logging.getLogger(__name__)

DEFAULT_RECORD_LIMIT = 100


# --- Habit registry ---


def _schedule_entries(cadence: schemas.Cadence, schedule: schemas.Schedule) -> List[models.HabitSchedule]:
    if cadence is schemas.Cadence.WEEKLY:
        return [models.HabitSchedule(day_of_week=d) for d in schedule.days_of_week]
    if cadence is schemas.Cadence.MONTHLY:
        return [models.HabitSchedule(day_of_month=d) for d in schedule.days_of_month]
    return []


def create_habit(db: Session, habit_data: schemas.HabitCreate) -> models.Habit:
    habit = models.Habit(
        description=habit_data.description,
        cadence=habit_data.cadence.value,
        start_date=habit_data.start_date,
        color=habit_data.color,
        schedule_entries=_schedule_entries(habit_data.cadence, habit_data.schedule),
    )
    try:
        db.add(habit)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Creating habit failed")
        raise StorageError.from_exception("create habit", e)
    db.refresh(habit)
    logger.info("Created habit %s (%s)", habit.id, habit.cadence)
    return habit


def update_habit(db: Session, habit_id: int, habit_data: schemas.HabitUpdate) -> models.Habit:
    """Replace every editable field; the schedule is swapped in the same transaction."""
    habit = get_habit_by_id(db, habit_id)

    habit.description = habit_data.description
    habit.cadence = habit_data.cadence.value
    habit.start_date = habit_data.start_date
    habit.color = habit_data.color
    try:
        habit.schedule_entries.clear()
        # old rows must be gone before the unique (habit, day) rows come back
        db.flush()
        habit.schedule_entries.extend(_schedule_entries(habit_data.cadence, habit_data.schedule))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Updating habit %s failed", habit_id)
        raise StorageError.from_exception("update habit", e)
    db.refresh(habit)
    logger.info("Updated habit %s", habit_id)
    return habit


def find_habit(db: Session, habit_id: int) -> Optional[models.Habit]:
    try:
        return db.query(models.Habit).filter(models.Habit.id == habit_id).first()
    except SQLAlchemyError as e:
        raise StorageError.from_exception("get habit", e)


def get_habit_by_id(db: Session, habit_id: int) -> models.Habit:
    habit = find_habit(db, habit_id)
    if habit is None:
        raise NotFound(f"habit {habit_id} not found")
    return habit


def get_habits(db: Session) -> List[models.Habit]:
    try:
        return (
            db.query(models.Habit)
            .order_by(models.Habit.created_at.desc(), models.Habit.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError.from_exception("get habits", e)


def delete_habit(db: Session, habit_id: int) -> None:
    """Delete a habit's records, its schedule and the habit in a single transaction."""
    habit = get_habit_by_id(db, habit_id)
    try:
        deleted = (
            db.query(models.Record)
            .filter(models.Record.habit_id == habit_id)
            .delete(synchronize_session=False)
        )
        db.delete(habit)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Deleting habit %s failed", habit_id)
        raise StorageError.from_exception("delete habit", e)
    logger.info("Deleted habit %s and %d records", habit_id, deleted)


def is_valid_for_date(habit, day: date) -> bool:
    """Whether ``day`` is one the habit is scheduled on. Advisory only."""
    cadence = getattr(habit.cadence, "value", habit.cadence)
    schedule = habit.schedule
    if isinstance(schedule, dict):
        schedule = schemas.Schedule(**schedule)

    if cadence == schemas.Cadence.DAILY.value:
        return True
    if cadence == schemas.Cadence.WEEKLY.value:
        return not schedule.days_of_week or sunday_weekday(day) in schedule.days_of_week
    if cadence == schemas.Cadence.MONTHLY.value:
        return not schedule.days_of_month or day.day in schedule.days_of_month
    return False


# --- Completion store ---


def record_completion(db: Session, habit_id: int, record_date: date, completed_at: datetime) -> None:
    """Mark ``habit_id`` done on ``record_date``; re-marking only refreshes completed_at."""
    if find_habit(db, habit_id) is None:
        raise NotFound(f"habit {habit_id} not found")

    completed_at = completed_at.replace(microsecond=0)
    stmt = sqlite_insert(models.Record).values(
        habit_id=habit_id,
        record_date=record_date,
        completed_at=completed_at,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["habit_id", "record_date"],
        set_={"completed_at": completed_at},
    )
    try:
        db.execute(stmt)
        db.commit()
    except IntegrityError as e:
        # the habit went away between the lookup and the insert
        db.rollback()
        raise NotFound(f"habit {habit_id} not found") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Recording completion for habit %s failed", habit_id)
        raise StorageError.from_exception("record completion", e)
    logger.info("Habit %s done on %s", habit_id, record_date.isoformat())


def list_record_dates_desc(db: Session, habit_id: int, limit: int = DEFAULT_RECORD_LIMIT) -> List[date]:
    """The most recent ``limit`` completion dates, newest first."""
    try:
        rows = (
            db.query(models.Record.record_date)
            .filter(models.Record.habit_id == habit_id)
            .order_by(models.Record.record_date.desc())
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError.from_exception("get record dates", e)
    return [row.record_date for row in rows]


def list_records_in_range(db: Session, habit_id: int, start: date, end: date) -> List[models.Record]:
    """Records with start <= record_date <= end, newest first. Empty when start > end."""
    try:
        return (
            db.query(models.Record)
            .filter(
                models.Record.habit_id == habit_id,
                models.Record.record_date >= start,
                models.Record.record_date <= end,
            )
            .order_by(models.Record.record_date.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError.from_exception("get records", e)


def count_records(db: Session, habit_id: int) -> int:
    try:
        return db.query(models.Record).filter(models.Record.habit_id == habit_id).count()
    except SQLAlchemyError as e:
        raise StorageError.from_exception("count records", e)
