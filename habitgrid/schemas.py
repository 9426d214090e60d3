from datetime import date, datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class Cadence(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


# --- Habits ---


class Schedule(BaseModel):
    days_of_week: List[int] = Field(default_factory=list)   # 0=Sunday .. 6=Saturday
    days_of_month: List[int] = Field(default_factory=list)  # 1 .. 31

    @field_validator("days_of_week")
    @classmethod
    def check_days_of_week(cls, value: List[int]) -> List[int]:
        if any(d < 0 or d > 6 for d in value):
            raise ValueError("days_of_week must be between 0 (Sunday) and 6 (Saturday)")
        return sorted(set(value))

    @field_validator("days_of_month")
    @classmethod
    def check_days_of_month(cls, value: List[int]) -> List[int]:
        if any(d < 1 or d > 31 for d in value):
            raise ValueError("days_of_month must be between 1 and 31")
        return sorted(set(value))


class HabitCreate(BaseModel):
    description: str = Field(..., min_length=1)
    cadence: Cadence
    schedule: Schedule = Field(default_factory=Schedule)
    start_date: date
    color: str = Field(..., max_length=32)

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be empty")
        return value

    @model_validator(mode="after")
    def check_schedule_matches_cadence(self) -> "HabitCreate":
        """Daily habits ignore the schedule; the others accept only their own kind of day."""
        if self.cadence is Cadence.DAILY:
            self.schedule = Schedule()
        elif self.cadence is Cadence.WEEKLY and self.schedule.days_of_month:
            raise ValueError("weekly habits cannot be scheduled on days of the month")
        elif self.cadence is Cadence.MONTHLY and self.schedule.days_of_week:
            raise ValueError("monthly habits cannot be scheduled on days of the week")
        return self


class HabitUpdate(HabitCreate):
    """Full replacement of every editable field."""


class HabitRead(BaseModel):
    id: int
    description: str
    cadence: Cadence
    schedule: Schedule
    start_date: date
    color: str
    created_at: datetime
    completed_today: bool = False

    model_config = {
        "from_attributes": True
    }


# --- Records ---


class RecordRead(BaseModel):
    id: int
    habit_id: int
    record_date: date
    completed_at: datetime
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class ContributionDay(BaseModel):
    date: date
    completed: bool


class Streak(BaseModel):
    habit_id: int
    current_count: int = Field(0, ge=0)
