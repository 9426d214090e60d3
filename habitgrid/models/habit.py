# habitgrid/models/habit.py
from datetime import datetime

from sqlalchemy import (
    CheckConstraint, Column, Date, ForeignKey, Integer, String, Text, UniqueConstraint
)
from sqlalchemy.orm import relationship

from ..database import Base, Timestamp


class Habit(Base):
    __tablename__ = "habits"
    __table_args__ = (
        CheckConstraint("frequency IN ('daily', 'weekly', 'monthly')", name="ck_habits_frequency"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Basic info
    description = Column(Text, nullable=False)
    cadence = Column("frequency", String(20), nullable=False)  # 'daily', 'weekly', 'monthly'
    start_date = Column(Date, nullable=False)
    color = Column(String(32), nullable=False)

    # Timestamps
    created_at = Column(Timestamp, nullable=False, default=lambda: datetime.now().replace(microsecond=0))

    # Relationships
    schedule_entries = relationship(
        "HabitSchedule",
        back_populates="habit",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="HabitSchedule.id",
    )
    records = relationship(
        "Record",
        back_populates="habit",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def days_of_week(self):
        return sorted(e.day_of_week for e in self.schedule_entries if e.day_of_week is not None)

    @property
    def days_of_month(self):
        return sorted(e.day_of_month for e in self.schedule_entries if e.day_of_month is not None)

    @property
    def schedule(self):
        return {"days_of_week": self.days_of_week, "days_of_month": self.days_of_month}


class HabitSchedule(Base):
    """One qualifying weekday (0=Sunday) or day of month for a habit."""

    __tablename__ = "habit_schedule"
    __table_args__ = (
        UniqueConstraint("habit_id", "day_of_week", "day_of_month", name="uq_habit_schedule_day"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    habit_id = Column(Integer, ForeignKey("habits.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=True)   # 0-6
    day_of_month = Column(Integer, nullable=True)  # 1-31
    created_at = Column(Timestamp, nullable=False, default=lambda: datetime.now().replace(microsecond=0))

    habit = relationship("Habit", back_populates="schedule_entries")
