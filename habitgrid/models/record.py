# habitgrid/models/record.py
from datetime import datetime

from sqlalchemy import Column, Date, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base, Timestamp


class Record(Base):
    """A habit marked done on one civil date; unique per (habit, date)."""

    __tablename__ = "records"
    __table_args__ = (
        UniqueConstraint("habit_id", "record_date", name="uq_records_habit_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    habit_id = Column(Integer, ForeignKey("habits.id", ondelete="CASCADE"), nullable=False, index=True)
    record_date = Column(Date, nullable=False, index=True)
    completed_at = Column(Timestamp, nullable=False)
    created_at = Column(Timestamp, nullable=False, default=lambda: datetime.now().replace(microsecond=0))

    habit = relationship("Habit", back_populates="records")
