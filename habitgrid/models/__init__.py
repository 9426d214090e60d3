from .habit import Habit, HabitSchedule
from .record import Record

__all__ = ["Habit", "HabitSchedule", "Record"]
