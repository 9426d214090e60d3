from .contribution import build_contribution
from .streak import calculate_streak
from .tracker import CompletedTodayProbe, HabitTracker, NoCompletionProbe, RecordProbe

__all__ = [
    "CompletedTodayProbe",
    "HabitTracker",
    "NoCompletionProbe",
    "RecordProbe",
    "build_contribution",
    "calculate_streak",
]
