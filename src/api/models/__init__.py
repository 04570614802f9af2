from .base import Base, metadata_obj
from .daily_record import DailyRecord
from .habit import Habit
from .habit_completion import HabitCompletion
from .month import Month

__all__ = [
    "metadata_obj",
    "Base",
    "Month",
    "Habit",
    "DailyRecord",
    "HabitCompletion",
]
