"""Инициализация модуля репозиториев."""

from .base_repository import BaseRepository
from .daily_record_repository import DailyRecordRepository
from .habit_completion_repository import HabitCompletionRepository
from .habit_repository import HabitRepository
from .month_repository import MonthRepository

__all__ = [
    "BaseRepository",
    "MonthRepository",
    "HabitRepository",
    "DailyRecordRepository",
    "HabitCompletionRepository",
]
