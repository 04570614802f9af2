"""Инициализация модуля сервисов."""

from .app_state_service import AppStateService
from .base_service import BaseService
from .daily_record_service import DailyRecordService
from .dashboard_service import DashboardService, build_dashboard
from .habit_service import HabitService
from .month_service import MonthService

__all__ = [
    "BaseService",
    "MonthService",
    "HabitService",
    "DailyRecordService",
    "DashboardService",
    "AppStateService",
    "build_dashboard",
]
