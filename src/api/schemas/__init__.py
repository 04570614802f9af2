"""Инициализация модуля схем Pydantic."""

from .app_state_schema import AppStateEventSchema, AppStateSchemaRead
from .base_schema import BaseReadSchema, BaseSchema, TimestampedReadSchema
from .daily_record_schema import (
    DailyRecordSchemaCreate,
    DailyRecordSchemaMissed,
    DailyRecordSchemaRead,
    DailyRecordSchemaReadWithCompletions,
    HabitCompletionSchemaCreate,
    HabitCompletionSchemaRead,
)
from .dashboard_schema import (
    DashboardSchema,
    LifelinePointSchema,
    RecentRecordSchema,
    ScoreBand,
    Trajectory,
)
from .habit_schema import HabitSchemaBase, HabitSchemaCreate, HabitSchemaRead
from .month_schema import MonthSchemaRead

__all__ = [
    "BaseSchema",
    "BaseReadSchema",
    "TimestampedReadSchema",
    "MonthSchemaRead",
    "HabitSchemaBase",
    "HabitSchemaCreate",
    "HabitSchemaRead",
    "HabitCompletionSchemaCreate",
    "HabitCompletionSchemaRead",
    "DailyRecordSchemaCreate",
    "DailyRecordSchemaMissed",
    "DailyRecordSchemaRead",
    "DailyRecordSchemaReadWithCompletions",
    "DashboardSchema",
    "LifelinePointSchema",
    "RecentRecordSchema",
    "ScoreBand",
    "Trajectory",
    "AppStateSchemaRead",
    "AppStateEventSchema",
]
