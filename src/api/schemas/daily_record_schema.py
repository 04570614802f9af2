"""Схемы Pydantic для моделей DailyRecord и HabitCompletion."""

import datetime as dt
import math

from pydantic import Field, StrictBool, field_validator

from .base_schema import BaseReadSchema, BaseSchema

# --- HabitCompletion ---


class HabitCompletionSchemaCreate(BaseSchema):
    """Отметка выполнения привычки в запросе на запись дня."""

    habit_id: int = Field(..., gt=0, description="ID привычки")
    completed: StrictBool = Field(False, description="Выполнена ли привычка (только true/false)")
    value: float | None = Field(None, description="Значение метрики")

    @field_validator("value")
    @classmethod
    def normalize_value(cls, value: float | None) -> float | None:
        """NaN и бесконечности приводятся к 0."""
        if value is not None and not math.isfinite(value):
            return 0.0
        return value


class HabitCompletionSchemaRead(BaseReadSchema):
    """Схема для чтения отметки выполнения (ответа API)."""

    daily_record_id: int = Field(..., description="ID дневной записи")
    habit_id: int = Field(..., description="ID привычки")
    completed: bool = Field(..., description="Выполнена ли привычка")
    value: float | None = Field(None, description="Значение метрики")


# --- DailyRecord ---


class DailyRecordSchemaCreate(BaseSchema):
    """Схема для записи дня."""

    date: dt.date | None = Field(None, description="Дата записи (по умолчанию - сегодня)")
    notes: str = Field("", description="Заметки к дню")
    completions: list[HabitCompletionSchemaCreate] = Field(default_factory=list, description="Отметки привычек")


class DailyRecordSchemaMissed(BaseSchema):
    """Схема для отметки пропущенного дня."""

    date: dt.date = Field(..., description="Пропущенная дата")


class DailyRecordSchemaRead(BaseReadSchema):
    """Схема для чтения дневной записи (ответа API)."""

    month_id: int = Field(..., description="ID месяца")
    date: dt.date = Field(..., description="Дата записи")
    recorded: bool = Field(..., description="Записан ли день (False - пропущенный день)")
    score: int = Field(..., ge=0, le=100, description="Оценка дня")
    notes: str = Field("", description="Заметки")
    recorded_at: dt.datetime | None = Field(None, description="Момент записи дня")


class DailyRecordSchemaReadWithCompletions(DailyRecordSchemaRead):
    """Схема дневной записи с отметками выполнения."""

    completions: list[HabitCompletionSchemaRead] = Field(default_factory=list)
