"""Схемы Pydantic для дашборда."""

import datetime as dt
from enum import Enum

from pydantic import Field

from .base_schema import BaseSchema


class ScoreBand(str, Enum):
    """Градация оценки для отображения."""

    GOOD = "good"  # >= 70
    WARNING = "warning"  # >= 40
    BAD = "bad"


class Trajectory(str, Enum):
    """Направление тренда последних оценок."""

    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class LifelinePointSchema(BaseSchema):
    """Точка линии жизни."""

    date: dt.date = Field(..., description="Дата")
    value: float = Field(..., ge=0, le=100, description="Значение тренда")


class RecentRecordSchema(BaseSchema):
    """Краткая запись дня для списка последних записей."""

    date: dt.date = Field(..., description="Дата")
    recorded: bool = Field(..., description="Записан ли день")
    score: int = Field(..., description="Оценка дня")
    band: ScoreBand = Field(..., description="Градация оценки")


class DashboardSchema(BaseSchema):
    """Сводная статистика месяца."""

    month_id: int = Field(..., description="ID месяца")
    latest_score: int = Field(..., description="Оценка последнего дня")
    latest_band: ScoreBand = Field(..., description="Градация оценки последнего дня")
    streak: int = Field(..., ge=0, description="Текущая серия")
    streak_threshold: int = Field(..., description="Порог оценки для серии")
    average_score: int = Field(..., description="Средняя оценка записанных дней")
    average_band: ScoreBand = Field(..., description="Градация средней оценки")
    missed_days: int = Field(..., ge=0, description="Количество пропущенных дней")
    trajectory: Trajectory = Field(..., description="Направление тренда")
    lifeline: list[LifelinePointSchema] = Field(default_factory=list, description="Линия жизни по возрастанию дат")
    lifeline_band: ScoreBand = Field(..., description="Градация последнего значения линии жизни")
    recent_records: list[RecentRecordSchema] = Field(
        default_factory=list, description="Последние записи, начиная с самой свежей"
    )
