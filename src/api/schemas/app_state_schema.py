"""Схемы Pydantic для состояния экрана приложения."""

from pydantic import Field

from src.api.utils.view_state import ViewEvent, ViewMode

from .base_schema import BaseSchema


class AppStateSchemaRead(BaseSchema):
    """Текущий экран и данные, по которым он выбран."""

    view_mode: ViewMode = Field(..., description="Экран приложения")
    month_id: int | None = Field(None, description="ID текущего месяца")
    locked: bool = Field(False, description="Зафиксирована ли структура привычек")
    habits_count: int = Field(0, description="Количество привычек месяца")
    has_today_record: bool = Field(False, description="Записан ли сегодняшний день")


class AppStateEventSchema(BaseSchema):
    """Событие, применяемое к текущему экрану."""

    current: ViewMode = Field(..., description="Текущий экран")
    event: ViewEvent = Field(..., description="Событие")
