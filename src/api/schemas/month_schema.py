"""Схемы Pydantic для модели Month."""

from pydantic import Field

from .base_schema import TimestampedReadSchema


class MonthSchemaRead(TimestampedReadSchema):
    """Месяц трекинга."""

    year: int = Field(..., description="Год")
    month: int = Field(..., ge=1, le=12, description="Номер месяца (1-12)")
    locked: bool = Field(..., description="Зафиксирована ли структура привычек")
