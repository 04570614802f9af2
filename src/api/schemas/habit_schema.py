"""Схемы Pydantic для модели Habit."""

from pydantic import Field, field_validator

from .base_schema import BaseSchema, TimestampedReadSchema


class HabitSchemaBase(BaseSchema):
    """Базовая схема для привычки."""

    name: str = Field(..., min_length=1, max_length=255, description="Название привычки")
    is_scoring: bool = Field(True, description="Участвует ли привычка в оценке дня (False - только метрика)")


class HabitSchemaCreate(HabitSchemaBase):
    """Схема для создания новой привычки в месяце."""

    # month_id берется из path parameter эндпоинта
    sort_order: int | None = Field(
        None,
        ge=0,
        description="Позиция в списке (если не указана, привычка добавляется в конец)",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        """Обрезает пробелы и запрещает пустое название."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("Название привычки не может быть пустым")
        return stripped


class HabitSchemaRead(HabitSchemaBase, TimestampedReadSchema):
    """Схема для чтения данных привычки (ответа API)."""

    month_id: int = Field(..., description="ID месяца")
    sort_order: int = Field(..., description="Позиция в списке")
