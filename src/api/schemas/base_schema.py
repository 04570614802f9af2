"""Базовые схемы Pydantic."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Общая конфигурация: чтение из ORM-объектов, лишние поля игнорируются."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, extra="ignore")


class BaseReadSchema(BaseSchema):
    """Ответ API для сохраненного объекта."""

    id: int = Field(..., description="Идентификатор")


class TimestampedReadSchema(BaseReadSchema):
    """Ответ API с временем создания объекта."""

    created_at: datetime = Field(..., description="Время создания")
