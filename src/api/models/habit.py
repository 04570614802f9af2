"""Модель SQLAlchemy для Habit (Привычка)."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:  # pragma: no cover
    from .habit_completion import HabitCompletion
    from .month import Month


class Habit(Base):
    """
    Привычка месяца.

    Attributes:
        month_id: Внешний ключ на месяц.
        name: Название привычки.
        is_scoring: True - привычка участвует в оценке дня, False - только метрика.
        sort_order: Позиция в списке привычек месяца.
        month: Месяц, которому принадлежит привычка.
        completions: Отметки выполнения этой привычки.
    """

    __tablename__ = "habits"
    __repr_attrs__ = ("month_id", "name", "is_scoring")

    month_id: Mapped[int] = mapped_column(ForeignKey("months.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_scoring: Mapped[bool] = mapped_column(default=True, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Связи
    month: Mapped["Month"] = relationship(back_populates="habits")
    completions: Mapped[list["HabitCompletion"]] = relationship(
        back_populates="habit", cascade="all, delete-orphan"
    )
