"""Модель SQLAlchemy для HabitCompletion (Отметка выполнения привычки)."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:  # pragma: no cover
    from .daily_record import DailyRecord
    from .habit import Habit


class HabitCompletion(Base):
    """
    Отметка выполнения привычки в рамках дневной записи.

    Attributes:
        daily_record_id: Внешний ключ на дневную запись.
        habit_id: Внешний ключ на привычку.
        completed: Выполнена ли привычка.
        value: Числовое значение (имеет смысл только для привычек-метрик).
    """

    __tablename__ = "habit_completions"
    __repr_attrs__ = ("daily_record_id", "habit_id", "completed")

    daily_record_id: Mapped[int] = mapped_column(
        ForeignKey("daily_records.id", ondelete="CASCADE"), nullable=False, index=True
    )
    habit_id: Mapped[int] = mapped_column(ForeignKey("habits.id", ondelete="CASCADE"), nullable=False, index=True)
    completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    value: Mapped[float | None] = mapped_column(Float)

    # Связи
    daily_record: Mapped["DailyRecord"] = relationship(back_populates="completions")
    habit: Mapped["Habit"] = relationship(back_populates="completions")

    # Одна отметка на привычку в пределах дня
    __table_args__ = (UniqueConstraint("daily_record_id", "habit_id", name="uq_habit_completion_per_record"),)
