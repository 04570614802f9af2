"""Модель SQLAlchemy для DailyRecord (Запись дня)."""

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:  # pragma: no cover
    from .habit_completion import HabitCompletion
    from .month import Month


class DailyRecord(Base):
    """
    Итог одного календарного дня.

    Attributes:
        month_id: Внешний ключ на месяц.
        date: Календарная дата.
        recorded: True - день записан пользователем, False - пропущенный день (заглушка).
        score: Оценка дня 0-100 (для пропущенных дней 0).
        notes: Произвольные заметки.
        recorded_at: Момент записи дня (только для записанных дней).
        completions: Отметки выполнения привычек за день.
    """

    __tablename__ = "daily_records"
    __repr_attrs__ = ("month_id", "date", "recorded", "score")

    month_id: Mapped[int] = mapped_column(ForeignKey("months.id", ondelete="CASCADE"), nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    recorded: Mapped[bool] = mapped_column(default=True, nullable=False)
    score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    recorded_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))

    # Связи
    month: Mapped["Month"] = relationship(back_populates="records")
    completions: Mapped[list["HabitCompletion"]] = relationship(
        back_populates="daily_record", cascade="all, delete-orphan"
    )

    # Одна запись на дату в пределах месяца
    __table_args__ = (
        UniqueConstraint("month_id", "date", name="uq_daily_record_per_date"),
        CheckConstraint("score BETWEEN 0 AND 100", name="score_range"),
    )
