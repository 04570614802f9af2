"""Модель SQLAlchemy для Month (Месяц трекинга)."""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:  # pragma: no cover
    from .daily_record import DailyRecord
    from .habit import Habit


class Month(Base):
    """
    Контейнер месяца, к которому привязаны привычки и дневные записи.

    Attributes:
        year: Год.
        month: Номер месяца (1-12).
        locked: Флаг фиксации структуры привычек. После установки не снимается.
        habits: Привычки месяца.
        records: Дневные записи месяца.
    """

    __tablename__ = "months"
    __repr_attrs__ = ("year", "month", "locked")

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    locked: Mapped[bool] = mapped_column(default=False, nullable=False)

    # Связи
    habits: Mapped[list["Habit"]] = relationship(
        back_populates="month",
        cascade="all, delete-orphan",
        order_by="Habit.sort_order",
    )
    records: Mapped[list["DailyRecord"]] = relationship(
        back_populates="month",
        cascade="all, delete-orphan",
        order_by="DailyRecord.date",
    )

    __table_args__ = (
        UniqueConstraint("year", "month", name="uq_month_year_month"),
        CheckConstraint("month BETWEEN 1 AND 12", name="month_range"),
    )
