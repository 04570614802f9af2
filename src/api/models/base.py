"""Декларативная база моделей SQLAlchemy."""

from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime, MetaData, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Имена ограничений и индексов стабильны между автогенерациями Alembic
# https://alembic.sqlalchemy.org/en/latest/naming.html
metadata_obj = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


class TimestampMixin:
    """Время создания и последнего изменения строки, проставляемые БД."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="Время создания записи",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="Время последнего обновления записи",
    )


class Base(DeclarativeBase, TimestampMixin):
    """
    База всех моделей: суррогатный ключ `id`, временные метки и общая metadata.

    Таблицу каждая модель называет сама (`__tablename__`). Поля из `__repr_attrs__`
    попадают в repr, например `<Month(id=1, year=2026, month=10)>`.
    """

    metadata = metadata_obj

    __repr_attrs__: ClassVar[tuple[str, ...]] = ()

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name, None)!r}" for name in ("id", *self.__repr_attrs__))
        return f"<{self.__class__.__name__}({fields})>"
