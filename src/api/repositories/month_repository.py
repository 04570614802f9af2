"""Репозиторий для работы с моделью Month."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.logging import api_log as log
from src.api.models import Month
from src.api.schemas import MonthSchemaRead

from .base_repository import BaseRepository


class MonthRepository(BaseRepository[Month, MonthSchemaRead]):
    """Репозиторий месяцев."""

    async def get_by_year_and_month(self, db_session: AsyncSession, *, year: int, month: int) -> Month | None:
        """
        Получает месяц по году и номеру месяца.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            year (int): Год.
            month (int): Номер месяца (1-12).

        Returns:
            Month | None: Месяц или None.
        """
        log.debug(f"Поиск месяца {year}-{month:02d}")
        return await self.get_by_filter_first_or_none(
            db_session,
            self.model.year == year,
            self.model.month == month,
        )

    async def create_month(self, db_session: AsyncSession, *, year: int, month: int) -> Month:
        """Создает незафиксированный месяц."""
        return await self.create(db_session, obj_in={"year": year, "month": month, "locked": False})
