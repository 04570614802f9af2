"""Репозиторий для работы с моделью DailyRecord."""

from datetime import date
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.api.core.logging import api_log as log
from src.api.models import DailyRecord
from src.api.schemas import DailyRecordSchemaCreate

from .base_repository import BaseRepository


class DailyRecordRepository(BaseRepository[DailyRecord, DailyRecordSchemaCreate]):
    """Репозиторий дневных записей."""

    async def get_records_by_month_id(self, db_session: AsyncSession, *, month_id: int) -> Sequence[DailyRecord]:
        """
        Получает записи месяца в порядке возрастания даты.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.

        Returns:
            Sequence[DailyRecord]: Записи месяца.
        """
        return await self.get_multi_by_filter(
            db_session,
            self.model.month_id == month_id,
            order_by=[self.model.date.asc()],
        )

    async def get_record_by_month_and_date(
        self, db_session: AsyncSession, *, month_id: int, record_date: date
    ) -> DailyRecord | None:
        """
        Получает запись месяца на указанную дату.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.
            record_date (date): Дата.

        Returns:
            DailyRecord | None: Запись или None.
        """
        record = await self.get_by_filter_first_or_none(
            db_session,
            self.model.month_id == month_id,
            self.model.date == record_date,
        )

        status = "найдена" if record else "не найдена"
        log.debug(f"Запись месяца ID {month_id} на {record_date} {status}.")

        return record

    async def get_record_by_id_with_completions(
        self, db_session: AsyncSession, *, record_id: int
    ) -> DailyRecord | None:
        """
        Получает запись по ID с жадной загрузкой отметок выполнения.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            record_id (int): ID записи.

        Returns:
            DailyRecord | None: Запись с подгруженными отметками или None.
        """
        statement = (
            select(self.model)
            .where(self.model.id == record_id)
            .options(selectinload(self.model.completions))
            .execution_options(populate_existing=True)
        )
        result = await db_session.execute(statement)
        return result.scalar_one_or_none()
