"""Сервис для работы с дневными записями и отметками выполнения привычек."""

from datetime import date, datetime, timezone
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.config import settings
from src.api.core.exceptions import BadRequestException, ConflictException, NotFoundException
from src.api.core.logging import api_log as log
from src.api.models import DailyRecord, HabitCompletion, Month
from src.api.repositories import (
    DailyRecordRepository,
    HabitCompletionRepository,
    HabitRepository,
    MonthRepository,
)
from src.api.schemas import DailyRecordSchemaCreate, HabitCompletionSchemaCreate
from src.api.utils.date_utils import get_today_date, is_date_in_month
from src.api.utils.scoring import calculate_daily_score

from .base_service import BaseService


class DailyRecordService(BaseService[DailyRecord, DailyRecordRepository]):
    """
    Сервис для записи дней.

    Записывает день с отметками привычек и вычисляет его оценку,
    отмечает пропущенные дни и отдает историю записей месяца.
    """

    def __init__(
        self,
        record_repository: DailyRecordRepository,
        completion_repository: HabitCompletionRepository,
        habit_repository: HabitRepository,
        month_repository: MonthRepository,
    ):
        """
        Инициализирует сервис дневных записей.

        Args:
            record_repository (DailyRecordRepository): Репозиторий дневных записей.
            completion_repository (HabitCompletionRepository): Репозиторий отметок выполнения.
            habit_repository (HabitRepository): Репозиторий привычек.
            month_repository (MonthRepository): Репозиторий месяцев.
        """
        super().__init__(repository=record_repository, month_repository=month_repository)
        self.completion_repository = completion_repository
        self.habit_repository = habit_repository

    def _check_date_in_month(self, month: Month, record_date: date) -> None:
        """
        Проверяет, что дата относится к месяцу.

        Raises:
            BadRequestException: Если дата вне месяца.
        """
        if not is_date_in_month(record_date, month.year, month.month):
            raise BadRequestException(
                message=f"Дата {record_date} не относится к месяцу {month.year}-{month.month:02d}.",
                error_type="date_outside_month",
                loc=["body", "date"],
            )

    async def _check_date_is_free(self, db_session: AsyncSession, *, month_id: int, record_date: date) -> None:
        """
        Проверяет, что на дату еще нет записи.

        Raises:
            ConflictException: Если запись на дату уже существует.
        """
        existing = await self.repository.get_record_by_month_and_date(
            db_session, month_id=month_id, record_date=record_date
        )

        if existing is not None:
            raise ConflictException(
                message=f"Запись на {record_date} уже существует.",
                error_type="daily_record_exists",
                loc=["body", "date"],
            )

    async def get_records_for_month(self, db_session: AsyncSession, *, month_id: int) -> Sequence[DailyRecord]:
        """
        Получает записи месяца в порядке возрастания даты.

        Raises:
            NotFoundException: Если месяц не найден.
        """
        await self.get_month_or_404(db_session, month_id=month_id)
        return await self.repository.get_records_by_month_id(db_session, month_id=month_id)

    async def get_today_record(
        self, db_session: AsyncSession, *, month_id: int, today: date | None = None
    ) -> DailyRecord | None:
        """
        Получает запись месяца на сегодняшнюю дату.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.
            today (date | None): Дата "сегодня". По умолчанию вычисляется в часовом поясе из настроек.

        Returns:
            DailyRecord | None: Запись или None, если сегодняшний день не записан.

        Raises:
            NotFoundException: Если месяц не найден.
        """
        await self.get_month_or_404(db_session, month_id=month_id)
        today = today or get_today_date(settings.TIMEZONE)
        return await self.repository.get_record_by_month_and_date(db_session, month_id=month_id, record_date=today)

    async def record_day(
        self,
        db_session: AsyncSession,
        *,
        month_id: int,
        record_in: DailyRecordSchemaCreate,
        today: date | None = None,
    ) -> DailyRecord:
        """
        Записывает день: создает запись с оценкой и по одной отметке на каждую привычку месяца.

        Привычки, отсутствующие в запросе, получают отметку completed=False.
        Оценка дня вычисляется по оценочным привычкам.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.
            record_in (DailyRecordSchemaCreate): Дата, заметки и отметки привычек.
            today (date | None): Дата "сегодня" (используется, если дата в запросе не указана).

        Returns:
            DailyRecord: Созданная запись с подгруженными отметками.

        Raises:
            NotFoundException: Если месяц не найден.
            BadRequestException: Если дата вне месяца или отметка ссылается на чужую привычку.
            ConflictException: Если запись на дату уже существует.
        """
        month = await self.get_month_or_404(db_session, month_id=month_id)
        record_date = record_in.date or today or get_today_date(settings.TIMEZONE)

        self._check_date_in_month(month, record_date)
        await self._check_date_is_free(db_session, month_id=month_id, record_date=record_date)

        habits = await self.habit_repository.get_habits_by_month_id(db_session, month_id=month_id)
        habit_ids = {habit.id for habit in habits}

        foreign_ids = sorted({c.habit_id for c in record_in.completions} - habit_ids)
        if foreign_ids:
            raise BadRequestException(
                message=f"Привычки с ID {foreign_ids} не относятся к месяцу ID {month_id}.",
                error_type="habit_not_in_month",
                loc=["body", "completions"],
            )

        # По одной отметке на привычку: первая отметка из запроса или пустая
        completions_in: list[HabitCompletionSchemaCreate] = []
        for habit in habits:
            completion = next((c for c in record_in.completions if c.habit_id == habit.id), None)
            completions_in.append(completion or HabitCompletionSchemaCreate(habit_id=habit.id))

        score = calculate_daily_score(habits, completions_in)

        log.info(f"Запись дня {record_date} в месяце ID {month_id}: оценка {score}.")

        async with self.unit_of_work(db_session, action=f"запись дня {record_date} в месяце ID {month_id}"):
            record = await self.repository.create(
                db_session,
                obj_in={
                    "month_id": month_id,
                    "date": record_date,
                    "recorded": True,
                    "score": score,
                    "notes": record_in.notes,
                    "recorded_at": datetime.now(timezone.utc),
                },
            )
            db_session.add_all(
                self.completion_repository.build_completions(record_id=record.id, completions_in=completions_in)
            )
            await db_session.flush()

        record_with_completions = await self.repository.get_record_by_id_with_completions(
            db_session, record_id=record.id
        )
        return record_with_completions or record

    async def mark_day_missed(self, db_session: AsyncSession, *, month_id: int, record_date: date) -> DailyRecord:
        """
        Создает заглушку пропущенного дня (recorded=False, оценка 0).

        Такие записи прерывают серию и снижают линию жизни.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.
            record_date (date): Пропущенная дата.

        Returns:
            DailyRecord: Созданная запись.

        Raises:
            NotFoundException: Если месяц не найден.
            BadRequestException: Если дата вне месяца.
            ConflictException: Если запись на дату уже существует.
        """
        month = await self.get_month_or_404(db_session, month_id=month_id)

        self._check_date_in_month(month, record_date)
        await self._check_date_is_free(db_session, month_id=month_id, record_date=record_date)

        async with self.unit_of_work(db_session, action=f"отметка пропуска {record_date} в месяце ID {month_id}"):
            record = await self.repository.create(
                db_session,
                obj_in={"month_id": month_id, "date": record_date, "recorded": False, "score": 0, "notes": ""},
            )

        log.info(f"День {record_date} в месяце ID {month_id} отмечен пропущенным.")
        return record

    async def get_completions_for_record(
        self, db_session: AsyncSession, *, record_id: int
    ) -> Sequence[HabitCompletion]:
        """
        Получает отметки выполнения дневной записи.

        Raises:
            NotFoundException: Если запись не найдена.
        """
        record = await self.repository.get_by_id(db_session, obj_id=record_id)

        if record is None:
            raise NotFoundException(message=f"Запись с ID {record_id} не найдена.", error_type="daily_record_not_found")

        return await self.completion_repository.get_completions_by_record_id(db_session, record_id=record_id)
