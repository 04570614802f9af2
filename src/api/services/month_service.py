"""Сервис для работы с месяцами."""

from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.config import settings
from src.api.core.exceptions import BadRequestException
from src.api.core.logging import api_log as log
from src.api.models import Month
from src.api.repositories import HabitRepository, MonthRepository
from src.api.utils.date_utils import get_today_date

from .base_service import BaseService


class MonthService(BaseService[Month, MonthRepository]):
    """
    Сервис для управления месяцами трекинга.

    Отвечает за получение (и создание) текущего месяца и фиксацию структуры привычек.
    """

    def __init__(self, month_repository: MonthRepository, habit_repository: HabitRepository):
        """
        Инициализирует сервис месяцев.

        Args:
            month_repository (MonthRepository): Репозиторий месяцев.
            habit_repository (HabitRepository): Репозиторий привычек (для проверки перед фиксацией).
        """
        super().__init__(repository=month_repository, month_repository=month_repository)
        self.habit_repository = habit_repository

    async def get_current_month(self, db_session: AsyncSession, *, today: date | None = None) -> Month | None:
        """
        Получает месяц, соответствующий сегодняшней дате, без создания.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            today (date | None): Дата "сегодня". По умолчанию вычисляется в часовом поясе из настроек.

        Returns:
            Month | None: Текущий месяц или None.
        """
        today = today or get_today_date(settings.TIMEZONE)
        return await self.repository.get_by_year_and_month(db_session, year=today.year, month=today.month)

    async def get_or_create_current_month(self, db_session: AsyncSession, *, today: date | None = None) -> Month:
        """
        Получает текущий месяц, создавая его (незафиксированным), если он отсутствует.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            today (date | None): Дата "сегодня". По умолчанию вычисляется в часовом поясе из настроек.

        Returns:
            Month: Текущий месяц.
        """
        today = today or get_today_date(settings.TIMEZONE)

        month = await self.get_current_month(db_session, today=today)
        if month is not None:
            return month

        log.info(f"Месяц {today.year}-{today.month:02d} не найден, создаем новый.")

        try:
            month = await self.repository.create_month(db_session, year=today.year, month=today.month)
            await db_session.commit()
        except IntegrityError:
            # Месяц уже создан параллельным запросом
            await db_session.rollback()
            log.info(f"Месяц {today.year}-{today.month:02d} создан параллельным запросом, повторяем поиск.")
            month = await self.get_current_month(db_session, today=today)
            if month is None:
                raise
        except Exception as exc:
            await db_session.rollback()
            log.opt(exception=exc).error(f"Ошибка при создании месяца {today.year}-{today.month:02d}: {exc}")
            raise

        return month

    async def get_month(self, db_session: AsyncSession, *, month_id: int) -> Month:
        """
        Получает месяц по ID.

        Raises:
            NotFoundException: Если месяц не найден.
        """
        return await self.get_month_or_404(db_session, month_id=month_id)

    async def lock_month(self, db_session: AsyncSession, *, month_id: int) -> Month:
        """
        Фиксирует структуру привычек месяца.

        Повторная фиксация ничего не меняет. Зафиксировать месяц без привычек нельзя.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.

        Returns:
            Month: Зафиксированный месяц.

        Raises:
            NotFoundException: Если месяц не найден.
            BadRequestException: Если у месяца нет привычек.
        """
        month = await self.get_month_or_404(db_session, month_id=month_id)

        if month.locked:
            log.debug(f"Месяц ID {month_id} уже зафиксирован.")
            return month

        habits_count = await self.habit_repository.count_habits_by_month_id(db_session, month_id=month_id)
        if habits_count == 0:
            raise BadRequestException(
                message="Нельзя зафиксировать месяц без привычек.",
                error_type="month_without_habits",
            )

        async with self.unit_of_work(db_session, action=f"фиксация месяца ID {month_id}"):
            month = await self.repository.update(db_session, db_obj=month, obj_in={"locked": True})

        log.info(f"Структура привычек месяца ID {month_id} зафиксирована ({habits_count} привычек).")
        return month

