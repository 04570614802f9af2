"""Сервис для работы с привычками."""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions import BadRequestException
from src.api.core.logging import api_log as log
from src.api.models import Habit
from src.api.repositories import HabitRepository, MonthRepository
from src.api.schemas import HabitSchemaCreate

from .base_service import BaseService


class HabitService(BaseService[Habit, HabitRepository]):
    """
    Сервис для управления привычками месяца.

    Привычки добавляются только пока структура месяца не зафиксирована.
    """

    def __init__(self, habit_repository: HabitRepository, month_repository: MonthRepository):
        """
        Инициализирует сервис привычек.

        Args:
            habit_repository (HabitRepository): Репозиторий привычек.
            month_repository (MonthRepository): Репозиторий месяцев.
        """
        super().__init__(repository=habit_repository, month_repository=month_repository)

    async def get_habits_for_month(self, db_session: AsyncSession, *, month_id: int) -> Sequence[Habit]:
        """
        Получает привычки месяца в порядке sort_order.

        Raises:
            NotFoundException: Если месяц не найден.
        """
        await self.get_month_or_404(db_session, month_id=month_id)
        return await self.repository.get_habits_by_month_id(db_session, month_id=month_id)

    async def create_habit_for_month(
        self,
        db_session: AsyncSession,
        *,
        month_id: int,
        habit_in: HabitSchemaCreate,
    ) -> Habit:
        """
        Создает привычку в месяце.

        Если позиция не указана, привычка добавляется в конец списка.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.
            habit_in (HabitSchemaCreate): Данные привычки.

        Returns:
            Habit: Созданная привычка.

        Raises:
            NotFoundException: Если месяц не найден.
            BadRequestException: Если структура месяца уже зафиксирована.
        """
        month = await self.get_month_or_404(db_session, month_id=month_id)

        if month.locked:
            log.warning(f"Попытка добавить привычку в зафиксированный месяц ID {month_id}.")
            raise BadRequestException(
                message="Структура привычек месяца зафиксирована, добавлять привычки нельзя.",
                error_type="month_locked",
            )

        sort_order = habit_in.sort_order
        if sort_order is None:
            sort_order = await self.repository.count_habits_by_month_id(db_session, month_id=month_id)

        async with self.unit_of_work(db_session, action=f"создание привычки в месяце ID {month_id}"):
            habit = await self.repository.create_habit(
                db_session, habit_in=habit_in, month_id=month_id, sort_order=sort_order
            )

        kind = "оценочная" if habit.is_scoring else "метрика"
        log.info(f"Привычка '{habit.name}' ({kind}, ID {habit.id}) добавлена в месяц ID {month_id}.")
        return habit
