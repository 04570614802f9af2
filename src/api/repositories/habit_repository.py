"""Репозиторий для работы с моделью Habit."""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.models import Habit
from src.api.schemas import HabitSchemaCreate

from .base_repository import BaseRepository


class HabitRepository(BaseRepository[Habit, HabitSchemaCreate]):
    """Репозиторий привычек."""

    async def get_habits_by_month_id(self, db_session: AsyncSession, *, month_id: int) -> Sequence[Habit]:
        """
        Получает привычки месяца, упорядоченные по позиции.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            month_id (int): ID месяца.

        Returns:
            Sequence[Habit]: Привычки месяца.
        """
        return await self.get_multi_by_filter(
            db_session,
            self.model.month_id == month_id,
            order_by=[self.model.sort_order.asc(), self.model.id.asc()],
        )

    async def count_habits_by_month_id(self, db_session: AsyncSession, *, month_id: int) -> int:
        """Считает привычки месяца."""
        return await self.count_by_filter(db_session, self.model.month_id == month_id)

    async def create_habit(
        self,
        db_session: AsyncSession,
        *,
        habit_in: HabitSchemaCreate,
        month_id: int,
        sort_order: int,
    ) -> Habit:
        """
        Создает привычку в месяце.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            habit_in (HabitSchemaCreate): Название и тип привычки.
            month_id (int): ID месяца.
            sort_order (int): Итоговая позиция привычки.

        Returns:
            Habit: Созданная привычка.
        """
        habit_in_data = habit_in.model_dump(exclude={"sort_order"})
        return await self.create(
            db_session,
            obj_in={**habit_in_data, "month_id": month_id, "sort_order": sort_order},
        )
