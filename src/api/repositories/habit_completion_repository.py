"""Репозиторий для работы с моделью HabitCompletion."""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.models import HabitCompletion
from src.api.schemas import HabitCompletionSchemaCreate

from .base_repository import BaseRepository


class HabitCompletionRepository(BaseRepository[HabitCompletion, HabitCompletionSchemaCreate]):
    """Репозиторий отметок выполнения привычек."""

    async def get_completions_by_record_id(
        self, db_session: AsyncSession, *, record_id: int
    ) -> Sequence[HabitCompletion]:
        """
        Получает отметки выполнения дневной записи.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            record_id (int): ID дневной записи.

        Returns:
            Sequence[HabitCompletion]: Отметки записи.
        """
        return await self.get_multi_by_filter(
            db_session,
            self.model.daily_record_id == record_id,
            order_by=[self.model.id.asc()],
        )

    def build_completions(
        self, *, record_id: int, completions_in: Sequence[HabitCompletionSchemaCreate]
    ) -> list[HabitCompletion]:
        """Создает объекты отметок для записи (без добавления в сессию)."""
        return [self.model(daily_record_id=record_id, **completion.model_dump()) for completion in completions_in]
