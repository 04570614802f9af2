"""
Базовый класс для сервисов.

Сервис - единица работы (Unit of Work): вызывает репозитории,
фиксирует транзакцию при успехе и откатывает ее при ошибке.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions import NotFoundException
from src.api.core.logging import api_log as log
from src.api.models import Base as SQLAlchemyBaseModel
from src.api.models import Month
from src.api.repositories import BaseRepository, MonthRepository

# Обобщенные типы для моделей SQLAlchemy и репозиториев
ModelType = TypeVar("ModelType", bound=SQLAlchemyBaseModel)
RepositoryType = TypeVar("RepositoryType", bound=BaseRepository)


class BaseService(Generic[ModelType, RepositoryType]):
    """
    Базовый сервис с общими операциями и управлением транзакциями.

    Attributes:
        repository (RepositoryType): Основной репозиторий сервиса.
        month_repository (MonthRepository): Репозиторий месяцев - все сущности привязаны к месяцу.
    """

    def __init__(self, repository: RepositoryType, month_repository: MonthRepository):
        """
        Инициализирует базовый сервис.

        Args:
            repository (RepositoryType): Основной репозиторий сервиса.
            month_repository (MonthRepository): Репозиторий месяцев.
        """
        self.repository = repository
        self.month_repository = month_repository

    async def get_by_id(self, db_session: AsyncSession, *, obj_id: int) -> ModelType:
        """
        Получает объект по ID или выбрасывает исключение, если объект не найден.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            obj_id (int): ID объекта.

        Returns:
            ModelType: Найденный объект.

        Raises:
            NotFoundException: Если объект с указанным ID не найден.
        """
        model_name = self.repository.model.__name__

        db_obj = await self.repository.get_by_id(db_session, obj_id=obj_id)

        if db_obj is None:
            raise NotFoundException(
                message=f"{model_name} с ID {obj_id} не найден.",
                error_type=f"{model_name.lower()}_not_found",
            )

        return db_obj

    async def get_month_or_404(self, db_session: AsyncSession, *, month_id: int) -> Month:
        """
        Получает месяц по ID.

        Raises:
            NotFoundException: Если месяц не найден.
        """
        month = await self.month_repository.get_by_id(db_session, obj_id=month_id)

        if month is None:
            log.warning(f"Месяц ID {month_id} не найден.")
            raise NotFoundException(message=f"Месяц с ID {month_id} не найден.", error_type="month_not_found")

        return month

    @asynccontextmanager
    async def unit_of_work(self, db_session: AsyncSession, *, action: str) -> AsyncIterator[None]:
        """
        Выполняет блок как одну транзакцию.

        Фиксирует транзакцию после блока. При любой ошибке (в блоке или при commit)
        откатывает ее, логирует и пробрасывает исключение дальше.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            action (str): Описание операции для лога.
        """
        try:
            yield
            await db_session.commit()
        except IntegrityError as exc:
            # Нарушение ограничения отдается клиенту как 409
            await db_session.rollback()
            log.warning(f"Конфликт данных при операции '{action}': {exc.orig}")
            raise
        except Exception as exc:
            await db_session.rollback()
            log.opt(exception=exc).error(f"Ошибка при операции '{action}': {exc}")
            raise
