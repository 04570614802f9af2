"""Базовый репозиторий: общие запросы и CRUD для моделей SQLAlchemy."""

from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.logging import api_log as log
from src.api.models import Base as SQLAlchemyBaseModel

ModelType = TypeVar("ModelType", bound=SQLAlchemyBaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class BaseRepository(Generic[ModelType, CreateSchemaType]):
    """
    Асинхронный репозиторий одной модели.

    Репозиторий добавляет объекты в сессию и делает flush, чтобы получить
    сгенерированные БД значения. commit и rollback выполняет сервис.

    Attributes:
        model: Класс модели SQLAlchemy.
    """

    def __init__(self, model: type[ModelType]):
        self.model = model

    def _select(self, *filters: ColumnElement[bool]) -> Select[tuple[ModelType]]:
        statement = select(self.model)
        return statement.where(*filters) if filters else statement

    async def get_by_id(self, db_session: AsyncSession, *, obj_id: int) -> ModelType | None:
        """
        Получает объект по первичному ключу.

        Returns:
            ModelType | None: Объект или None, если его нет.
        """
        instance = await db_session.get(self.model, obj_id)
        log.debug(f"{self.model.__name__} ID {obj_id}: {'найден' if instance else 'не найден'}.")
        return instance

    async def get_by_filter_first_or_none(
        self, db_session: AsyncSession, *filters: ColumnElement[bool]
    ) -> ModelType | None:
        """Первый объект, удовлетворяющий всем фильтрам, или None."""
        result = await db_session.execute(self._select(*filters).limit(1))
        return result.scalar_one_or_none()

    async def get_multi_by_filter(
        self,
        db_session: AsyncSession,
        *filters: ColumnElement[bool],
        limit: int | None = None,
        order_by: Sequence[ColumnElement[Any]] = (),
    ) -> Sequence[ModelType]:
        """
        Список объектов по фильтрам (объединяются через AND).

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            *filters (ColumnElement[bool]): Условия SQLAlchemy.
            limit (int | None): Максимум объектов, None - без ограничения.
            order_by (Sequence[ColumnElement[Any]]): Выражения сортировки.

        Returns:
            Sequence[ModelType]: Найденные объекты.
        """
        statement = self._select(*filters)

        if order_by:
            statement = statement.order_by(*order_by)

        if limit is not None:
            statement = statement.limit(limit)

        result = await db_session.execute(statement)
        instances = result.scalars().all()
        log.debug(f"{self.model.__name__}: найдено {len(instances)}.")
        return instances

    async def count_by_filter(self, db_session: AsyncSession, *filters: ColumnElement[bool]) -> int:
        """Количество объектов, удовлетворяющих фильтрам."""
        statement = select(func.count()).select_from(self.model)
        if filters:
            statement = statement.where(*filters)

        result = await db_session.execute(statement)
        return int(result.scalar_one())

    async def create(self, db_session: AsyncSession, *, obj_in: CreateSchemaType | dict[str, Any]) -> ModelType:
        """
        Создает объект, выполняет flush и перечитывает значения, сгенерированные БД.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            obj_in (CreateSchemaType | dict[str, Any]): Схема или словарь значений полей.

        Returns:
            ModelType: Созданный объект с ID.
        """
        values = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()

        db_obj = self.model(**values)
        db_session.add(db_obj)
        await db_session.flush()
        await db_session.refresh(db_obj)

        log.info(f"Создан {db_obj!r}.")
        return db_obj

    async def update(self, db_session: AsyncSession, *, db_obj: ModelType, obj_in: dict[str, Any]) -> ModelType:
        """
        Обновляет поля объекта.

        Raises:
            ValueError: Если у модели нет одного из полей.
        """
        unknown = [field for field in obj_in if not hasattr(self.model, field)]
        if unknown:
            raise ValueError(f"У модели {self.model.__name__} нет полей {unknown}.")

        for field, value in obj_in.items():
            setattr(db_obj, field, value)

        await db_session.flush()
        await db_session.refresh(db_obj)

        log.info(f"Обновлен {db_obj!r}: {obj_in}.")
        return db_obj
