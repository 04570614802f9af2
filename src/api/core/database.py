"""Асинхронный движок SQLAlchemy и сессии для запросов API."""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import settings
from .exceptions import AppException
from .logging import api_log as log


def build_engine(database_url: str, **engine_kwargs: Any) -> AsyncEngine:
    """Движок с проверкой соединений из пула и их пересозданием раз в час."""
    engine_kwargs.setdefault("echo", settings.DEVELOPMENT)
    engine_kwargs.setdefault("pool_pre_ping", True)
    engine_kwargs.setdefault("pool_recycle", 3600)
    return create_async_engine(database_url, **engine_kwargs)


class Database:
    """
    Владелец движка и фабрики сессий.

    `connect` вызывается при старте приложения, `disconnect` - при остановке.
    До `connect` получить сессию нельзя.
    """

    def __init__(self) -> None:
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self.session_factory is not None

    async def connect(self, database_url: str | None = None, **engine_kwargs: Any) -> None:
        """
        Создает движок и проверяет соединение запросом `SELECT 1`.

        Args:
            database_url (str | None): URL базы. По умолчанию `settings.DATABASE_URL`.
            **engine_kwargs: Параметры create_async_engine.

        Raises:
            RuntimeError: Если база данных не ответила.
        """
        self.engine = build_engine(database_url or settings.DATABASE_URL, **engine_kwargs)
        # Транзакции фиксируют сервисы, flush делают репозитории
        self.session_factory = async_sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False)

        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
        except Exception as exc:
            log.critical(f"База данных {settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME} недоступна: {exc}")
            await self.disconnect()
            raise RuntimeError("Не удалось подключиться к базе данных.") from exc

        log.success(f"Подключение к базе данных {settings.DB_NAME} установлено.")

    async def disconnect(self) -> None:
        if self.engine is None:
            return

        await self.engine.dispose()
        self.engine = None
        self.session_factory = None
        log.info("Пул соединений с базой данных закрыт.")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Сессия на время блока. Незафиксированные изменения откатываются при любой ошибке.

        Raises:
            RuntimeError: Если `connect` еще не вызывался.
        """
        if self.session_factory is None:
            raise RuntimeError("База данных не инициализирована, сначала вызовите `await db.connect()`.")

        async with self.session_factory() as session:
            try:
                yield session
            except (AppException, IntegrityError):
                # Ожидаемые ошибки (404, 409, ...) уже описаны в ответе клиенту
                await session.rollback()
                raise
            except Exception as exc:
                # Трейсбек только в режиме разработки
                traceback = exc if settings.DEVELOPMENT else None
                log.opt(exception=traceback).error(f"Ошибка во время сессии БД, откат: {exc}")
                await session.rollback()
                raise


db = Database()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Зависимость FastAPI: одна сессия на запрос."""
    async with db.session() as session:
        yield session
