from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import Database, get_db_session
from src.api.main import app
from src.api.models import Base

# --- ФИКСТУРЫ С НАСТОЯЩЕЙ БАЗОЙ ДАННЫХ ---


@pytest_asyncio.fixture(scope="function")
async def test_db(tmp_path) -> AsyncGenerator[Database, None]:
    """
    Отдельная SQLite-база (aiosqlite) на каждый тест.

    Схема создается по моделям, запросы репозиториев выполняются по-настоящему.
    """
    database = Database()
    await database.connect(f"sqlite+aiosqlite:///{tmp_path / 'integration.db'}", echo=False)

    async with database.engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    yield database

    await database.disconnect()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db: Database) -> AsyncGenerator[AsyncSession, None]:
    """Сессия настоящей БД вместо заглушки из корневого conftest."""
    async with test_db.session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def api_client(test_db: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент API поверх настоящих сервисов и репозиториев.

    Подменяется только источник сессий: каждый запрос получает свою сессию тестовой базы.
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with test_db.session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
