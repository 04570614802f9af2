from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.core.database import get_db_session
from src.api.core.dependencies import (
    get_app_state_service,
    get_daily_record_service,
    get_dashboard_service,
    get_habit_service,
    get_month_service,
)
from src.api.main import app
from src.api.services import AppStateService, DailyRecordService, DashboardService, HabitService, MonthService

# --- ФИКСТУРЫ, СПЕЦИФИЧНЫЕ ДЛЯ ТЕСТИРОВАНИЯ API ---


@pytest.fixture
def services() -> dict[str, MagicMock]:
    """Сервисы-заглушки: роуты проверяются отдельно от бизнес-логики."""
    return {
        "month": MagicMock(spec=MonthService),
        "habit": MagicMock(spec=HabitService),
        "record": MagicMock(spec=DailyRecordService),
        "dashboard": MagicMock(spec=DashboardService),
        "app_state": MagicMock(spec=AppStateService),
    }


@pytest_asyncio.fixture(scope="function")
async def test_client(db_session: MagicMock, services: dict[str, MagicMock]) -> AsyncGenerator[AsyncClient, None]:
    """
    Создает тестовый клиент FastAPI для каждого API-теста.

    Сессия БД и сервисы подменяются через dependency_overrides.
    """

    async def override_get_db_session() -> AsyncGenerator[MagicMock, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_month_service] = lambda: services["month"]
    app.dependency_overrides[get_habit_service] = lambda: services["habit"]
    app.dependency_overrides[get_daily_record_service] = lambda: services["record"]
    app.dependency_overrides[get_dashboard_service] = lambda: services["dashboard"]
    app.dependency_overrides[get_app_state_service] = lambda: services["app_state"]

    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def failing_db_session(db_session: MagicMock) -> MagicMock:
    """Сессия, у которой запрос к БД падает с ошибкой соединения."""
    db_session.execute = AsyncMock(side_effect=ConnectionRefusedError("connection refused"))
    return db_session
