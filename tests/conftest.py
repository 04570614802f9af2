from datetime import date, datetime, timezone
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.api.core.config import settings
from src.api.models import DailyRecord, Habit, HabitCompletion, Month

CREATED_AT = datetime(2026, 10, 1, 8, 0, tzinfo=timezone.utc)


# --- ФИКСТУРА БЕЗОПАСНОСТИ ---


@pytest.fixture(scope="session", autouse=True)
def verify_test_environment():
    """
    Проверяет, что тесты запускаются с корректными настройками окружения.

    Выполняется автоматически перед началом тестовой сессии.
    """
    assert settings.DEVELOPMENT is True, (
        "❌ ОШИБКА КОНФИГУРАЦИИ: Тесты должны запускаться в режиме разработки/тестирования (DEVELOPMENT=True). "
        "Проверьте настройки [tool.pytest.ini_options] в pyproject.toml"
    )

    assert "test" in settings.DB_NAME, (
        f"❌ ОПАСНОСТЬ: Тесты пытаются использовать базу '{settings.DB_NAME}'. "
        "Тестовая база должна содержать 'test' в названии."
    )

    assert not settings.SENTRY_DSN, "❌ ОШИБКА КОНФИГУРАЦИИ: Sentry не должен быть включен в тестах."


# --- ФАБРИКИ МОДЕЛЕЙ (без БД) ---


@pytest.fixture
def month_factory() -> Callable[..., Month]:
    def _build(id: int = 1, year: int = 2026, month: int = 10, locked: bool = False) -> Month:
        return Month(id=id, year=year, month=month, locked=locked, created_at=CREATED_AT, updated_at=CREATED_AT)

    return _build


@pytest.fixture
def habit_factory() -> Callable[..., Habit]:
    def _build(id: int, name: str = "Habit", is_scoring: bool = True, month_id: int = 1, sort_order: int = 0) -> Habit:
        return Habit(
            id=id,
            month_id=month_id,
            name=name,
            is_scoring=is_scoring,
            sort_order=sort_order,
            created_at=CREATED_AT,
            updated_at=CREATED_AT,
        )

    return _build


@pytest.fixture
def record_factory() -> Callable[..., DailyRecord]:
    def _build(
        id: int,
        record_date: date,
        score: int = 0,
        recorded: bool = True,
        month_id: int = 1,
        notes: str = "",
    ) -> DailyRecord:
        return DailyRecord(
            id=id,
            month_id=month_id,
            date=record_date,
            recorded=recorded,
            score=score,
            notes=notes,
            recorded_at=CREATED_AT if recorded else None,
            created_at=CREATED_AT,
            updated_at=CREATED_AT,
        )

    return _build


@pytest.fixture
def completion_factory() -> Callable[..., HabitCompletion]:
    def _build(id: int, habit_id: int, completed: bool = True, daily_record_id: int = 1, value: float | None = None):
        return HabitCompletion(
            id=id,
            daily_record_id=daily_record_id,
            habit_id=habit_id,
            completed=completed,
            value=value,
            created_at=CREATED_AT,
            updated_at=CREATED_AT,
        )

    return _build


# --- СЕССИЯ БД ---


@pytest.fixture
def db_session() -> MagicMock:
    """Заглушка AsyncSession: тесты проверяют вызовы commit/rollback без реальной БД."""
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    return session
