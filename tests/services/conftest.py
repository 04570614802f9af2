from unittest.mock import MagicMock

import pytest

from src.api.models import DailyRecord, Habit, HabitCompletion, Month
from src.api.repositories import (
    DailyRecordRepository,
    HabitCompletionRepository,
    HabitRepository,
    MonthRepository,
)
from src.api.services import DailyRecordService, HabitService, MonthService

# --- Репозитории-заглушки: асинхронные методы автоматически становятся AsyncMock ---


@pytest.fixture
def month_repository() -> MagicMock:
    repository = MagicMock(spec=MonthRepository)
    repository.model = Month
    return repository


@pytest.fixture
def habit_repository() -> MagicMock:
    repository = MagicMock(spec=HabitRepository)
    repository.model = Habit
    return repository


@pytest.fixture
def record_repository() -> MagicMock:
    repository = MagicMock(spec=DailyRecordRepository)
    repository.model = DailyRecord
    return repository


@pytest.fixture
def completion_repository() -> MagicMock:
    # build_completions - синхронный метод, используем реальную реализацию
    repository = MagicMock(spec=HabitCompletionRepository)
    repository.model = HabitCompletion
    repository.build_completions.side_effect = HabitCompletionRepository(HabitCompletion).build_completions
    return repository


@pytest.fixture
def month_service(month_repository, habit_repository) -> MonthService:
    return MonthService(month_repository=month_repository, habit_repository=habit_repository)


@pytest.fixture
def habit_service(habit_repository, month_repository) -> HabitService:
    return HabitService(habit_repository=habit_repository, month_repository=month_repository)


@pytest.fixture
def record_service(record_repository, completion_repository, habit_repository, month_repository) -> DailyRecordService:
    return DailyRecordService(
        record_repository=record_repository,
        completion_repository=completion_repository,
        habit_repository=habit_repository,
        month_repository=month_repository,
    )
