"""Зависимости FastAPI: сессия БД, репозитории и сервисы."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.models import DailyRecord, Habit, HabitCompletion, Month
from src.api.repositories import (
    DailyRecordRepository,
    HabitCompletionRepository,
    HabitRepository,
    MonthRepository,
)
from src.api.services import (
    AppStateService,
    DailyRecordService,
    DashboardService,
    HabitService,
    MonthService,
)

from .database import get_db_session

# --- Типизация для инъекции зависимостей ---

# Сессия базы данных
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# --- Фабрики Репозиториев ---


def get_month_repository() -> MonthRepository:
    return MonthRepository(Month)


def get_habit_repository() -> HabitRepository:
    return HabitRepository(Habit)


def get_daily_record_repository() -> DailyRecordRepository:
    return DailyRecordRepository(DailyRecord)


def get_habit_completion_repository() -> HabitCompletionRepository:
    return HabitCompletionRepository(HabitCompletion)


# Типизация для репозиториев
MonthRepo = Annotated[MonthRepository, Depends(get_month_repository)]
HabitRepo = Annotated[HabitRepository, Depends(get_habit_repository)]
DailyRecordRepo = Annotated[DailyRecordRepository, Depends(get_daily_record_repository)]
HabitCompletionRepo = Annotated[HabitCompletionRepository, Depends(get_habit_completion_repository)]


# --- Фабрики Сервисов ---


def get_month_service(repository: MonthRepo, habit_repository: HabitRepo) -> MonthService:
    return MonthService(month_repository=repository, habit_repository=habit_repository)


def get_habit_service(repository: HabitRepo, month_repository: MonthRepo) -> HabitService:
    return HabitService(habit_repository=repository, month_repository=month_repository)


# DailyRecordService зависит от репозиториев записей, отметок, привычек и месяцев
def get_daily_record_service(
    repository: DailyRecordRepo,
    completion_repository: HabitCompletionRepo,
    habit_repository: HabitRepo,
    month_repository: MonthRepo,
) -> DailyRecordService:
    return DailyRecordService(
        record_repository=repository,
        completion_repository=completion_repository,
        habit_repository=habit_repository,
        month_repository=month_repository,
    )


def get_dashboard_service(repository: DailyRecordRepo, month_repository: MonthRepo) -> DashboardService:
    return DashboardService(record_repository=repository, month_repository=month_repository)


# Типизация для сервисов
MonthSvc = Annotated[MonthService, Depends(get_month_service)]
HabitSvc = Annotated[HabitService, Depends(get_habit_service)]
DailyRecordSvc = Annotated[DailyRecordService, Depends(get_daily_record_service)]
DashboardSvc = Annotated[DashboardService, Depends(get_dashboard_service)]


def get_app_state_service(
    month_service: MonthSvc,
    record_service: DailyRecordSvc,
    habit_repository: HabitRepo,
) -> AppStateService:
    return AppStateService(
        month_service=month_service,
        record_service=record_service,
        habit_repository=habit_repository,
    )


AppStateSvc = Annotated[AppStateService, Depends(get_app_state_service)]
