"""
Эндпоинты для дневных записей (DailyRecords) и отметок выполнения привычек.
"""

from typing import Sequence

from fastapi import APIRouter, Path, status

from src.api.core.dependencies import DailyRecordSvc, DBSession
from src.api.core.exceptions import NotFoundException
from src.api.models import DailyRecord, HabitCompletion
from src.api.schemas import (
    DailyRecordSchemaCreate,
    DailyRecordSchemaMissed,
    DailyRecordSchemaRead,
    DailyRecordSchemaReadWithCompletions,
    HabitCompletionSchemaRead,
)

router = APIRouter(tags=["Daily Records"])

MonthIDPath = Path(..., title="ID Месяца", description="Идентификатор месяца", gt=0)


@router.get(
    "/months/{month_id}/records",
    response_model=Sequence[DailyRecordSchemaRead],
    status_code=status.HTTP_200_OK,
    summary="Получение записей месяца",
    description="Возвращает записи месяца в порядке возрастания даты.",
)
async def get_records(
    db_session: DBSession,
    record_service: DailyRecordSvc,
    month_id: int = MonthIDPath,
) -> Sequence[DailyRecord]:
    return await record_service.get_records_for_month(db_session, month_id=month_id)


@router.post(
    "/months/{month_id}/records",
    response_model=DailyRecordSchemaReadWithCompletions,
    status_code=status.HTTP_201_CREATED,
    summary="Запись дня",
    description=(
        "Создает запись дня (по умолчанию - сегодня) с отметками привычек. "
        "Оценка дня вычисляется сервером по оценочным привычкам."
    ),
)
async def record_day(
    db_session: DBSession,
    record_service: DailyRecordSvc,
    record_in: DailyRecordSchemaCreate,
    month_id: int = MonthIDPath,
) -> DailyRecord:
    """
    Записывает день.

    - Привычки без отметки в запросе считаются невыполненными.
    - Повторная запись той же даты - 409.
    """
    return await record_service.record_day(db_session, month_id=month_id, record_in=record_in)


@router.post(
    "/months/{month_id}/records/missed",
    response_model=DailyRecordSchemaRead,
    status_code=status.HTTP_201_CREATED,
    summary="Отметка пропущенного дня",
    description="Создает незаписанную запись (recorded=false) на дату. Такой день прерывает серию.",
)
async def mark_day_missed(
    db_session: DBSession,
    record_service: DailyRecordSvc,
    missed_in: DailyRecordSchemaMissed,
    month_id: int = MonthIDPath,
) -> DailyRecord:
    return await record_service.mark_day_missed(db_session, month_id=month_id, record_date=missed_in.date)


@router.get(
    "/months/{month_id}/records/today",
    response_model=DailyRecordSchemaRead,
    status_code=status.HTTP_200_OK,
    summary="Получение сегодняшней записи",
)
async def get_today_record(
    db_session: DBSession,
    record_service: DailyRecordSvc,
    month_id: int = MonthIDPath,
) -> DailyRecord:
    record = await record_service.get_today_record(db_session, month_id=month_id)

    if record is None:
        raise NotFoundException(message="Сегодняшний день еще не записан.", error_type="today_record_not_found")

    return record


@router.get(
    "/records/{record_id}/completions",
    response_model=Sequence[HabitCompletionSchemaRead],
    status_code=status.HTTP_200_OK,
    summary="Получение отметок выполнения записи",
)
async def get_record_completions(
    db_session: DBSession,
    record_service: DailyRecordSvc,
    record_id: int = Path(..., title="ID Записи", gt=0),
) -> Sequence[HabitCompletion]:
    return await record_service.get_completions_for_record(db_session, record_id=record_id)
