"""
Эндпоинты для управления месяцами (Months).
"""

from fastapi import APIRouter, Path, status

from src.api.core.dependencies import DashboardSvc, DBSession, MonthSvc
from src.api.models import Month
from src.api.schemas import DashboardSchema, MonthSchemaRead

router = APIRouter(prefix="/months", tags=["Months"])

MonthIDPath = Path(..., title="ID Месяца", description="Идентификатор месяца", gt=0)


@router.get(
    "/current",
    response_model=MonthSchemaRead,
    status_code=status.HTTP_200_OK,
    summary="Получение текущего месяца",
    description="Возвращает месяц, соответствующий сегодняшней дате. Создает его, если он отсутствует.",
)
async def get_current_month(db_session: DBSession, month_service: MonthSvc) -> Month:
    return await month_service.get_or_create_current_month(db_session)


@router.get(
    "/{month_id}",
    response_model=MonthSchemaRead,
    status_code=status.HTTP_200_OK,
    summary="Получение месяца по ID",
)
async def get_month(db_session: DBSession, month_service: MonthSvc, month_id: int = MonthIDPath) -> Month:
    return await month_service.get_month(db_session, month_id=month_id)


@router.post(
    "/{month_id}/lock",
    response_model=MonthSchemaRead,
    status_code=status.HTTP_200_OK,
    summary="Фиксация структуры привычек месяца",
    description=(
        "Помечает месяц зафиксированным. После этого добавлять привычки нельзя. "
        "Повторный вызов ничего не меняет."
    ),
)
async def lock_month(db_session: DBSession, month_service: MonthSvc, month_id: int = MonthIDPath) -> Month:
    """
    Фиксирует структуру привычек месяца.

    - Месяц без привычек зафиксировать нельзя (400).
    """
    return await month_service.lock_month(db_session, month_id=month_id)


@router.get(
    "/{month_id}/dashboard",
    response_model=DashboardSchema,
    status_code=status.HTTP_200_OK,
    summary="Статистика месяца",
    description="Последняя и средняя оценка, серия, пропуски, направление тренда, линия жизни и последние записи.",
)
async def get_dashboard(
    db_session: DBSession,
    dashboard_service: DashboardSvc,
    month_id: int = MonthIDPath,
) -> DashboardSchema:
    return await dashboard_service.get_dashboard(db_session, month_id=month_id)
