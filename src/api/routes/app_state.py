"""
Эндпоинты состояния экрана приложения.
"""

from fastapi import APIRouter, status

from src.api.core.dependencies import AppStateSvc, DBSession
from src.api.schemas import AppStateEventSchema, AppStateSchemaRead

router = APIRouter(prefix="/app/state", tags=["App State"])


@router.get(
    "",
    response_model=AppStateSchemaRead,
    status_code=status.HTTP_200_OK,
    summary="Текущий экран приложения",
    description=(
        "Загружает текущий месяц (создает при отсутствии) и выбирает экран: "
        "setup - нужно определить привычки, record - нужно записать сегодняшний день, dashboard - статистика."
    ),
)
async def get_app_state(db_session: DBSession, app_state_service: AppStateSvc) -> AppStateSchemaRead:
    return await app_state_service.get_state(db_session)


@router.post(
    "/events",
    response_model=AppStateSchemaRead,
    status_code=status.HTTP_200_OK,
    summary="Применение события к экрану",
    description="Переход машины состояний экрана. Недопустимое событие для текущего экрана - 400.",
)
async def apply_app_event(
    db_session: DBSession,
    app_state_service: AppStateSvc,
    event_in: AppStateEventSchema,
) -> AppStateSchemaRead:
    return await app_state_service.apply_event(db_session, current=event_in.current, event=event_in.event)
