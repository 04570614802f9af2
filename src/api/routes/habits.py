"""
Эндпоинты для управления привычками месяца (Habits).
"""

from typing import Sequence

from fastapi import APIRouter, Path, status

from src.api.core.dependencies import DBSession, HabitSvc
from src.api.models import Habit
from src.api.schemas import HabitSchemaCreate, HabitSchemaRead

router = APIRouter(prefix="/months/{month_id}/habits", tags=["Habits"])

MonthIDPath = Path(..., title="ID Месяца", description="Идентификатор месяца", gt=0)


@router.get(
    "",
    response_model=Sequence[HabitSchemaRead],
    status_code=status.HTTP_200_OK,
    summary="Получение привычек месяца",
    description="Возвращает привычки месяца в порядке sort_order.",
)
async def get_habits(db_session: DBSession, habit_service: HabitSvc, month_id: int = MonthIDPath) -> Sequence[Habit]:
    return await habit_service.get_habits_for_month(db_session, month_id=month_id)


@router.post(
    "",
    response_model=HabitSchemaRead,
    status_code=status.HTTP_201_CREATED,
    summary="Создание привычки",
    description="Добавляет привычку в месяц. Доступно, пока структура месяца не зафиксирована.",
)
async def create_habit(
    db_session: DBSession,
    habit_service: HabitSvc,
    habit_in: HabitSchemaCreate,
    month_id: int = MonthIDPath,
) -> Habit:
    """
    Создает привычку в месяце.

    - `is_scoring=true` - привычка участвует в оценке дня, `false` - только метрика.
    - Без `sort_order` привычка добавляется в конец списка.
    """
    return await habit_service.create_habit_for_month(db_session, month_id=month_id, habit_in=habit_in)
