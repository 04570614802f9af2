"""Сервис выбора экрана приложения."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions import BadRequestException
from src.api.core.logging import api_log as log
from src.api.repositories import HabitRepository
from src.api.schemas import AppStateSchemaRead
from src.api.utils.view_state import (
    InvalidTransitionError,
    MonthSnapshot,
    ViewEvent,
    ViewMode,
    next_view_mode,
)

from .daily_record_service import DailyRecordService
from .month_service import MonthService


class AppStateService:
    """
    Сервис состояния экрана.

    Собирает снимок данных текущего месяца и прогоняет его через машину состояний.
    """

    def __init__(
        self,
        month_service: MonthService,
        record_service: DailyRecordService,
        habit_repository: HabitRepository,
    ):
        """
        Инициализирует сервис состояния экрана.

        Args:
            month_service (MonthService): Сервис месяцев.
            record_service (DailyRecordService): Сервис дневных записей.
            habit_repository (HabitRepository): Репозиторий привычек.
        """
        self.month_service = month_service
        self.record_service = record_service
        self.habit_repository = habit_repository

    async def _load_state(self, db_session: AsyncSession) -> tuple[int, MonthSnapshot]:
        """Загружает (создает) текущий месяц и собирает снимок данных."""
        month = await self.month_service.get_or_create_current_month(db_session)

        habits_count = await self.habit_repository.count_habits_by_month_id(db_session, month_id=month.id)
        today_record = await self.record_service.get_today_record(db_session, month_id=month.id)

        snapshot = MonthSnapshot(
            month_exists=True,
            locked=month.locked,
            habits_count=habits_count,
            has_today_record=today_record is not None,
        )
        return month.id, snapshot

    def _to_schema(self, view_mode: ViewMode, month_id: int | None, snapshot: MonthSnapshot) -> AppStateSchemaRead:
        return AppStateSchemaRead(
            view_mode=view_mode,
            month_id=month_id,
            locked=snapshot.locked,
            habits_count=snapshot.habits_count,
            has_today_record=snapshot.has_today_record,
        )

    async def get_state(self, db_session: AsyncSession) -> AppStateSchemaRead:
        """
        Определяет экран после загрузки данных (событие data_loaded из состояния loading).

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.

        Returns:
            AppStateSchemaRead: Экран и снимок данных.
        """
        return await self.apply_event(db_session, current=ViewMode.LOADING, event=ViewEvent.DATA_LOADED)

    async def apply_event(self, db_session: AsyncSession, *, current: ViewMode, event: ViewEvent) -> AppStateSchemaRead:
        """
        Применяет событие к текущему экрану по свежему снимку данных.

        Завершение настройки (setup_completed) фиксирует текущий месяц.

        Args:
            db_session (AsyncSession): Асинхронная сессия базы данных.
            current (ViewMode): Текущий экран.
            event (ViewEvent): Событие.

        Returns:
            AppStateSchemaRead: Новый экран и снимок данных.

        Raises:
            BadRequestException: Если событие недопустимо в текущем состоянии
                или месяц без привычек нельзя зафиксировать.
        """
        month_id, snapshot = await self._load_state(db_session)

        if current is ViewMode.SETUP and event is ViewEvent.SETUP_COMPLETED:
            month = await self.month_service.lock_month(db_session, month_id=month_id)
            snapshot = snapshot._replace(locked=month.locked)

        try:
            view_mode = next_view_mode(current, event, snapshot)
        except InvalidTransitionError as exc:
            raise BadRequestException(
                message=str(exc), error_type="invalid_view_transition", loc=["body", "event"]
            ) from exc

        log.debug(f"Экран: {current.value} --{event.value}--> {view_mode.value}")
        return self._to_schema(view_mode, month_id, snapshot)
