"""
Машина состояний экрана приложения.

Состояния: loading -> setup -> record -> dashboard. Переходы определяются событиями
и снимком данных месяца (есть ли месяц, зафиксирован ли он, сколько привычек,
записан ли сегодняшний день).
"""

from enum import Enum
from typing import NamedTuple


class ViewMode(str, Enum):
    """Экраны приложения."""

    LOADING = "loading"
    SETUP = "setup"
    RECORD = "record"
    DASHBOARD = "dashboard"


class ViewEvent(str, Enum):
    """События, меняющие экран."""

    DATA_LOADED = "data_loaded"  # Данные месяца загружены
    SETUP_COMPLETED = "setup_completed"  # Структура привычек зафиксирована
    RECORD_SAVED = "record_saved"  # День записан, данные перезагружены
    NEW_RECORD_REQUESTED = "new_record_requested"  # Пользователь хочет записать день с дашборда


class MonthSnapshot(NamedTuple):
    """Результаты запросов, по которым выбирается экран."""

    month_exists: bool
    locked: bool = False
    habits_count: int = 0
    has_today_record: bool = False


class InvalidTransitionError(ValueError):
    """Событие недопустимо в текущем состоянии."""

    def __init__(self, current: ViewMode, event: ViewEvent):
        self.current = current
        self.event = event
        super().__init__(f"Событие '{event.value}' недопустимо в состоянии '{current.value}'")


# None - целевой экран вычисляется по снимку данных
TRANSITIONS: dict[tuple[ViewMode, ViewEvent], ViewMode | None] = {
    (ViewMode.LOADING, ViewEvent.DATA_LOADED): None,
    (ViewMode.SETUP, ViewEvent.SETUP_COMPLETED): ViewMode.RECORD,
    (ViewMode.RECORD, ViewEvent.RECORD_SAVED): None,
    (ViewMode.DASHBOARD, ViewEvent.NEW_RECORD_REQUESTED): ViewMode.RECORD,
}


def resolve_view_mode(snapshot: MonthSnapshot) -> ViewMode:
    """
    Выбирает экран по снимку данных.

    Нет месяца - loading; месяц не зафиксирован и без привычек - setup;
    сегодняшний день не записан - record; иначе - dashboard.
    """
    if not snapshot.month_exists:
        return ViewMode.LOADING

    if not snapshot.locked and snapshot.habits_count == 0:
        return ViewMode.SETUP

    if not snapshot.has_today_record:
        return ViewMode.RECORD

    return ViewMode.DASHBOARD


def next_view_mode(current: ViewMode, event: ViewEvent, snapshot: MonthSnapshot) -> ViewMode:
    """
    Применяет событие к текущему экрану.

    Raises:
        InvalidTransitionError: Если пары (экран, событие) нет в таблице переходов
            или настройка завершается на незафиксированном месяце.
    """
    try:
        target = TRANSITIONS[(current, event)]
    except KeyError:
        raise InvalidTransitionError(current, event) from None

    # Настройка завершается только фиксацией месяца
    if event is ViewEvent.SETUP_COMPLETED and not snapshot.locked:
        raise InvalidTransitionError(current, event)

    if target is None:
        return resolve_view_mode(snapshot)

    return target
