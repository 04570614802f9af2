"""Модуль вспомогательных утилит для работы с датами/таймзонами."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.api.core.logging import api_log as log


def get_timezone(timezone_name: str | None) -> ZoneInfo:
    """
    Возвращает объект часового пояса по имени IANA.

    Если имя пустое или некорректное, используется UTC.

    Args:
        timezone_name (str | None): Имя часового пояса, например "Europe/Moscow".

    Returns:
        ZoneInfo: Часовой пояс.
    """
    try:
        return ZoneInfo(timezone_name or "UTC")
    except (ZoneInfoNotFoundError, ValueError):
        # Опечатка в настройках не должна ронять запрос - откатываемся к UTC
        log.warning(f"Некорректный часовой пояс '{timezone_name}'. Используется UTC по умолчанию.")
        return ZoneInfo("UTC")


def get_today_date(timezone_name: str | None, now: datetime | None = None) -> date:
    """
    Вычисляет текущую дату ("сегодня") в указанном часовом поясе.

    Args:
        timezone_name (str | None): Имя часового пояса.
        now (datetime | None): Момент времени (aware). По умолчанию - текущее время UTC.

    Returns:
        date: Дата "сегодня" для часового пояса.
    """
    utc_now = now or datetime.now(timezone.utc)

    # astimezone() сохраняет абсолютный момент, но пересчитывает календарные поля
    return utc_now.astimezone(get_timezone(timezone_name)).date()


def is_date_in_month(value: date, year: int, month: int) -> bool:
    """Проверяет, что дата относится к указанному месяцу."""
    return value.year == year and value.month == month
