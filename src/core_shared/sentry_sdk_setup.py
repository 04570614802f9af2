"""Подключение мониторинга ошибок Sentry."""

import logging
from typing import Any, Callable, Protocol

import sentry_sdk
from loguru import logger
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.loguru import LoguruIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

log = logger.bind(service_name="Sentry")

Event = dict[str, Any]
BeforeSend = Callable[[Event, dict[str, Any]], Event | None]


class SentrySettingsProtocol(Protocol):
    """Настройки, из которых собирается конфигурация Sentry."""

    SENTRY_DSN: str | None
    PROJECT_NAME: str
    API_VERSION: str

    @property
    def PRODUCTION(self) -> bool: ...


def build_sentry_options(settings: SentrySettingsProtocol) -> dict[str, str | float]:
    """
    Окружение, релиз и доля семплирования трейсов/профилей.

    В продакшене семплируется 10%, в разработке - все.
    """
    production = settings.PRODUCTION
    sample_rate = 0.1 if production else 1.0

    return {
        "environment": "production" if production else "development",
        "release": f"{settings.PROJECT_NAME}@{settings.API_VERSION}",
        "traces_sample_rate": sample_rate,
        "profiles_sample_rate": sample_rate,
    }


def make_before_send(ignored_exceptions: tuple[type[BaseException], ...]) -> BeforeSend:
    """Фильтр событий: исключения из `ignored_exceptions` в Sentry не отправляются."""

    def before_send(event: Event, hint: dict[str, Any]) -> Event | None:
        exc_info = hint.get("exc_info")
        if exc_info and isinstance(exc_info[1], ignored_exceptions):
            return None
        return event

    return before_send


def setup_sentry(
    settings: SentrySettingsProtocol,
    log_level: str,
    ignored_exceptions: tuple[type[BaseException], ...] = (),
) -> bool:
    """
    Инициализирует Sentry SDK.

    Args:
        settings (SentrySettingsProtocol): Настройки с DSN и метаданными релиза.
        log_level (str): Уровень логов, попадающих в breadcrumbs.
        ignored_exceptions: Ожидаемые исключения (ответы 4xx), которые не являются ошибками.

    Returns:
        bool: True, если SDK инициализирован.
    """
    if not settings.SENTRY_DSN:
        log.info("SENTRY_DSN не задан, мониторинг Sentry выключен.")
        return False

    options = build_sentry_options(settings)
    breadcrumb_level = logging.getLevelName(log_level.upper())
    if not isinstance(breadcrumb_level, int):
        breadcrumb_level = logging.INFO

    try:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=[
                StarletteIntegration(transaction_style="endpoint"),
                FastApiIntegration(transaction_style="endpoint"),
                SqlalchemyIntegration(),
                LoguruIntegration(level=breadcrumb_level, event_level=logging.ERROR),
            ],
            before_send=make_before_send(ignored_exceptions),
            **options,
        )
    except Exception as exc:
        # Неверный DSN не должен останавливать API
        log.exception(f"Sentry SDK не инициализирован: {exc}")
        return False

    log.info(
        f"Sentry SDK инициализирован: {options['environment']}, релиз {options['release']}, "
        f"трейсы {options['traces_sample_rate']}."
    )
    return True
