"""
Настройка Loguru для сервисов проекта.

Каждый сервис получает логгер с привязанным `service_name`, который выводится
в каждой строке лога. Логи пишутся в stderr и, если задан каталог, в файл
с ротацией по размеру.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger as _root_logger
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from loguru import Logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[service_name]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class LogConfig(BaseModel):
    """Параметры логирования одного сервиса."""

    level: str = Field(default="INFO")
    format: str = Field(default=DEFAULT_FORMAT)
    serialize: bool = Field(default=False, description="JSON вместо текстового формата")
    log_dir: str | None = Field(default="logs", description="Каталог для файлов; None или '' - только stderr")
    file_name: str = Field(default="{service_name}_{time:YYYY-MM-DD}.log")
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="7 days")


def _prepare_log_dir(log_dir: str | None, service_logger: "Logger") -> Path | None:
    """Создает каталог логов. None - файловые логи выключены или каталог недоступен."""
    if not log_dir:
        return None

    path = Path(log_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        service_logger.warning(f"Каталог логов '{path}' недоступен ({exc}), логи пишутся только в stderr.")
        return None

    return path


def setup_logger(
    service_name: str,
    log_config: LogConfig | None = None,
    log_level_override: str | None = None,
) -> "Logger":
    """
    Перенастраивает Loguru и возвращает логгер сервиса.

    Предыдущие обработчики удаляются, поэтому повторный вызов (например, в тестах
    или при импорте миграций) не дублирует строки.

    Args:
        service_name: Имя сервиса в логах ("API", "Alembic", ...).
        log_config: Параметры логирования. По умолчанию - `LogConfig()`.
        log_level_override: Уровень, заменяющий `log_config.level`.

    Returns:
        Логгер с привязанным `service_name`.
    """
    config = log_config or LogConfig()
    level = (log_level_override or config.level).upper()

    _root_logger.remove()
    service_logger = _root_logger.bind(service_name=service_name)

    service_logger.add(sys.stderr, level=level, format=config.format, colorize=True, serialize=config.serialize)

    log_dir = _prepare_log_dir(config.log_dir, service_logger)
    if log_dir is not None:
        file_name = config.file_name.replace("{service_name}", service_name.lower())
        service_logger.add(
            str(log_dir / file_name),
            level=level,
            format=config.format,
            rotation=config.rotation,
            retention=config.retention,
            serialize=config.serialize,
            encoding="utf-8",
        )

    service_logger.debug(f"Логгер '{service_name}' настроен, уровень {level}.")
    return service_logger


__all__ = ["LogConfig", "setup_logger"]
