"""Логгер API."""

from src.core_shared.logging_setup import LogConfig, setup_logger

from .config import settings

api_log = setup_logger(
    service_name="API",
    log_config=LogConfig(log_dir=settings.LOG_DIR, serialize=settings.LOG_JSON),
    log_level_override=settings.LOG_LEVEL,
)
