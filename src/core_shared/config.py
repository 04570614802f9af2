"""Общие настройки сервисов: метаданные проекта, режим работы, логирование, Sentry."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Базовый класс настроек.

    Значения читаются из переменных окружения и файла `.env` (регистр имен не важен).
    Наследники добавляют настройки конкретного сервиса.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    PROJECT_NAME: str = "Discipline Telemetry"
    API_VERSION: str = "0.1.0"

    DEVELOPMENT: bool = Field(default=False, description="Режим разработки/тестирования")

    # --- Логирование ---
    LOG_LEVEL: str = Field(default="INFO", description="Минимальный уровень логов")
    LOG_DIR: str = Field(default="logs", description="Каталог файлов логов (пустая строка - без файлов)")
    LOG_JSON: bool = Field(default=False, description="Писать логи в формате JSON")

    # --- Sentry ---
    SENTRY_DSN: str | None = Field(default=None, description="DSN Sentry. Без него мониторинг выключен")

    @property
    def PRODUCTION(self) -> bool:
        """Все, что не разработка, считается продакшеном."""
        return not self.DEVELOPMENT
