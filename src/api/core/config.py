"""Настройки API."""

from urllib.parse import quote_plus

from pydantic import Field, computed_field

from src.core_shared.config import AppSettings


class Settings(AppSettings):
    """Настройки сервера, базы данных и расчета статистики."""

    # --- Сервер ---
    API_HOST: str = "0.0.0.0"  # noqa: S104 - слушаем все интерфейсы внутри контейнера
    API_PORT: int = 8000
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:5173"],
        description="Источники веб-клиента, которым разрешены запросы к API",
    )

    # --- PostgreSQL ---
    DB_NAME: str = Field(default="discipline_telemetry_db")
    DB_USER: str = Field(default="telemetry_user")
    DB_PASSWORD: str = Field(..., description="Пароль пользователя БД (обязателен)")
    DB_HOST: str = Field(default="db", description="Хост БД (имя сервиса в docker compose)")
    DB_PORT: int = Field(default=5432)

    # --- Трекинг ---
    TIMEZONE: str = Field(default="UTC", description="IANA часовой пояс, в котором определяется 'сегодня'")
    STREAK_THRESHOLD_SCORE: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Минимальная оценка дня, продолжающая серию",
    )
    RECENT_RECORDS_LIMIT: int = Field(default=10, gt=0, description="Сколько последних записей показывает дашборд")

    @computed_field(repr=False)  # type: ignore[prop-decorator]
    @property
    def DATABASE_URL(self) -> str:
        """URL async-движка SQLAlchemy (драйвер psycopg 3)."""
        user = quote_plus(self.DB_USER)
        password = quote_plus(self.DB_PASSWORD)
        return f"postgresql+psycopg://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


settings = Settings()  # type: ignore[call-arg]
