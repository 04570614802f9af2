"""
Приложение FastAPI трекера дисциплины.

Запуск: `uvicorn src.api.main:app` или `python -m src.api.main`.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.config import settings
from src.api.core.database import db
from src.api.core.exceptions import AppException, setup_exception_handlers
from src.api.core.logging import api_log as log
from src.api.routes import api_router, health
from src.core_shared.sentry_sdk_setup import setup_sentry

if settings.SENTRY_DSN:
    setup_sentry(settings, log_level=settings.LOG_LEVEL, ignored_exceptions=(AppException,))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # pragma: no cover
    """Пул соединений с БД живет столько же, сколько приложение."""
    log.info(f"Запуск '{settings.PROJECT_NAME}', часовой пояс {settings.TIMEZONE}.")
    try:
        await db.connect()
    except Exception as exc:
        log.opt(exception=exc).critical(f"Не удалось подключиться к базе данных при старте: {exc}")
        raise

    try:
        yield
    finally:
        await db.disconnect()
        log.info("Приложение остановлено.")


def create_app() -> FastAPI:
    """
    Собирает приложение: CORS для веб-клиента, обработчики ошибок, роутеры.

    Returns:
        FastAPI: Готовое к запуску приложение.
    """
    mode = "development" if settings.DEVELOPMENT else "production"
    log.info(f"Создание приложения '{settings.PROJECT_NAME}@{settings.API_VERSION}' ({mode}).")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.API_VERSION,
        debug=settings.DEVELOPMENT,
        lifespan=lifespan,
        description="Привычки месяца, оценка дня, серия и линия жизни.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router)

    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("src.api.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEVELOPMENT)
