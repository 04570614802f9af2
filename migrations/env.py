import asyncio
import logging

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from src.api.core.config import settings
from src.api.models import Base  # Регистрирует все модели в metadata
from src.core_shared.logging_setup import setup_logger

loguru_logger = setup_logger("Alembic")
logger = loguru_logger.bind(service_name="Alembic")


class InterceptHandler(logging.Handler):
    """Перенаправляет записи стандартного logging (alembic, sqlalchemy) в Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Пропускаем кадры самого logging, чтобы в логе было реальное место вызова
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO, force=True)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

config = context.config
target_metadata = Base.metadata

# URL из alembic.ini (или переданный тестами) имеет приоритет над настройками приложения
database_url = config.get_main_option("sqlalchemy.url") or str(settings.DATABASE_URL)
logger.info(f"Миграции для базы '{settings.DB_NAME}' на {settings.DB_HOST}:{settings.DB_PORT}")


def run_migrations_offline() -> None:
    """Генерирует SQL миграций без подключения к БД."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Применяет миграции через асинхронный движок приложения."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = database_url

    connectable = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
