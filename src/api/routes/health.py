"""Эндпоинт проверки работоспособности сервиса."""

from typing import Literal

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.api.core.dependencies import DBSession
from src.api.core.logging import api_log as log

router = APIRouter(tags=["Health Check"])

DependencyStatus = Literal["ok", "error"]


class DependenciesStatus(BaseModel):
    database: DependencyStatus


class HealthSchema(BaseModel):
    api_status: DependencyStatus = "ok"
    dependencies: DependenciesStatus


@router.get(
    "/healthcheck",
    response_model=HealthSchema,
    summary="Проверка работоспособности сервиса и его зависимостей",
    description="Выполняет `SELECT 1`. Если база данных недоступна, отвечает HTTP 503.",
)
async def health_check(response: Response, db_session: DBSession) -> HealthSchema:
    database: DependencyStatus = "ok"

    try:
        await db_session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        log.warning(f"Health check: база данных недоступна ({exc}).")
        database = "error"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthSchema(dependencies=DependenciesStatus(database=database))
