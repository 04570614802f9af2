"""Роутеры API. Все ресурсы трекера подключаются под общим префиксом /v1."""

from fastapi import APIRouter

from . import app_state, daily_records, habits, health, months

api_router = APIRouter(prefix="/v1")

for module in (months, habits, daily_records, app_state):
    api_router.include_router(module.router)

__all__ = ["api_router", "health"]
