"""
Исключения приложения и их обработчики.

Сервисы выбрасывают наследников `AppException`, а обработчики FastAPI
превращают их в JSON-ответ в формате, совместимом с ошибками валидации FastAPI:
`{"detail": [{"loc": [...], "msg": "...", "type": "..."}]}`.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from .logging import api_log as log


class AppException(Exception):
    """
    Базовое исключение приложения.

    Attributes:
        status_code: HTTP статус ответа.
        message: Человекочитаемое описание ошибки.
        error_type: Машиночитаемый тип ошибки.
        loc: Расположение ошибки (например, ["body", "date"]).
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_type: str = "internal_error"

    def __init__(self, message: str, error_type: str | None = None, loc: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type or self.default_error_type
        self.loc = loc or []

    def to_detail(self) -> list[dict[str, object]]:
        """Формирует тело `detail` для JSON-ответа."""
        return [{"loc": self.loc, "msg": self.message, "type": self.error_type}]


class BadRequestException(AppException):
    """Некорректный запрос (400)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_error_type = "bad_request"


class NotFoundException(AppException):
    """Объект не найден (404)."""

    status_code = status.HTTP_404_NOT_FOUND
    default_error_type = "not_found"


class ConflictException(AppException):
    """Конфликт с существующими данными (409)."""

    status_code = status.HTTP_409_CONFLICT
    default_error_type = "conflict"


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Обработчик исключений приложения."""
    log.info(f"{request.method} {request.url.path} -> {exc.status_code} ({exc.error_type}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Обработчик нарушений ограничений уникальности/целостности БД."""
    log.warning(f"{request.method} {request.url.path} -> нарушение целостности данных: {exc.orig}")
    conflict = ConflictException(
        message="Запись нарушает ограничения целостности данных.", error_type="integrity_error"
    )
    return JSONResponse(status_code=conflict.status_code, content={"detail": conflict.to_detail()})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Обработчик непредвиденных исключений."""
    log.opt(exception=exc).error(f"Необработанная ошибка при {request.method} {request.url.path}: {exc}")
    internal = AppException(message="Внутренняя ошибка сервера.")
    return JSONResponse(status_code=internal.status_code, content={"detail": internal.to_detail()})


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Регистрирует обработчики исключений в приложении.

    Args:
        app (FastAPI): Экземпляр приложения FastAPI.
    """
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "AppException",
    "BadRequestException",
    "NotFoundException",
    "ConflictException",
    "setup_exception_handlers",
]
