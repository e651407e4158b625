from __future__ import annotations

from typing import Any, Sequence, cast

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from foodstory.api.middleware.request_id import get_request_id
from foodstory.application.use_cases.persistence import MenuPersistenceError
from foodstory.domain.menu.entities import DishNotFoundError, MenuValidationError
from foodstory.domain.side.entities import SideNotFoundError


def _error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "code": code,
            "details": details or {},
            "requestId": get_request_id(),
        },
    )


def _exception_handler(status_code: int, code: str):
    async def handler(_: Request, exc: Exception) -> JSONResponse:
        details = getattr(exc, "details", None)
        return _error_response(
            status_code=status_code,
            code=code,
            message=str(exc),
            details=details if isinstance(details, dict) else None,
        )

    return handler


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else "request failed"
    code = "HTTP_ERROR"
    if http_exc.status_code == 404:
        code = "NOT_FOUND"
    elif http_exc.status_code == 400:
        code = "BAD_REQUEST"
    elif http_exc.status_code == 405:
        code = "METHOD_NOT_ALLOWED"
    return _error_response(
        status_code=http_exc.status_code,
        code=code,
        message=message,
    )


_FIELD_MESSAGES = {
    "dish_id": "ID de plat invalide",
    "side_id": "ID d'accompagnement invalide",
    "categorie": "Catégorie invalide",
    "categorieSource": "Catégorie invalide",
    "categorieDestination": "Catégorie invalide",
}


def _validation_message(errors: Sequence[Any]) -> str:
    for error in errors:
        for part in error.get("loc", ()):
            if part in _FIELD_MESSAGES:
                return _FIELD_MESSAGES[part]
    return "Données de requête invalides"


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    errors = validation_exc.errors()
    return _error_response(
        status_code=400,
        code="INVALID_REQUEST",
        message=_validation_message(errors),
        details={"errors": jsonable_encoder(errors)},
    )


async def _unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    return _error_response(
        status_code=500,
        code="INTERNAL_ERROR",
        message="Erreur interne du serveur",
    )


def register_exception_handlers(app: FastAPI) -> None:
    mappings: list[tuple[type[Exception], int, str]] = [
        (MenuValidationError, 400, "INVALID_MENU_DATA"),
        (DishNotFoundError, 404, "DISH_NOT_FOUND"),
        (SideNotFoundError, 404, "SIDE_NOT_FOUND"),
        (MenuPersistenceError, 500, "PERSISTENCE_FAILED"),
    ]

    for exc_cls, status_code, code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code))

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
