from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from foodstory.api.error_handling import register_exception_handlers
from foodstory.api.middleware.request_id import RequestIDMiddleware
from foodstory.api.routes.dishes import router as dishes_router
from foodstory.api.routes.health import router as health_router
from foodstory.api.routes.menus import router as menus_router
from foodstory.api.routes.metrics import router as metrics_router
from foodstory.api.routes.sides import router as sides_router
from foodstory.application.ports.repositories import MenuStore
from foodstory.infrastructure.observability.logging_config import configure_logging
from foodstory.infrastructure.observability.otel import configure_otel
from foodstory.infrastructure.storage.json_store import build_menu_store

logger = logging.getLogger("foodstory.api.access")

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)


def _cors_allow_origins() -> list[str]:
    env = os.getenv("APP_ENV", "dev").lower()

    # Dev/test: unblock everything (no credentials allowed)
    if env in {"dev", "test"}:
        return ["*"]

    raw_value = os.getenv("CORS_ALLOW_ORIGINS", "")
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        path = request.url.path
        method = request.method
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - started) * 1000
            REQUEST_COUNT.labels(method=method, path=path, status_code="500").inc()
            REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000)
            logger.exception(
                "request_error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        REQUEST_COUNT.labels(method=method, path=path, status_code=str(response.status_code)).inc()
        REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000)
        logger.info(
            "request_complete",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warm the in-memory copy so a later unreadable file still serves the last menu.
    document = app.state.menu_store.load()
    logger.info("menu_store_ready", extra={"dish_count": document.dish_count()})
    yield


def create_app(store: MenuStore | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(title="FoodStory Menus", version="0.1.0", lifespan=lifespan)
    app.state.menu_store = store or build_menu_store()

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(menus_router)
    app.include_router(dishes_router)
    app.include_router(sides_router)

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_allow_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    configure_otel(app)
    return app


app = create_app()
