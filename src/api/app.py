# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, and Prometheus metrics for operations visibility.
# Config and the database client are passed in explicitly and kept on app.state for dependencies.

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from src.api.api_config import ApiConfig
from src.api.ddl import apply_task_ddl
from src.api.error_handlers import register_error_handlers
from src.api.routers.health import router as health_router
from src.api.routers.tasks import router as tasks_router
from src.common.logging import configure_logging

LOGGER = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "task_api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "task_api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "task_api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return str(getattr(route, "path", request.url.path))


def create_app(
    *,
    config: ApiConfig,
    db_client: Any,
) -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = app.state.db_client
        try:
            if not db.can_connect():
                raise RuntimeError("Database is unreachable; refusing to start.")
            if config.auto_create_schema:
                apply_task_ddl(db.engine, config.tasks_table_name)
                LOGGER.info("Ensured table %s exists", config.tasks_table_name)
            yield
        finally:
            db.dispose()

    app = FastAPI(
        title=config.api_name,
        description="Create, list, fetch, update, and delete task records.",
        version=config.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "tasks", "description": "Task records with due dates."},
        ],
    )
    app.state.config = config
    app.state.db_client = db_client

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            LOGGER.info(
                "%s %s status=%s duration_ms=%.2f request_id=%s",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
                request_id,
            )
            return response
        finally:
            duration_s = time.perf_counter() - started
            path_label = _route_path(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(tasks_router)

    return app
