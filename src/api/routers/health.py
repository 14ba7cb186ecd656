# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that the tasks table exists.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.dependencies import get_config, get_database_client
from src.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    config: ConfigDep,
    db: DBDep,
) -> dict[str, object]:
    db_connected = db.can_connect()
    tasks_table_ready = db_connected and db.table_exists(config.tasks_table_name)

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "tasks_table_ready": tasks_table_ready,
        "ready": db_connected and tasks_table_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
