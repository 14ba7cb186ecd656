# This file defines the task CRUD endpoints.
# It exists so HTTP decoding, validation, and status mapping stay out of the service layer.
# Request bodies and path ids are validated by FastAPI before the service is called.
# Repository errors are translated here: not found becomes 404, storage failures become 500.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from src.api.dependencies import get_task_service
from src.api.error_handlers import INTERNAL_ERROR_MESSAGE, APIError
from src.api.repositories.task_repository import TaskNotFoundError, TaskStorageError
from src.api.schemas.common import ErrorResponse
from src.api.schemas.task_schemas import Task, TaskPayload
from src.api.services.task_service import TaskService

LOGGER = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
# Ids are BIGSERIAL: signed 64-bit range.
TaskIdPath = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

_NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}


def _not_found(exc: TaskNotFoundError) -> APIError:
    return APIError(
        status_code=404,
        error_code="TASK_NOT_FOUND",
        message="Task not found.",
        details={"task_id": exc.task_id},
    )


def _storage_failure() -> APIError:
    return APIError(
        status_code=500,
        error_code="INTERNAL_SERVER_ERROR",
        message=INTERNAL_ERROR_MESSAGE,
    )


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskPayload, service: TaskServiceDep) -> Task:
    try:
        task = service.create_task(payload)
    except TaskStorageError as exc:
        raise _storage_failure() from exc
    LOGGER.info("Created task id=%s", task.id)
    return task


@router.get("", response_model=list[Task])
def list_tasks(service: TaskServiceDep) -> list[Task]:
    try:
        return service.list_tasks()
    except TaskStorageError as exc:
        raise _storage_failure() from exc


@router.get("/{task_id}", response_model=Task, responses=_NOT_FOUND_RESPONSE)
def get_task(task_id: TaskIdPath, service: TaskServiceDep) -> Task:
    try:
        return service.get_task(task_id)
    except TaskNotFoundError as exc:
        raise _not_found(exc) from exc
    except TaskStorageError as exc:
        raise _storage_failure() from exc


@router.put("/{task_id}", response_model=Task, responses=_NOT_FOUND_RESPONSE)
def update_task(task_id: TaskIdPath, payload: TaskPayload, service: TaskServiceDep) -> Task:
    try:
        task = service.update_task(task_id, payload)
    except TaskNotFoundError as exc:
        raise _not_found(exc) from exc
    except TaskStorageError as exc:
        raise _storage_failure() from exc
    LOGGER.info("Updated task id=%s", task.id)
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND_RESPONSE,
)
def delete_task(task_id: TaskIdPath, service: TaskServiceDep) -> Response:
    try:
        service.delete_task(task_id)
    except TaskNotFoundError as exc:
        raise _not_found(exc) from exc
    except TaskStorageError as exc:
        raise _storage_failure() from exc
    LOGGER.info("Deleted task id=%s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
