"""
Unit tests for the task service.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from src.api.repositories.task_repository import TaskNotFoundError, TaskStorageError
from src.api.schemas.task_schemas import Task, TaskPayload
from src.api.services.task_service import TaskService

STAMP = datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
TASK = Task(
    id=1,
    title="Buy milk",
    description="2%",
    due_date=datetime(2025, 1, 1, 10, 0, tzinfo=UTC),
    created_at=STAMP,
    updated_at=STAMP,
)
PAYLOAD = TaskPayload(title="Buy milk", description="2%", due_date=datetime(2025, 1, 1, 10, 0, tzinfo=UTC))


class SpyRepository:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.error = error

    def _handle(self, name: str, *args: Any) -> Any:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error
        if name == "get_all":
            return [TASK]
        if name == "delete":
            return None
        return TASK

    def create(self, payload: TaskPayload) -> Task:
        return self._handle("create", payload)

    def get_all(self) -> list[Task]:
        return self._handle("get_all")

    def get_by_id(self, task_id: int) -> Task:
        return self._handle("get_by_id", task_id)

    def update(self, task_id: int, payload: TaskPayload) -> Task:
        return self._handle("update", task_id, payload)

    def delete(self, task_id: int) -> None:
        return self._handle("delete", task_id)


def test_service_forwards_every_operation_unchanged() -> None:
    repo = SpyRepository()
    service = TaskService(repository=repo)

    assert service.create_task(PAYLOAD) is TASK
    assert service.list_tasks() == [TASK]
    assert service.get_task(1) is TASK
    assert service.update_task(1, PAYLOAD) is TASK
    assert service.delete_task(1) is None

    assert repo.calls == [
        ("create", (PAYLOAD,)),
        ("get_all", ()),
        ("get_by_id", (1,)),
        ("update", (1, PAYLOAD)),
        ("delete", (1,)),
    ]


@pytest.mark.parametrize("error", [TaskNotFoundError(1), TaskStorageError("boom")])
def test_service_propagates_repository_errors(error: Exception) -> None:
    service = TaskService(repository=SpyRepository(error=error))

    with pytest.raises(type(error)) as exc_info:
        service.get_task(1)

    assert exc_info.value is error
