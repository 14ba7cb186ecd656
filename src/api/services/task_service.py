# This file implements the task service that sits between the router and the repository.
# It exists so HTTP concerns and persistence concerns stay in separate layers.
# Every operation forwards its arguments to the repository and returns the result unchanged.
# Repository errors propagate untouched; the router decides how they map to status codes.

from __future__ import annotations

from src.api.repositories.task_repository import TaskRepository
from src.api.schemas.task_schemas import Task, TaskPayload


class TaskService:
    """Task operations exposed to the HTTP layer."""

    def __init__(self, *, repository: TaskRepository) -> None:
        self.repository = repository

    def create_task(self, payload: TaskPayload) -> Task:
        return self.repository.create(payload)

    def list_tasks(self) -> list[Task]:
        return self.repository.get_all()

    def get_task(self, task_id: int) -> Task:
        return self.repository.get_by_id(task_id)

    def update_task(self, task_id: int, payload: TaskPayload) -> Task:
        return self.repository.update(task_id, payload)

    def delete_task(self, task_id: int) -> None:
        self.repository.delete(task_id)
