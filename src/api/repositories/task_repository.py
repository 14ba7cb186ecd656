# This file implements the task repository on top of parameterized SQL.
# It exists so the service layer never sees SQL text or database driver exceptions.
# Each operation issues exactly one statement against the tasks table.
# A missing row becomes TaskNotFoundError; every other database failure becomes TaskStorageError.

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError

from src.api.db_access import SqlExecutor
from src.api.schemas.task_schemas import Task, TaskPayload

LOGGER = logging.getLogger(__name__)

TASK_COLUMNS = "id, title, description, due_date, created_at, updated_at"


class TaskRepositoryError(Exception):
    """Base class for task persistence failures."""


class TaskNotFoundError(TaskRepositoryError):
    """The requested task id has no matching row."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class TaskStorageError(TaskRepositoryError):
    """The database rejected or failed to run a statement."""


class TaskRepository(Protocol):
    def create(self, payload: TaskPayload) -> Task: ...

    def get_all(self) -> list[Task]: ...

    def get_by_id(self, task_id: int) -> Task: ...

    def update(self, task_id: int, payload: TaskPayload) -> Task: ...

    def delete(self, task_id: int) -> None: ...


class PostgresTaskRepository:
    """Task persistence backed by a PostgreSQL table."""

    def __init__(self, *, db: SqlExecutor, table_name: str = "tasks") -> None:
        self.db = db
        self.table = table_name

    def create(self, payload: TaskPayload) -> Task:
        query = f"""
        INSERT INTO {self.table} (title, description, due_date, created_at, updated_at)
        VALUES (:title, :description, :due_date, NOW(), NOW())
        RETURNING {TASK_COLUMNS}
        """
        row = self._run("create", lambda: self.db.execute_returning(query, self._payload_params(payload)))
        if row is None:
            raise TaskStorageError("INSERT returned no row")
        return Task.model_validate(row)

    def get_all(self) -> list[Task]:
        query = f"SELECT {TASK_COLUMNS} FROM {self.table}"
        rows = self._run("get_all", lambda: self.db.fetch_all(query))
        return [Task.model_validate(row) for row in rows]

    def get_by_id(self, task_id: int) -> Task:
        query = f"SELECT {TASK_COLUMNS} FROM {self.table} WHERE id = :task_id"
        row = self._run("get_by_id", lambda: self.db.fetch_one(query, {"task_id": task_id}))
        if row is None:
            raise TaskNotFoundError(task_id)
        return Task.model_validate(row)

    def update(self, task_id: int, payload: TaskPayload) -> Task:
        query = f"""
        UPDATE {self.table}
        SET title = :title, description = :description, due_date = :due_date, updated_at = NOW()
        WHERE id = :task_id
        RETURNING {TASK_COLUMNS}
        """
        params = self._payload_params(payload)
        params["task_id"] = task_id
        row = self._run("update", lambda: self.db.execute_returning(query, params))
        if row is None:
            raise TaskNotFoundError(task_id)
        return Task.model_validate(row)

    def delete(self, task_id: int) -> None:
        query = f"DELETE FROM {self.table} WHERE id = :task_id"
        affected = self._run("delete", lambda: self.db.execute(query, {"task_id": task_id}))
        if affected == 0:
            raise TaskNotFoundError(task_id)

    def _payload_params(self, payload: TaskPayload) -> dict[str, Any]:
        return {
            "title": payload.title,
            "description": payload.description,
            "due_date": payload.due_date,
        }

    def _run(self, operation: str, call: Callable[[], Any]) -> Any:
        try:
            return call()
        except SQLAlchemyError as exc:
            LOGGER.exception("Task %s failed against table %s", operation, self.table)
            raise TaskStorageError(f"Task {operation} failed") from exc
