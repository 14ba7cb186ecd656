# This file provides dependency factories for FastAPI routes.
# It exists so routers receive the service layer through dependency injection.
# Config and the database client are created once at startup and handed to create_app;
# these factories only read them back from app state, which keeps endpoint tests easy to override.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.repositories.task_repository import PostgresTaskRepository, TaskRepository
from src.api.services.task_service import TaskService


def get_config(request: Request) -> ApiConfig:
    return request.app.state.config


def get_database_client(request: Request) -> DatabaseClient:
    return request.app.state.db_client


def get_task_repository(
    config: Annotated[ApiConfig, Depends(get_config)],
    db: Annotated[DatabaseClient, Depends(get_database_client)],
) -> TaskRepository:
    return PostgresTaskRepository(db=db, table_name=config.tasks_table_name)


def get_task_service(
    repository: Annotated[TaskRepository, Depends(get_task_repository)],
) -> TaskService:
    return TaskService(repository=repository)
