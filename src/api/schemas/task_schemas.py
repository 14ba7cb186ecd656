# This file defines the task record and the request payload used by the task endpoints.
# It exists so the repository, service, and router agree on one typed task shape.
# The payload validator only accepts RFC 3339 date-time text that carries a timezone offset.
# Task objects serialize timestamps as ISO 8601 strings in JSON responses.

from __future__ import annotations

import re
from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator

_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


class TaskPayload(BaseModel):
    """Mutable task fields accepted on create and full replacement."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    due_date: AwareDatetime

    @field_validator("description", mode="before")
    @classmethod
    def null_description_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("due_date", mode="before")
    @classmethod
    def validate_due_date_format(cls, value: object) -> object:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not _RFC3339_RE.match(value):
            raise ValueError("due_date must be an RFC 3339 date-time with timezone offset.")
        return value


class Task(BaseModel):
    """Persisted task record."""

    id: int
    title: str
    description: str
    due_date: datetime
    created_at: datetime
    updated_at: datetime
