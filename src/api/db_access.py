# This file wraps database access so the task repository can run parameterized SQL safely.
# It exists to keep SQL execution details out of repository and router code and make testing easier.
# Every call checks a connection out of the engine pool for one statement and returns it on exit.
# The SqlExecutor protocol is what the repository depends on, so tests can swap in a fake.

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class SqlExecutor(Protocol):
    """Anything that can run a parameterized statement and hand back rows or a row count."""

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]: ...

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None: ...

    def execute_returning(
        self, query: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None: ...

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int: ...


class DatabaseClient:
    """Minimal SQLAlchemy wrapper around a pooled engine."""

    def __init__(self, *, database_url: str, pool_size: int = 5) -> None:
        self._engine: Engine = create_engine(
            database_url,
            pool_pre_ping=True,
            pool_size=pool_size,
            future=True,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        self._validate_identifier(table_name)
        query = text("SELECT to_regclass(:table_name) IS NOT NULL AS exists_flag")
        with self._engine.connect() as connection:
            result = connection.execute(query, {"table_name": table_name}).scalar_one()
        return bool(result)

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def execute_returning(
        self, query: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Run a write with a RETURNING clause and commit it."""

        with self._engine.begin() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run a write and return the number of affected rows."""

        with self._engine.begin() as connection:
            rowcount = connection.execute(text(query), dict(params or {})).rowcount
        return int(rowcount)

    def dispose(self) -> None:
        self._engine.dispose()

    def _validate_identifier(self, identifier: str) -> str:
        if not _IDENTIFIER_RE.match(identifier):
            raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
        return identifier
