"""DDL helpers for the tasks table."""

from __future__ import annotations

import re
from pathlib import Path

from sqlalchemy.engine import Engine

PROJECT_ROOT = Path(__file__).resolve().parents[2]

TASK_DDL_FILES: list[str] = ["sql/ddl/001_tasks.sql"]

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def render_task_ddl(table_name: str = "tasks", ddl_dir: Path | None = None) -> list[str]:
    """Return the DDL statements with the table name filled in."""

    if not _IDENTIFIER_RE.match(table_name):
        raise ValueError(f"Unsafe SQL identifier: {table_name!r}")

    ddl_base = ddl_dir or (PROJECT_ROOT / "sql/ddl")
    statements: list[str] = []
    for candidate in TASK_DDL_FILES:
        ddl_path = ddl_base / Path(candidate).name
        if not ddl_path.exists():
            raise FileNotFoundError(f"No DDL file found: {ddl_path}")
        sql_text = ddl_path.read_text(encoding="utf-8")
        statements.append(sql_text.replace("{table_name}", table_name))
    return statements


def apply_task_ddl(engine: Engine, table_name: str = "tasks", ddl_dir: Path | None = None) -> None:
    """Create the tasks table if it does not exist yet."""

    statements = render_task_ddl(table_name, ddl_dir)
    with engine.begin() as connection:
        for sql_text in statements:
            connection.exec_driver_sql(sql_text)
