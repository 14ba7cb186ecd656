#!/usr/bin/env python3
"""
Create the tasks table in the configured database.
It packages the schema bootstrap so a fresh database can be prepared before the API starts.
Run it directly; it prints the applied statements with --print-only and exits non-zero on failure.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.api.api_config import load_api_config
from src.api.db_access import DatabaseClient
from src.api.ddl import apply_task_ddl, render_task_ddl
from src.common.logging import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the tasks table if it is missing")
    parser.add_argument("--table-name", default=None, help="Override API_TASKS_TABLE_NAME")
    parser.add_argument("--print-only", action="store_true", help="Print the DDL without running it")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    config = load_api_config()
    configure_logging(config.log_level)
    table_name = args.table_name or config.tasks_table_name

    if args.print_only:
        for statement in render_task_ddl(table_name):
            print(statement)
        return 0

    db = DatabaseClient(database_url=config.database_url, pool_size=config.db_pool_size)
    if not db.can_connect():
        print("Database is unreachable.", file=sys.stderr)
        return 1
    apply_task_ddl(db.engine, table_name)
    print(f"Table {table_name} is ready.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
