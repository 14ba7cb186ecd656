"""Process entrypoint that wires config, the database pool, and the app, then serves it."""

from __future__ import annotations

import logging

import uvicorn

from src.api.api_config import load_api_config
from src.api.app import create_app
from src.api.db_access import DatabaseClient
from src.common.logging import configure_logging

LOGGER = logging.getLogger(__name__)


def main() -> None:
    config = load_api_config()
    configure_logging(config.log_level)

    db_client = DatabaseClient(database_url=config.database_url, pool_size=config.db_pool_size)
    app = create_app(config=config, db_client=db_client)

    LOGGER.info("Starting %s on %s:%s", config.api_name, config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
