"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from invoicedash.core.config import get_config
from invoicedash.core.logging_config import configure_logging
from invoicedash.database.db import init_db, verify_database_connection

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """Fail-fast config and connectivity checks."""
    config = get_config()
    if not verify_database_connection():
        raise RuntimeError("Database connectivity check failed.")

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "database_url_scheme": config.DATABASE_URL.split("://", 1)[0],
        },
    )


def bootstrap() -> None:
    """Initialize logging, validate runtime configuration and ensure tables."""
    configure_logging()
    validate_startup_config()
    init_db()
