"""Logging setup and the one-line event helpers used across the service."""

import logging
import sys
from typing import Any

LOGGER_NAME = "tyre_finder"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``tyre_finder`` logger (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger


logger = setup_logging()


def _fields(**kwargs: Any) -> str:
    return " ".join(f"{k}={v}" for k, v in kwargs.items() if v is not None)


def log_request(method: str, path: str, **kwargs: Any) -> None:
    logger.info(f"REQUEST {method} {path} {_fields(**kwargs)}".strip())


def log_response(method: str, path: str, status: int, duration_ms: float) -> None:
    logger.info(
        f"RESPONSE {method} {path} status={status} duration_ms={duration_ms:.2f}"
    )


def log_catalog_attempt(
    url: str, attempt: int, max_attempts: int, kind: str, reason: str
) -> None:
    """Log one failed round-trip to the remote catalog."""
    logger.warning(
        f"CATALOG attempt={attempt}/{max_attempts} kind={kind} url={url} reason={reason}"
    )


def log_db_query(operation: str, table: str, duration_ms: float | None = None) -> None:
    duration = f"duration_ms={duration_ms:.2f}" if duration_ms else ""
    logger.debug(f"DB {operation} table={table} {duration}".strip())


def log_external_call(
    service: str, operation: str, success: bool, duration_ms: float | None = None
) -> None:
    status = "success" if success else "failed"
    duration = f"duration_ms={duration_ms:.2f}" if duration_ms else ""
    logger.info(f"EXTERNAL {service} {operation} status={status} {duration}".strip())
