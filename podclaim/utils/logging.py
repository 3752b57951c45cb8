"""
Project-wide logging setup for podclaim.

Provides a simple, consistent console logger with optional JSON output.
Controlled via settings (environment variables):
- PODCLAIM_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
- PODCLAIM_LOG_FORMAT: text|json (default: text)
"""
from __future__ import annotations

import logging
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from podclaim.config import settings


def _get_level(level: Optional[str] = None) -> int:
    name = (level or settings.LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def setup_logging(
    force: bool = False,
    *,
    level: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Configure root logging for console output.

    If a handler is already present and force is False, this is a no-op.
    """
    target_logger = logger or logging.getLogger()
    if target_logger.handlers and not force:
        return

    if force:
        for h in list(target_logger.handlers):
            target_logger.removeHandler(h)

    target_logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()

    if settings.LOG_FORMAT == "json":
        formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    handler.setFormatter(formatter)
    target_logger.addHandler(handler)
