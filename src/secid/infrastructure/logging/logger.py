# src/secid/infrastructure/logging/logger.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory producing one JSON object per line.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Structured context passed as ``extra={"extra": {...}}`` is merged into
      the payload; keys that would shadow the stable keys are prefixed.
    * Exceptions are reduced to ``exc_type`` / ``exc_message``.
    * Logs go to stderr by default so command output on stdout stays
      machine-readable.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, Final, TextIO

__all__ = ["configure_root_logging", "get_json_logger"]

_LEVEL_ENV_KEYS: Final[tuple[str, ...]] = ("SECID_LOG_LEVEL", "LOG_LEVEL")
_RESERVED_KEYS: Final[frozenset[str]] = frozenset({"ts", "level", "logger", "message"})


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            str: JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            for key, value in extra.items():
                payload[f"extra_{key}" if key in _RESERVED_KEYS else key] = value

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def _env_level() -> str | None:
    for key in _LEVEL_ENV_KEYS:
        value = os.getenv(key)
        if value:
            return value.upper()
    return None


def configure_root_logging(level: str | int | None = None, *, stream: TextIO | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env
            ``SECID_LOG_LEVEL`` / ``LOG_LEVEL`` or ``WARNING``.
        stream: Target stream for the handler; defaults to ``sys.stderr``.
    """
    root = logging.getLogger()

    resolved: int | str = level if level is not None else (_env_level() or "WARNING")
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)

    if any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        logging.Logger: Logger propagating to the root handler.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
