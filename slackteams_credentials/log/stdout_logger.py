# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Stdout logger implementation with structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import LEVELS, Logger

# Structured fields that may hold secret material
REDACTED_FIELDS = frozenset({"value", "secret", "password", "token"})
REDACTED = "***"


def redact(fields: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``fields`` with secret-bearing entries masked."""
    return {
        name: REDACTED if name.lower() in REDACTED_FIELDS else field
        for name, field in fields.items()
    }


class StdoutLogger(Logger):
    """Logger that outputs structured JSON logs to stdout."""

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            name: Optional logger name for identification

        Raises:
            ValueError: If level is not recognized
        """
        self.level = level.upper()
        self.name = name or "slackteams_credentials"

        if self.level not in LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(LEVELS)}")

        # Mirror into stdlib logging so caplog and handlers can capture records
        self._stdlib_logger = logging.getLogger(self.name)
        self._stdlib_logger.setLevel(logging.NOTSET)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        """Format and output a log message.

        Args:
            level: Log level
            message: The log message
            **kwargs: Additional structured data to log
        """
        if LEVELS.index(level) < LEVELS.index(self.level):
            return

        fields = redact(kwargs)

        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if fields:
            log_entry["extra"] = fields

        try:
            print(json.dumps(log_entry, default=str), file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": fields} if fields else None
        self._stdlib_logger.log(getattr(logging, level), message, extra=extra)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)
