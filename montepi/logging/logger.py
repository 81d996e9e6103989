# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for montepi.

Every log entry is a single JSON line carrying a timestamp, a level, the
logger name and the message, plus whatever context the caller attached via
`extra`.

Logs are written to stderr, never stdout. The only thing montepi prints on
stdout is the estimate line, so scripts can capture it with a plain pipe.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "montepi.cli", "msg": "run finished", ...}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Attributes every LogRecord carries. Anything else on the record came in
# through `extra` and belongs in the JSON payload.
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "relativeCreated",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "pathname",
        "filename",
        "module",
        "levelno",
        "levelname",
        "processName",
        "process",
        "threadName",
        "thread",
        "message",
        "msecs",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Mandatory fields:
      ts     — ISO 8601 UTC timestamp
      level  — log level name
      module — the logger name
      msg    — the formatted message string

    Extra context fields are merged in as-is. Tracebacks, when present, land
    under "exc".
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def _add_file_handler(logger: logging.Logger, log_file: Path, level: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)


def get_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Create a structured JSON logger.

    This is the only sanctioned way to get a logger in montepi.

    Args:
        name: Logger name, typically __name__ of the calling module.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  stderr and the file.

    Returns:
        A configured logging.Logger that outputs structured JSON.
    """
    logger = logging.getLogger(name)
    level = _resolve_log_level(log_level)
    logger.setLevel(level)

    formatter = JsonFormatter()

    # Calling get_logger again for the same name updates the level and only
    # adds a file handler that isn't attached yet.
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
    else:
        stderr_handler = logging.StreamHandler(stream=sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None and not _has_file_handler(logger, log_file):
        _add_file_handler(logger, log_file, level)

    logger.propagate = False

    return logger


def apply_log_level(
    log_level: str,
    prefix: str = "montepi",
    log_file: Optional[Path] = None,
) -> None:
    """
    Set the level on every montepi logger created so far.

    Module-level loggers are created at import time with the default level
    and no file handler. The CLI calls this once it knows the requested
    level and log file, so their entries land in the file too.
    """
    level = _resolve_log_level(log_level)
    for name in list(logging.Logger.manager.loggerDict):
        if name == prefix or name.startswith(f"{prefix}."):
            logger = logging.getLogger(name)
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)

            # Only loggers built by get_logger own handlers. The rest propagate.
            if log_file is not None and logger.handlers and not _has_file_handler(logger, log_file):
                _add_file_handler(logger, log_file, level)
