"""Logging setup for the command-line entry point."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import TextIO
from uuid import uuid4

__all__ = ["JsonFormatter", "configure_logging"]

_RESERVED_KEYS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "run_id",
    }
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render log records as JSON, carrying ``extra`` fields as context."""

    def __init__(self, *, run_id: str | None = None) -> None:
        super().__init__()
        self._run_id = run_id

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_KEYS
        }
        payload: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": getattr(record, "run_id", None) or self._run_id,
            "context": context,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        elif record.exc_text:
            payload["exception"] = record.exc_text
        return json.dumps(payload, default=str)


def configure_logging(
    level: str | int = logging.WARNING,
    *,
    fmt: str = "text",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a single stream handler to the ``ai_footprint`` logger.

    Args:
        level: Log level name or number. Unknown names fall back to WARNING.
        fmt: ``"json"`` for structured records, anything else for text.
        stream: Target stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler. Earlier handlers installed by this function
        are replaced.
    """

    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING

    logger = logging.getLogger("ai_footprint")
    for existing in list(logger.handlers):
        if getattr(existing, "_ai_footprint_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    if fmt == "json":
        handler.setFormatter(JsonFormatter(run_id=str(uuid4())))
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    handler._ai_footprint_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
