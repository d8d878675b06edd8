"""Logging setup for deed-registry.

Registry mutations log through ``deed_registry.registry.registry`` and attach
the fields named in :data:`LOG_CONTEXT_FIELDS` via ``extra``. Both formatters
render those fields: the standard one as trailing ``key=value`` pairs, the
JSON one as top-level keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

LOG_CONTEXT_FIELDS = ("operation", "caller", "property_id", "height", "error_kind")

QUIET_LOGGERS = ("confluent_kafka", "faker")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s%(context)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Registry context fields present on a record, in display order."""
    return {key: getattr(record, key) for key in LOG_CONTEXT_FIELDS if hasattr(record, key)}


class ContextFormatter(logging.Formatter):
    """Plain-text formatter that appends registry context to each line."""

    def __init__(self) -> None:
        super().__init__(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        context = record_context(record)
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        record.context = f" | {pairs}" if pairs else ""
        return super().format(record)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with registry context as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if isinstance(getattr(record, "extra", None), dict):
            entry.update(record.extra)
        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Route all logging to a single handler.

    Parameters
    ----------
    level : str
        Log level name. Unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for text lines or ``"json"`` for JSON Lines.
    stream : TextIO | None
        Destination; defaults to stdout.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JsonFormatter() if format_type == "json" else ContextFormatter()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)

    logging.getLogger("deed_registry").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger."""
    return logging.getLogger(name)
