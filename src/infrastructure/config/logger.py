"""Logging configuration for the application."""

import logging
import sys
import json
from datetime import datetime, timezone

ROOT_LOGGER_NAME = "catalog"

# Attributes callers may attach with ``extra=`` that both formats render.
CONTEXT_FIELDS = ("product_id", "coupon_code", "path")

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET = "\033[0m"


class _CatalogFormatter(logging.Formatter):
    """Shared helpers for the catalog log formats."""

    def timestamp(self, record: logging.LogRecord) -> datetime:
        return datetime.fromtimestamp(record.created, tz=timezone.utc)

    def context(self, record: logging.LogRecord) -> dict:
        return {
            field: str(getattr(record, field))
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        }


class JSONFormatter(_CatalogFormatter):
    """One JSON object per line, for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update(self.context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


class TextFormatter(_CatalogFormatter):
    """Colored single-line output for local development."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname, RESET)
        stamp = self.timestamp(record).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{color}[{stamp}] {record.levelname:8s}{RESET} - {record.name} - {record.getMessage()}"

        context = self.context(record)
        if context:
            line += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "text"
) -> logging.Logger:
    """
    Configure the catalog root logger.

    Loggers from get_logger are its children and share its handler.

    Args:
        name: Logger name
        level: Log level name
        log_format: "json" or "text"

    Returns:
        Configured logger instance
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if log_format.lower() == "json" else TextFormatter())

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the catalog root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
