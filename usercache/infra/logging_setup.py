"""
Stdlib logging setup: single-line console output plus a rotating JSON-lines file.
"""

import json
import logging
import logging.handlers
import os
import sys
import traceback
from datetime import datetime, timezone

DEFAULT_FORMAT_FIELDS = ("pathname", "lineno", "funcName", "process", "threadName")


def _timestamp(record, iso=False):
    created = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return created.isoformat() if iso else created.strftime("%Y-%m-%d %H:%M:%S")


class ConsoleFormatter(logging.Formatter):
    """YYYY-MM-DD HH:MM:SS | LEVEL | logger.name | message"""

    def format(self, record):
        line = f"{_timestamp(record)} | {record.levelname} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            return line + "\n" + "".join(traceback.format_exception(*record.exc_info))
        return line


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    With ``ecs_compatible`` the timestamp and level use the Elastic Common Schema
    names (``@timestamp``, ``log.level``) instead of ``ts`` and ``level``.
    """

    def __init__(self, ecs_compatible=False):
        super().__init__()
        self.ecs_compatible = ecs_compatible

    def format(self, record):
        ts_key, level_key = ("@timestamp", "log.level") if self.ecs_compatible else ("ts", "level")
        log_obj = {
            ts_key: _timestamp(record, iso=True),
            level_key: record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in DEFAULT_FORMAT_FIELDS:
            log_obj[field] = getattr(record, field, None)

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            log_obj["exc"] = {
                "type": exc_type.__name__ if exc_type is not None else None,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
            }
        if record.stack_info:
            log_obj["stack_info"] = record.stack_info

        return json.dumps(log_obj, ensure_ascii=False)


def _uncaught_exception_handler(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.getLogger("uncaught").error(
        f"Uncaught exception: {exc_type.__name__}: {exc_value}",
        exc_info=(exc_type, exc_value, exc_traceback),
    )


_handlers = []


def init_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    log_file: str = "usercache.log",
    rotate_max_bytes: int = 10 * 1024 * 1024,
    rotate_backups: int = 5,
    ecs_compatible: bool = False,
) -> None:
    """
    Attach console and rotating file handlers to the root logger (idempotent).

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files, created if missing
        log_file: Log file name inside ``log_dir``
        rotate_max_bytes: Max bytes per log file before rotation
        rotate_backups: Number of rotated files to keep
        ecs_compatible: Use ECS field names in the JSON file output
    """
    if _handlers:
        return

    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ConsoleFormatter())

    file_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, log_file),
        maxBytes=rotate_max_bytes,
        backupCount=rotate_backups,
        encoding="utf-8",
    )
    file_handler.setFormatter(JSONFormatter(ecs_compatible=ecs_compatible))

    for handler in (console_handler, file_handler):
        root_logger.addHandler(handler)
        _handlers.append(handler)

    sys.excepthook = _uncaught_exception_handler


def init_logging_from_config(config) -> None:
    """Initialize logging from the ``[logging]`` section of a ``Config``."""
    init_logging(
        level=config.get("logging", "level"),
        log_dir=config.getstr("logging", "log_dir", fallback="logs"),
        log_file=config.getstr("logging", "log_file", fallback="usercache.log"),
        ecs_compatible=config.getboolean("logging", "ecs_compatible", fallback=False),
    )


def shutdown_logging() -> None:
    """Detach and close the handlers added by ``init_logging``."""
    root_logger = logging.getLogger()
    while _handlers:
        handler = _handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
    sys.excepthook = sys.__excepthook__


def get_logger(name: str = __name__) -> logging.Logger:
    return logging.getLogger(name)
