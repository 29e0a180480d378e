"""Dynamics logging implementation.

Only the `dynamics` logger hierarchy is configured here; the root logger
and any handlers installed by the host application are left alone.
"""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from dynamics.api.logging import DynamicsLoggingConfig
from dynamics.runtime.config import load_dynamics_config
from dynamics.runtime.json_codec import dumps_text

DYNAMICS_LOGGER_NAME = "dynamics"

_QUEUE_LISTENER: QueueListener | None = None
_INSTALLED_HANDLERS: list[logging.Handler] = []
_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "asctime",
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
        "message",
        "taskName",
    }
)


def get_dynamics_logger(component: str | None = None) -> logging.Logger:
    """Return the `dynamics` logger or one of its component children."""
    if not component:
        return logging.getLogger(DYNAMICS_LOGGER_NAME)
    return logging.getLogger(f"{DYNAMICS_LOGGER_NAME}.{component}")


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def configure_dynamics_logging(config: DynamicsLoggingConfig) -> logging.Logger:
    """Route the `dynamics` hierarchy to its own console and optional file output.

    Records handled here stop propagating to the root logger so they are not
    emitted twice. Calling again replaces the handlers installed previously.
    """
    global _QUEUE_LISTENER

    logger = get_dynamics_logger()
    _remove_installed_handlers(logger)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    logger.setLevel(_level_from_name(config.level_name))
    logger.propagate = False

    if len(handlers) == 1:
        _install(logger, handlers[0])
        return logger

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    _install(logger, QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()
    return logger


def setup_dynamics_logging() -> logging.Logger:
    """Apply the environment log level to the `dynamics` logger once.

    Leaves a logger untouched when the host already gave it a level or
    handlers. Records keep propagating to whatever the host configured.
    """
    logger = get_dynamics_logger()
    if logger.handlers or logger.level != logging.NOTSET:
        return logger
    logger.setLevel(_level_from_name(load_dynamics_config().log_level))
    _install(logger, logging.NullHandler())
    return logger


def shutdown_dynamics_logging() -> None:
    """Stop file streaming and detach handlers installed on the `dynamics` logger."""
    logger = get_dynamics_logger()
    _remove_installed_handlers(logger)
    logger.propagate = True


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _INSTALLED_HANDLERS.append(handler)


def _remove_installed_handlers(logger: logging.Logger) -> None:
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        for handler in _QUEUE_LISTENER.handlers:
            handler.close()
        _QUEUE_LISTENER = None
    while _INSTALLED_HANDLERS:
        handler = _INSTALLED_HANDLERS.pop()
        logger.removeHandler(handler)
        handler.close()


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
