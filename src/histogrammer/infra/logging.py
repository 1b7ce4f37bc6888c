"""Structured logging infrastructure for Histogrammer.

This module provides JSON-formatted structured logging with common fields for
debugging. Log records go to stderr by default because stdout carries the
rendered chart.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TextIO

__all__ = ["LoggingState", "StructuredLogger", "configure_logging", "get_logger", "restore_logging"]

LOG_LEVEL_ENV = "HISTOGRAMMER_LOG_LEVEL"

# Loggers handed out by get_logger, reconfigured by configure_logging and restore_logging
_configured_loggers: dict[str, logging.Logger] = {}
_overrides: dict[str, Any] = {"level": None, "stream": None}


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs JSON-structured log entries."""

    # LogRecord attributes that are not user-supplied extra fields
    EXCLUDED_FIELDS = frozenset(
        {
            "name",
            "msg",
            "args",
            "created",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "module",
            "msecs",
            "message",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "thread",
            "threadName",
            "taskName",
            "exc_info",
            "exc_text",
            "stack_info",
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_entry = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update({key: value for key, value in record.__dict__.items() if key not in self.EXCLUDED_FIELDS})

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class StructuredLogger:
    """Wrapper around standard logger with structured logging support."""

    def __init__(self, logger: logging.Logger) -> None:
        """Initialize structured logger.

        Args:
            logger: The underlying Python logger instance.
        """
        self._logger = logger

    def _log(
        self,
        level: int,
        msg: str,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        """Internal log method with extra fields support.

        Args:
            level: Log level.
            msg: Log message.
            exc_info: Whether to attach the active exception.
            **kwargs: Additional fields to include in the log entry.
        """
        self._logger.log(level, msg, exc_info=exc_info, extra=dict(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log error message with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log critical message."""
        self._log(logging.CRITICAL, msg, **kwargs)


class OverridableStderrHandler(logging.StreamHandler):
    """Stream handler that resolves its stream on every write.

    Writes go to the stream set by :func:`configure_logging`, or to whatever
    ``sys.stderr`` is at the time of the write.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        """Initialize the handler without binding a stream."""
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:
        return _overrides["stream"] or sys.stderr


@dataclass(frozen=True)
class LoggingState:
    """Snapshot of the logging configuration, as returned by configure_logging.

    Attributes:
        level: Level override applied to new loggers, or None for the environment level
        stream: Stream override, or None for stderr
        logger_levels: Level of each logger handed out so far
    """

    level: int | None
    stream: TextIO | None
    logger_levels: dict[str, int] = field(default_factory=dict)


def _env_level() -> int:
    log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    return getattr(logging, log_level, logging.INFO)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured StructuredLogger instance.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = OverridableStderrHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        level = _overrides["level"]
        logger.setLevel(level if level is not None else _env_level())

    _configured_loggers[name] = logger
    return StructuredLogger(logger)


def _snapshot() -> LoggingState:
    return LoggingState(
        level=_overrides["level"],
        stream=_overrides["stream"],
        logger_levels={name: logger.level for name, logger in _configured_loggers.items()},
    )


def configure_logging(level: int | None = None, stream: TextIO | None = None) -> LoggingState:
    """Set level and output stream for every Histogrammer logger.

    Applies to loggers already handed out by :func:`get_logger` and to those
    created afterwards.

    Args:
        level: Logging level, or None to keep each logger's current level.
        stream: Output stream, or None to write to ``sys.stderr``.

    Returns:
        The configuration in effect before the call, for :func:`restore_logging`.
    """
    previous = _snapshot()

    _overrides["level"] = level
    _overrides["stream"] = stream

    if level is not None:
        for logger in _configured_loggers.values():
            logger.setLevel(level)

    return previous


def restore_logging(state: LoggingState) -> None:
    """Return to a configuration captured by :func:`configure_logging`.

    Loggers created after the snapshot get the snapshot's default level.

    Args:
        state: Snapshot to restore.
    """
    _overrides["level"] = state.level
    _overrides["stream"] = state.stream

    default_level = state.level if state.level is not None else _env_level()
    for name, logger in _configured_loggers.items():
        logger.setLevel(state.logger_levels.get(name, default_level))
