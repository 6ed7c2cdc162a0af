"""Logging configuration and utilities."""
import logging
import logging.handlers
import os
import sys
from typing import Any, Dict, List, Optional, TextIO, Union
from datetime import datetime


# Libraries that log chattily at INFO while loading models
_NOISY_LOGGERS = ('urllib3', 'filelock', 'transformers', 'torch', 'textblob')


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get a logger instance for this class."""
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    log_file: Optional[str] = None,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure the root logger, replacing any handlers it already has.

    Args:
        level: Level number or name such as ``"DEBUG"``
        format_string: Log message format
        log_file: Optional path of a rotating log file; parent directories are created
        max_file_size: Size in bytes at which the file is rotated
        backup_count: Number of rotated files to keep
        stream: Console stream, ``sys.stdout`` by default. Command line tools
            that print results pass ``sys.stderr`` to keep stdout clean.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    formatter = logging.Formatter(format_string)
    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_file_size, backupCount=backup_count
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, usually ``__name__`` or a dotted class path."""
    return logging.getLogger(name)


class ContextualLogger:
    """Logger wrapper that prefixes messages with key=value context, e.g. the sector being refreshed."""

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None):
        self._logger = logger
        self._context = context if context is not None else {}

    def _format_message(self, message: str) -> str:
        if not self._context:
            return message
        context_str = " | ".join(f"{k}={v}" for k, v in self._context.items())
        return f"[{context_str}] {message}"

    def warning(self, message: str, *args, **kwargs):
        self._logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._logger.error(self._format_message(message), *args, **kwargs)


def get_contextual_logger(name: str, **context) -> ContextualLogger:
    """Get a contextual logger instance for ``name`` carrying ``context``."""
    return ContextualLogger(get_logger(name), context)


class TimedLogger:
    """Context manager logging how long an operation such as a sector refresh took."""

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time:
            seconds = (datetime.now() - self.start_time).total_seconds()
            if exc_type:
                self.logger.error(f"Failed {self.operation} after {seconds:.2f}s: {exc_val}")
            else:
                self.logger.log(self.level, f"Completed {self.operation} in {seconds:.2f}s")


def timed_operation(logger: logging.Logger, operation: str, level: int = logging.INFO) -> TimedLogger:
    """Create a timed logger context manager."""
    return TimedLogger(logger, operation, level)
