"""
Bridge between the stdlib ``logging`` module and envlogger

Lets code that logs through ``logging.getLogger(__name__)`` be gated by the
same specification string as envlogger loggers. Logger names map onto
component paths ("myapp.net" is the path myapp::net); the root logger maps
onto the root path, which only a default directive covers.

Nothing here installs handlers globally; attach the filter or handler to
whichever logger or handler you own.
"""

import logging
from typing import Tuple

from envlogger.core.component_path import ComponentPath, split_path
from envlogger.core.log_entry import LogEntry
from envlogger.core.log_level import LogLevel
from envlogger.core.logger import Logger
from envlogger.filters.env_filter import EnvFilter

# Event levels, most severe first
_EVENT_LEVELS: Tuple[LogLevel, ...] = (
    LogLevel.CRITICAL,
    LogLevel.ERROR,
    LogLevel.WARN,
    LogLevel.INFO,
    LogLevel.DEBUG,
    LogLevel.TRACE,
)


def level_from_stdlib(levelno: int) -> LogLevel:
    """
    Map a stdlib level number onto the nearest LogLevel at or below it.

    Numbers below TRACE map to TRACE; anything above CRITICAL is CRITICAL.
    """
    for level in _EVENT_LEVELS:
        if levelno >= level:
            return level
    return LogLevel.TRACE


def level_to_stdlib(level: LogLevel) -> int:
    """Map a LogLevel onto a stdlib level number (OFF is above CRITICAL)."""
    return int(level)


def record_path(record: logging.LogRecord) -> ComponentPath:
    """Component path for a stdlib record; the root logger is the root path."""
    if record.name == "root":
        return ()
    return split_path(record.name)


class EnvLoggerFilter(logging.Filter):
    """
    ``logging.Filter`` that applies an EnvFilter to stdlib records.

    Example:
        handler = logging.StreamHandler()
        handler.addFilter(EnvLoggerFilter(EnvFilter.from_env()))
    """

    def __init__(self, env_filter: EnvFilter):
        super().__init__()
        self.env_filter = env_filter

    def filter(self, record: logging.LogRecord) -> bool:
        path = record_path(record)
        level = level_from_stdlib(record.levelno)
        # Skip rendering the message for disabled levels
        if not self.env_filter.is_enabled(path, level):
            return False
        return self.env_filter.accepts(path, level, record.getMessage())


class LoggerBridgeHandler(logging.Handler):
    """
    ``logging.Handler`` forwarding stdlib records into an envlogger Logger.

    Records keep their own logger name as component, are gated by the
    target logger's EnvFilter, and are then written to its writers.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            path = record_path(record)
            level = level_from_stdlib(record.levelno)
            env_filter = self.target.env_filter
            if not env_filter.is_enabled(path, level):
                return
            message = record.getMessage()
            if not env_filter.accepts(path, level, message):
                return

            entry = LogEntry(
                level=level,
                message=message,
                component="::".join(path),
                thread_id=record.thread or 0,
                thread_name=record.threadName or "",
                file_name=record.pathname,
                line_number=record.lineno,
                function_name=record.funcName or "",
            )
            self.target.write_entry(entry)
        except Exception:
            self.handleError(record)
