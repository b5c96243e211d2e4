"""
Main Logger class - component logger gated by an EnvFilter

Renders messages lazily: nothing is formatted for a disabled level.
"""

from __future__ import annotations
from typing import Optional, List, Any
import sys
import threading

from envlogger.core.component_path import split_path
from envlogger.core.log_level import LogLevel
from envlogger.core.log_entry import LogEntry
from envlogger.filters.env_filter import EnvFilter


class Logger:
    """Logger for one component, forwarding accepted entries to writers."""

    def __init__(
        self,
        name: str = "",
        env_filter: Optional[EnvFilter] = None,
        writers: Optional[List[Any]] = None,
        filters: Optional[List[Any]] = None,
    ):
        self._name = name
        self._path = split_path(name)
        self._env_filter = env_filter or EnvFilter()
        self._writers: List[Any] = writers if writers is not None else []
        self._filters: List[Any] = filters if filters is not None else []
        self._metrics = {"logged": 0, "filtered": 0}
        self._metrics_lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def env_filter(self) -> EnvFilter:
        return self._env_filter

    def child(self, name: str) -> "Logger":
        """
        Create a logger for a sub-component.

        The child shares this logger's filter, writers and extra filters.

        Args:
            name: Segment(s) appended to this logger's component name
        """
        full_name = f"{self._name}::{name}" if self._name else name
        return Logger(full_name, self._env_filter, self._writers, self._filters)

    def add_writer(self, writer: Any) -> None:
        """Add a log writer (any object with write(entry))."""
        self._writers.append(writer)

    def add_filter(self, log_filter: Any) -> None:
        """
        Add a log filter.

        Args:
            log_filter: Filter instance with should_log(entry) method
        """
        self._filters.append(log_filter)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Cheap check before doing expensive work for a log call."""
        return self._env_filter.is_enabled(self._path, level)

    def log(self, level: LogLevel, message: str, *args, **kwargs) -> None:
        """
        Log a message.

        Args:
            level: Event severity
            message: Message, %-formatted with args only if the level is enabled
            kwargs: Stored in the entry's extra fields
        """
        if not self._env_filter.is_enabled(self._path, level):
            self._count("filtered")
            return

        try:
            rendered = message % args if args else message
        except (TypeError, ValueError) as e:
            print(f"Format error: {e} (message={message!r}, args={args!r})", file=sys.stderr)
            self._count("filtered")
            return

        if not self._env_filter.accepts(self._path, level, str(rendered)):
            self._count("filtered")
            return

        entry = LogEntry(
            level=level,
            message=rendered,
            component=self._name,
            extra=kwargs,
        )
        self.write_entry(entry)

    def write_entry(self, entry: LogEntry) -> None:
        """Apply extra filters to an accepted entry and hand it to every writer."""
        for f in self._filters:
            if not f.should_log(entry):
                self._count("filtered")
                return

        for writer in self._writers:
            try:
                writer.write(entry)
            except Exception as e:
                print(f"Writer error: {e}", file=sys.stderr)
        self._count("logged")

    def trace(self, message: str, *args, **kwargs) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, *args, **kwargs)

    def warn(self, message: str, *args, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, *args, **kwargs)

    def flush(self):
        """Flush all writers."""
        for writer in self._writers:
            if hasattr(writer, 'flush'):
                writer.flush()

    def _count(self, key: str) -> None:
        with self._metrics_lock:
            self._metrics[key] += 1

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        return f"Logger(name='{self._name}', filter={self._env_filter!r})"
