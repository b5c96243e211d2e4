"""
Environment-configured log filter

Combines a DirectiveSet with an optional message regex
"""

import os
import re
from typing import Optional, Pattern, Union

from envlogger.core.component_path import PathLike
from envlogger.core.errors import RegexCompileError
from envlogger.core.log_entry import LogEntry
from envlogger.core.log_level import LogLevel
from envlogger.filters.base_filter import BaseFilter
from envlogger.filters.directive import DirectiveSet, parse_logging_spec

DEFAULT_ENV_VAR = "PY_LOG"


class EnvFilter(BaseFilter):
    """
    Decide whether a log event passes, per component and level.

    Immutable after construction and safe to share between threads.
    ``is_enabled`` is the cheap check callers make before rendering a
    message; ``accepts`` additionally applies the regex to the rendered text.

    Example:
        env_filter = EnvFilter.from_spec("warn,myapp::db=debug/timeout")

        if env_filter.is_enabled("myapp::db::pool", LogLevel.DEBUG):
            message = render()
            if env_filter.accepts("myapp::db::pool", LogLevel.DEBUG, message):
                sink.write(message)
    """

    __slots__ = ("_directives", "_pattern")

    def __init__(
        self,
        directives: Optional[DirectiveSet] = None,
        pattern: Union[str, Pattern, None] = None
    ):
        """
        Initialize the filter.

        Args:
            directives: Parsed directives. None means an empty set, which
                        lets every level through.
            pattern: Optional regex (string or compiled Pattern) that a
                     rendered message must contain a match for

        Raises:
            RegexCompileError: If pattern is not a valid regular expression
        """
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise RegexCompileError(pattern, str(e)) from e

        self._directives = directives if directives is not None else DirectiveSet()
        self._pattern = pattern

    @classmethod
    def from_spec(cls, spec: Optional[str]) -> "EnvFilter":
        """
        Build a filter from a full specification string.

        Raises:
            SpecParseError: If the directives are malformed
            RegexCompileError: If the '/regex' part does not compile
        """
        directives, pattern = parse_logging_spec(spec)
        return cls(directives, pattern)

    @classmethod
    def from_env(cls, var: str = DEFAULT_ENV_VAR, default: str = "") -> "EnvFilter":
        """Build a filter from the specification held in environment variable ``var``."""
        return cls.from_spec(os.environ.get(var, default))

    @property
    def directives(self) -> DirectiveSet:
        return self._directives

    @property
    def pattern(self) -> Optional[Pattern]:
        return self._pattern

    def most_verbose_level(self) -> LogLevel:
        return self._directives.most_verbose_level()

    def is_enabled(self, component_path: PathLike, level: LogLevel) -> bool:
        """
        Check whether events at ``level`` from ``component_path`` are enabled.

        Args:
            component_path: Text path or sequence of segments
            level: Event severity

        Returns:
            True if level is at least the resolved minimum level. OFF is
            never an enabled event level.
        """
        if level >= LogLevel.OFF:
            return False
        return level >= self._directives.resolve(component_path)

    def accepts(self, component_path: PathLike, level: LogLevel, message: str) -> bool:
        """
        Check whether an event with an already rendered message passes.

        The regex is only evaluated when the level check succeeds.

        Returns:
            True if enabled and (no regex configured or the regex matches
            anywhere in message)
        """
        if not self.is_enabled(component_path, level):
            return False
        if self._pattern is None:
            return True
        return self._pattern.search(message) is not None

    def should_log(self, entry: LogEntry) -> bool:
        return self.accepts(entry.path, entry.level, entry.message)

    def __repr__(self) -> str:
        """String representation."""
        pattern = self._pattern.pattern if self._pattern is not None else None
        return f"EnvFilter(directives={self._directives!r}, pattern={pattern!r})"
