"""Filter builder pattern"""

from typing import List, Optional, Pattern, Union

from envlogger.core.component_path import PathLike, join_path, parse_path
from envlogger.core.errors import SpecParseError
from envlogger.core.log_level import LogLevel
from envlogger.filters.directive import Directive, DirectiveSet, parse_logging_spec
from envlogger.filters.env_filter import EnvFilter


class FilterBuilder:
    """
    Builder pattern for EnvFilter construction.

    Example:
        env_filter = (FilterBuilder()
            .filter(None, LogLevel.WARN)
            .filter("myapp::db", LogLevel.DEBUG)
            .parse(os.environ.get("PY_LOG", ""))
            .build())
    """

    def __init__(self):
        self._directives: List[Directive] = []
        self._pattern: Union[str, Pattern, None] = None

    def filter(self, module: PathLike, level: LogLevel) -> "FilterBuilder":
        """
        Add a directive.

        Args:
            module: Component path, or None for the default directive
            level: Minimum level for that path

        Returns:
            Self for method chaining

        Raises:
            SpecParseError: If module is not a legal component path
        """
        path = None
        if module:
            text = module if isinstance(module, str) else join_path(tuple(module))
            path = parse_path(text)
            if path is None:
                raise SpecParseError(text, 0, f"invalid component path '{text}'")
        self._directives.append(Directive(path, level))
        return self

    def parse(self, spec: Optional[str]) -> "FilterBuilder":
        """
        Append the directives of a specification string.

        A '/regex' suffix replaces any previously set pattern.

        Raises:
            SpecParseError: If the specification is malformed
        """
        directives, pattern = parse_logging_spec(spec)
        self._directives.extend(directives)
        if pattern is not None:
            self._pattern = pattern
        return self

    def regex(self, pattern: Union[str, Pattern, None]) -> "FilterBuilder":
        """Set the message pattern (None clears it)."""
        self._pattern = pattern
        return self

    def build(self) -> EnvFilter:
        """
        Build and return the configured filter.

        Raises:
            RegexCompileError: If the pattern does not compile
        """
        return EnvFilter(DirectiveSet(self._directives), self._pattern)
