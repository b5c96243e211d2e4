"""Logger builder pattern"""

from typing import Mapping, Optional

from envlogger.core.env_config import EnvLoggerConfig
from envlogger.core.logger import Logger
from envlogger.filters.env_filter import EnvFilter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = ""
        self._spec: Optional[str] = None
        self._config: Optional[EnvLoggerConfig] = None
        self._environ: Optional[Mapping[str, str]] = None
        self._env_filter: Optional[EnvFilter] = None
        self._custom_writers = []
        self._custom_filters = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set the logger's component name."""
        self._name = name
        return self

    def with_spec(self, spec: str) -> "LoggerBuilder":
        """Use an explicit specification string."""
        self._spec = spec
        return self

    def with_config(
        self,
        config: EnvLoggerConfig,
        environ: Optional[Mapping[str, str]] = None
    ) -> "LoggerBuilder":
        """Read the specification as described by config."""
        self._config = config
        self._environ = environ
        return self

    def with_env(self, var: str, default: str = "") -> "LoggerBuilder":
        """Read the specification from environment variable var."""
        return self.with_config(EnvLoggerConfig(env_var=var, default_spec=default))

    def with_env_filter(self, env_filter: EnvFilter) -> "LoggerBuilder":
        """Use an already built EnvFilter."""
        self._env_filter = env_filter
        return self

    def with_filter(self, log_filter) -> "LoggerBuilder":
        """
        Add an extra filter, applied after the EnvFilter accepted an entry.

        Args:
            log_filter: Filter instance (BaseFilter subclass)

        Returns:
            Self for method chaining
        """
        self._custom_filters.append(log_filter)
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build(self) -> Logger:
        """
        Build and return configured logger.

        The filter source is, in order of precedence: with_env_filter,
        with_spec, with_config/with_env, then the default configuration.

        Raises:
            SpecParseError: If the specification is malformed
            RegexCompileError: If the regex does not compile
        """
        if self._env_filter is not None:
            env_filter = self._env_filter
        elif self._spec is not None:
            env_filter = EnvFilter.from_spec(self._spec)
        else:
            config = self._config or EnvLoggerConfig.default()
            env_filter = config.build_filter(self._environ)

        return Logger(
            self._name,
            env_filter,
            list(self._custom_writers),
            list(self._custom_filters),
        )
