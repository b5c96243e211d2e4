"""
Env logger configuration management

Where the specification string comes from and what happens when it is bad
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from envlogger.core.errors import EnvLoggerError
from envlogger.filters.env_filter import DEFAULT_ENV_VAR, EnvFilter

logger = logging.getLogger(__name__)


@dataclass
class EnvLoggerConfig:
    """
    Env logger configuration.

    Attributes:
        env_var: Environment variable holding the specification string
        default_spec: Specification used when env_var is unset
        fallback_spec: Specification used when the configured one is invalid.
                       If None, configuration errors are raised to the caller.
    """

    env_var: str = DEFAULT_ENV_VAR
    default_spec: str = ""
    fallback_spec: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.env_var:
            raise ValueError("env_var must not be empty")

    @classmethod
    def default(cls) -> "EnvLoggerConfig":
        """Create default configuration (unset variable lets everything through)."""
        return cls()

    @classmethod
    def debug_config(cls) -> "EnvLoggerConfig":
        """Create configuration for debugging."""
        return cls(default_spec="debug")

    @classmethod
    def production_config(cls) -> "EnvLoggerConfig":
        """Create configuration for production; a bad spec degrades to warnings."""
        return cls(default_spec="warn", fallback_spec="warn")

    def read_spec(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """
        Read the specification string.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Value of env_var, or default_spec if unset
        """
        environ = os.environ if environ is None else environ
        return environ.get(self.env_var, self.default_spec)

    def build_filter(self, environ: Optional[Mapping[str, str]] = None) -> EnvFilter:
        """
        Build an EnvFilter from the configured source.

        Raises:
            SpecParseError: If the spec is invalid and no fallback is set
            RegexCompileError: If the regex is invalid and no fallback is set
        """
        spec = self.read_spec(environ)
        try:
            return EnvFilter.from_spec(spec)
        except EnvLoggerError as e:
            if self.fallback_spec is None:
                raise
            logger.warning(
                "Ignoring %s=%r (%s); using fallback spec %r",
                self.env_var, spec, e, self.fallback_spec
            )
            return EnvFilter.from_spec(self.fallback_spec)
