"""
Log level enumeration

Severity levels shared by directives, filters and log entries
"""

from enum import IntEnum
from typing import Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered from most verbose to least verbose. Values are compatible
    with Python's logging module. OFF is only meaningful as a directive
    level: it disables everything under the directive's path.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    CRITICAL = 50   # Critical errors
    OFF = 100       # Logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def parse(cls, level_str: str) -> Optional["LogLevel"]:
        """
        Look up a level token without raising.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value, or None if the token is not a level
        """
        return LEVEL_FROM_NAME.get(level_str.strip().upper())

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = cls.parse(level_str)
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
    LogLevel.OFF: "OFF",
}

# Reverse mapping, including the short and long spellings found in env specs
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
LEVEL_FROM_NAME.update({
    "TRCE": LogLevel.TRACE,
    "DEBG": LogLevel.DEBUG,
    "WARNING": LogLevel.WARN,
    "ERRO": LogLevel.ERROR,
    "CRIT": LogLevel.CRITICAL,
    "FATAL": LogLevel.CRITICAL,
})
