"""
Core module for envlogger

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- LogEntry: Log entry data structure
- Logger: Component logger gated by an EnvFilter
- LoggerBuilder: Builder pattern for logger construction
- EnvLoggerConfig: Where the specification string comes from
- SpecParseError, RegexCompileError: Configuration errors
"""

from envlogger.core.errors import EnvLoggerError, RegexCompileError, SpecParseError
from envlogger.core.log_level import LogLevel
from envlogger.core.log_entry import LogEntry
from envlogger.core.env_config import EnvLoggerConfig
from envlogger.core.logger import Logger
from envlogger.core.logger_builder import LoggerBuilder

__all__ = [
    "EnvLoggerConfig",
    "EnvLoggerError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerBuilder",
    "RegexCompileError",
    "SpecParseError",
]
