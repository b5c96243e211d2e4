"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

envlogger - per-component log filtering configured by a specification
string, conventionally read from the PY_LOG environment variable
"""

import logging

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from envlogger.core.errors import EnvLoggerError, RegexCompileError, SpecParseError
from envlogger.core.log_level import LogLevel
from envlogger.core.log_entry import LogEntry
from envlogger.core.env_config import EnvLoggerConfig
from envlogger.core.logger import Logger
from envlogger.core.logger_builder import LoggerBuilder
from envlogger.filters import (
    Directive,
    DirectiveSet,
    EnvFilter,
    FilterBuilder,
    parse_logging_spec,
    parse_spec,
)

# Import submodules (not all classes by default)
from envlogger import bridge
from envlogger import filters

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Directive",
    "DirectiveSet",
    "EnvFilter",
    "EnvLoggerConfig",
    "EnvLoggerError",
    "FilterBuilder",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerBuilder",
    "RegexCompileError",
    "SpecParseError",
    "bridge",
    "filters",
    "parse_logging_spec",
    "parse_spec",
]
