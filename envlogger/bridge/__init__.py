"""Bridge module - stdlib logging interoperability"""

from envlogger.bridge.stdlib import (
    EnvLoggerFilter,
    LoggerBridgeHandler,
    level_from_stdlib,
    level_to_stdlib,
    record_path,
)

__all__ = [
    "EnvLoggerFilter",
    "LoggerBridgeHandler",
    "level_from_stdlib",
    "level_to_stdlib",
    "record_path",
]
