"""
Log entry data structure

What a sink receives once an event has passed the filter
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any
import threading

from envlogger.core.component_path import ComponentPath, split_path
from envlogger.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single accepted log message.
    ``component`` is the originating component name ("a::b" or "a.b").
    """

    level: LogLevel
    message: str
    component: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    file_name: str = ""
    line_number: int = 0
    function_name: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def path(self) -> ComponentPath:
        """Component name split into path segments."""
        return split_path(self.component)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "component": self.component,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
            "extra": self.extra,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:8}] "
            f"[{self.component}] "
            f"{self.message}"
        )
