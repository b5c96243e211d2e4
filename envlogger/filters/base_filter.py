"""
Entry-level filter interface

Logger.write_entry runs every extra filter on an entry the EnvFilter has
already accepted; EnvFilter itself implements should_log so it can be
used wherever a LogEntry is at hand.
"""

from abc import ABC, abstractmethod
from envlogger.core.log_entry import LogEntry


class BaseFilter(ABC):
    """
    Post-acceptance check on a complete LogEntry.

    Unlike EnvFilter.is_enabled, implementations see the rendered message,
    component and extra fields, so they only run once an entry exists.
    """

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """
        Decide whether an accepted entry still goes to the writers.

        Args:
            entry: Entry built by Logger.log or the stdlib bridge handler

        Returns:
            False to drop the entry (counted as filtered)
        """

    def __call__(self, entry: LogEntry) -> bool:
        return self.should_log(entry)
