"""
Configuration errors

Raised while turning a specification string into a filter. Per-event
evaluation never raises.
"""

from typing import Optional


class EnvLoggerError(Exception):
    """Base class for envlogger configuration errors."""


class SpecParseError(EnvLoggerError, ValueError):
    """
    A directive specification could not be parsed.

    Attributes:
        clause: The offending clause text
        position: Character offset of the clause within the specification
        reason: Short description of what is wrong with the clause
    """

    def __init__(self, clause: str, position: int, reason: str):
        self.clause = clause
        self.position = position
        self.reason = reason
        super().__init__(
            f"invalid logging spec clause '{clause}' at position {position}: {reason}"
        )


class RegexCompileError(EnvLoggerError, ValueError):
    """
    A message filter pattern is not a valid regular expression.

    Attributes:
        pattern: The pattern text that failed to compile
        detail: Message from the regex engine
    """

    def __init__(self, pattern: str, detail: Optional[str] = None):
        self.pattern = pattern
        self.detail = detail
        message = f"invalid regex filter '{pattern}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
