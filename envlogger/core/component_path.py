"""
Component path helpers

A component path is the ordered sequence of name segments identifying
where a log event comes from, e.g. ``("myapp", "net", "http")``.
"""

import re
from typing import Iterable, Optional, Tuple, Union

ComponentPath = Tuple[str, ...]
PathLike = Union[str, Iterable[str], None]

# Both "a::b::c" and Python logger names "a.b.c" are accepted
PATH_SEPARATOR = re.compile(r"::|\.")
SEGMENT = re.compile(r"[A-Za-z0-9_\-]+")


def split_path(path: PathLike) -> ComponentPath:
    """
    Normalize a component path into a tuple of segments.

    Args:
        path: Text path, sequence of segments, or None/"" for the root

    Returns:
        Tuple of segments (empty for the root path)
    """
    if path is None:
        return ()
    if isinstance(path, str):
        if not path:
            return ()
        return tuple(PATH_SEPARATOR.split(path))
    return tuple(path)


def parse_path(text: str) -> Optional[ComponentPath]:
    """
    Parse a path token from a specification string.

    Returns:
        Tuple of segments, or None if any segment is empty or contains
        characters outside [A-Za-z0-9_-]
    """
    segments = PATH_SEPARATOR.split(text)
    if not all(SEGMENT.fullmatch(segment) for segment in segments):
        return None
    return tuple(segments)


def join_path(path: ComponentPath) -> str:
    """Render a path back into ``a::b::c`` form."""
    return "::".join(path)


def is_prefix(prefix: ComponentPath, path: ComponentPath) -> bool:
    """True if ``prefix`` covers ``path`` segment by segment."""
    return len(prefix) <= len(path) and path[:len(prefix)] == prefix
