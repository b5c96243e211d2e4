"""
Logging directives

Parses a specification string such as ``"warn,myapp::net=debug/timeout"``
into an ordered set of (component path, minimum level) directives and
resolves the minimum level that applies to a given component path.

Grammar::

    spec      := directives ["/" regex]
    directives:= clause ("," clause)*
    clause    := level | path | path "=" [level]

Empty clauses are ignored. A bare level sets the default for every path, a
bare path enables everything under it. Any malformed clause rejects the
whole specification.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from envlogger.core.component_path import (
    ComponentPath,
    PathLike,
    is_prefix,
    join_path,
    parse_path,
    split_path,
)
from envlogger.core.errors import SpecParseError
from envlogger.core.log_level import LogLevel


@dataclass(frozen=True)
class Directive:
    """
    A single (component path, minimum level) rule.

    A ``component_path`` of None is the default directive and matches
    every path.
    """

    component_path: Optional[ComponentPath]
    level: LogLevel

    def __post_init__(self):
        if self.component_path is not None:
            path = split_path(self.component_path)
            object.__setattr__(self, "component_path", path or None)
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")

    @property
    def is_default(self) -> bool:
        return self.component_path is None

    @property
    def specificity(self) -> int:
        """Number of path segments; 0 for the default directive."""
        return len(self.component_path) if self.component_path else 0

    def matches(self, path: ComponentPath) -> bool:
        """True if this directive covers ``path`` (segment-wise prefix)."""
        if self.component_path is None:
            return True
        return is_prefix(self.component_path, path)

    def __str__(self) -> str:
        if self.component_path is None:
            return self.level.name.lower()
        return f"{join_path(self.component_path)}={self.level.name.lower()}"


class DirectiveSet:
    """
    Immutable, ordered collection of directives from one specification.

    Parse order is kept in ``entries``. Resolution picks the directive with
    the longest matching path; among equally long paths the one parsed last
    wins.
    """

    __slots__ = ("_entries", "_by_specificity")

    def __init__(self, entries: Iterable[Directive] = ()):
        self._entries: Tuple[Directive, ...] = tuple(entries)
        # Stable sort keeps parse order among equally specific directives
        self._by_specificity: Tuple[Directive, ...] = tuple(
            sorted(self._entries, key=lambda d: d.specificity)
        )

    @classmethod
    def from_directives(cls, directives: Iterable[Directive]) -> "DirectiveSet":
        return cls(directives)

    @property
    def entries(self) -> Tuple[Directive, ...]:
        return self._entries

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def default(self) -> Optional[Directive]:
        """The effective default directive, if any."""
        for directive in reversed(self._entries):
            if directive.is_default:
                return directive
        return None

    def resolve(self, component_path: PathLike) -> LogLevel:
        """
        Resolve the minimum level for a component path.

        Args:
            component_path: Text path or sequence of segments

        Returns:
            TRACE when the set is empty (everything allowed), the level of
            the most specific matching directive otherwise, or OFF when no
            directive matches
        """
        if not self._entries:
            return LogLevel.TRACE

        path = split_path(component_path)
        for directive in reversed(self._by_specificity):
            if directive.matches(path):
                return directive.level
        return LogLevel.OFF

    def most_verbose_level(self) -> LogLevel:
        """Most verbose level that any component could be enabled at."""
        if not self._entries:
            return LogLevel.TRACE
        return min(directive.level for directive in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectiveSet):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"DirectiveSet('{','.join(str(d) for d in self._entries)}')"


def parse_spec(spec: Optional[str]) -> DirectiveSet:
    """
    Parse the directive part of a specification string.

    Args:
        spec: Comma-separated directives; None or "" yields an empty set

    Returns:
        Parsed DirectiveSet

    Raises:
        SpecParseError: If any clause is malformed
    """
    if not spec:
        return DirectiveSet()

    directives = []
    offset = 0
    for raw in spec.split(","):
        clause = raw.strip()
        position = offset + len(raw) - len(raw.lstrip())
        offset += len(raw) + 1
        if clause:
            directives.append(_parse_clause(clause, position))
    return DirectiveSet(directives)


def parse_logging_spec(spec: Optional[str]) -> Tuple[DirectiveSet, Optional[str]]:
    """
    Parse a full specification string, e.g. "crate1,crate2::mod3,crate3::x=error/foo".

    Returns:
        Tuple of (DirectiveSet, regex pattern text or None)

    Raises:
        SpecParseError: If a clause is malformed or the spec has more than
                        one '/' separator
    """
    if not spec:
        return DirectiveSet(), None

    mods, sep, pattern = spec.partition("/")
    if "/" in pattern:
        raise SpecParseError(pattern, len(mods) + 1, "too many '/' separators")

    return parse_spec(mods), (pattern if sep and pattern else None)


def _parse_clause(clause: str, position: int) -> Directive:
    parts = clause.split("=")

    if len(parts) == 1:
        level = LogLevel.parse(clause)
        if level is not None:
            return Directive(None, level)
        path = parse_path(clause)
        if path is None:
            raise SpecParseError(clause, position, "not a log level or component path")
        return Directive(path, LogLevel.TRACE)

    if len(parts) != 2:
        raise SpecParseError(clause, position, "expected 'path=level'")

    name, level_text = parts[0].strip(), parts[1].strip()
    path = parse_path(name) if name else None
    if path is None:
        raise SpecParseError(clause, position, f"invalid component path '{name}'")

    # "path=" enables everything under path
    if not level_text:
        return Directive(path, LogLevel.TRACE)

    level = LogLevel.parse(level_text)
    if level is None:
        raise SpecParseError(clause, position, f"unknown log level '{level_text}'")
    return Directive(path, level)
