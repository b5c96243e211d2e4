"""
Log filters module

Directive parsing and the environment-configured filter engine.
"""

from envlogger.filters.base_filter import BaseFilter
from envlogger.filters.directive import (
    Directive,
    DirectiveSet,
    parse_logging_spec,
    parse_spec,
)
from envlogger.filters.env_filter import DEFAULT_ENV_VAR, EnvFilter
from envlogger.filters.filter_builder import FilterBuilder

__all__ = [
    "BaseFilter",
    "DEFAULT_ENV_VAR",
    "Directive",
    "DirectiveSet",
    "EnvFilter",
    "FilterBuilder",
    "parse_logging_spec",
    "parse_spec",
]
