#!/usr/bin/env python3
"""Basic usage example

Try: PY_LOG="warn,example::db=debug/query" python examples/basic_usage.py
"""

import logging
import sys

from envlogger import EnvLoggerConfig, LoggerBuilder, SpecParseError
from envlogger.bridge import EnvLoggerFilter, level_to_stdlib


class StderrWriter:
    def write(self, entry):
        sys.stderr.write(f"{entry}\n")


def main():
    config = EnvLoggerConfig.default()
    try:
        env_filter = config.build_filter()
    except SpecParseError as e:
        sys.exit(f"bad {config.env_var}: {e}")

    logger = (LoggerBuilder()
        .with_name("example")
        .with_env_filter(env_filter)
        .add_writer(StderrWriter())
        .build())
    db = logger.child("db")

    logger.trace("This is trace")
    logger.info("Application started")
    db.debug("running query %s", "SELECT 1")
    db.warn("slow query")
    logger.error("This is error")

    # stdlib logging gated by the same spec
    handler = logging.StreamHandler()
    handler.addFilter(EnvLoggerFilter(env_filter))
    legacy = logging.getLogger("example.legacy")
    legacy.addHandler(handler)
    legacy.setLevel(level_to_stdlib(env_filter.most_verbose_level()))
    legacy.warning("legacy warning")

if __name__ == "__main__":
    main()
