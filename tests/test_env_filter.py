"""Tests for the EnvFilter evaluation engine"""

import re
import threading
from unittest.mock import MagicMock

import pytest

from envlogger import LogEntry, LogLevel, RegexCompileError, SpecParseError
from envlogger.filters import DirectiveSet, EnvFilter, FilterBuilder, parse_spec

EVENT_LEVELS = [
    LogLevel.TRACE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
]


class TestIsEnabled:
    """Test the level check."""

    def test_empty_spec_enables_everything(self):
        env_filter = EnvFilter(parse_spec(""))
        for level in EVENT_LEVELS:
            assert env_filter.is_enabled("any::path", level)
            assert env_filter.is_enabled((), level)

    def test_no_directives_argument(self):
        assert EnvFilter().is_enabled("x", LogLevel.TRACE)

    def test_filter_info(self):
        env_filter = EnvFilter(parse_spec("info"))
        assert env_filter.is_enabled("crate1", LogLevel.INFO)
        assert not env_filter.is_enabled("crate1", LogLevel.DEBUG)

    def test_path_level(self):
        env_filter = EnvFilter(parse_spec("pathA::pathB=warn"))
        assert env_filter.is_enabled(["pathA", "pathB"], LogLevel.WARN)
        assert not env_filter.is_enabled(["pathA", "pathB"], LogLevel.INFO)
        assert env_filter.is_enabled(["pathA", "pathB", "pathC"], LogLevel.WARN)
        assert not env_filter.is_enabled(["pathA"], LogLevel.WARN)

    def test_longest_prefix(self):
        env_filter = EnvFilter(parse_spec("a=error,a::b=debug"))
        assert env_filter.is_enabled(["a", "b", "c"], LogLevel.DEBUG)
        assert not env_filter.is_enabled(["a", "c"], LogLevel.DEBUG)

    def test_beginning_longest_match(self):
        env_filter = EnvFilter(parse_spec("crate2=info,crate2::mod=debug,crate1::mod1=warn"))
        assert env_filter.is_enabled("crate2::mod::x", LogLevel.DEBUG)
        assert not env_filter.is_enabled("crate2", LogLevel.DEBUG)

    def test_match_full_path(self):
        env_filter = EnvFilter(parse_spec("crate2=info,crate1::mod1=warn"))
        assert env_filter.is_enabled("crate1::mod1", LogLevel.WARN)
        assert not env_filter.is_enabled("crate1::mod1", LogLevel.INFO)
        assert env_filter.is_enabled("crate2", LogLevel.INFO)
        assert not env_filter.is_enabled("crate2", LogLevel.DEBUG)

    def test_no_match(self):
        env_filter = EnvFilter(parse_spec("crate2=info,crate1::mod1=warn"))
        assert not env_filter.is_enabled("crate3", LogLevel.WARN)
        assert not env_filter.is_enabled("crate3", LogLevel.CRITICAL)

    def test_off_level(self):
        env_filter = EnvFilter(parse_spec("info,crate1::mod1=off"))
        assert not env_filter.is_enabled("crate1::mod1", LogLevel.ERROR)
        assert not env_filter.is_enabled("crate1::mod1", LogLevel.CRITICAL)
        assert env_filter.is_enabled("crate2::mod2", LogLevel.INFO)

    def test_duplicate_defaults(self):
        env_filter = EnvFilter(parse_spec("Info,Debug"))
        assert env_filter.is_enabled("x", LogLevel.DEBUG)
        assert not env_filter.is_enabled("x", LogLevel.TRACE)

    def test_off_is_never_an_enabled_event_level(self):
        assert not EnvFilter.from_spec("info,noisy=off").is_enabled("noisy", LogLevel.OFF)
        assert not EnvFilter.from_spec("pathA=warn").is_enabled("other", LogLevel.OFF)
        assert not EnvFilter.from_spec("trace").is_enabled("x", LogLevel.OFF)
        assert not EnvFilter().is_enabled("x", LogLevel.OFF)

    def test_python_logger_names(self):
        env_filter = EnvFilter(parse_spec("myapp::net=debug"))
        assert env_filter.is_enabled("myapp.net.http", LogLevel.DEBUG)


class TestAccepts:
    """Test regex gating of rendered messages."""

    def test_no_regex(self):
        env_filter = EnvFilter(parse_spec("mycomp=trace"))
        assert env_filter.accepts(["mycomp"], LogLevel.TRACE, "anything")

    def test_regex_match(self):
        env_filter = EnvFilter(parse_spec("mycomp=trace"), "fail")
        assert not env_filter.accepts(["mycomp"], LogLevel.TRACE, "operation ok")
        assert env_filter.accepts(["mycomp"], LogLevel.TRACE, "operation failed")

    def test_regex_is_substring_search(self):
        env_filter = EnvFilter(None, "f.o")
        assert env_filter.accepts("x", LogLevel.INFO, "say foo now")
        assert env_filter.accepts("x", LogLevel.INFO, "f1o")
        assert not env_filter.accepts("x", LogLevel.INFO, "bar")

    def test_level_failure_wins_over_message(self):
        env_filter = EnvFilter(parse_spec("mycomp=error"), "fail")
        assert not env_filter.accepts(["mycomp"], LogLevel.DEBUG, "failed")

    def test_regex_not_evaluated_when_disabled(self):
        pattern = MagicMock()
        env_filter = EnvFilter(parse_spec("mycomp=error"), pattern)

        assert not env_filter.accepts(["mycomp"], LogLevel.DEBUG, "failed")
        pattern.search.assert_not_called()

        env_filter.accepts(["mycomp"], LogLevel.ERROR, "failed")
        pattern.search.assert_called_once_with("failed")

    def test_precompiled_pattern(self):
        env_filter = EnvFilter(None, re.compile("timeout", re.IGNORECASE))
        assert env_filter.accepts("x", LogLevel.INFO, "Connection TIMEOUT")

    def test_should_log_entry(self):
        env_filter = EnvFilter(parse_spec("app::db=warn"), "slow")
        entry = LogEntry(level=LogLevel.WARN, message="slow query", component="app::db")
        assert env_filter.should_log(entry)
        assert env_filter(entry)

        quiet = LogEntry(level=LogLevel.INFO, message="slow query", component="app::db")
        assert not env_filter.should_log(quiet)


class TestConstruction:
    """Test building filters."""

    def test_invalid_regex(self):
        with pytest.raises(RegexCompileError) as exc_info:
            EnvFilter(DirectiveSet(), "a(")
        assert exc_info.value.pattern == "a("
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_from_spec(self):
        env_filter = EnvFilter.from_spec("error,hello=warn/[0-9] scopes")
        assert env_filter.pattern.pattern == "[0-9] scopes"
        assert env_filter.accepts("hello", LogLevel.WARN, "3 scopes")
        assert not env_filter.accepts("hello", LogLevel.WARN, "scopes")
        assert not env_filter.accepts("other", LogLevel.WARN, "3 scopes")

    def test_from_spec_bad_regex(self):
        with pytest.raises(RegexCompileError):
            EnvFilter.from_spec("info/[unclosed")

    def test_from_spec_bad_directive(self):
        with pytest.raises(SpecParseError):
            EnvFilter.from_spec("mycomp=NotALevel/foo")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PY_LOG", "warn,db=debug")
        env_filter = EnvFilter.from_env()
        assert env_filter.is_enabled("db", LogLevel.DEBUG)
        assert not env_filter.is_enabled("web", LogLevel.INFO)

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("MY_APP_LOG", raising=False)
        env_filter = EnvFilter.from_env("MY_APP_LOG", default="error")
        assert not env_filter.is_enabled("x", LogLevel.WARN)
        assert env_filter.is_enabled("x", LogLevel.ERROR)

    def test_most_verbose_level(self):
        assert EnvFilter.from_spec("warn,db=debug").most_verbose_level() == LogLevel.DEBUG

    def test_repr(self):
        repr_str = repr(EnvFilter.from_spec("info/abc"))
        assert "info" in repr_str
        assert "abc" in repr_str


class TestFilterBuilder:
    """Test FilterBuilder."""

    def test_filter_default(self):
        env_filter = FilterBuilder().filter(None, LogLevel.INFO).build()
        assert env_filter.is_enabled("crate1", LogLevel.INFO)
        assert not env_filter.is_enabled("crate1", LogLevel.DEBUG)

    def test_beginning_longest_match(self):
        env_filter = (FilterBuilder()
            .filter("crate2", LogLevel.INFO)
            .filter("crate2::mod", LogLevel.DEBUG)
            .filter("crate1::mod1", LogLevel.WARN)
            .build())
        assert env_filter.is_enabled("crate2::mod::x", LogLevel.DEBUG)
        assert not env_filter.is_enabled("crate2", LogLevel.DEBUG)

    def test_parse_appends(self):
        env_filter = (FilterBuilder()
            .filter(None, LogLevel.ERROR)
            .parse("info,crate1::mod1=warn")
            .build())
        assert env_filter.is_enabled("crate1::mod1", LogLevel.WARN)
        assert env_filter.is_enabled("crate2::mod2", LogLevel.INFO)

    def test_parse_sets_regex(self):
        env_filter = FilterBuilder().regex("old").parse("info/new").build()
        assert env_filter.pattern.pattern == "new"

    def test_parse_without_regex_keeps_existing(self):
        env_filter = FilterBuilder().regex("keep").parse("info").build()
        assert env_filter.pattern.pattern == "keep"

    def test_parse_error(self):
        with pytest.raises(SpecParseError):
            FilterBuilder().parse("a=b=c")

    def test_filter_rejects_bad_paths(self):
        with pytest.raises(SpecParseError) as exc_info:
            FilterBuilder().filter("bad path", LogLevel.INFO)
        assert exc_info.value.clause == "bad path"

        with pytest.raises(SpecParseError):
            FilterBuilder().filter("a..b", LogLevel.INFO)
        with pytest.raises(SpecParseError):
            FilterBuilder().filter(["a", ""], LogLevel.INFO)

    def test_filter_accepts_segment_sequences(self):
        env_filter = FilterBuilder().filter(["app", "db"], LogLevel.DEBUG).filter([], LogLevel.ERROR).build()
        assert env_filter.is_enabled("app.db.pool", LogLevel.DEBUG)
        assert env_filter.is_enabled("web", LogLevel.ERROR)
        assert not env_filter.is_enabled("web", LogLevel.WARN)

    def test_build_bad_regex(self):
        with pytest.raises(RegexCompileError):
            FilterBuilder().regex("(").build()


class TestConcurrency:
    """Shared filters evaluated from many threads."""

    def test_shared_filter(self):
        env_filter = EnvFilter.from_spec("warn,app::db=debug/query")
        expected = [
            env_filter.accepts("app::db::pool", LogLevel.DEBUG, "slow query"),
            env_filter.accepts("app::web", LogLevel.INFO, "query"),
        ]
        results = []
        lock = threading.Lock()

        def worker():
            for _ in range(500):
                outcome = [
                    env_filter.accepts("app::db::pool", LogLevel.DEBUG, "slow query"),
                    env_filter.accepts("app::web", LogLevel.INFO, "query"),
                ]
                with lock:
                    results.append(outcome)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert expected == [True, False]
        assert all(outcome == expected for outcome in results)
        assert len(results) == 8 * 500
