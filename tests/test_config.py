"""Tests for ContextVar-based recognizer configuration.

Validates defaults, context manager behavior, and thread isolation.
"""

import sys
from threading import Thread

import pytest

from minilang import (
    ParseConfig,
    Recognizer,
    get_parse_config,
    parse_config_context,
    recognize,
    reset_parse_config,
    set_parse_config,
    tokenize,
)
from minilang.config import DEFAULT_MAX_DEPTH, max_depth_ceiling
from minilang.errors import ConfigError


class TestParseConfigDataclass:
    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.max_depth == DEFAULT_MAX_DEPTH
        assert config.strict is False

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"strict": True, "max_depth": 7, "colour": "red"})
        assert config == ParseConfig(max_depth=7, strict=True)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()

    def test_from_dict_rejects_non_integer_depth(self) -> None:
        with pytest.raises(ConfigError, match="max_depth"):
            ParseConfig.from_dict({"max_depth": "5"})

    def test_ceiling_follows_recursion_limit(self) -> None:
        assert max_depth_ceiling() == sys.getrecursionlimit() // 4
        assert DEFAULT_MAX_DEPTH <= max_depth_ceiling()
        assert ParseConfig(max_depth=max_depth_ceiling()).max_depth == max_depth_ceiling()


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(strict=True))
        assert get_parse_config().strict is True
        reset_parse_config()
        assert get_parse_config().strict is False

    def test_context_manager_restores_previous(self) -> None:
        set_parse_config(ParseConfig(max_depth=50))
        with parse_config_context(ParseConfig(max_depth=5)):
            assert get_parse_config().max_depth == 5
        assert get_parse_config().max_depth == 50

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_parse_config().strict is False

    def test_config_read_when_recognition_starts(self) -> None:
        recognizer = Recognizer(tokenize("x = (1);"))
        with parse_config_context(ParseConfig(max_depth=1)):
            diagnostics = recognizer.recognize()
        assert diagnostics[0].reason == "Nesting too deep"


class TestThreadIsolation:
    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, int] = {}

        def worker(name: str, depth: int) -> None:
            with parse_config_context(ParseConfig(max_depth=depth)):
                results[name] = len(recognize("x = ((1));"))

        threads = [
            Thread(target=worker, args=("shallow", 1)),
            Thread(target=worker, args=("deep", 10)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results["deep"] == 0
        assert results["shallow"] > 0
        assert get_parse_config() == ParseConfig()
