"""ContextVar-based recognizer configuration for MiniLang.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by every Recognizer created in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from minilang.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(strict=True)):
        diagnostics = recognize("x = 1;")

"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from minilang.errors import ConfigError

DEFAULT_MAX_DEPTH = 200

# Each nesting level costs three Python frames (expression, term, factor
# or program, statement, conditional); the rest is headroom for callers.
_FRAMES_PER_LEVEL = 4


def max_depth_ceiling() -> int:
    """Largest max_depth the interpreter stack can hold right now."""
    return sys.getrecursionlimit() // _FRAMES_PER_LEVEL


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable recognizer configuration.

    Attributes:
        max_depth: Deepest rule nesting before the recognizer reports
            "Nesting too deep" instead of recursing further
        strict: Raise RecognitionError after a run that produced diagnostics

    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            raise ConfigError(
                "max_depth", f"must be an integer, got {type(self.max_depth).__name__}"
            )
        if self.max_depth < 1:
            raise ConfigError("max_depth", f"must be >= 1, got {self.max_depth}")
        ceiling = max_depth_ceiling()
        if self.max_depth > ceiling:
            raise ConfigError(
                "max_depth",
                f"must be <= {ceiling} under the current recursion limit, got {self.max_depth}",
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"strict": True, "colour": "red"}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "minilang_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current recognizer configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set recognizer configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_depth=8)):
        ...     get_parse_config().max_depth
        8

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "max_depth_ceiling",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
