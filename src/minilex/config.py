"""ContextVar-based scanner configuration for minilex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Session or Scanner created without an explicit ``config=`` argument reads
the active LexConfig once, at construction time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from minilex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(max_lexeme_length=32)):
        tokens = tokenize("a_rather_long_identifier_name_that_overflows")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from minilex.errors import ConfigError

# Default cap on stored lexeme length (characters)
MAX_LEXEME_LENGTH = 256


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable scanner configuration.

    Attributes:
        max_lexeme_length: Longest text stored on a token. Longer identifier
            and number runs are consumed in full but stored truncated.
        separators_enabled: Emit SEPARATOR tokens for ( ) { } [ ] ; ,
            instead of INVALID
        encoding: Text encoding used when opening source files

    """

    max_lexeme_length: int = MAX_LEXEME_LENGTH
    separators_enabled: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if (
            not isinstance(self.max_lexeme_length, int)
            or isinstance(self.max_lexeme_length, bool)
            or self.max_lexeme_length < 1
        ):
            raise ConfigError(
                f"max_lexeme_length must be a positive integer, got {self.max_lexeme_length!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"max_lexeme_length": 8, "color": "red"})
            LexConfig(max_lexeme_length=8, separators_enabled=False, encoding='utf-8')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current scanner configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set scanner configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: LexConfig to use within the context.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "MAX_LEXEME_LENGTH",
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
