"""ContextVar-based print configuration for plume.

Provides context-local configuration using Python's ContextVars (PEP 567).
The printer reads the active config once per print_ast() call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from plume.config import PrintConfig, print_config_context

    with print_config_context(PrintConfig(strict=False)):
        text = print_ast(tree)

    # Or per call
    text = print_ast(tree, config=PrintConfig(strict=False))

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PrintConfig:
    """Immutable print configuration.

    Attributes:
        strict: Raise PrintError when an operation, fragment definition or
            inline fragment has an empty selection set
        log_unknown_kinds: Log a warning before raising for node kinds that
            have no rendering entry

    """

    strict: bool = True
    log_unknown_kinds: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "PrintConfig":
        """Create PrintConfig from a mapping, ignoring unknown keys.

        Example:
            >>> PrintConfig.from_dict({"strict": False, "unknown": 1}).strict
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PrintConfig = PrintConfig()

_print_config: ContextVar[PrintConfig] = ContextVar(
    "print_config",
    default=_DEFAULT_CONFIG,
)


def get_print_config() -> PrintConfig:
    """Get the print configuration active in this context."""
    return _print_config.get()


def set_print_config(config: PrintConfig) -> None:
    """Set print configuration for the current context."""
    _print_config.set(config)


def reset_print_config() -> None:
    """Reset to the default configuration."""
    _print_config.set(_DEFAULT_CONFIG)


@contextmanager
def print_config_context(config: PrintConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with print_config_context(PrintConfig(strict=False)):
        ...     get_print_config().strict
        False

    """
    token = _print_config.set(config)
    try:
        yield
    finally:
        _print_config.reset(token)


__all__ = [
    "PrintConfig",
    "get_print_config",
    "print_config_context",
    "reset_print_config",
    "set_print_config",
]
