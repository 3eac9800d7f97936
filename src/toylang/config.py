"""ContextVar-based scan configuration for toylang.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, when it is constructed.

Thread Safety:
    Each thread has independent ContextVar storage,
    so no locks are needed.

Usage:
    from toylang.config import ScanConfig, scan_config_context
    from toylang.lexer import Scanner

    with scan_config_context(ScanConfig(unicode_whitespace=False)):
        tokens = Scanner(source).scan_all()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is excluded: it is per-call state,
    not configuration. It remains on the Scanner instance.

    Attributes:
        unicode_whitespace: Skip any Unicode whitespace between tokens.
            When False only ASCII whitespace is skipped and other space
            characters (e.g. U+00A0) are invalid characters.

    """

    unicode_whitespace: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "unicode_whitespace": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.unicode_whitespace
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(unicode_whitespace=False)):
        ...     get_scan_config().unicode_whitespace
        False
        >>> get_scan_config().unicode_whitespace
        True

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
