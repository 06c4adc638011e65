"""ContextVar-based scan configuration for mathseg.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Segmenter call, read by the scanner in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from mathseg.config import ScanConfig, scan_config_context
    from mathseg.modes import RenderingMode

    with scan_config_context(ScanConfig(mode=RenderingMode.ALL)):
        blocks = parse("x^2 + y^2")  # One inline equation block

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mathseg.modes import RenderingMode

if TYPE_CHECKING:
    from mathseg.grammars import GrammarRegistry


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Explicit arguments passed to the scan entry points take precedence;
    this config supplies the defaults.

    Attributes:
        mode: Rendering mode used when none is passed
        grammar_registry: Grammars to scan for (None = defaults)

    """

    mode: RenderingMode = RenderingMode.ONLY_EQUATIONS
    grammar_registry: GrammarRegistry | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. A string ``mode`` is coerced to RenderingMode.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Raises:
            ValueError: If ``mode`` does not name a rendering mode.

        Example:
            >>> config = ScanConfig.from_dict({"mode": "all", "unknown_key": 1})
            >>> config.mode
            <RenderingMode.ALL: 'all'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "mode" in filtered:
            filtered["mode"] = RenderingMode.from_value(filtered["mode"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

# Thread-local configuration via ContextVar
_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local).

    Returns:
        The active ScanConfig for this thread/context.

    """
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

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
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
