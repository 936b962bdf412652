"""ContextVar-based highlight configuration for Spanmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The selector reads the active config when no explicit request mask is given.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from spanmark.config import HighlightConfig, highlight_config_context
    from spanmark.kinds import TextKind

    with highlight_config_context(HighlightConfig(kinds=TextKind.STRUCTURAL)):
        highlighter = select_highlighter(item)

"""

from collections.abc import Iterable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from spanmark.errors import ConfigError
from spanmark.kinds import TextKind


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        kinds: Default request mask used when the caller passes none
        sniff_plural: Also sniff the plural string when deciding whether
            markup or common placeholders are present

    """

    kinds: TextKind = TextKind.ALL
    sniff_plural: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Unknown keys are silently ignored. ``kinds`` accepts a TextKind,
        an int bit mask, a single kind name or an iterable of kind names
        (case-insensitive, e.g. ``["markup", "placeholder"]``).

        Args:
            config_dict: Dictionary with config values

        Returns:
            New HighlightConfig instance with values from dict.

        Raises:
            ConfigError: If ``kinds`` names an unknown kind or has an
                unsupported type.

        Example:
            >>> config = HighlightConfig.from_dict({"kinds": ["escape"]})
            >>> config.kinds
            <TextKind.ESCAPE: 2>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "kinds" in filtered:
            filtered["kinds"] = parse_kinds(filtered["kinds"])
        return cls(**filtered)


def parse_kinds(value: TextKind | int | str | Iterable[str]) -> TextKind:
    """Convert a loosely typed request mask into a TextKind."""
    if isinstance(value, TextKind):
        return value
    if isinstance(value, bool):
        raise ConfigError("kinds", value, "expected kind names or a bit mask")
    if isinstance(value, int):
        try:
            return TextKind(value)
        except ValueError:
            raise ConfigError("kinds", value, "bit mask has unknown bits") from None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Iterable):
        raise ConfigError("kinds", value, "expected kind names or a bit mask")

    mask = TextKind(0)
    for name in value:
        if not isinstance(name, str):
            raise ConfigError("kinds", name, "kind names must be strings")
        member = TextKind.__members__.get(name.strip().upper().replace("-", "_"))
        if member is None:
            raise ConfigError("kinds", name, "unknown text kind")
        mask |= member
    return mask


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

# Thread-local configuration via ContextVar
_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Args:
        config: HighlightConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: HighlightConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "highlight_config_context",
    "parse_kinds",
    "reset_highlight_config",
    "set_highlight_config",
]
