"""ContextVar-based render configuration for Llano.

Provides thread-local configuration using Python's ContextVars (PEP 567).
With no configuration set, ``convert()`` uses the module-level defaults,
which give the fixed plain-text behaviour.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from llano import convert
    from llano.config import ListMarkers, RenderConfig, render_config_context

    with render_config_context(RenderConfig(list_markers=ListMarkers.BULLET)):
        text = convert("- alpha\\n- beta")  # "• alpha\\n• beta"

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum


class ListMarkers(Enum):
    """How list items are introduced in plain-text output.

    NONE: item boundaries are conveyed by line breaks only
    BULLET: every item starts with "• "
    ORDINAL: ordered items start with "N. ", bullet items with "• "

    """

    NONE = "none"
    BULLET = "bullet"
    ORDINAL = "ordinal"


BULLET_MARKER = "• "


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        list_markers: List item marker policy
        drop_strikethrough: Omit ~~deleted~~ text instead of keeping it
        table_cell_separator: Text written between cells of a table row
        tables_enabled: Parse GFM tables
        strikethrough_enabled: Parse ~~strikethrough~~ syntax

    """

    list_markers: ListMarkers = ListMarkers.NONE
    drop_strikethrough: bool = True
    table_cell_separator: str = "\t"
    tables_enabled: bool = True
    strikethrough_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. ``list_markers`` may be given by value
        ("bullet") as well as by enum member.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "list_markers": "ordinal",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.list_markers
            <ListMarkers.ORDINAL: 'ordinal'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "list_markers" in filtered:
            filtered["list_markers"] = ListMarkers(filtered["list_markers"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(drop_strikethrough=False)):
        ...     text = convert("~~old~~ new")
        >>> # Automatically reset to previous config

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "BULLET_MARKER",
    "ListMarkers",
    "RenderConfig",
    "get_render_config",
    "reset_render_config",
    "render_config_context",
    "set_render_config",
]
