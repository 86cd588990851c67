"""ContextVar-based walker configuration for optwalk.

A walker reads the active configuration once, when it is constructed, so
changing the context afterwards never affects a walk in progress.

Usage:
    from optwalk.config import WalkConfig, walk_config_context

    with walk_config_context(WalkConfig(strict_attached_values=True)):
        walker = ArgWalker(sys.argv[1:])

    # Or pass it explicitly, which wins over the context
    walker = ArgWalker(sys.argv[1:], config=WalkConfig(strict_attached_values=True))

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Immutable walker configuration.

    Attributes:
        strict_attached_values: Raise UnexpectedAttachedValue when the value
            of ``--name=value`` is never claimed, instead of emitting it as
            a Word.
        preserve_cluster_on_refusal: When a cluster remainder is refused by
            ``required_parameter(False)``, keep the letters so they are
            emitted as further flags. When False the rest of the argument
            is dropped.

    """

    strict_attached_values: bool = False
    preserve_cluster_on_refusal: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> WalkConfig:
        """Create WalkConfig from dictionary, ignoring unknown keys.

        Example:
            >>> WalkConfig.from_dict({"strict_attached_values": True, "x": 1})
            WalkConfig(strict_attached_values=True, preserve_cluster_on_refusal=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: WalkConfig = WalkConfig()

_walk_config: ContextVar[WalkConfig] = ContextVar(
    "walk_config",
    default=_DEFAULT_CONFIG,
)


def get_walk_config() -> WalkConfig:
    """Get the walker configuration active in this context."""
    return _walk_config.get()


def set_walk_config(config: WalkConfig) -> None:
    """Set the walker configuration for the current context."""
    _walk_config.set(config)


def reset_walk_config() -> None:
    """Reset to the default configuration."""
    _walk_config.set(_DEFAULT_CONFIG)


@contextmanager
def walk_config_context(config: WalkConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with walk_config_context(WalkConfig(strict_attached_values=True)):
        ...     get_walk_config().strict_attached_values
        True

    """
    previous = _walk_config.get()
    _walk_config.set(config)
    try:
        yield
    finally:
        _walk_config.set(previous)


__all__ = [
    "WalkConfig",
    "get_walk_config",
    "reset_walk_config",
    "set_walk_config",
    "walk_config_context",
]
