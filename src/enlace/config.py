"""Autolink options and ContextVar-based defaults for enlace.

Options are passed per call. Arguments left as None fall back to the
AutolinkConfig active in the current context, so an application can change
its defaults (for example the skip-tag list) without mutating shared state.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from enlace import autolink
    from enlace.config import AutolinkConfig, autolink_config_context

    with autolink_config_context(AutolinkConfig(skip_tags=("a", "pre"))):
        result = autolink("<code>http://example.com</code>")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any

from enlace.errors import InvalidModeError
from enlace.tags import DEFAULT_SKIP_TAGS


class LinkMode(Enum):
    """Which kinds of links a scan creates."""

    ALL = "all"
    URLS = "urls"
    EMAILS = "email_addresses"

    @classmethod
    def coerce(cls, value: Any) -> "LinkMode":
        """Convert a member, its value or its name to a LinkMode.

        Raises:
            InvalidModeError: If ``value`` names no mode.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value or key == member.name.lower():
                    return member
        raise InvalidModeError(value)

    @property
    def urls_enabled(self) -> bool:
        return self is not LinkMode.EMAILS

    @property
    def emails_enabled(self) -> bool:
        return self is not LinkMode.URLS


class AutolinkFlags(IntFlag):
    """Bit flags adjusting detection.

    Values are stable; callers may build the bitset from plain ints.
    """

    NONE = 0
    SHORT_DOMAINS = 1


# Accept single-label hosts such as http://localhost
SHORT_DOMAINS: int = int(AutolinkFlags.SHORT_DOMAINS)


@dataclass(frozen=True, slots=True)
class AutolinkConfig:
    """Immutable autolink defaults.

    Attributes:
        mode: Which link categories to detect
        link_attr: Extra attributes inserted verbatim into each <a> tag
        skip_tags: Tag names whose content is never linked
        flags: AutolinkFlags bitset

    """

    mode: LinkMode = LinkMode.ALL
    link_attr: str | bytes | None = None
    skip_tags: tuple[str | bytes, ...] = DEFAULT_SKIP_TAGS
    flags: int = 0

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AutolinkConfig":
        """Create AutolinkConfig from dictionary.

        Only includes keys that are valid AutolinkConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                AutolinkConfig attribute names.

        Returns:
            New AutolinkConfig instance with values from dict.

        Raises:
            InvalidModeError: If ``mode`` names no mode.

        Example:
            >>> config = AutolinkConfig.from_dict({
            ...     "mode": "urls",
            ...     "skip_tags": ["a", "pre"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.mode
            <LinkMode.URLS: 'urls'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "mode" in filtered:
            filtered["mode"] = LinkMode.coerce(filtered["mode"])
        if "skip_tags" in filtered:
            filtered["skip_tags"] = tuple(filtered["skip_tags"] or ())
        if "flags" in filtered:
            filtered["flags"] = int(filtered["flags"] or 0)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: AutolinkConfig = AutolinkConfig()

# Thread-local configuration via ContextVar
_autolink_config: ContextVar[AutolinkConfig] = ContextVar(
    "autolink_config",
    default=_DEFAULT_CONFIG,
)


def get_autolink_config() -> AutolinkConfig:
    """Get current autolink defaults (thread-local)."""
    return _autolink_config.get()


def set_autolink_config(config: AutolinkConfig) -> None:
    """Set autolink defaults for current context.

    Args:
        config: AutolinkConfig instance to use for this context.

    """
    _autolink_config.set(config)


def reset_autolink_config() -> None:
    """Reset to the built-in defaults."""
    _autolink_config.set(_DEFAULT_CONFIG)


@contextmanager
def autolink_config_context(config: AutolinkConfig) -> Iterator[None]:
    """Context manager for temporary default changes.

    Args:
        config: AutolinkConfig to use within the context.

    Example:
        >>> with autolink_config_context(AutolinkConfig(mode=LinkMode.URLS)):
        ...     autolink("a@b.com").link_count
        0

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _autolink_config.get()
    _autolink_config.set(config)
    try:
        yield
    finally:
        _autolink_config.set(previous)


__all__ = [
    "SHORT_DOMAINS",
    "AutolinkConfig",
    "AutolinkFlags",
    "LinkMode",
    "autolink_config_context",
    "get_autolink_config",
    "reset_autolink_config",
    "set_autolink_config",
]
