"""
enlace — single-pass autolinker for plain text and HTML

Finds URLs, bare ``www.`` domains and email addresses in a block of text and
wraps them in ``<a>`` tags. Existing links and code are left alone. Works on
bytes directly; no HTML parser, no runtime dependencies.

Quick Start:
    >>> from enlace import autolink
    >>> autolink("Visit http://example.com.")
    ScanResult(text='Visit <a href="http://example.com">http://example.com</a>.', link_count=1)

    >>> # Reusable, thread-safe processor
    >>> from enlace import Autolinker, LinkMode
    >>> linker = Autolinker(mode=LinkMode.URLS, link_attr='rel="nofollow"')
    >>> text, count = linker("www.example.com")

Custom link text:
    >>> autolink("see http://x.com", on_link=lambda url: "LINK").text
    'see <a href="http://x.com">LINK</a>'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from enlace.config import (
    SHORT_DOMAINS,
    AutolinkConfig,
    AutolinkFlags,
    LinkMode,
    autolink_config_context,
    get_autolink_config,
    reset_autolink_config,
    set_autolink_config,
)
from enlace.detectors import LinkCategory, match_email, match_url, match_www
from enlace.errors import EnlaceError, InvalidCallbackResultError, InvalidModeError
from enlace.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from enlace.renderer import TEXT_ENCODING, TEXT_ERRORS, LinkRenderer, LinkTextCallback
from enlace.scanner import Scanner, ScanResult, scan
from enlace.span import Span
from enlace.tags import DEFAULT_SKIP_TAGS

__version__ = "0.1.0"

TextInput: TypeAlias = str | bytes | bytearray | memoryview


def _coerce_flags(flags: int | Iterable[int]) -> int:
    if isinstance(flags, int):
        return int(flags)
    bits = 0
    for flag in flags:
        bits |= int(flag)
    return bits


def _coerce_skip_tags(skip_tags: Iterable[str | bytes]) -> tuple[str | bytes, ...]:
    if isinstance(skip_tags, (str, bytes)):
        return (skip_tags,)
    return tuple(skip_tags)


def _autolink(
    text: TextInput,
    config: AutolinkConfig,
    on_link: LinkTextCallback | None,
) -> ScanResult:
    """Autolink ``text`` with a fully resolved config."""
    text_input = isinstance(text, str)
    if text_input:
        data = text.encode(TEXT_ENCODING, TEXT_ERRORS)
    elif isinstance(text, bytes):
        data = text
    elif isinstance(text, (bytearray, memoryview)):
        data = bytes(text)
    else:
        raise TypeError(f"autolink() expects str or bytes, got {type(text).__name__}")

    result = scan(
        data,
        mode=config.mode,
        flags=config.flags,
        link_attr=config.link_attr,
        skip_tags=config.skip_tags,
        on_link=on_link,
        text_input=text_input,
    )

    if result.link_count == 0:
        return ScanResult(text, 0)
    if text_input:
        return ScanResult(result.text.decode(TEXT_ENCODING, TEXT_ERRORS), result.link_count)
    return result


def _resolve_config(
    mode: LinkMode | str | None,
    link_attr: str | bytes | None,
    skip_tags: Iterable[str | bytes] | None,
    flags: int | Iterable[int] | None,
) -> AutolinkConfig:
    defaults = get_autolink_config()
    return AutolinkConfig(
        mode=LinkMode.coerce(defaults.mode if mode is None else mode),
        link_attr=defaults.link_attr if link_attr is None else link_attr,
        skip_tags=defaults.skip_tags if skip_tags is None else _coerce_skip_tags(skip_tags),
        flags=_coerce_flags(defaults.flags if flags is None else flags),
    )


def autolink(
    text: TextInput,
    mode: LinkMode | str | None = None,
    link_attr: str | bytes | None = None,
    skip_tags: Iterable[str | bytes] | None = None,
    flags: int | Iterable[int] | None = None,
    on_link: LinkTextCallback | None = None,
) -> ScanResult:
    """Wrap URLs, www. domains and email addresses in ``<a>`` tags.

    The text may be plain text or HTML. If it is HTML it is expected to be
    escaped already; matched links are emitted as they are.

    Args:
        text: Input text. ``str`` in gives ``str`` out, bytes in gives bytes out.
        mode: ``LinkMode.ALL``, ``LinkMode.URLS`` or ``LinkMode.EMAILS``
            (or ``"all"``, ``"urls"``, ``"email_addresses"``).
        link_attr: Attributes inserted verbatim into every generated tag,
            e.g. ``'target="_blank"'``. Not escaped.
        skip_tags: Tag names whose content is never linked. An empty
            iterable disables skipping. Defaults to ``DEFAULT_SKIP_TAGS``.
        flags: ``AutolinkFlags`` bitset (or an iterable of flags).
            ``SHORT_DOMAINS`` accepts hosts without a dot in URLs.
        on_link: Called once per link, in order, with the matched text;
            its return value becomes the visible link text.

    Arguments left as None use the active AutolinkConfig
    (see ``autolink_config_context``).

    Returns:
        ScanResult ``(text, link_count)``. When ``link_count`` is zero,
        ``text`` is the input object itself.

    Raises:
        InvalidModeError: Unknown mode. Raised before scanning.
        InvalidCallbackResultError: ``on_link`` returned neither str nor bytes.
        TypeError: ``text`` is not str or bytes.

    Example:
        >>> autolink("mail me at a@b.com or visit http://x.com", mode="email_addresses")
        ScanResult(text='mail me at <a href="mailto:a@b.com">a@b.com</a> or visit http://x.com', link_count=1)

    """
    config = _resolve_config(mode, link_attr, skip_tags, flags)
    return _autolink(text, config, on_link)


class Autolinker:
    """Reusable autolinker with fixed options.

    Usage:
        >>> linker = Autolinker(link_attr='target="_blank"')
        >>> linker("www.example.com").text
        '<a href="http://www.example.com" target="_blank">www.example.com</a>'

        >>> # Batch
        >>> results = linker.link_many(["a@b.com", "no links here"])

    Options not given are taken from the AutolinkConfig active when the
    Autolinker is created. Later config changes do not affect it.

    Thread Safety:
        Immutable after construction. Safe to share between threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        mode: LinkMode | str | None = None,
        link_attr: str | bytes | None = None,
        skip_tags: Iterable[str | bytes] | None = None,
        flags: int | Iterable[int] | None = None,
    ) -> None:
        """Initialize the autolinker.

        Raises:
            InvalidModeError: Unknown mode.
        """
        self._config = _resolve_config(mode, link_attr, skip_tags, flags)

    @property
    def config(self) -> AutolinkConfig:
        """The resolved options used for every call."""
        return self._config

    def __call__(self, text: TextInput, on_link: LinkTextCallback | None = None) -> ScanResult:
        """Autolink one text. See ``autolink`` for details."""
        return _autolink(text, self._config, on_link)

    def link_many(
        self,
        texts: Iterable[TextInput],
        on_link: LinkTextCallback | None = None,
    ) -> list[ScanResult]:
        """Autolink several texts with the same options.

        Args:
            texts: Iterable of inputs
            on_link: Optional link text callback shared by all texts

        Returns:
            List of ScanResult, in input order
        """
        return [_autolink(text, self._config, on_link) for text in texts]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "autolink",
    "Autolinker",
    "ScanResult",
    # Options
    "LinkMode",
    "AutolinkFlags",
    "SHORT_DOMAINS",
    "DEFAULT_SKIP_TAGS",
    # Configuration (ContextVar-based)
    "AutolinkConfig",
    "get_autolink_config",
    "set_autolink_config",
    "reset_autolink_config",
    "autolink_config_context",
    # Engine
    "LinkCategory",
    "LinkRenderer",
    "LinkTextCallback",
    "Scanner",
    "Span",
    "match_email",
    "match_url",
    "match_www",
    "scan",
    # Errors
    "EnlaceError",
    "InvalidCallbackResultError",
    "InvalidModeError",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
