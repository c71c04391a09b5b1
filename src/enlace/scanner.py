"""Single-pass, tag-aware autolink scanner.

Walks the input once, jumping from trigger byte to trigger byte:

    <        tag: skip its attributes, and the whole element if skip-listed
    :        URL detector (when URLs are enabled)
    w, W     bare www. detector (when URLs are enabled)
    @        email detector (when emails are enabled)

Bytes between links are copied verbatim. When no link is found nothing is
copied at all and the original input is returned.

Thread Safety:
A Scanner is single-use and owns all its state. Module-level tables are
immutable, so any number of scans may run concurrently.

"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import NamedTuple

from enlace.bytebuilder import ByteBuilder
from enlace.charsets import AT, COLON, LT
from enlace.config import LinkMode
from enlace.detectors import DETECTORS, LinkCategory
from enlace.profiling import get_scan_accumulator
from enlace.renderer import LinkRenderer, LinkTextCallback
from enlace.tags import DEFAULT_SKIP_TAGS, normalize_skip_tags, skip_tag
from enlace.utils.logger import get_logger

logger = get_logger(__name__)

# Trigger byte -> detector category. "<" is handled by the scanner itself.
_ACTIONS: MappingProxyType[int, LinkCategory] = MappingProxyType(
    {
        COLON: LinkCategory.URL,
        ord("w"): LinkCategory.WWW,
        ord("W"): LinkCategory.WWW,
        AT: LinkCategory.EMAIL,
    }
)


def _trigger_pattern(mode: LinkMode) -> re.Pattern[bytes]:
    chars = b"<"
    if mode.urls_enabled:
        chars += b":wW"
    if mode.emails_enabled:
        chars += b"@"
    return re.compile(b"[" + chars + b"]")


# Per-mode search patterns for the next byte that needs attention
_TRIGGERS: MappingProxyType[LinkMode, re.Pattern[bytes]] = MappingProxyType(
    {mode: _trigger_pattern(mode) for mode in LinkMode}
)

_DEFAULT_SKIP_TAG_NAMES: tuple[bytes, ...] = normalize_skip_tags(DEFAULT_SKIP_TAGS)


class ScanResult(NamedTuple):
    """Outcome of one autolink pass.

    Attributes:
        text: The linked text, or the original input object when
            ``link_count`` is zero.
        link_count: Number of links created.

    """

    text: bytes | str
    link_count: int


class Scanner:
    """Tag-aware autolink scanner over a bytes input.
    
    Usage:
        >>> renderer = LinkRenderer()
        >>> Scanner(b"see www.example.com", renderer=renderer).scan()
        ScanResult(text=b'see <a href="http://www.example.com">www.example.com</a>', link_count=1)
    
    Thread Safety:
        Single-use. Create one Scanner per input.
        
    """

    __slots__ = ("_data", "_flags", "_mode", "_renderer", "_skip_tags")

    def __init__(
        self,
        data: bytes,
        *,
        renderer: LinkRenderer,
        mode: LinkMode | str = LinkMode.ALL,
        flags: int = 0,
        skip_tags: tuple[bytes, ...] = _DEFAULT_SKIP_TAG_NAMES,
    ) -> None:
        self._data = data
        self._renderer = renderer
        self._mode = LinkMode.coerce(mode)
        self._flags = flags
        self._skip_tags = skip_tags

    def scan(self) -> ScanResult:
        """Run the scan.

        Returns:
            ScanResult with the rendered bytes, or the untouched input when
            no link was found.

        Raises:
            InvalidCallbackResultError: If the link text callback returns
                neither str nor bytes. Exceptions raised by the callback
                itself propagate unchanged. No partial output is kept.

        """
        data = self._data
        size = len(data)
        search = _TRIGGERS[self._mode].search
        flags = self._flags

        out = ByteBuilder()
        copied = 0
        link_count = 0
        pos = 0

        while pos < size:
            match = search(data, pos)
            if match is None:
                break
            pos = match.start()

            if data[pos] == LT:
                pos = skip_tag(data, pos, self._skip_tags)
                continue

            category = _ACTIONS[data[pos]]
            span = DETECTORS[category](data, pos, flags)
            if span is None or span.start < copied:
                pos += 1
                continue

            out.append(data[copied : span.start])
            self._renderer.render(out, data, span, category)
            link_count += 1
            copied = span.end
            pos = max(span.end, pos + 1)

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(size, link_count)

        if link_count == 0:
            logger.debug("Scanned %d bytes, no links", size)
            return ScanResult(data, 0)

        out.append(data[copied:])
        logger.debug("Scanned %d bytes, %d link(s)", size, link_count)
        return ScanResult(out.build(), link_count)


def scan(
    data: bytes,
    *,
    mode: LinkMode | str = LinkMode.ALL,
    flags: int = 0,
    link_attr: str | bytes | None = None,
    skip_tags: tuple[str | bytes, ...] = DEFAULT_SKIP_TAGS,
    on_link: LinkTextCallback | None = None,
    text_input: bool = False,
) -> ScanResult:
    """Autolink ``data`` with fully resolved options.

    This is the bytes-level entry point; ``enlace.autolink`` resolves
    defaults and str input before calling it.

    Args:
        data: Input bytes.
        mode: Link categories to detect, as a LinkMode or its value/name.
        flags: AutolinkFlags bitset.
        link_attr: Attributes inserted verbatim into each <a> tag.
        skip_tags: Tag names whose content is never linked.
        on_link: Optional link text callback.
        text_input: Call ``on_link`` with str instead of bytes.

    Returns:
        ScanResult over bytes.

    Raises:
        InvalidModeError: If ``mode`` names no mode. Checked before scanning.

    """
    mode = LinkMode.coerce(mode)
    if not data:
        return ScanResult(data, 0)

    renderer = LinkRenderer(link_attr, on_link, text_input=text_input)
    scanner = Scanner(
        data,
        renderer=renderer,
        mode=mode,
        flags=flags,
        skip_tags=normalize_skip_tags(skip_tags),
    )
    return scanner.scan()


__all__ = [
    "ScanResult",
    "Scanner",
    "scan",
]
