"""Link detectors, one per link category.

Each detector is triggered by a specific byte found by the scanner and
tries to grow a full link span around it:

    match_url    ':'       scheme://host/path
    match_www    'w'/'W'   www.host/path
    match_email  '@'       local@host.tld

All detectors share the signature ``(data, pos, flags) -> Span | None``.
Returning None is the normal "no link here" outcome; detectors never
raise on unrecognized input.

Thread Safety:
Pure functions. No state is kept between calls.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeAlias
from enum import Enum
from types import MappingProxyType

from enlace.charsets import (
    ALNUM,
    ALPHA,
    AT,
    COLON,
    DOT,
    EMAIL_DOMAIN_EXTRA,
    EMAIL_LOCAL_EXTRA,
    PUNCTUATION,
    SLASH,
    WHITESPACE,
)
from enlace.config import AutolinkFlags
from enlace.delimiters import resolve_delimiters
from enlace.domain import check_domain
from enlace.safety import SAFE_PREFIX_WINDOW, is_safe
from enlace.span import Span

Detector: TypeAlias = Callable[[bytes, int, int], Span | None]


class LinkCategory(Enum):
    """Kind of link a detector produces.

    The value is the prefix prepended to the matched bytes in the href.
    """

    URL = ""
    WWW = "http://"
    EMAIL = "mailto:"

    @property
    def href_prefix(self) -> bytes:
        return self.value.encode("ascii")


def _extend_non_space(data: bytes, end: int) -> int:
    size = len(data)
    while end < size and data[end] not in WHITESPACE:
        end += 1
    return end


def match_url(data: bytes, pos: int, flags: int = 0) -> Span | None:
    """Match ``scheme://host...`` around the colon at ``pos``.

    The scheme is the run of ASCII letters right before the colon and must
    pass the safety allow-list. With ``AutolinkFlags.SHORT_DOMAINS`` the
    host may be a single label such as ``localhost``.
    """
    size = len(data)
    if data[pos] != COLON or size - pos < 4:
        return None
    if data[pos + 1] != SLASH or data[pos + 2] != SLASH:
        return None

    allow_short = bool(flags & AutolinkFlags.SHORT_DOMAINS)
    host = check_domain(data, Span(pos + 3, pos + 3), allow_short)
    if host is None:
        return None

    end = _extend_non_space(data, host.end)

    start = pos
    while start > 0 and data[start - 1] in ALPHA:
        start -= 1

    if not is_safe(data[start : start + SAFE_PREFIX_WINDOW]):
        return None

    return resolve_delimiters(data, Span(start, end))


def match_www(data: bytes, pos: int, flags: int = 0) -> Span | None:
    """Match a bare ``www.host...`` starting at ``pos``.

    The ``www.`` prefix is case-sensitive and must not follow a word
    character, so ``awww.example.com`` is not linked. Short domains are
    never accepted here.
    """
    if pos > 0:
        prev = data[pos - 1]
        if prev not in PUNCTUATION and prev not in WHITESPACE:
            return None

    if len(data) - pos < 4 or not data.startswith(b"www.", pos):
        return None

    host = check_domain(data, Span(pos, pos), False)
    if host is None:
        return None

    return resolve_delimiters(data, Span(pos, _extend_non_space(data, host.end)))


def match_email(data: bytes, pos: int, flags: int = 0) -> Span | None:
    """Match ``local@domain.tld`` around the ``@`` at ``pos``.

    Requires a non-empty local part, exactly one ``@`` and at least one
    dot after it. A dot that is the last byte of the input ends the match.
    """
    size = len(data)
    if data[pos] != AT:
        return None

    start = pos
    while start > 0:
        c = data[start - 1]
        if c not in ALNUM and c not in EMAIL_LOCAL_EXTRA:
            break
        start -= 1

    if start == pos:
        return None

    at_signs = dots = 0
    end = pos
    while end < size:
        c = data[end]
        if c == AT:
            at_signs += 1
        elif c == DOT and end < size - 1:
            dots += 1
        elif c not in ALNUM and c not in EMAIL_DOMAIN_EXTRA:
            break
        end += 1

    if end - pos < 2 or at_signs != 1 or dots == 0:
        return None

    return resolve_delimiters(data, Span(start, end))


DETECTORS: Mapping[LinkCategory, Detector] = MappingProxyType(
    {
        LinkCategory.URL: match_url,
        LinkCategory.WWW: match_www,
        LinkCategory.EMAIL: match_email,
    }
)


__all__ = [
    "DETECTORS",
    "Detector",
    "LinkCategory",
    "match_email",
    "match_url",
    "match_www",
]
