"""Hostname validation for URL and bare ``www.`` detection."""

from __future__ import annotations

from enlace.charsets import ALNUM, DOT, HYPHEN
from enlace.span import Span


def check_domain(data: bytes, span: Span, allow_short: bool) -> Span | None:
    """Consume a hostname starting at ``span.start``.

    The hostname must start with an ASCII alphanumeric byte and continues
    over alphanumerics, ``-`` and ``.``. The final byte of the input is
    never consumed here; callers extend over the remaining non-whitespace
    afterwards, so a trailing dot at end of input does not make a domain.

    Args:
        data: The complete input being scanned.
        span: Span whose start is the first hostname byte.
        allow_short: Accept hostnames without any dot (``localhost``).

    Returns:
        Span ending after the last hostname byte, or None if the hostname
        is invalid.

    """
    start = span.start
    size = len(data)
    if start >= size or data[start] not in ALNUM:
        return None

    dots = 0
    i = start + 1
    while i < size - 1:
        c = data[i]
        if c == DOT:
            dots += 1
        elif c not in ALNUM and c != HYPHEN:
            break
        i += 1

    if allow_short or dots > 0:
        return Span(start, i)
    return None
