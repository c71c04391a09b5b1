"""Trailing delimiter resolution for candidate links.

A detector finds the longest run of non-whitespace that could be a link.
Prose punctuation around the link ends up inside that run:

    Visit http://example.com.          -> http://example.com
    (see http://example.com/Pikachu_(Electric))
                                       -> http://example.com/Pikachu_(Electric)
    Tom &amp; http://example.com&amp;  -> http://example.com

This module trims such delimiters using only the bytes of the span itself.

Thread Safety:
Pure functions over immutable inputs.

"""

from __future__ import annotations

from enlace.charsets import (
    ALPHA,
    AMPERSAND,
    BRACKET_PAIRS,
    LT,
    SEMICOLON,
    TRAILING_PUNCTUATION,
)
from enlace.span import Span


def _strip_entity(data: bytes, start: int, end: int) -> int:
    """Return the new end after removing a trailing ``;``.

    If the ``;`` closes a named entity reference (``&amp;``), the whole
    reference is removed. Numeric references (``&#123;``) and stray
    semicolons only lose the ``;``.
    """
    i = end - 2
    while i > start and data[i] in ALPHA:
        i -= 1
    if i < end - 2 and data[i] == AMPERSAND:
        return i
    return end - 1


def _unbalanced_closer(data: bytes, start: int, end: int) -> bool:
    """Check whether the last byte closes something opened outside the span."""
    closer = data[end - 1]
    opener = BRACKET_PAIRS.get(closer)
    if opener is None:
        return False

    opening = closing = 0
    for i in range(start, end):
        c = data[i]
        # Quotes open and close with the same byte; each counts as an opener
        if c == opener:
            opening += 1
        elif c == closer:
            closing += 1
    return opening != closing


def resolve_delimiters(data: bytes, span: Span) -> Span | None:
    """Trim trailing punctuation, entities and unbalanced closers.

    Args:
        data: The complete input being scanned.
        span: Candidate link span.

    Returns:
        The resolved span, or None if nothing is left.

    Example:
        >>> resolve_delimiters(b"http://a.com/x).", Span(0, 16))
        Span(start=0, end=14)

    """
    start, end = span.start, span.end

    # Links never cross into embedded markup
    lt = data.find(LT, start, end)
    if lt != -1:
        end = lt

    while end > start:
        last = data[end - 1]
        if last in TRAILING_PUNCTUATION:
            end -= 1
        elif last == SEMICOLON:
            end = _strip_entity(data, start, end)
        else:
            break

    if end <= start:
        return None

    if _unbalanced_closer(data, start, end):
        end -= 1
        if end <= start:
            return None

    return Span(start, end)
