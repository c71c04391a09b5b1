"""HTML tag recognition for the scanner.

The scanner never parses HTML. When it meets ``<`` it only needs to know
two things: where the tag ends (attributes are never linked), and whether
the tag opens a region that must be copied untouched up to its closing tag
(existing links, code, preformatted text, scripts).

Tag names are compared case-insensitively as ASCII bytes. Nesting is not
tracked: a skip region ends at the first matching closing tag. Unterminated
tags and regions run to the end of the input.

Thread Safety:
Pure functions. DEFAULT_SKIP_TAGS is an immutable tuple.

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from enlace.charsets import GT, LT, SLASH, WHITESPACE

# Tags whose content is never autolinked unless the caller says otherwise
DEFAULT_SKIP_TAGS: tuple[str, ...] = ("a", "pre", "code", "kbd", "script")


class TagKind(Enum):
    """Result of matching a tag name at a ``<``."""

    NONE = 0
    OPEN = 1
    CLOSE = 2


def normalize_skip_tags(tags: Iterable[str | bytes]) -> tuple[bytes, ...]:
    """Convert tag names to lowercase ASCII bytes, keeping first-seen order.

    Args:
        tags: Tag names as str or bytes.

    Returns:
        Tuple of unique lowercase tag names. Empty names are dropped.

    Raises:
        TypeError: If a tag name is neither str nor bytes.
        ValueError: If a str tag name is not ASCII.

    """
    seen: dict[bytes, None] = {}
    for tag in tags:
        if isinstance(tag, str):
            try:
                name = tag.encode("ascii")
            except UnicodeEncodeError as e:
                raise ValueError(f"Skip tag names must be ASCII, got {tag!r}") from e
        elif isinstance(tag, (bytes, bytearray)):
            name = bytes(tag)
        else:
            raise TypeError(f"Skip tag names must be str or bytes, got {type(tag).__name__}")
        name = name.lower()
        if name:
            seen.setdefault(name, None)
    return tuple(seen)


def html_tag_kind(data: bytes, pos: int, name: bytes) -> TagKind:
    """Check whether ``data[pos:]`` is an opening or closing ``name`` tag.

    Matches ``<name>``, ``<name attr...>``, ``</name>`` and ``</name ...>``.
    ``name`` must already be lowercase.
    """
    size = len(data)
    if size - pos < 3 or data[pos] != LT:
        return TagKind.NONE

    i = pos + 1
    closing = data[i] == SLASH
    if closing:
        i += 1

    n = len(name)
    if size - i <= n or data[i : i + n].lower() != name:
        return TagKind.NONE

    c = data[i + n]
    if c in WHITESPACE or c == GT:
        return TagKind.CLOSE if closing else TagKind.OPEN
    return TagKind.NONE


def skip_tag(data: bytes, pos: int, skip_tags: tuple[bytes, ...]) -> int:
    """Find where scanning resumes after the tag starting at ``pos``.

    Args:
        data: The complete input being scanned.
        pos: Offset of the ``<``.
        skip_tags: Lowercase tag names whose content is skipped.

    Returns:
        Offset of the ``>`` ending the tag (or of the closing tag, for a
        skip-listed tag), or ``len(data)`` if it is never terminated.

    """
    size = len(data)
    i = data.find(GT, pos)
    if i == -1:
        i = size

    name = next(
        (tag for tag in skip_tags if html_tag_kind(data, pos, tag) is TagKind.OPEN),
        None,
    )
    if name is None:
        return i

    while True:
        i = data.find(LT, i)
        if i == -1:
            return size
        if html_tag_kind(data, i, name) is TagKind.CLOSE:
            break
        i += 1

    i = data.find(GT, i)
    return size if i == -1 else i
