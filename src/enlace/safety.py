"""Scheme allow-list for generated links.

Only a fixed set of prefixes is ever linked. Everything else, including
``javascript:``, ``data:`` and ``vbscript:``, is left as plain text.
"""

from __future__ import annotations

from enlace.charsets import ALNUM

SAFE_PREFIXES: tuple[bytes, ...] = (b"/", b"http://", b"https://", b"ftp://", b"mailto:")


def is_safe(link: bytes) -> bool:
    """Check whether ``link`` starts with an allowed scheme.

    The allowed prefix must be followed by an ASCII alphanumeric byte, so
    ``http://`` alone or ``http://-x`` is rejected.

    Args:
        link: Bytes starting at the scheme of the candidate link. May run
            past the end of the link.

    Returns:
        True if the link may be rendered.

    """
    for prefix in SAFE_PREFIXES:
        n = len(prefix)
        if len(link) > n and link[:n].lower() == prefix and link[n] in ALNUM:
            return True
    return False


# Longest allowed prefix plus the alphanumeric byte that must follow it
SAFE_PREFIX_WINDOW = max(len(p) for p in SAFE_PREFIXES) + 1
