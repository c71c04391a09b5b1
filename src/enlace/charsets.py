"""Byte classes for O(1) classification.

All sets are frozensets of byte values (ints) so that indexing into a
``bytes`` object can be tested directly:

    if data[i] in ALNUM:  # O(1) lookup, no decoding
        ...

Only ASCII is classified. Bytes >= 0x80 belong to no class, so multi-byte
UTF-8 sequences never start, extend or terminate a domain.
"""

from __future__ import annotations


def _bytes(chars: str) -> frozenset[int]:
    return frozenset(chars.encode("ascii"))


DIGITS: frozenset[int] = _bytes("0123456789")

ALPHA: frozenset[int] = _bytes("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

ALNUM: frozenset[int] = ALPHA | DIGITS

# C isspace() in the "C" locale
WHITESPACE: frozenset[int] = _bytes(" \t\n\v\f\r")

# C ispunct() in the "C" locale
PUNCTUATION: frozenset[int] = _bytes("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Extra characters allowed in the local part of an email address
EMAIL_LOCAL_EXTRA: frozenset[int] = _bytes(".+-_")

# Extra characters allowed after the @ of an email address (besides . and @)
EMAIL_DOMAIN_EXTRA: frozenset[int] = _bytes("-_")

# Trailing sentence punctuation never kept at the end of a link
TRAILING_PUNCTUATION: frozenset[int] = _bytes("?!.,:")

# Closing bracket/quote -> matching opener
BRACKET_PAIRS: dict[int, int] = {
    ord('"'): ord('"'),
    ord("'"): ord("'"),
    ord(")"): ord("("),
    ord("]"): ord("["),
    ord("}"): ord("{"),
}

LT = ord("<")
GT = ord(">")
SLASH = ord("/")
COLON = ord(":")
SEMICOLON = ord(";")
AMPERSAND = ord("&")
AT = ord("@")
DOT = ord(".")
HYPHEN = ord("-")
