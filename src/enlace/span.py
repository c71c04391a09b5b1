"""Half-open byte ranges used during link detection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range ``[start, end)`` into the scanned input.

    Spans are values: each refinement step (domain walk, extension over
    non-whitespace, delimiter trimming) returns a new Span instead of
    mutating one in place, which keeps every detector reentrant.

    Attributes:
        start: Offset of the first byte of the candidate link.
        end: Offset one past the last byte.

    """

    start: int
    end: int

    def slice(self, data: bytes) -> bytes:
        """Return the bytes covered by this span."""
        return data[self.start : self.end]
