"""enlace ScanAccumulator — opt-in profiling for autolinking.

This module provides accumulated metrics during scanning:
- Total profiled time
- Bytes scanned
- Links created

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from enlace import autolink
    from enlace.profiling import profiled_scan

    with profiled_scan() as metrics:
        autolink("see http://example.com")

    print(metrics.summary())
    # {"total_ms": 0.1, "bytes_scanned": 22, "link_count": 1, "scan_calls": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during autolinking.

    Attributes:
        start_time: Profiling start timestamp.
        bytes_scanned: Total input size across all scans.
        link_count: Total links created.
        scan_calls: Number of scans recorded.
        changed_calls: Number of scans that created at least one link.

    """

    start_time: float = field(default_factory=perf_counter)
    bytes_scanned: int = 0
    link_count: int = 0
    scan_calls: int = 0
    changed_calls: int = 0

    def record_scan(self, size: int, link_count: int) -> None:
        """Record a completed scan.

        Args:
            size: Input size in bytes.
            link_count: Links created by the scan.

        """
        self.scan_calls += 1
        self.bytes_scanned += size
        self.link_count += link_count
        if link_count:
            self.changed_calls += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "bytes_scanned": self.bytes_scanned,
            "link_count": self.link_count,
            "scan_calls": self.scan_calls,
            "changed_calls": self.changed_calls,
        }


# Module-level ContextVar
_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled autolinking.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
