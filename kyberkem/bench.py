"""Tick counting and summary printing for benchmarks."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

_OVERHEAD_SAMPLES = 100000
_overhead: Optional[int] = None


@dataclass(frozen=True)
class BenchResult:
    """Median and average ticks per measured interval."""

    median: int
    average: int


def cpucycles() -> int:
    """Return a monotonically increasing tick count in nanoseconds."""
    return time.perf_counter_ns()


def cpucycles_overhead() -> int:
    """Return the smallest observed cost of two back-to-back tick readings."""
    best = None
    for _ in range(_OVERHEAD_SAMPLES):
        t0 = cpucycles()
        t1 = cpucycles()
        if best is None or t1 - t0 < best:
            best = t1 - t0
    return best if best is not None else 0


def _median(values: Sequence[int]) -> int:
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) // 2


def print_results(label: str, timestamps: Sequence[int]) -> Optional[BenchResult]:
    """Print median and average of the intervals between successive timestamps.

    Each interval has the measuring overhead taken off. With fewer than two
    timestamps an error goes to stderr and None is returned.
    """
    global _overhead
    stamps = list(timestamps)
    if len(stamps) < 2:
        print("ERROR: Need a least two cycle counts!", file=sys.stderr)
        return None

    if _overhead is None:
        _overhead = cpucycles_overhead()

    diffs = [b - a - _overhead for a, b in zip(stamps, stamps[1:])]
    result = BenchResult(_median(diffs), sum(diffs) // len(diffs))

    print(label)
    print(f"median: {result.median} cycles/ticks")
    print(f"average: {result.average} cycles/ticks")
    print()
    return result