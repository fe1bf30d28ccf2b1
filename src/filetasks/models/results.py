"""Result models produced by the file tasks."""

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np


@dataclass
class NumberBuckets:
    """Numeric tokens split into byte-range, integer and fractional buckets."""

    byte_range: list[int] = field(default_factory=list)
    integers: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)

    def values(self) -> list[float]:
        """All values, floats first, then integers, then bytes."""
        return [float(v) for v in (*self.floats, *self.integers, *self.byte_range)]

    @property
    def average(self) -> float:
        """Mean over all three buckets.

        An empty set of buckets yields nan (numpy emits a RuntimeWarning).
        """
        return float(np.mean(np.array(self.values(), dtype=np.float64)))

    @property
    def integer_count(self) -> int:
        return len(self.integers)


@dataclass
class NumberReport:
    """Everything the numeric analyzer reports about one file."""

    tokens: list[str]
    buckets: NumberBuckets
    average: float
    integer_count: int
    three_quarters_average: float


@dataclass(frozen=True)
class FilterResult:
    """Outcome of a keyword filter run."""

    output: Path
    occurrences: int
    stopped: bool
    chars_written: int
