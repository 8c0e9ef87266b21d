"""Percentile lookups over a sorted copy of some data."""

from __future__ import annotations

import math
from collections.abc import Iterable


class Percentiles:
    """A sorted view of data that answers percentile queries in O(1)."""

    def __init__(self, values: Iterable[float]) -> None:
        self._sorted = sorted(values)

    def __len__(self) -> int:
        return len(self._sorted)

    def at(self, p: float) -> float:
        """Return the percentile at ``p`` percent, interpolating linearly.

        Raises ValueError if ``p`` lies outside ``[0, 100]`` or there is no data.
        """
        if not 0 <= p <= 100:
            raise ValueError(f"percentile must be in [0, 100], got {p!r}")
        if not self._sorted:
            raise ValueError("no data to take percentiles of")
        last = len(self._sorted) - 1
        if p == 100:
            return self._sorted[last]
        rank = (p / 100) * last
        integer = math.floor(rank)
        fraction = rank - integer
        floor = self._sorted[integer]
        if integer + 1 > last:
            return floor
        ceiling = self._sorted[integer + 1]
        return floor + (ceiling - floor) * fraction

    def iqr(self) -> float:
        """Return the interquartile range."""
        return self.at(75) - self.at(25)

    def median(self) -> float:
        """Return the 50th percentile."""
        return self.at(50)

    def quartiles(self) -> tuple[float, float, float]:
        """Return the 25th, 50th and 75th percentiles."""
        return self.at(25), self.at(50), self.at(75)