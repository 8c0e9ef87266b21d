"""Univariate samples, bootstrap distributions and resampling."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import islice
from typing import Optional, overload

from benchstats.percentiles import Percentiles
from benchstats.rng import new_rng


def dot(xs: Iterable[float], ys: Iterable[float]) -> float:
    """Return the dot product of two sequences."""
    return sum((x * y for x, y in zip(xs, ys)), 0.0)


class Sample(Sequence):
    """A collection of data points drawn from a population.

    A sample holds at least two points and no NaNs.
    """

    def __init__(self, values: Iterable[float]) -> None:
        data = tuple(values)
        if len(data) < 2:
            raise ValueError("a sample needs at least two data points")
        if any(math.isnan(x) for x in data):
            raise ValueError("a sample must not contain NaN")
        self._values = data

    @classmethod
    def _trusted(cls, values: tuple) -> "Sample":
        obj = cls.__new__(cls)
        obj._values = values
        return obj

    @overload
    def __getitem__(self, i: int) -> float: ...

    @overload
    def __getitem__(self, i: slice) -> tuple: ...

    def __getitem__(self, i):
        return self._values[i]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)!r})"

    def max(self) -> float:
        """Return the biggest element."""
        return max(self._values)

    def min(self) -> float:
        """Return the smallest element."""
        return min(self._values)

    def sum(self) -> float:
        """Return the sum of all elements."""
        return sum(self._values, 0.0)

    def mean(self) -> float:
        """Return the arithmetic average."""
        return self.sum() / len(self._values)

    def var(self, mean: Optional[float] = None) -> float:
        """Return the sample variance, optionally reusing a known mean."""
        if mean is None:
            mean = self.mean()
        total = sum(((x - mean) ** 2 for x in self._values), 0.0)
        return total / (len(self._values) - 1)

    def std_dev(self, mean: Optional[float] = None) -> float:
        """Return the standard deviation, optionally reusing a known mean."""
        return math.sqrt(self.var(mean))

    def std_dev_pct(self) -> float:
        """Return the standard deviation as a percentage of the mean."""
        mean = self.mean()
        return self.std_dev(mean) / mean * 100

    def median_abs_dev(self, median: Optional[float] = None) -> float:
        """Return the median absolute deviation, scaled for normal data."""
        if median is None:
            median = self.percentiles().median()
        abs_devs = Sample(abs(x - median) for x in self._values)
        return abs_devs.percentiles().median() * 1.4826

    def median_abs_dev_pct(self) -> float:
        """Return the median absolute deviation as a percentage of the median."""
        median = self.percentiles().median()
        return self.median_abs_dev(median) / median * 100

    def percentiles(self) -> Percentiles:
        """Return a sorted view for fast percentile queries."""
        return Percentiles(self._values)

    def median(self) -> float:
        """Return the median."""
        return self.percentiles().median()

    def iqr(self) -> float:
        """Return the interquartile range."""
        return self.percentiles().iqr()

    def t(self, other: "Sample") -> float:
        """Return Welch's t score between this sample and ``other``."""
        x_bar, y_bar = self.mean(), other.mean()
        s2_x, s2_y = self.var(x_bar), other.var(y_bar)
        den = math.sqrt(s2_x / len(self) + s2_y / len(other))
        return (x_bar - y_bar) / den

    def bootstrap(
        self, nresamples: int, statistic: Callable[["Sample"], tuple]
    ) -> tuple["Distribution", ...]:
        """Return bootstrap distributions of the tuple ``statistic`` returns."""
        resamples = Resamples(self)
        return collect_distributions(
            statistic(resample) for resample in islice(resamples, nresamples)
        )


class Tails(enum.Enum):
    """Number of tails for significance testing."""

    ONE = 1
    TWO = 2


class Distribution(Sample):
    """The bootstrap distribution of some parameter."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(values)

    def confidence_interval(self, confidence_level: float) -> tuple[float, float]:
        """Return the percentile confidence interval at ``confidence_level``.

        Raises ValueError unless the level lies strictly between 0 and 1.
        """
        if not 0 < confidence_level < 1:
            raise ValueError(
                f"confidence level must be in (0, 1), got {confidence_level!r}"
            )
        percentiles = self.percentiles()
        return (
            percentiles.at(50 * (1 - confidence_level)),
            percentiles.at(50 * (1 + confidence_level)),
        )

    def p_value(self, t: float, tails: Tails) -> float:
        """Return the likelihood of seeing ``t`` or more extreme values."""
        n = len(self._values)
        hits = sum(1 for x in self._values if x < t)
        return min(hits, n - hits) / n * tails.value


def collect_distributions(rows: Iterable[tuple]) -> tuple[Distribution, ...]:
    """Turn a stream of statistic tuples into one distribution per field."""
    columns = list(zip(*rows))
    return tuple(Distribution(column) for column in columns)


class Resamples(Iterator):
    """Endless stream of resamples drawn with replacement from a sample."""

    def __init__(self, sample: Sequence[float], rng: Optional[random.Random] = None) -> None:
        self._sample = tuple(sample)
        self._rng = rng if rng is not None else new_rng()

    def __iter__(self) -> "Resamples":
        return self

    def __next__(self) -> Sample:
        n = len(self._sample)
        pick = self._rng.randrange
        return Sample._trusted(tuple(self._sample[pick(n)] for _ in range(n)))