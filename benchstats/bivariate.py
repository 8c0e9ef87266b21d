"""Bivariate analysis."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Optional

from benchstats.rng import new_rng
from benchstats.sample import Distribution, Sample, collect_distributions


class Data:
    """Paired ``(x, y)`` data: equal lengths, at least two points, no NaNs."""

    def __init__(self, xs: Iterable[float], ys: Iterable[float]) -> None:
        xs = tuple(xs)
        ys = tuple(ys)
        if len(xs) != len(ys):
            raise ValueError(f"length mismatch: {len(xs)} xs and {len(ys)} ys")
        if len(xs) < 2:
            raise ValueError("bivariate data needs at least two points")
        if any(math.isnan(v) for v in xs) or any(math.isnan(v) for v in ys):
            raise ValueError("bivariate data must not contain NaN")
        self._xs = xs
        self._ys = ys

    @classmethod
    def _trusted(cls, xs: tuple, ys: tuple) -> "Data":
        obj = cls.__new__(cls)
        obj._xs = xs
        obj._ys = ys
        return obj

    def __len__(self) -> int:
        return len(self._xs)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self._xs, self._ys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._xs)!r}, {list(self._ys)!r})"

    @property
    def x(self) -> Sample:
        """The x values as a sample."""
        return Sample(self._xs)

    @property
    def y(self) -> Sample:
        """The y values as a sample."""
        return Sample(self._ys)

    def bootstrap(
        self, nresamples: int, statistic: Callable[["Data"], tuple]
    ) -> tuple[Distribution, ...]:
        """Return bootstrap distributions of the tuple ``statistic`` returns."""
        resamples = Resamples(self)
        return collect_distributions(
            statistic(resample) for resample in islice(resamples, nresamples)
        )


class Resamples(Iterator):
    """Endless stream of paired resamples drawn with replacement."""

    def __init__(self, data: Data, rng: Optional[random.Random] = None) -> None:
        self._pairs = tuple(data)
        self._rng = rng if rng is not None else new_rng()

    def __iter__(self) -> "Resamples":
        return self

    def __next__(self) -> Data:
        n = len(self._pairs)
        pick = self._rng.randrange
        chosen = [self._pairs[pick(n)] for _ in range(n)]
        xs, ys = zip(*chosen)
        return Data._trusted(xs, ys)