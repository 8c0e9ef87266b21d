"""Kernel density estimation."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Protocol

from benchstats.sample import Sample

_SQRT_2PI = math.sqrt(2 * math.pi)


class Kernel(Protocol):
    """A kernel function."""

    def evaluate(self, x: float) -> float:
        """Apply the kernel function to ``x``."""
        ...


@dataclass(frozen=True)
class Gaussian:
    """The standard normal kernel."""

    def evaluate(self, x: float) -> float:
        """Return the standard normal density at ``x``."""
        return math.exp(-(x * x) / 2) / _SQRT_2PI


class Bandwidth(enum.Enum):
    """Method to estimate the bandwidth."""

    SILVERMAN = "silverman"

    def estimate(self, sample: Sample) -> float:
        """Return the bandwidth for ``sample``; always positive."""
        sigma = sample.std_dev()
        # A constant sample has no spread; a tiny bandwidth gives a sharp
        # peak at its single value instead of a zero bandwidth.
        if sigma == 0:
            return 0.001
        return sigma * (4 / 3 / len(sample)) ** (1 / 5)


class Kde:
    """Univariate kernel density estimator."""

    def __init__(
        self,
        sample: Sample,
        kernel: Optional[Kernel] = None,
        bw: Bandwidth = Bandwidth.SILVERMAN,
    ) -> None:
        self._sample = sample
        self._kernel: Kernel = kernel if kernel is not None else Gaussian()
        self._bandwidth = bw.estimate(sample)
        self._constant = sample.min() == sample.max()

    @property
    def bandwidth(self) -> float:
        """The bandwidth used by the estimator."""
        return self._bandwidth

    def map(self, xs: Iterable[float]) -> tuple[float, ...]:
        """Estimate the density at every point of ``xs``."""
        return tuple(self.estimate(x) for x in xs)

    def estimate(self, x: float) -> float:
        """Estimate the probability density at ``x``."""
        if self._constant:
            return 1.0
        h = self._bandwidth
        evaluate = self._kernel.evaluate
        total = sum((evaluate((x - x_i) / h) for x_i in self._sample), 0.0)
        return total / (h * len(self._sample))