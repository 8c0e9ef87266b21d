"""Regression analysis."""

from __future__ import annotations

import math
from dataclasses import dataclass

from benchstats.bivariate import Data
from benchstats.sample import dot


@dataclass(frozen=True)
class Slope:
    """A straight line through the origin, ``y = value * x``."""

    value: float

    @staticmethod
    def fit(data: Data) -> "Slope":
        """Fit ``data`` to a line through the origin by ordinary least squares."""
        xs = list(data.x)
        ys = list(data.y)
        xy = dot(xs, ys)
        x2 = dot(xs, xs)
        return Slope(xy / x2 if x2 else math.nan)

    def r_squared(self, data: Data) -> float:
        """Return the goodness of fit of this line for ``data``."""
        m = self.value
        y_bar = data.y.mean()
        ss_res = 0.0
        ss_tot = 0.0
        for x, y in data:
            ss_res += (y - m * x) ** 2
            ss_tot = ss_res + (y - y_bar) ** 2
        if ss_tot == 0:
            return math.nan
        return 1 - ss_res / ss_tot