"""Mixed two-sample bootstrap."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice

from benchstats.sample import Distribution, Resamples, Sample, collect_distributions


def bootstrap(
    a: Sample,
    b: Sample,
    nresamples: int,
    statistic: Callable[[Sample, Sample], tuple],
) -> tuple[Distribution, ...]:
    """Perform a *mixed* two-sample bootstrap.

    Both samples are pooled; every resample of the pool is split back into
    parts of the original sizes before ``statistic`` is applied.

    Raises ValueError if ``nresamples`` is less than one.
    """
    if nresamples < 1:
        raise ValueError(f"nresamples must be at least 1, got {nresamples!r}")
    n_a = len(a)
    pooled = Sample([*a, *b])
    resamples = Resamples(pooled)
    return collect_distributions(
        statistic(Sample(resample[:n_a]), Sample(resample[n_a:]))
        for resample in islice(resamples, nresamples)
    )