"""Two-sample bootstrap over independent univariate samples."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

from benchstats.sample import Distribution, Resamples, Sample, collect_distributions


def _chunked_statistics(
    a: Sample,
    b: Sample,
    nresamples: int,
    statistic: Callable[[Sample, Sample], tuple],
) -> Iterator[tuple]:
    chunks = math.ceil(math.sqrt(nresamples))
    per_chunk = (nresamples + chunks - 1) // chunks
    a_resamples = Resamples(a)
    b_resamples = Resamples(b)
    for i in range(chunks):
        start = i * per_chunk
        end = min((i + 1) * per_chunk, nresamples)
        a_resample = next(a_resamples)
        for _ in range(start, end):
            yield statistic(a_resample, next(b_resamples))


def bootstrap(
    a: Sample,
    b: Sample,
    nresamples: int,
    statistic: Callable[[Sample, Sample], tuple],
) -> tuple[Distribution, ...]:
    """Perform a two-sample bootstrap.

    Resamples of ``a`` are drawn about ``sqrt(nresamples)`` times and each is
    paired with a run of fresh resamples of ``b``. ``statistic`` returns a
    tuple; one distribution is returned per field of that tuple.

    Raises ValueError if ``nresamples`` is less than one.
    """
    if nresamples < 1:
        raise ValueError(f"nresamples must be at least 1, got {nresamples!r}")
    return collect_distributions(_chunked_statistics(a, b, nresamples, statistic))