import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from benchstats.sample import Sample
from benchstats.univariate import bootstrap

values = st.lists(
    st.floats(min_value=0.0, max_value=1.0, allow_nan=False), min_size=3, max_size=40
)
counts = st.integers(min_value=1, max_value=255)


def _within(x, lo, hi):
    return (x > lo or math.isclose(x, lo, abs_tol=1e-9)) and (
        x < hi or math.isclose(x, hi, abs_tol=1e-9)
    )


@settings(max_examples=50, deadline=None)
@given(values, values, counts)
def test_two_sample(a_values, b_values, nresamples):
    a = Sample(a_values)
    b = Sample(b_values)
    (distribution,) = bootstrap(a, b, nresamples, lambda x, y: (x.mean() - y.mean(),))
    lo = min(a.min() - b.max(), b.min() - a.max())
    hi = max(a.max() - b.min(), b.max() - a.min())
    assert len(distribution) == nresamples
    assert all(_within(x, lo, hi) for x in distribution)


@pytest.mark.parametrize("nresamples", [1, 2, 5, 7, 10, 99, 100])
def test_exact_number_of_resamples(nresamples):
    a = Sample([1.0, 2.0, 3.0])
    b = Sample([4.0, 5.0, 6.0])
    means, diffs = bootstrap(
        a, b, nresamples, lambda x, y: (x.mean(), x.mean() - y.mean())
    )
    assert len(means) == nresamples
    assert len(diffs) == nresamples


def test_a_resamples_are_shared_in_chunks():
    a = Sample([1.0, 2.0, 3.0, 4.0])
    b = Sample([5.0, 6.0, 7.0])
    # Keep every resample alive so that object identities are never reused.
    known_a = {}
    known_b = {}

    def _label(known, obj):
        entry = known.setdefault(id(obj), (len(known), obj))
        return float(entry[0])

    def statistic(x, y):
        return (_label(known_a, x), _label(known_b, y))

    a_labels, b_labels = bootstrap(a, b, 100, statistic)
    assert len(a_labels) == 100
    assert len(b_labels) == 100
    assert len(set(a_labels)) == 10
    assert len(set(b_labels)) == 100


def test_resamples_draw_from_inputs():
    a = Sample([1.0, 2.0, 3.0])
    b = Sample([10.0, 20.0])

    def statistic(x, y):
        return (
            float(set(x) <= {1.0, 2.0, 3.0}),
            float(set(y) <= {10.0, 20.0}),
            float(len(x)),
            float(len(y)),
        )

    a_ok, b_ok, a_sizes, b_sizes = bootstrap(a, b, 20, statistic)
    assert list(a_ok) == [1.0] * 20
    assert list(b_ok) == [1.0] * 20
    assert list(a_sizes) == [3.0] * 20
    assert list(b_sizes) == [2.0] * 20


def test_zero_resamples_is_an_error():
    with pytest.raises(ValueError):
        bootstrap(Sample([1.0, 2.0]), Sample([3.0, 4.0]), 0, lambda x, y: (0.0,))