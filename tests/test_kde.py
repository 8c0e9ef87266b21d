import math
import random

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from benchstats.kde import Bandwidth, Gaussian, Kde
from benchstats.sample import Sample

DX = 1e-3


def _random_sample(seed, size):
    rng = random.Random(seed)
    return Sample(rng.random() for _ in range(size))


def _trapezoid(f, a, b):
    acc = 0.0
    x = a
    y = f(a)
    while x < b:
        acc += DX * y / 2
        x += DX
        y = f(x)
        acc += DX * y / 2
    return acc


def test_constant_sample_measurements():
    measurements = [1.0, 1.0]
    kde = Kde(Sample(measurements), Gaussian(), Bandwidth.SILVERMAN)
    for x in measurements:
        assert kde.estimate(x) == 1.0


def test_positive_bandwidth():
    h = Bandwidth.SILVERMAN.estimate(Sample([1.0, 1.0]))
    assert h > 0
    assert h == 0.001


@pytest.mark.parametrize("seed,size", [(1, 3), (2, 10), (3, 50), (4, 200)])
def test_integral_is_one(seed, size):
    data = _random_sample(seed, size)
    kde = Kde(data, Gaussian(), Bandwidth.SILVERMAN)
    h = kde.bandwidth
    a, b = data.min() - 5 * h, data.max() + 5 * h
    acc = _trapezoid(kde.estimate, a, b)
    assert math.isclose(acc, 1.0, abs_tol=2e-5)


def test_map_matches_estimate():
    data = _random_sample(7, 20)
    kde = Kde(data)
    xs = [-0.5, 0.0, 0.25, 0.5, 1.5]
    assert kde.map(xs) == tuple(kde.estimate(x) for x in xs)


def test_default_kernel_and_bandwidth():
    data = _random_sample(8, 15)
    assert Kde(data).bandwidth == Bandwidth.SILVERMAN.estimate(data)
    assert Kde(data).estimate(0.5) == Kde(data, Gaussian()).estimate(0.5)


@given(st.floats(allow_nan=False))
def test_gaussian_symmetric(x):
    g = Gaussian()
    assert math.isclose(g.evaluate(-x), g.evaluate(x))


def test_gaussian_peak():
    assert math.isclose(Gaussian().evaluate(0.0), 1 / math.sqrt(2 * math.pi))


def test_gaussian_far_tail_is_zero():
    assert Gaussian().evaluate(1e200) == 0.0


@given(
    st.floats(allow_nan=False, allow_infinity=False),
    st.floats(allow_nan=False, allow_infinity=False),
)
def test_gaussian_integral_in_unit_range(a, b):
    a = abs(math.sin(a))
    b = abs(math.sin(b))
    assume(a <= b)
    acc = _trapezoid(Gaussian().evaluate, a, b)
    assert (acc > 0 or math.isclose(acc, 0, abs_tol=1e-12)) and (
        acc < 1 or math.isclose(acc, 1)
    )