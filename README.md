# benchstats

Statistics for benchmark measurements. The package provides descriptive
statistics and percentiles. It does bootstrap resampling: one-sample,
two-sample, mixed and bivariate. It also provides kernel density estimation,
Tukey outlier classification and a least-squares line through the origin.

It needs only the standard library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Samples

`benchstats.sample.Sample` is a read-only sequence. It holds at least two
numbers and no NaNs. Any other input raises `ValueError`.

```python
from benchstats.sample import Sample

s = Sample([1.0, 2.0, 3.0, 4.0, 10.0])
s.mean()                 # 4.0
s.median()               # 3.0
s.min(), s.max(), s.sum()
s.var(None)              # sample variance (n - 1); a known mean may be passed
s.std_dev(None)
s.std_dev_pct()          # standard deviation as a percentage of the mean
s.median_abs_dev(None)   # median absolute deviation, scaled by 1.4826
s.median_abs_dev_pct()
s.iqr()
s.percentiles().quartiles()
```

`Sample.t(other)` returns Welch's t score between two samples.

`benchstats.percentiles.Percentiles` keeps a sorted copy of the data. It
answers `at(p)` with linear interpolation for any `p` in `[0, 100]`. It also
provides `median()`, `iqr()` and `quartiles()`. A `p` outside that range
raises `ValueError`.

## Bootstrap

A statistic returns a tuple. The bootstrap returns one
`benchstats.sample.Distribution` for each element of that tuple.

```python
from benchstats.sample import Tails

(means,) = s.bootstrap(1000, lambda r: (r.mean(),))
low, high = means.confidence_interval(0.95)   # level must lie in (0, 1)
means.p_value(4.0, Tails.TWO)                 # Tails.ONE or Tails.TWO
```

Two-sample and mixed bootstraps work the same way:

```python
from benchstats import mixed, univariate

a = Sample([1.0, 2.0, 3.0])
b = Sample([2.0, 3.0, 4.0, 5.0])
(diff,) = univariate.bootstrap(a, b, 1000, lambda x, y: (x.mean() - y.mean(),))
(diff_mixed,) = mixed.bootstrap(a, b, 1000, lambda x, y: (x.mean() - y.mean(),))
```

The two bootstraps differ in how they draw resamples:

- `univariate.bootstrap` draws about `sqrt(nresamples)` resamples of `a`. It
  pairs each one with a run of fresh resamples of `b`.
- `mixed.bootstrap` pools both samples and resamples the pool. It then splits
  each resample back into parts with the original sizes.

Both raise `ValueError` when `nresamples` is less than one.

Resampling with replacement is exposed directly as an endless iterator,
`benchstats.sample.Resamples(sample, rng=None)`. Each generator comes from
`benchstats.rng.new_rng()` unless you pass a `random.Random`.

## Outliers

```python
from benchstats.tukey import classify

labeled = classify(s)
labeled.fences    # (low severe, low mild, high mild, high severe)
labeled.count()   # (low severe, low mild, normal, high mild, high severe)
labeled[4]        # Label of the fifth point
for value, label in labeled:
    if label.is_outlier():
        print(value, label)
```

`Label` has these predicates:

- `is_high()`
- `is_low()`
- `is_mild()`
- `is_severe()`
- `is_outlier()`

## Kernel density estimation

```python
from benchstats.kde import Bandwidth, Gaussian, Kde

kde = Kde(s, Gaussian(), Bandwidth.SILVERMAN)   # these are also the defaults
kde.bandwidth
kde.estimate(3.0)
kde.map([1.0, 2.0, 3.0])
```

Two rules cover a sample whose values are all equal:

- The Silverman estimate falls back to a bandwidth of `0.001`.
- `estimate` returns `1.0` for every point.

## Bivariate data and regression

`benchstats.bivariate.Data` holds pairs of values. The two sequences must
have equal length and at least two points, and neither may contain a NaN.
The x and y values are available as samples through `data.x` and `data.y`.

```python
from benchstats.bivariate import Data
from benchstats.regression import Slope

data = Data([1.0, 2.0, 3.0], [2.1, 3.9, 6.2])
slope = Slope.fit(data)
slope.value
slope.r_squared(data)
(slopes,) = data.bootstrap(1000, lambda d: (Slope.fit(d).value,))
```

`Slope.fit` returns NaN when every x is zero. `r_squared` returns NaN when
its denominator is zero.

## What it does not do

This is a statistics library only. It does not time or run benchmarks. It
draws no plots, writes no reports and stores no results or baselines. It
provides no command-line program.

## Tests

```
pytest
```