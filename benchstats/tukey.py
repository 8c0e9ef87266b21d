"""Classification of outliers with Tukey's fences.

There is no formal definition of an outlier, so any classifier is
subjective; Tukey's method is a de facto standard. Inner fences lie 1.5
interquartile ranges outside the first and third quartiles, outer fences 3
ranges outside. Points beyond the outer fences are severe outliers, points
between the fences mild ones, and the rest are normal data.
"""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

from benchstats.sample import Sample


class Label(enum.Enum):
    """Labels used to classify outliers."""

    HIGH_MILD = "high mild"
    HIGH_SEVERE = "high severe"
    LOW_MILD = "low mild"
    LOW_SEVERE = "low severe"
    NOT_AN_OUTLIER = "not an outlier"

    def is_high(self) -> bool:
        """Whether the point has an unusually high value."""
        return self in (Label.HIGH_MILD, Label.HIGH_SEVERE)

    def is_low(self) -> bool:
        """Whether the point has an unusually low value."""
        return self in (Label.LOW_MILD, Label.LOW_SEVERE)

    def is_mild(self) -> bool:
        """Whether the point is a mild outlier."""
        return self in (Label.HIGH_MILD, Label.LOW_MILD)

    def is_severe(self) -> bool:
        """Whether the point is a severe outlier."""
        return self in (Label.HIGH_SEVERE, Label.LOW_SEVERE)

    def is_outlier(self) -> bool:
        """Whether the point is an outlier at all."""
        return self is not Label.NOT_AN_OUTLIER


@dataclass(frozen=True)
class LabeledSample:
    """A sample whose points are labeled by the fences; order is retained."""

    fences: tuple[float, float, float, float]
    sample: Sample

    def _label(self, x: float) -> Label:
        low_severe, low_mild, high_mild, high_severe = self.fences
        if x < low_severe:
            return Label.LOW_SEVERE
        if x > high_severe:
            return Label.HIGH_SEVERE
        if x < low_mild:
            return Label.LOW_MILD
        if x > high_mild:
            return Label.HIGH_MILD
        return Label.NOT_AN_OUTLIER

    def count(self) -> tuple[int, int, int, int, int]:
        """Return the number of points per label.

        The order is low severe, low mild, normal, high mild, high severe.
        """
        counts = Counter(label for _, label in self)
        return (
            counts[Label.LOW_SEVERE],
            counts[Label.LOW_MILD],
            counts[Label.NOT_AN_OUTLIER],
            counts[Label.HIGH_MILD],
            counts[Label.HIGH_SEVERE],
        )

    def __iter__(self) -> Iterator[tuple[float, Label]]:
        return ((x, self._label(x)) for x in self.sample)

    def __getitem__(self, i: int) -> Label:
        return self._label(self.sample[i])

    def __len__(self) -> int:
        return len(self.sample)


def classify(sample: Sample) -> LabeledSample:
    """Classify ``sample`` with Tukey's inner and outer fences."""
    q1, _, q3 = sample.percentiles().quartiles()
    iqr = q3 - q1
    mild = 1.5
    severe = 3.0
    return LabeledSample(
        fences=(q1 - severe * iqr, q1 - mild * iqr, q3 + mild * iqr, q3 + severe * iqr),
        sample=sample,
    )