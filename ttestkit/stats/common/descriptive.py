"""
ttestkit.stats.common.descriptive
=================================

Descriptive statistics for one sample.

Computes the count, the arithmetic mean and the *population* variance
(divisor = count) of a sample. The biased estimator is intentional: the
two-sample engines apply their own (count - 1) corrections explicitly.

Examples
--------
>>> from ttestkit.stats.common.descriptive import describe
>>> s = describe([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
>>> s.count, s.mean, s.variance
(8, 5.0, 4.0)
>>> s.sample_variance
4.571428571428571
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from ttestkit.core.errors import EmptySample, NonFiniteSample
from ttestkit.core.names import SamplePosition

# Any finite iterable of real numbers (lists, tuples, generators, numpy arrays,
# pandas Series, ...).
SampleLike = Iterable[Union[float, int]]


@dataclass(frozen=True)
class SampleStats:
    """
    Summary of one sample.

    Attributes:
        count: Number of observations (>= 1)
        mean: Arithmetic mean
        variance: Population variance (divisor = count)
    """

    count: int
    mean: float
    variance: float

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")
        if self.variance < 0:
            raise ValueError(f"variance must be nonnegative, got {self.variance}")

    @property
    def sample_variance(self) -> float:
        """Unbiased (count - 1) variance; NaN for a single observation."""
        if self.count < 2:
            return float("nan")
        return self.variance * self.count / (self.count - 1)

    @property
    def std(self) -> float:
        """Population standard deviation."""
        return math.sqrt(self.variance)


def as_sample(
    values: SampleLike, position: SamplePosition = SamplePosition.FIRST
) -> Tuple[float, ...]:
    """Materialize `values` into a tuple of finite floats.

    The input is iterated exactly once, so one-shot generators are accepted.

    Raises:
        EmptySample: if `values` yields nothing
        NonFiniteSample: if any value is NaN or infinite
    """
    sample = tuple(float(v) for v in values)
    if not sample:
        raise EmptySample(position)
    for v in sample:
        if not math.isfinite(v):
            raise NonFiniteSample(position, v)
    return sample


def describe(
    values: SampleLike, position: SamplePosition = SamplePosition.FIRST
) -> SampleStats:
    """
    Compute count, mean and population variance of a sample.

    Two passes over the materialized sample: mean first, then the average
    squared deviation from it.

    Args:
        values: Finite iterable of real numbers
        position: Argument position reported by validation errors

    Returns:
        SampleStats for the sample

    Raises:
        EmptySample: if the sample has no elements
        NonFiniteSample: if the sample holds NaN or an infinity
    """
    sample = as_sample(values, position)
    n = len(sample)
    lo, hi = min(sample), max(sample)
    if lo == hi:
        # Rounding in the mean would otherwise leave a spurious variance.
        return SampleStats(count=n, mean=lo, variance=0.0)
    mean = min(max(math.fsum(sample) / n, lo), hi)
    variance = math.fsum((v - mean) ** 2 for v in sample) / n
    return SampleStats(count=n, mean=mean, variance=variance)
