"""
ttestkit.stats.schemes.two_sample.statistics
============================================

Test statistic and degrees-of-freedom engines for two independent samples.

Both engines consume the `SampleStats` of each sample and return ``(t, df)``.
SampleStats carries population variances V (divisor = count); the engines
apply the (count - 1) correction themselves, so N V is the sum of squared
deviations and V N / (N - 1) the unbiased variance s².

**Student (pooled variance):**
    s_p² = (N1 V1 + N2 V2) / ((N1-1) + (N2-1))
    t    = (mean1 - mean2) / (s_p * sqrt(1/N1 + 1/N2))
    df   = (N1-1) + (N2-1)

**Welch (unequal variances):**
    v_i = s_i² / N_i = V_i / (N_i - 1)
    t   = (mean1 - mean2) / sqrt(v1 + v2)
    df  = (v1 + v2)² / (v1²/(N1-1) + v2²/(N2-1))      (Welch-Satterthwaite)
        = 1 / (r1²/(N1-1) + r2²/(N2-1)),  r_i = v_i / (v1 + v2)

A sample of count 1 has V_i = 0; its v_i and v_i²/(N_i-1) are taken as 0.

Examples
--------
>>> from ttestkit.stats.common.descriptive import SampleStats
>>> from ttestkit.stats.schemes.two_sample.statistics import pooled_t, welch_t
>>> s1 = SampleStats(count=4, mean=2.0, variance=2.0)
>>> s2 = SampleStats(count=4, mean=1.0, variance=1.0)
>>> t, df = pooled_t(s1, s2)
>>> round(t, 12), df
(1.0, 6)
>>> t, df = welch_t(s1, s2)
>>> round(t, 12), round(df, 12)
(1.0, 5.4)
"""

from __future__ import annotations
import math
from typing import Tuple

from ttestkit.core.errors import ComputationError, DegenerateSamples
from ttestkit.stats.common.descriptive import SampleStats


def check_degenerate(s1: SampleStats, s2: SampleStats) -> None:
    """Raise `DegenerateSamples` when both samples have zero variance."""
    if s1.variance == 0.0 and s2.variance == 0.0:
        raise DegenerateSamples(
            "both samples have zero variance; the t statistic is undefined"
        )


def pooled_t(s1: SampleStats, s2: SampleStats) -> Tuple[float, int]:
    """
    Student's t statistic with pooled variance.

    Args:
        s1: Statistics of the first sample
        s2: Statistics of the second sample

    Returns:
        Tuple of (t_statistic, degrees_of_freedom)

    Raises:
        DegenerateSamples: if both variances are zero
        ComputationError: if (N1-1) + (N2-1) is zero
    """
    check_degenerate(s1, s2)

    df = (s1.count - 1) + (s2.count - 1)
    if df <= 0:
        raise ComputationError(
            f"Pooled degrees of freedom must be positive, got {df} "
            f"(counts {s1.count} and {s2.count})"
        )

    pooled_var = (s1.count * s1.variance + s2.count * s2.variance) / df
    se = math.sqrt(pooled_var) * math.sqrt(1.0 / s1.count + 1.0 / s2.count)
    t = (s1.mean - s2.mean) / se
    return t, df


def welch_t(s1: SampleStats, s2: SampleStats) -> Tuple[float, float]:
    """
    Welch's t statistic with Welch-Satterthwaite degrees of freedom.

    Args:
        s1: Statistics of the first sample
        s2: Statistics of the second sample

    Returns:
        Tuple of (t_statistic, degrees_of_freedom)

    Raises:
        DegenerateSamples: if both variances are zero
        ComputationError: if the degrees of freedom are not positive and finite
    """
    check_degenerate(s1, s2)

    v1 = _mean_variance(s1)
    v2 = _mean_variance(s2)
    v = v1 + v2
    if v == 0.0:
        raise DegenerateSamples("combined standard error is zero")

    t = (s1.mean - s2.mean) / math.sqrt(v)

    # Shares r_i = v_i / v keep the ratio free of overflow and underflow.
    denom = _satterthwaite_term(v1 / v, s1.count) + _satterthwaite_term(v2 / v, s2.count)
    df = 1.0 / denom if denom > 0 else float("nan")
    if not (df > 0 and math.isfinite(df)):
        raise ComputationError(f"Welch degrees of freedom are undefined: {df}")

    return t, df


def _mean_variance(s: SampleStats) -> float:
    """Squared standard error s² / N of the sample mean."""
    # A single observation has V = 0; its 0/0 term is taken as 0.
    if s.variance == 0.0:
        return 0.0
    if s.count < 2:
        raise ComputationError(
            f"Variance {s.variance} reported for a single observation"
        )
    return s.variance / (s.count - 1)


def _satterthwaite_term(r: float, n: int) -> float:
    if r == 0.0:
        return 0.0
    return r * r / (n - 1)
