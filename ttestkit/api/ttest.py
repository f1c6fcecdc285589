"""
ttestkit.api.ttest
==================

Two-sample t-tests for callers (report generators, CLIs, notebooks).

- `student_t_test()`: equal-variance (pooled) test
- `welch_t_test()`: unequal-variance test
- `two_sample_t_test()`: either test, returning the full `TTestResult`

Each call validates both samples (empty or non-finite, then zero variance on
both sides) before computing anything, then wires descriptive statistics -> engine
-> p-value mapping. Errors derive from `ttestkit.core.errors.TTestError`.

Examples
--------
>>> from ttestkit.api.ttest import student_t_test, welch_t_test
>>> a = [30.02, 29.99, 30.11, 29.97, 30.01, 29.99]
>>> b = [29.89, 29.93, 29.72, 29.98, 30.02, 29.98]
>>> round(student_t_test(a, b, as_statistic=True), 3)
1.959
>>> round(welch_t_test(a, b), 4)
0.0908
"""

from __future__ import annotations
import logging
from typing import Callable, Optional, Tuple

from ttestkit.core.names import STUDENT, WELCH, MethodTag, SamplePosition
from ttestkit.core.settings import BetaSettings
from ttestkit.stats.common.descriptive import SampleLike, SampleStats, describe
from ttestkit.stats.common.t_distribution import two_tailed_p_value
from ttestkit.stats.schemes.two_sample.model import TTestResult
from ttestkit.stats.schemes.two_sample.statistics import (
    check_degenerate,
    pooled_t,
    welch_t,
)

logger = logging.getLogger(__name__)

Engine = Callable[[SampleStats, SampleStats], Tuple[float, float]]

_ENGINES = {
    STUDENT: pooled_t,
    WELCH: welch_t,
}


def student_t_test(
    sample1: SampleLike,
    sample2: SampleLike,
    as_statistic: bool = False,
    *,
    settings: Optional[BetaSettings] = None,
) -> float:
    """
    Two-tailed Student's t-test assuming equal population variances.

    Parameters
    ----------
    sample1, sample2 : iterable of float
        Non-empty finite samples (lists, generators, numpy arrays, ...)
    as_statistic : bool, default=False
        Return the t statistic instead of the p-value
    settings : BetaSettings, optional
        Convergence controls for the p-value computation

    Returns
    -------
    float
        p-value in [0, 1], or the t statistic when `as_statistic` is True

    Raises
    ------
    EmptySample
        If either sample has no elements
    DegenerateSamples
        If both samples have zero variance
    ComputationError
        If the degrees of freedom are undefined or the p-value does not converge
    """
    return _run(STUDENT, sample1, sample2, as_statistic, settings)


def welch_t_test(
    sample1: SampleLike,
    sample2: SampleLike,
    as_statistic: bool = False,
    *,
    settings: Optional[BetaSettings] = None,
) -> float:
    """
    Two-tailed Welch's t-test (population variances not assumed equal).

    Degrees of freedom follow the Welch-Satterthwaite approximation.
    Parameters, return value and errors are as for `student_t_test`.
    """
    return _run(WELCH, sample1, sample2, as_statistic, settings)


def two_sample_t_test(
    sample1: SampleLike,
    sample2: SampleLike,
    equal_var: bool = False,
    *,
    settings: Optional[BetaSettings] = None,
) -> TTestResult:
    """
    Run a two-sample t-test and return the complete result record.

    Parameters
    ----------
    sample1, sample2 : iterable of float
        Non-empty finite samples
    equal_var : bool, default=False
        Use the pooled (Student) test if True, Welch's test otherwise
    settings : BetaSettings, optional
        Convergence controls for the p-value computation

    Returns
    -------
    TTestResult
        Statistic, degrees of freedom, p-value and per-sample statistics

    Examples
    --------
    >>> r = two_sample_t_test([1.0, 2.0, 3.0, 4.0], [2.0, 3.0, 4.0, 5.0], equal_var=True)
    >>> r.method, r.df, round(r.statistic, 12)
    ('ttest:student', 6, -1.09544511501)
    """
    method: MethodTag = STUDENT if equal_var else WELCH
    s1, s2 = _describe_pair(sample1, sample2)
    t, df = _compute(method, s1, s2)
    p = two_tailed_p_value(t, df, settings=settings)
    return TTestResult(
        method=method, statistic=t, df=df, p_value=p, stats1=s1, stats2=s2
    )


def _describe_pair(
    sample1: SampleLike, sample2: SampleLike
) -> Tuple[SampleStats, SampleStats]:
    """Validate both samples, then summarize them."""
    s1 = describe(sample1, SamplePosition.FIRST)
    s2 = describe(sample2, SamplePosition.SECOND)
    check_degenerate(s1, s2)
    return s1, s2


def _compute(
    method: MethodTag, s1: SampleStats, s2: SampleStats
) -> Tuple[float, float]:
    engine: Engine = _ENGINES[method]
    t, df = engine(s1, s2)
    logger.debug(
        "%s: n1=%d n2=%d t=%.6g df=%.6g", method, s1.count, s2.count, t, df
    )
    return t, df


def _run(
    method: MethodTag,
    sample1: SampleLike,
    sample2: SampleLike,
    as_statistic: bool,
    settings: Optional[BetaSettings],
) -> float:
    s1, s2 = _describe_pair(sample1, sample2)
    t, df = _compute(method, s1, s2)
    if as_statistic:
        return t
    return two_tailed_p_value(t, df, settings=settings)
