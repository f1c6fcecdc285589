"""
ttestkit — two-sample t-tests with a self-contained incomplete beta function.

Given two finite samples of real numbers, ttestkit returns either the t
statistic or the two-tailed p-value of the equal-variance (Student) or
unequal-variance (Welch) test of equal means.

The computation is a short pipeline of pure functions:

1. **Descriptive statistics** (`ttestkit.stats.common.descriptive`):
   count, mean and population variance of each sample.
2. **Engines** (`ttestkit.stats.schemes.two_sample.statistics`):
   pooled or Welch-Satterthwaite t statistic and degrees of freedom.
3. **p-value** (`ttestkit.stats.common.t_distribution`):
   p = I_{d/(t²+d)}(d/2, 1/2), evaluated by the continued-fraction
   incomplete beta function in `ttestkit.stats.common.incomplete_beta`.

Nothing outlives a call, so every function is safe to use from several
threads at once.

Example
-------
>>> import ttestkit
>>> a = [30.02, 29.99, 30.11, 29.97, 30.01, 29.99]
>>> b = [29.89, 29.93, 29.72, 29.98, 30.02, 29.98]
>>> round(ttestkit.student_t_test(a, b), 4)
0.0786
>>> ttestkit.welch_t_test([], b)
Traceback (most recent call last):
...
ttestkit.core.errors.EmptySample: first sample is empty
"""

import logging

from ttestkit.api.ttest import student_t_test, two_sample_t_test, welch_t_test
from ttestkit.core.errors import (
    ComputationError,
    DegenerateSamples,
    EmptySample,
    NonFiniteSample,
    TTestError,
)
from ttestkit.core.settings import DEFAULT_SETTINGS, BetaSettings
from ttestkit.stats.schemes.two_sample.model import TTestResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "student_t_test",
    "welch_t_test",
    "two_sample_t_test",
    "TTestResult",
    "BetaSettings",
    "DEFAULT_SETTINGS",
    "TTestError",
    "EmptySample",
    "NonFiniteSample",
    "DegenerateSamples",
    "ComputationError",
]
