"""
ttestkit.stats.schemes.two_sample.model
=======================================

Typed results for the *two independent samples* scheme.

- `TTestResult`: immutable record of one test call
- `TTestPayload`: TypedDict contract of its plain-dict export (mypy-friendly)

Examples
--------
>>> from ttestkit.stats.common.descriptive import SampleStats
>>> from ttestkit.stats.schemes.two_sample.model import TTestResult
>>> r = TTestResult(
...     method="ttest:welch", statistic=2.0, df=10.0, p_value=0.07,
...     stats1=SampleStats(3, 1.0, 0.5), stats2=SampleStats(4, 0.0, 0.25),
... )
>>> r.to_payload()["n1"], r.to_payload()["method"]
(3, 'ttest:welch')
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypedDict

from ttestkit.core.names import MethodTag
from ttestkit.stats.common.descriptive import SampleStats


class TTestPayload(TypedDict):
    method: str
    statistic: float
    df: float
    p_value: float
    n1: int
    n2: int
    mean1: float
    mean2: float
    var1: float
    var2: float


@dataclass(frozen=True)
class TTestResult:
    """
    Outcome of a two-sample t-test.

    Attributes:
        method: "ttest:student" or "ttest:welch"
        statistic: t statistic; positive when sample 1 has the larger mean
        df: Degrees of freedom used for the p-value
        p_value: Two-tailed p-value in [0, 1]
        stats1: Descriptive statistics of sample 1
        stats2: Descriptive statistics of sample 2
    """

    method: MethodTag
    statistic: float
    df: float
    p_value: float
    stats1: SampleStats
    stats2: SampleStats

    @property
    def mean_difference(self) -> float:
        return self.stats1.mean - self.stats2.mean

    def to_payload(self) -> TTestPayload:
        """Export as a JSON-friendly dict (variances are population variances)."""
        return {
            "method": str(self.method),
            "statistic": float(self.statistic),
            "df": float(self.df),
            "p_value": float(self.p_value),
            "n1": self.stats1.count,
            "n2": self.stats2.count,
            "mean1": self.stats1.mean,
            "mean2": self.stats2.mean,
            "var1": self.stats1.variance,
            "var2": self.stats2.variance,
        }
