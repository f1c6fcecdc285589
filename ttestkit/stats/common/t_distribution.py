"""
ttestkit.stats.common.t_distribution
====================================

Tail probabilities of Student's t distribution.

The square of a t-distributed variable with d degrees of freedom follows an
F(1, d) distribution, so the two-tailed probability reduces to

    P(|T| >= |t|) = I_{d/(t²+d)}(d/2, 1/2)

where I is the regularized incomplete beta function. The complement
t²/(t²+d) is formed directly to keep precision when t is small.

Examples
--------
>>> from ttestkit.stats.common.t_distribution import two_tailed_p_value, t_survival
>>> two_tailed_p_value(0.0, 10.0)
1.0
>>> round(two_tailed_p_value(12.706204736174707, 1.0), 10)  # 97.5% quantile, df=1
0.05
>>> round(t_survival(0.0, 7.0), 12)
0.5
"""

from __future__ import annotations
import math
from typing import Optional

from ttestkit.core.errors import ComputationError
from ttestkit.core.settings import BetaSettings
from ttestkit.stats.common.incomplete_beta import incomplete_beta_complement


def two_tailed_p_value(
    t: float, df: float, *, settings: Optional[BetaSettings] = None
) -> float:
    """
    Two-tailed p-value of a t statistic.

    Args:
        t: Test statistic (any sign)
        df: Degrees of freedom (> 0)
        settings: Convergence controls for the incomplete beta evaluation

    Returns:
        p-value in [0, 1]; t = 0 maps to 1 and |t| -> inf maps to 0

    Raises:
        ComputationError: if df is not a positive finite number, t is NaN,
            or the evaluation does not converge
    """
    if math.isnan(t):
        raise ComputationError("t statistic is undefined (NaN)")
    if not (df > 0 and math.isfinite(df)):
        raise ComputationError(f"Degrees of freedom must be positive, got {df}")
    if math.isinf(t):
        return 0.0

    t2 = t * t
    if math.isinf(t2):
        return 0.0
    x = df / (t2 + df)
    y = t2 / (t2 + df)
    return incomplete_beta_complement(df / 2.0, 0.5, x, y, settings=settings)


def t_survival(t: float, df: float, *, settings: Optional[BetaSettings] = None) -> float:
    """
    Upper-tail probability P(T > t) for Student's t with `df` degrees of freedom.

    Derived from the two-tailed probability by symmetry of the distribution.
    """
    half = 0.5 * two_tailed_p_value(t, df, settings=settings)
    return half if t >= 0 else 1.0 - half
