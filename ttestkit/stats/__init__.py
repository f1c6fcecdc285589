"""
Statistical computations behind the two-sample t-tests.

This module keeps generic methods apart from scheme-specific ones:

1. **Common** (ttestkit.stats.common):
   Reusable numerical building blocks that know nothing about two-sample
   testing: descriptive statistics, the regularized incomplete beta function
   and Student's t tail probabilities.

2. **Schemes** (ttestkit.stats.schemes):
   Problem-specific implementations that combine the common methods for a
   particular experimental layout (two independent samples).

Example:
--------
>>> # Generic method (reusable across schemes)
>>> from ttestkit.stats.common.t_distribution import two_tailed_p_value
>>> two_tailed_p_value(0.0, 5.0)
1.0

>>> # Scheme-specific application
>>> from ttestkit.stats.common.descriptive import describe
>>> from ttestkit.stats.schemes.two_sample.statistics import welch_t
>>> t, df = welch_t(describe([1.0, 2.0, 3.0]), describe([1.0, 2.0, 3.0]))
>>> t
0.0
"""
