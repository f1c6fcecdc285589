"""
Two independent samples compared on their means.

**Module Organization:**

- `statistics`: pooled (Student) and Welch engines producing (t, df)
- `model`: `TTestResult` record and its plain-dict payload

Example Usage
-------------
>>> from ttestkit.stats.common.descriptive import describe
>>> from ttestkit.stats.common.t_distribution import two_tailed_p_value
>>> from ttestkit.stats.schemes.two_sample.statistics import pooled_t
>>> t, df = pooled_t(describe([1.0, 2.0, 3.0, 4.0]), describe([2.0, 3.0, 4.0, 5.0]))
>>> df
6
>>> 0.0 < two_tailed_p_value(t, df) < 1.0
True
"""
