"""
ttestkit.api - User-Friendly Facade
===================================

Entry points for callers that want a test result without touching the
statistical layers underneath (facade pattern).

Examples
--------
>>> from ttestkit.api.ttest import welch_t_test
>>> round(welch_t_test([1.0, 2.0, 3.0, 4.0], [2.0, 3.0, 4.0, 5.0], as_statistic=True), 6)
-1.095445

Unified Interface
-----------------
All functionality is in `ttestkit.api.ttest`:
- `student_t_test()`: equal-variance test, p-value or statistic
- `welch_t_test()`: unequal-variance test, p-value or statistic
- `two_sample_t_test()`: either test with the full `TTestResult`
"""
