"""
ttestkit.stats.common
=====================

Common statistical methods and utilities.

Generic numerical routines used by the testing schemes: descriptive
statistics, the regularized incomplete beta function and tail probabilities
of Student's t distribution. None of them depend on a particular scheme.
"""
