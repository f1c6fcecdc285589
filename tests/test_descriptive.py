"""
Tests for single-sample descriptive statistics.

Covers mean and population variance, input materialization from arbitrary
iterables, and validation of empty or non-finite samples.
"""
import math

import numpy as np
import pytest

from ttestkit.core.errors import EmptySample, NonFiniteSample, TTestError
from ttestkit.core.names import SamplePosition
from ttestkit.stats.common.descriptive import SampleStats, as_sample, describe


class TestDescribe:
    """Count, mean and population variance."""

    def test_population_variance_divides_by_count(self):
        s = describe([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        assert s.count == 8
        assert s.mean == pytest.approx(5.0)
        assert s.variance == pytest.approx(4.0)   # not 32/7

    def test_matches_numpy(self, plant_growth):
        a, _ = plant_growth
        s = describe(a)
        assert s.mean == pytest.approx(np.mean(a), rel=1e-14)
        assert s.variance == pytest.approx(np.var(a, ddof=0), rel=1e-12)
        assert s.sample_variance == pytest.approx(np.var(a, ddof=1), rel=1e-12)

    def test_single_observation(self):
        s = describe([7.5])
        assert (s.count, s.mean, s.variance) == (1, 7.5, 0.0)
        assert math.isnan(s.sample_variance)

    def test_constant_sample_has_zero_variance(self):
        assert describe([3.0, 3.0, 3.0]).variance == 0.0

    @pytest.mark.parametrize("value,n", [(0.1, 3), (0.1, 6), (0.7, 5), (29.99, 9)])
    def test_constant_inexact_values_have_zero_variance(self, value, n):
        # fsum(sample) / n lands one ulp away from these values
        s = describe([value] * n)
        assert s.variance == 0.0
        assert s.mean == value

    def test_mean_stays_within_range(self):
        sample = [0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.10000000000000002]
        s = describe(sample)
        assert min(sample) <= s.mean <= max(sample)

    def test_large_offset_keeps_precision(self):
        # Two-pass variance is unaffected by a large common offset
        s = describe([1e9 + 1.0, 1e9 + 2.0, 1e9 + 3.0])
        assert s.variance == pytest.approx(2.0 / 3.0, rel=1e-9)

    def test_std(self):
        assert describe([1.0, 3.0]).std == pytest.approx(1.0)


class TestInputs:
    """Accepted sample containers."""

    def test_generator_is_consumed_once(self):
        s = describe(x for x in [1.0, 2.0, 3.0])
        assert s.count == 3
        assert s.mean == pytest.approx(2.0)

    def test_numpy_array(self):
        s = describe(np.array([1, 2, 3, 4], dtype=np.int64))
        assert s.mean == pytest.approx(2.5)
        assert isinstance(s.mean, float)

    def test_integers_become_floats(self):
        assert as_sample([1, 2]) == (1.0, 2.0)


class TestValidation:
    """Empty and non-finite samples fail before anything is computed."""

    def test_empty_sample(self):
        with pytest.raises(EmptySample) as excinfo:
            describe([], SamplePosition.SECOND)
        assert excinfo.value.position is SamplePosition.SECOND
        assert isinstance(excinfo.value, TTestError)

    def test_empty_generator(self):
        with pytest.raises(EmptySample):
            describe(iter(()))

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite(self, bad):
        with pytest.raises(NonFiniteSample) as excinfo:
            describe([1.0, bad, 2.0], SamplePosition.FIRST)
        assert excinfo.value.position is SamplePosition.FIRST


class TestSampleStats:
    """Invariants of the summary record."""

    def test_rejects_zero_count(self):
        with pytest.raises(ValueError):
            SampleStats(count=0, mean=0.0, variance=0.0)

    def test_rejects_negative_variance(self):
        with pytest.raises(ValueError):
            SampleStats(count=3, mean=0.0, variance=-1.0)

    def test_is_immutable(self):
        s = SampleStats(count=2, mean=1.0, variance=0.25)
        with pytest.raises(AttributeError):
            s.mean = 2.0
