"""
Property-Based Tests Using Hypothesis

Checks invariants of both tests over randomly generated samples: p-values in
[0, 1], symmetry under swapping the samples, and invariance under a common
shift of both samples.
"""
import pytest
from hypothesis import assume, given, settings, strategies as st

from ttestkit import student_t_test, welch_t_test
from ttestkit.stats.common.incomplete_beta import regularized_incomplete_beta

# Rounded values keep variances well clear of underflow
values = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False).map(lambda v: round(v, 3))
samples = st.lists(values, min_size=1, max_size=30)
tests = st.sampled_from([student_t_test, welch_t_test])


def _varies(sample):
    return len(set(sample)) > 1


@st.composite
def sample_pairs(draw):
    """Two samples, at least one of them non-constant."""
    a = draw(samples)
    b = draw(samples)
    assume(_varies(a) or _varies(b))
    assume(len(a) + len(b) > 2)
    return a, b


class TestTwoSampleProperties:
    """Invariants of the public entry points."""

    @given(sample_pairs(), tests)
    @settings(max_examples=200, deadline=None)
    def test_p_value_in_unit_interval(self, data, func):
        a, b = data
        p = func(a, b)
        assert 0.0 <= p <= 1.0

    @given(sample_pairs(), tests)
    @settings(max_examples=200, deadline=None)
    def test_swap_symmetry(self, data, func):
        a, b = data
        assert func(a, b) == pytest.approx(func(b, a), rel=1e-12, abs=1e-300)
        assert func(a, b, True) == pytest.approx(-func(b, a, True), rel=1e-12, abs=1e-300)

    @given(sample_pairs(), tests, st.integers(min_value=-100, max_value=100))
    @settings(max_examples=100, deadline=None)
    def test_shift_invariance(self, data, func, shift):
        a, b = data
        shifted_a = [v + shift for v in a]
        shifted_b = [v + shift for v in b]
        assert func(shifted_a, shifted_b) == pytest.approx(func(a, b), rel=1e-6, abs=1e-9)


class TestIncompleteBetaProperties:
    """Invariants of I_x(a, b)."""

    @given(
        st.floats(min_value=0.05, max_value=200.0),
        st.floats(min_value=0.05, max_value=200.0),
        st.floats(min_value=1e-6, max_value=1.0 - 1e-6),
    )
    @settings(max_examples=300, deadline=None)
    def test_bounded_and_reflective(self, a, b, x):
        value = regularized_incomplete_beta(a, b, x)
        assert 0.0 <= value <= 1.0
        mirrored = 1.0 - regularized_incomplete_beta(b, a, 1.0 - x)
        assert value == pytest.approx(mirrored, abs=1e-12)
