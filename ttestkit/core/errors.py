"""
ttestkit.core.errors
====================

Exceptions raised by the two-sample tests.

Every error the package raises on purpose derives from `TTestError`, so callers
can catch "cannot compute this test for these inputs" in one place:

- `EmptySample`: a sample has no elements
- `NonFiniteSample`: a sample holds NaN or an infinity
- `DegenerateSamples`: both samples have zero variance (0/0 statistic)
- `ComputationError`: non-convergence or undefined degrees of freedom

Examples
--------
>>> from ttestkit.core.errors import EmptySample, TTestError
>>> from ttestkit.core.names import SamplePosition
>>> err = EmptySample(SamplePosition.SECOND)
>>> isinstance(err, TTestError) and isinstance(err, ValueError)
True
>>> str(err)
'second sample is empty'
"""

from __future__ import annotations

from ttestkit.core.names import SamplePosition


class TTestError(Exception):
    """Base class for errors raised by ttestkit."""


class EmptySample(TTestError, ValueError):
    """Raised when a supplied sample has zero elements.

    Attributes:
        position: Which argument (first or second) was empty
    """

    def __init__(self, position: SamplePosition) -> None:
        self.position = SamplePosition(position)
        super().__init__(f"{self.position.value} sample is empty")


class NonFiniteSample(TTestError, ValueError):
    """Raised when a sample contains NaN or an infinite value.

    Attributes:
        position: Which argument (first or second) held the value
        value: The offending value
    """

    def __init__(self, position: SamplePosition, value: float) -> None:
        self.position = SamplePosition(position)
        self.value = value
        super().__init__(
            f"{self.position.value} sample contains a non-finite value: {value!r}"
        )


class DegenerateSamples(TTestError, ValueError):
    """Raised when both samples have zero variance."""

    def __init__(self, message: str = "both samples have zero variance") -> None:
        super().__init__(message)


class ComputationError(TTestError, ArithmeticError):
    """Raised when a numerical step cannot produce a valid value."""
