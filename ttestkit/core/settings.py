"""
ttestkit.core.settings
======================

Numerical configuration for the incomplete beta evaluator.

Settings are immutable values passed down explicitly from the entry points;
there is no module-level mutable configuration.

Examples
--------
>>> from ttestkit.core.settings import BetaSettings, DEFAULT_SETTINGS
>>> DEFAULT_SETTINGS.max_iterations
10000
>>> BetaSettings(tolerance=1e-12).validate()
>>> BetaSettings(max_iterations=0).validate()
Traceback (most recent call last):
...
ValueError: max_iterations must be positive, got 0
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BetaSettings:
    """
    Convergence controls for the continued-fraction evaluation.

    Parameters
    ----------
    tolerance : float, default=1e-15
        Relative change below which successive approximations are
        considered converged
    max_iterations : int, default=10000
        Iteration bound; reaching it without convergence is an error
    tiny : float, default=1e-300
        Floor substituted for vanishing denominators in the Lentz recurrence
    """

    tolerance: float = 1e-15
    max_iterations: int = 10_000
    tiny: float = 1e-300

    def validate(self) -> None:
        """Validate convergence settings."""
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_iterations <= 0:
            raise ValueError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        if not self.tiny > 0:
            raise ValueError(f"tiny must be positive, got {self.tiny}")


DEFAULT_SETTINGS = BetaSettings()


def resolve_settings(settings: Optional[BetaSettings]) -> BetaSettings:
    """Return validated settings, falling back to `DEFAULT_SETTINGS`."""
    resolved = DEFAULT_SETTINGS if settings is None else settings
    resolved.validate()
    return resolved
