"""
ttestkit.core.names
===================

Typed names shared across the package.

- `SamplePosition`: an Enum identifying the first or second sample of a test.
- Common `Literal` tags naming the two-sample t-test variants.

Examples
--------
>>> from ttestkit.core.names import SamplePosition
>>> SamplePosition.FIRST.value
'first'
"""

from __future__ import annotations
from enum import Enum
from typing import Literal


class SamplePosition(str, Enum):
    """Argument position of a sample in a two-sample test call.

    - FIRST: `sample1`
    - SECOND: `sample2`
    """

    FIRST = "first"
    SECOND = "second"


# Method tags (extend as needed).
StudentTag = Literal["ttest:student"]
WelchTag = Literal["ttest:welch"]
MethodTag = Literal["ttest:student", "ttest:welch"]

STUDENT: StudentTag = "ttest:student"
WELCH: WelchTag = "ttest:welch"
