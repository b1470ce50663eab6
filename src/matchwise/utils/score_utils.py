"""Numeric helpers shared by the sub-scorers."""

import math
from typing import Any


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(58.333)
        58
        >>> round_half_up(-0.5)
        0
    """
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    """Round half-up and clamp into the 0-100 score range."""
    return max(0, min(100, round_half_up(value)))


def is_present(value: Any) -> bool:
    """Whether an optional field counts as answered.

    Zero salaries and empty labels are treated as unanswered, the same way
    upstream onboarding records leave them.
    """
    return bool(value)
