"""Internal parameter checks shared by the pipeline stages.

Not intended for public use.
"""

import math
from numbers import Real

from hatchplot.exceptions import InvalidParameterError


def require_finite(name: str, value: float) -> float:
    """Reject NaN, infinities and non-numeric values."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "must be finite")
    return float(value)


def require_positive(name: str, value: float) -> float:
    """Require a finite value strictly greater than zero."""
    value = require_finite(name, value)
    if value <= 0:
        raise InvalidParameterError(name, value, "must be greater than 0")
    return value


def require_at_least(name: str, value: float, minimum: float) -> float:
    """Require a finite value greater than or equal to minimum."""
    value = require_finite(name, value)
    if value < minimum:
        raise InvalidParameterError(name, value, f"must be at least {minimum:g}")
    return value


def require_ordered(low_name: str, low: float, high_name: str, high: float) -> None:
    """Require low <= high."""
    if low > high:
        raise InvalidParameterError(
            low_name, low, f"must not exceed {high_name} ({high:g})"
        )
