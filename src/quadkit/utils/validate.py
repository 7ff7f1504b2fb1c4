"""Validation utilities for QuadKit front ends."""

from __future__ import annotations

import math

__all__ = [
    "validate_epsilon",
    "validate_second_derivative_bound",
    "validate_positive_int",
]


def validate_epsilon(epsilon: float) -> float:
    """Checks that a target accuracy is a finite, strictly positive number.

    Args:
        epsilon: Target absolute accuracy.

    Returns:
        ``epsilon`` as a float.

    Raises:
        ValueError: If ``epsilon`` is not finite or not positive.
    """
    eps = float(epsilon)
    if not math.isfinite(eps) or eps <= 0.0:
        raise ValueError(f"epsilon must be a finite positive number; got {epsilon!r}.")
    return eps


def validate_second_derivative_bound(m2: float) -> float:
    """Checks that ``m2`` is a usable bound on ``|f''|`` (finite and non-negative)."""
    value = float(m2)
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"m2 must be a finite non-negative number; got {m2!r}.")
    return value


def validate_positive_int(value, name: str, *, minimum: int = 1) -> int:
    """Checks that ``value`` is an integer no smaller than ``minimum``.

    Args:
        value: Candidate value.
        name: Parameter name used in the error message.
        minimum: Smallest accepted value (default 1).

    Returns:
        ``value`` as an int.

    Raises:
        ValueError: If ``value`` is not an integer or is below ``minimum``.
    """
    if isinstance(value, bool) or int(value) != value:
        raise ValueError(f"{name} must be an integer; got {value!r}.")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}; got {value!r}.")
    return int(value)
