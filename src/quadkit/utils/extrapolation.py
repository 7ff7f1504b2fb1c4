"""Extrapolation and a-posteriori error estimates for step-halving sequences."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "richardson_extrapolate",
    "runge_error_estimate",
]


def richardson_extrapolate(
        base_values: Sequence[NDArray[np.float64] | float],
        p: int,
        r: float = 2.0,
) -> NDArray[np.float64] | float:
    """Computes Richardson extrapolation on a sequence of approximations.

    Richardson extrapolation improves the accuracy of a sequence of
    numerical approximations that converge with a known leading-order error
    term. Given a sequence of approximations computed with decreasing step sizes,
    this method combines them to eliminate the leading error term, yielding
    a more accurate estimate of the true value.

    For two quadrature estimates ``I_prev`` (step ``h``) and ``I`` (step ``h/r``)
    this reduces to ``I + (I - I_prev) / (r**p - 1)``.

    Args:
        base_values:
            Sequence of approximations at different step sizes.
            The step sizes are assumed to decrease by a factor of `r`
            between successive entries.
        p:
            The order of the leading error term in the approximations.
        r:
            The step-size reduction factor between successive entries
            (default is 2.0).

    Returns:
        The extrapolated value with improved accuracy.

    Raises:
        ValueError: If `base_values` has fewer than two entries.
    """
    n = len(base_values)
    if n < 2:
        raise ValueError("richardson_extrapolate requires at least two base values.")

    vals = [np.asarray(v, dtype=float) for v in base_values]

    for j in range(1, n):
        factor = r ** (p * j)
        for k in range(n - 1, j - 1, -1):
            vals[k] = (factor * vals[k] - vals[k - 1]) / (factor - 1.0)

    result = vals[-1]
    return float(result) if result.ndim == 0 else result


def runge_error_estimate(
        previous: float,
        current: float,
        p: int,
        r: float = 2.0,
) -> float:
    """Estimates the error of ``current`` from two successive approximations (Runge's rule).

    With ``previous`` computed at step ``h`` and ``current`` at step ``h/r``,
    the leading error term of ``current`` is approximately
    ``|current - previous| / (r**p - 1)``.

    Args:
        previous: Approximation at the coarser step.
        current: Approximation at the finer step.
        p: Order of accuracy of the underlying rule.
        r: Step-size reduction factor (default is 2.0).

    Returns:
        The non-negative error estimate. ``nan`` if either input is ``nan``.
    """
    return float(abs(current - previous) / (r ** p - 1.0))
