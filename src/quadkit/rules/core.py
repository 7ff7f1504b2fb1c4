"""Composite Newton-Cotes rules on a uniform partition.

Each rule has the signature ``rule(function, lower, upper, n, n_workers=1)``
and returns a float. Binding the integrand with :func:`functools.partial`
turns any of them into the ``rule(lower, upper, n)`` strategy consumed by
:func:`quadkit.adaptive.runge.adapt`::

    >>> import math
    >>> from functools import partial
    >>> from quadkit.rules.core import simpson_rule
    >>> rule = partial(simpson_rule, math.sin)
    >>> round(rule(0.0, math.pi, 64), 6)
    2.0

A non-positive subdivision count is a degenerate request and yields ``0.0``.
"""

from __future__ import annotations

import numpy as np

from quadkit.rules.batch_eval import eval_points
from quadkit.utils.types import Integrand

__all__ = [
    "central_rectangle_rule",
    "trapezoidal_rule",
    "simpson_rule",
    "ORDER_OF_ACCURACY",
]

ORDER_OF_ACCURACY: dict[str, int] = {
    "central_rectangle": 2,
    "trapezoidal": 2,
    "simpson": 4,
}


def central_rectangle_rule(
    function: Integrand,
    lower: float,
    upper: float,
    n: int,
    n_workers: int = 1,
) -> float:
    """Returns the composite central-rectangle (midpoint) estimate.

    Args:
        function: The integrand.
        lower: Lower integration bound.
        upper: Upper integration bound.
        n: Number of equal-width subintervals.
        n_workers: Number of threads used to evaluate the integrand.

    Returns:
        ``h * sum(f(lower + (i + 1/2) h))`` with ``h = (upper - lower) / n``,
        or ``0.0`` if ``n <= 0``.
    """
    if n <= 0:
        return 0.0
    h = (upper - lower) / n
    nodes = lower + (np.arange(n) + 0.5) * h
    values = eval_points(function, nodes, n_workers=n_workers)
    return float(h * np.sum(values))


def trapezoidal_rule(
    function: Integrand,
    lower: float,
    upper: float,
    n: int,
    n_workers: int = 1,
) -> float:
    """Returns the composite trapezoidal estimate.

    Args:
        function: The integrand.
        lower: Lower integration bound.
        upper: Upper integration bound.
        n: Number of equal-width subintervals.
        n_workers: Number of threads used to evaluate the integrand.

    Returns:
        ``h * ((f(lower) + f(upper)) / 2 + sum of interior values)``,
        or ``0.0`` if ``n <= 0``.
    """
    if n <= 0:
        return 0.0
    h = (upper - lower) / n
    ends = eval_points(function, [lower, upper], n_workers=n_workers)
    interior = eval_points(function, lower + np.arange(1, n) * h, n_workers=n_workers)
    return float(h * (0.5 * (ends[0] + ends[1]) + np.sum(interior)))


def simpson_rule(
    function: Integrand,
    lower: float,
    upper: float,
    n: int,
    n_workers: int = 1,
) -> float:
    """Returns the composite Simpson estimate.

    Simpson's rule pairs adjacent subintervals, so an odd ``n`` is rounded up
    to ``n + 1`` before partitioning.

    Args:
        function: The integrand.
        lower: Lower integration bound.
        upper: Upper integration bound.
        n: Number of equal-width subintervals.
        n_workers: Number of threads used to evaluate the integrand.

    Returns:
        ``(h / 3) * (f(lower) + f(upper) + 4 * odd nodes + 2 * even nodes)``,
        or ``0.0`` if ``n <= 0``.
    """
    if n <= 0:
        return 0.0
    if n % 2 != 0:
        n += 1
    h = (upper - lower) / n
    idx = np.arange(1, n)
    ends = eval_points(function, [lower, upper], n_workers=n_workers)
    interior = eval_points(function, lower + idx * h, n_workers=n_workers)
    # odd-indexed nodes carry weight 4, even-indexed interior nodes weight 2
    weights = np.where(idx % 2 == 1, 4.0, 2.0)
    return float(h / 3.0 * (ends[0] + ends[1] + np.dot(weights, interior)))
