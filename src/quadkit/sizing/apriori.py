"""A-priori choice of the subdivision count from a bound on ``|f''|``.

For the composite central-rectangle and trapezoidal rules the classical
truncation bound is

    |R_n| <= (upper - lower)**3 * M2 / (D * n**2),

with ``D = 24`` (central rectangle) and ``D = 12`` (trapezoidal), where
``M2 >= max |f''|`` on the interval. Solving for ``n`` gives the smallest
subdivision count for which the bound does not exceed the target accuracy.

The result is only as good as ``M2``: if ``M2`` underestimates ``|f''|``
the chosen ``n`` may be insufficient, and nothing here detects that.

Example:
    >>> from quadkit.sizing.apriori import required_subdivisions
    >>> required_subdivisions("central_rectangle", 0.0, 2.0, m2=0.43156, epsilon=1e-4)
    38
"""

from __future__ import annotations

import math

import numpy as np

from quadkit.rules.batch_eval import eval_points
from quadkit.rules.registry import resolve_rule
from quadkit.utils.types import Integrand
from quadkit.utils.validate import (
    validate_epsilon,
    validate_positive_int,
    validate_second_derivative_bound,
)

__all__ = [
    "ERROR_BOUND_DIVISOR",
    "required_subdivisions",
    "apriori_error_bound",
    "size_and_integrate",
    "estimate_second_derivative_bound",
]

ERROR_BOUND_DIVISOR: dict[str, float] = {
    "central_rectangle": 24.0,
    "trapezoidal": 12.0,
}


def _divisor(rule_kind: str) -> float:
    """Returns the error-bound divisor for a rule name or alias."""
    name = resolve_rule(rule_kind).name
    try:
        return ERROR_BOUND_DIVISOR[name]
    except KeyError:
        opts = ", ".join(sorted(ERROR_BOUND_DIVISOR))
        raise ValueError(
            f"No second-derivative error bound for rule '{name}'. Choose one of {{{opts}}}."
        ) from None


def required_subdivisions(
    rule_kind: str,
    lower: float,
    upper: float,
    m2: float,
    epsilon: float,
) -> int:
    """Computes the smallest ``n`` whose classical error bound meets ``epsilon``.

    Args:
        rule_kind: ``"central_rectangle"`` or ``"trapezoidal"`` (or an alias).
        lower: Lower integration bound.
        upper: Upper integration bound.
        m2: Upper bound on ``|f''|`` over ``[lower, upper]``.
        epsilon: Target absolute accuracy.

    Returns:
        ``ceil(sqrt((upper - lower)**3 * m2 / (D * epsilon)))``, at least 1.

    Raises:
        ValueError: If the rule has no second-derivative bound, ``m2`` is
            negative or ``epsilon`` is not positive.
    """
    divisor = _divisor(rule_kind)
    m2 = validate_second_derivative_bound(m2)
    epsilon = validate_epsilon(epsilon)

    width = abs(upper - lower)
    n = math.ceil(math.sqrt(width ** 3 * m2 / (divisor * epsilon)))
    # a quadrature estimate needs at least one subinterval
    return max(int(n), 1)


def apriori_error_bound(
    rule_kind: str,
    lower: float,
    upper: float,
    m2: float,
    n: int,
) -> float:
    """Returns the classical bound ``(upper - lower)**3 * m2 / (D * n**2)``.

    Raises:
        ValueError: If the rule has no second-derivative bound, ``m2`` is
            negative or ``n`` is not a positive integer.
    """
    divisor = _divisor(rule_kind)
    m2 = validate_second_derivative_bound(m2)
    n = validate_positive_int(n, "n")
    return abs(upper - lower) ** 3 * m2 / (divisor * n ** 2)


def size_and_integrate(
    function: Integrand,
    rule_kind: str,
    lower: float,
    upper: float,
    m2: float,
    epsilon: float,
    n_workers: int = 1,
) -> tuple[float, int]:
    """Sizes ``n`` from ``m2`` and evaluates the rule once at that ``n``.

    Args:
        function: The integrand.
        rule_kind: ``"central_rectangle"`` or ``"trapezoidal"`` (or an alias).
        lower: Lower integration bound.
        upper: Upper integration bound.
        m2: Upper bound on ``|f''|`` over ``[lower, upper]``.
        epsilon: Target absolute accuracy.
        n_workers: Number of threads used to evaluate the integrand.

    Returns:
        ``(estimate, n_used)``.
    """
    n = required_subdivisions(rule_kind, lower, upper, m2, epsilon)
    rule = resolve_rule(rule_kind).function
    return rule(function, lower, upper, n, n_workers=n_workers), n


def estimate_second_derivative_bound(
    second_derivative: Integrand,
    lower: float,
    upper: float,
    num_samples: int = 1001,
) -> float:
    """Estimates ``max |f''|`` on ``[lower, upper]`` by uniform sampling.

    The caller supplies ``f''``; the maximum is taken over ``num_samples``
    equally spaced points including both endpoints. This is a sampled
    estimate, not a certified bound: narrow peaks between samples are missed.

    Args:
        second_derivative: Callable returning ``f''(x)``.
        lower: Lower bound of the interval.
        upper: Upper bound of the interval.
        num_samples: Number of sample points (at least 2).

    Returns:
        The largest sampled ``|f''(x)|``.

    Raises:
        ValueError: If ``num_samples < 2`` or a sample is not finite.
    """
    num_samples = validate_positive_int(num_samples, "num_samples", minimum=2)
    xs = np.linspace(lower, upper, num_samples)
    values = np.abs(eval_points(second_derivative, xs))
    if not np.all(np.isfinite(values)):
        raise ValueError("second_derivative returned non-finite values on the interval.")
    return float(np.max(values))
