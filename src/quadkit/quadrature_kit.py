"""Provides the QuadratureKit API.

This class is a lightweight front end over QuadKit's quadrature engines.
You provide the integrand and the interval, then choose a rule by name
(e.g., ``"trapezoidal"`` or ``"simpson"``) and a way of picking the
subdivision count: fixed, sized from a bound on ``|f''|``, or adaptive.

Examples:
    Basic usage:

        >>> import math
        >>> from quadkit.quadrature_kit import QuadratureKit
        >>> qk = QuadratureKit(math.exp, 0.0, 1.0)
        >>> qk.integrate(method="simpson", n=16)  # doctest: +SKIP
        >>> qk.adapt(method="trapezoidal", epsilon=1e-8)  # doctest: +SKIP

Notes:
    - Rule names are case/spacing/punctuation insensitive; aliases like
      ``"midpoint"`` or ``"trap"`` are supported when registered.
    - For available canonical rule names at runtime, call
      ``available_rules()``.
"""

from __future__ import annotations

from functools import partial
from typing import Any

from quadkit.adaptive.runge_config import RungeConfig
from quadkit.adaptive.runge_integrator import RungeIntegrator
from quadkit.report import ComparisonRow, compare_methods
from quadkit.rules.registry import available_rules, register_rule, resolve_rule
from quadkit.sizing.apriori import size_and_integrate
from quadkit.utils.types import Integrand, QuadratureRule

__all__ = [
    "QuadratureKit",
    "available_rules",
    "register_rule",
]


class QuadratureKit:
    """Unified interface for computing definite integrals.

    Attributes:
        function: The integrand.
        lower: Lower integration bound.
        upper: Upper integration bound.
        default_method: The rule used when no method is specified.
    """

    def __init__(self, function: Integrand, lower: float, upper: float):
        """Initializes the QuadratureKit with an integrand and an interval.

        Args:
            function: The function to integrate. Must accept a single float
                      and return a float.
            lower: Lower integration bound.
            upper: Upper integration bound. ``lower <= upper`` is assumed.
        """
        self.function = function
        self.lower = float(lower)
        self.upper = float(upper)
        self.default_method = "trapezoidal"

    def rule(self, method: str | None = None, *, n_workers: int = 1) -> QuadratureRule:
        """Returns the named rule bound to the integrand, ``rule(lower, upper, n)``."""
        spec = resolve_rule(method or self.default_method)
        return partial(spec.function, self.function, n_workers=n_workers)

    def integrate(
        self,
        *,
        method: str | None = None,
        n: int = 100,
        n_workers: int = 1,
    ) -> float:
        """Evaluates a rule once with a fixed subdivision count.

        Args:
            method: Rule name or alias. Default is ``"trapezoidal"``.
            n: Number of subintervals. ``n <= 0`` yields ``0.0``.
            n_workers: Number of threads used to evaluate the integrand.

        Returns:
            The rule estimate.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        return self.rule(method, n_workers=n_workers)(self.lower, self.upper, n)

    def size_and_integrate(
        self,
        *,
        m2: float,
        epsilon: float = 1e-4,
        method: str = "central_rectangle",
        n_workers: int = 1,
    ) -> tuple[float, int]:
        """Sizes ``n`` from a bound ``m2`` on ``|f''|`` and integrates once.

        Args:
            m2: Upper bound on ``|f''|`` over the interval.
            epsilon: Target absolute accuracy.
            method: ``"central_rectangle"`` or ``"trapezoidal"`` (or an alias).
            n_workers: Number of threads used to evaluate the integrand.

        Returns:
            ``(estimate, n_used)``.
        """
        return size_and_integrate(
            self.function, method, self.lower, self.upper, m2, epsilon, n_workers=n_workers
        )

    def adapt(
        self,
        *,
        method: str | None = None,
        epsilon: float = 1e-4,
        config: RungeConfig | None = None,
        n_workers: int = 1,
        return_diagnostics: bool = False,
    ) -> tuple[float, int] | tuple[float, int, dict[str, Any]]:
        """Integrates with Runge step selection and Richardson extrapolation.

        Forwards to :meth:`RungeIntegrator.integrate`.
        """
        return RungeIntegrator(self.function, self.lower, self.upper).integrate(
            rule=method or self.default_method,
            epsilon=epsilon,
            config=config,
            n_workers=n_workers,
            return_diagnostics=return_diagnostics,
            stacklevel=3,
        )

    def compare(
        self,
        *,
        m2: float,
        exact: float,
        epsilon: float = 1e-4,
        config: RungeConfig | None = None,
        n_workers: int = 1,
    ) -> list[ComparisonRow]:
        """Compares the a-priori and adaptive strategies against ``exact``.

        See :func:`quadkit.report.compare_methods`.
        """
        return compare_methods(
            self.function,
            self.lower,
            self.upper,
            epsilon=epsilon,
            m2=m2,
            exact=exact,
            config=config,
            n_workers=n_workers,
        )
