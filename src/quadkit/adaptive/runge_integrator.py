"""Provides the RungeIntegrator class.

The user specifies the integrand and the interval; the rule is chosen by
name when integrating.

Examples:
--------
>>> from quadkit.adaptive.runge_integrator import RungeIntegrator
>>> f = lambda x: (x + 3.0) / (x * x + 4.0)
>>> value, n = RungeIntegrator(f, 0.0, 2.0).integrate(rule="simpson", epsilon=1e-4)
>>> n >= 8
True
"""

from __future__ import annotations

from functools import partial
from typing import Any

from quadkit.adaptive.runge import adapt
from quadkit.adaptive.runge_config import RungeConfig
from quadkit.rules.registry import resolve_rule
from quadkit.utils.types import Integrand
from quadkit.utils.validate import validate_epsilon


class RungeIntegrator:
    """Integrates with automatic step selection by Runge's rule.

    Attributes:
        function: The integrand.
        lower: Lower integration bound.
        upper: Upper integration bound.
    """

    def __init__(self, function: Integrand, lower: float, upper: float) -> None:
        """Initialises the integrator with an integrand and an interval.

        Arguments:
            function: The integrand. Must accept a single float and return a float.
            lower: Lower integration bound.
            upper: Upper integration bound.
        """
        self.function = function
        self.lower = float(lower)
        self.upper = float(upper)

    def integrate(
        self,
        rule: str = "trapezoidal",
        epsilon: float = 1e-4,
        config: RungeConfig | None = None,
        n_workers: int = 1,
        return_diagnostics: bool = False,
        stacklevel: int = 2,
    ) -> tuple[float, int] | tuple[float, int, dict[str, Any]]:
        """Integrates with the named rule until the Runge estimate meets ``epsilon``.

        Args:
            rule: Registered rule name or alias. Its order of accuracy is taken
                from the registry. Default is ``"trapezoidal"``.
            epsilon: Target absolute accuracy. Default is ``1e-4``.
            config: Loop tunables. Defaults to ``RungeConfig()``.
            n_workers: Number of threads used to evaluate the integrand.
            return_diagnostics: If True, also return the diagnostics dictionary
                of :func:`quadkit.adaptive.runge.adapt`.
            stacklevel: Frame the degraded-run warning points at, counted from
                this method; the default is its caller.

        Returns:
            ``(estimate, n_final)`` or ``(estimate, n_final, diagnostics)``.

        Raises:
            ValueError: If ``rule`` is unknown or ``epsilon`` is not positive.
        """
        epsilon = validate_epsilon(epsilon)
        spec = resolve_rule(rule)
        bound = partial(spec.function, self.function, n_workers=n_workers)
        return adapt(
            bound,
            spec.order,
            self.lower,
            self.upper,
            epsilon,
            config=config,
            return_diagnostics=return_diagnostics,
            stacklevel=stacklevel + 1,
        )
