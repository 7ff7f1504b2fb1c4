"""Adaptive step selection by Runge's rule with Richardson extrapolation.

The loop evaluates a quadrature rule at ``n``, ``2n``, ``4n``, ... and after
each doubling estimates the error of the finer estimate as

    err = |I_n - I_{n/2}| / (2**p - 1),

where ``p`` is the order of accuracy of the rule. Once ``err`` is below the
target (and, for high-order rules, ``n`` has reached the reliability floor)
the Richardson-extrapolated value ``I_n + (I_n - I_{n/2}) / (2**p - 1)`` is
returned together with ``n``.

If a safety cap from :class:`~quadkit.adaptive.runge_config.RungeConfig`
stops the loop first, the best available extrapolation is still returned and
a ``RuntimeWarning`` is emitted; no exception is raised for numeric reasons.

Example:
    >>> from functools import partial
    >>> from quadkit.adaptive.runge import adapt
    >>> from quadkit.rules.core import trapezoidal_rule
    >>> f = lambda x: (x + 3.0) / (x * x + 4.0)
    >>> value, n = adapt(partial(trapezoidal_rule, f), 2, 0.0, 2.0, 1e-4)
    >>> n
    64
"""

from __future__ import annotations

import math
import warnings
from typing import Any, NamedTuple

from quadkit.adaptive.runge_config import RungeConfig
from quadkit.logger import quadkit_logger
from quadkit.utils.extrapolation import (
    richardson_extrapolate,
    runge_error_estimate,
)
from quadkit.utils.types import QuadratureRule

__all__ = [
    "ConvergenceState",
    "adapt",
]


class ConvergenceState(NamedTuple):
    """Loop state of one adaptive run.

    Attributes:
        previous: Estimate at ``n // 2`` (``nan`` before the first doubling).
        current: Estimate at ``n``.
        n: Current subdivision count.
        iteration: Number of doublings performed so far.
    """

    previous: float
    current: float
    n: int
    iteration: int

    def advance(self, n: int, estimate: float) -> ConvergenceState:
        """Returns the state after one doubling to ``n`` with a new estimate."""
        return ConvergenceState(
            previous=self.current,
            current=float(estimate),
            n=int(n),
            iteration=self.iteration + 1,
        )

    def error_estimate(self, order: int) -> float:
        """Runge estimate of the error of ``current``; ``inf`` before the first doubling."""
        if self.iteration == 0:
            return math.inf
        return runge_error_estimate(self.previous, self.current, order)

    def extrapolate(self, order: int) -> float:
        """Richardson-extrapolated value; ``current`` before the first doubling."""
        if self.iteration == 0:
            return self.current
        return float(richardson_extrapolate([self.previous, self.current], p=order, r=2.0))


def adapt(
    rule: QuadratureRule,
    order: int,
    lower: float,
    upper: float,
    epsilon: float,
    *,
    config: RungeConfig | None = None,
    return_diagnostics: bool = False,
    stacklevel: int = 2,
) -> tuple[float, int] | tuple[float, int, dict[str, Any]]:
    """Integrates by doubling ``n`` until Runge's error estimate meets ``epsilon``.

    Args:
        rule: Quadrature rule bound to its integrand, ``rule(lower, upper, n) -> float``.
        order: Order of accuracy ``p`` of ``rule``.
        lower: Lower integration bound.
        upper: Upper integration bound.
        epsilon: Target absolute accuracy for the Runge estimate.
        config: Loop tunables. Defaults to ``RungeConfig()``.
        return_diagnostics: If True, also return a diagnostics dictionary.
        stacklevel: Passed to :func:`warnings.warn`; the default points the
            warning at the caller of this function. Wrappers add one per frame.

    Returns:
        ``(estimate, n_final)`` where ``estimate`` is the Richardson-extrapolated
        value and ``n_final`` the last subdivision count used. With
        ``return_diagnostics=True`` a third element is returned with keys
        ``status`` (``"converged"`` or ``"degraded"``), ``reason``
        (``"tolerance"``, ``"max_subdivisions"`` or ``"max_iterations"``),
        ``iterations``, ``error_estimate``, ``n_final`` and ``history``
        (list of ``(n, estimate)`` pairs).

    Warns:
        RuntimeWarning: If a safety cap stops the loop before the error
            estimate meets ``epsilon``.
    """
    cfg = config or RungeConfig()

    n = cfg.start_subdivisions(order)
    state = ConvergenceState(
        previous=math.nan,
        current=float(rule(lower, upper, n)),
        n=n,
        iteration=0,
    )
    history: list[tuple[int, float]] = [(state.n, state.current)]

    while True:
        if state.iteration >= cfg.max_iterations:
            reason = "max_iterations"
            break
        next_n = 2 * state.n
        if next_n > cfg.max_subdivisions:
            reason = "max_subdivisions"
            break

        state = state.advance(next_n, rule(lower, upper, next_n))
        history.append((state.n, state.current))
        err = state.error_estimate(order)
        quadkit_logger.debug(
            "Runge step %d: n=%d, estimate=%.12g, error estimate=%.3e",
            state.iteration, state.n, state.current, err,
        )

        if err < epsilon and cfg.is_reliable(order, state.n):
            value = state.extrapolate(order)
            quadkit_logger.info(
                "Runge loop converged: n=%d after %d doublings (error estimate %.3e < %.3e).",
                state.n, state.iteration, err, epsilon,
            )
            return _finish(value, state, err, "converged", "tolerance", history,
                           return_diagnostics)

    err = state.error_estimate(order)
    if reason == "max_subdivisions":
        msg = (
            f"[Runge] Reached the maximum subdivision count (n={state.n}, "
            f"limit {cfg.max_subdivisions}); accuracy epsilon={epsilon:g} may not be met. "
            f"Last error estimate: {err:.3e}."
        )
    else:
        msg = (
            f"[Runge] Did not converge within {state.iteration} doublings "
            f"to epsilon={epsilon:g} (n={state.n}). Last error estimate: {err:.3e}."
        )
    quadkit_logger.warning(msg)
    warnings.warn(msg, RuntimeWarning, stacklevel=stacklevel)

    value = state.extrapolate(order)
    return _finish(value, state, err, "degraded", reason, history, return_diagnostics)


def _finish(
    value: float,
    state: ConvergenceState,
    err: float,
    status: str,
    reason: str,
    history: list[tuple[int, float]],
    return_diagnostics: bool,
) -> tuple[float, int] | tuple[float, int, dict[str, Any]]:
    """Packs the result of :func:`adapt`."""
    if not return_diagnostics:
        return value, state.n
    diagnostics = {
        "status": status,
        "reason": reason,
        "iterations": state.iteration,
        "error_estimate": err,
        "n_final": state.n,
        "history": history,
    }
    return value, state.n, diagnostics
