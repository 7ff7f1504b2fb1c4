"""Side-by-side comparison of a-priori and adaptive quadrature strategies."""

from __future__ import annotations

from functools import partial
from typing import Callable, NamedTuple, Sequence

from quadkit.adaptive.runge import adapt
from quadkit.adaptive.runge_config import RungeConfig
from quadkit.rules.core import ORDER_OF_ACCURACY, simpson_rule, trapezoidal_rule
from quadkit.sizing.apriori import size_and_integrate
from quadkit.utils.concurrency import parallel_execute
from quadkit.utils.types import Integrand
from quadkit.utils.validate import validate_epsilon

__all__ = [
    "ComparisonRow",
    "compare_methods",
    "format_comparison_table",
]


class ComparisonRow(NamedTuple):
    """One strategy's result against a known exact value."""

    method: str
    n: int
    value: float
    abs_error: float
    target_met: bool


def _run(task: Callable[[], tuple[float, int]]) -> tuple[float, int]:
    return task()


def compare_methods(
    function: Integrand,
    lower: float,
    upper: float,
    *,
    epsilon: float,
    m2: float,
    exact: float,
    config: RungeConfig | None = None,
    n_workers: int = 1,
) -> list[ComparisonRow]:
    """Runs the four standard strategies and measures them against ``exact``.

    The strategies, in order, are the central-rectangle and trapezoidal rules
    sized from ``m2``, and the trapezoidal and Simpson rules with Runge step
    selection.

    Args:
        function: The integrand.
        lower: Lower integration bound.
        upper: Upper integration bound.
        epsilon: Target absolute accuracy shared by all strategies.
        m2: Upper bound on ``|f''|`` for the a-priori strategies.
        exact: Reference value of the integral.
        config: Loop tunables for the adaptive strategies.
        n_workers: Number of strategies run concurrently.

    Returns:
        One :class:`ComparisonRow` per strategy.

    Raises:
        ValueError: If ``epsilon`` is not a positive finite number.
    """
    epsilon = validate_epsilon(epsilon)
    tasks = [
        ("Central rectangles (M2)",
         partial(size_and_integrate, function, "central_rectangle", lower, upper, m2, epsilon)),
        ("Trapezoidal (M2)",
         partial(size_and_integrate, function, "trapezoidal", lower, upper, m2, epsilon)),
        ("Trapezoidal (Runge)",
         partial(adapt, partial(trapezoidal_rule, function), ORDER_OF_ACCURACY["trapezoidal"],
                 lower, upper, epsilon, config=config)),
        ("Simpson (Runge)",
         partial(adapt, partial(simpson_rule, function), ORDER_OF_ACCURACY["simpson"],
                 lower, upper, epsilon, config=config)),
    ]
    results = parallel_execute(_run, [(task,) for _, task in tasks], n_workers=n_workers)

    rows = []
    for (label, _), (value, n) in zip(tasks, results):
        err = abs(value - exact)
        rows.append(ComparisonRow(label, int(n), float(value), err, err <= epsilon))
    return rows


def format_comparison_table(
    rows: Sequence[ComparisonRow],
    *,
    exact: float | None = None,
    epsilon: float | None = None,
    decimals: int = 8,
) -> str:
    """Formats comparison rows into a human-readable table.

    Args:
        rows: Rows as returned by :func:`compare_methods`.
        exact: Optional reference value printed in the header.
        epsilon: Optional target accuracy; adds a summary of the strategies
            that missed it.
        decimals: Number of decimal places for values and errors.

    Returns:
        The table as a multi-line string.
    """
    width_method = max([len("Method")] + [len(r.method) for r in rows])
    header = f"| {'Method':<{width_method}} | {'n':>8} | {'Result':>16} | {'Abs. error':>16} |"
    rule = "-" * len(header)

    lines = []
    if exact is not None:
        lines.append(f"Exact value: {exact:.{decimals}f}")
    lines += [rule, header, rule]
    for r in rows:
        lines.append(
            f"| {r.method:<{width_method}} | {r.n:>8d} | {r.value:>16.{decimals}f} "
            f"| {r.abs_error:>16.{decimals}f} |"
        )
    lines.append(rule)

    if epsilon is not None:
        missed = [r for r in rows if r.abs_error > epsilon]
        if not missed:
            lines.append(f"All methods reached the target accuracy epsilon={epsilon:g}.")
        for r in missed:
            lines.append(
                f"Warning: {r.method} error ({r.abs_error:.3e}) > epsilon ({epsilon:g})."
            )
    return "\n".join(lines)
