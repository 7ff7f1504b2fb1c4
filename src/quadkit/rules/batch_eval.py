"""Batch evaluation of an integrand at quadrature nodes."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from quadkit.utils.concurrency import parallel_execute

__all__ = ["eval_points"]


def eval_points(
    func: Callable[[float], Any],
    xs: Sequence[float] | np.ndarray,
    n_workers: int | None = None,
) -> np.ndarray:
    """Evaluates ``func`` at a sequence of nodes.

    Args:
        func: Integrand taking a single float and returning a real number.
        xs: 1D sequence of nodes at which to evaluate ``func``.
        n_workers: Number of parallel workers. If None or <=1, runs serially.
            If greater than the number of nodes, capped to that number.

    Returns:
        A float array of integrand values, one per node.
    """
    xs_list = [float(x) for x in xs]
    if not xs_list:
        return np.asarray([], dtype=float)

    workers = _cap_workers(n_workers, len(xs_list))
    vals = parallel_execute(
        worker=func,
        arg_tuples=[(x,) for x in xs_list],
        n_workers=workers,
    )
    return np.asarray(vals, dtype=float)


def _cap_workers(n_workers: int | None, n_tasks: int) -> int:
    """Cap workers by number of tasks; ensure at least 1."""
    if n_workers is None or n_workers <= 1:
        return 1
    return max(1, min(int(n_workers), int(n_tasks)))
