"""Quick comparison of quadrature strategies in QuadratureKit.

Integrates f(x) = (x + 3) / (x^2 + 4) over [0, 2] with a target accuracy of
1e-4 using the central-rectangle and trapezoidal rules sized from a bound on
|f''|, and the trapezoidal and Simpson rules with Runge step selection.

Run with:
    python compare_quadrature_methods.py
"""

from __future__ import annotations

import logging
import math

from quadkit.quadrature_kit import QuadratureKit
from quadkit.report import format_comparison_table
from quadkit.sizing.apriori import (
    apriori_error_bound,
    estimate_second_derivative_bound,
)


def f(x: float) -> float:
    return (x + 3.0) / (x * x + 4.0)


def d2f(x: float) -> float:
    """f''(x) = 2 (x^3 + 9x^2 - 12x - 12) / (x^2 + 4)^3."""
    den = x * x + 4.0
    return 2.0 * (x ** 3 + 9.0 * x ** 2 - 12.0 * x - 12.0) / den ** 3


def main() -> None:
    """Main comparison routine."""
    logging.basicConfig(level=logging.INFO, format="%(name)s | %(levelname)s | %(message)s")

    a, b = 0.0, 2.0
    epsilon = 1e-4
    exact = 0.5 * math.log(2.0) + 3.0 * math.pi / 8.0

    m2 = estimate_second_derivative_bound(d2f, a, b)
    print(f"f(x) = (x+3)/(x^2+4) on [{a}, {b}], epsilon = {epsilon:g}")
    print(f"max|f''| sampled: M2 = {m2:.5f}")

    qk = QuadratureKit(f, a, b)
    rows = qk.compare(m2=m2, exact=exact, epsilon=epsilon, n_workers=4)
    print(format_comparison_table(rows, exact=exact, epsilon=epsilon))

    for kind, row in (("central_rectangle", rows[0]), ("trapezoidal", rows[1])):
        bound = apriori_error_bound(kind, a, b, m2, row.n)
        print(f"{row.method}: classical bound at n={row.n} is {bound:.3e}")


if __name__ == "__main__":
    main()
