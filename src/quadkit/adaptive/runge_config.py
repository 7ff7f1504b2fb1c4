"""Configuration for the adaptive Runge/Richardson loop.

This config controls where :func:`quadkit.adaptive.runge.adapt` starts,
when it may accept convergence, and when it gives up.
"""

from __future__ import annotations

from quadkit.utils.validate import validate_positive_int


class RungeConfig:
    """Tunables of the adaptive Runge/Richardson loop.

    The defaults reproduce the classical setup: start at two subintervals,
    double until the Runge estimate meets the target, never more than
    4 000 000 subintervals or 2000 doublings.
    """

    def __init__(
        self,
        initial_subdivisions: int = 2,
        max_iterations: int = 2000,
        max_subdivisions: int = 4_000_000,
        reliability_order: int = 4,
        reliability_floor: int = 8,
    ):
        """Initialize configuration.

        Args:
            initial_subdivisions:
                Subdivision count of the first estimate. For order-4 rules
                it is rounded up to an even value of at least 2.

            max_iterations:
                Maximum number of doublings. Acts as a safety bound on
                non-convergent inputs; hitting it yields a degraded result
                and a ``RuntimeWarning``.

            max_subdivisions:
                Largest subdivision count the loop will evaluate. A doubling
                that would exceed it is not performed; the loop stops with a
                degraded result and a ``RuntimeWarning``.

            reliability_order:
                Rules of this order of accuracy or higher are subject to
                ``reliability_floor``.

            reliability_floor:
                Minimum subdivision count before convergence may be accepted
                for rules of order ``>= reliability_order``. At very small
                ``n`` the asymptotic error model behind Runge's rule does not
                hold yet and a small difference between two estimates can be
                accidental. The default of 8 is an empirical choice for
                Simpson's rule, not a derived constant; tune it per rule.
        """
        self.initial_subdivisions = validate_positive_int(
            initial_subdivisions, "initial_subdivisions"
        )
        self.max_iterations = validate_positive_int(max_iterations, "max_iterations")
        self.max_subdivisions = validate_positive_int(max_subdivisions, "max_subdivisions")
        self.reliability_order = validate_positive_int(reliability_order, "reliability_order")
        self.reliability_floor = validate_positive_int(reliability_floor, "reliability_floor")

    def __repr__(self) -> str:
        return (
            f"RungeConfig(initial_subdivisions={self.initial_subdivisions}, "
            f"max_iterations={self.max_iterations}, "
            f"max_subdivisions={self.max_subdivisions}, "
            f"reliability_order={self.reliability_order}, "
            f"reliability_floor={self.reliability_floor})"
        )

    def start_subdivisions(self, order: int) -> int:
        """Returns the first subdivision count for a rule of the given order."""
        n = self.initial_subdivisions
        if order == 4:
            n = max(2, n + n % 2)
        return n

    def is_reliable(self, order: int, n: int) -> bool:
        """Returns True if an estimate at ``n`` may be trusted for a rule of ``order``."""
        return order < self.reliability_order or n >= self.reliability_floor
