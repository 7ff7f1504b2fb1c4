"""Adaptive step selection by Runge's rule and Richardson extrapolation."""

from quadkit.adaptive.runge import ConvergenceState, adapt
from quadkit.adaptive.runge_config import RungeConfig
from quadkit.adaptive.runge_integrator import RungeIntegrator

__all__ = [
    "ConvergenceState",
    "RungeConfig",
    "RungeIntegrator",
    "adapt",
]
