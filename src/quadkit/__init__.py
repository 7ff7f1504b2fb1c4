"""Provides all quadkit methods."""

from importlib.metadata import PackageNotFoundError, version

from quadkit.adaptive.runge import adapt
from quadkit.adaptive.runge_config import RungeConfig
from quadkit.adaptive.runge_integrator import RungeIntegrator
from quadkit.quadrature_kit import QuadratureKit, register_rule
from quadkit.rules.core import (
    central_rectangle_rule,
    simpson_rule,
    trapezoidal_rule,
)
from quadkit.sizing.apriori import size_and_integrate

try:
    __version__ = version("quadkit")
except PackageNotFoundError:
    pass

QuadratureKit.__module__ = "quadkit.quadrature_kit"

__all__ = [
    "QuadratureKit",
    "RungeConfig",
    "RungeIntegrator",
    "adapt",
    "central_rectangle_rule",
    "register_rule",
    "simpson_rule",
    "size_and_integrate",
    "trapezoidal_rule",
]
