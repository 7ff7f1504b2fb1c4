"""Tests for quadkit.adaptive.runge_integrator."""

from __future__ import annotations

import math
from functools import partial

import pytest

from quadkit.adaptive.runge import adapt
from quadkit.adaptive.runge_config import RungeConfig
from quadkit.adaptive.runge_integrator import RungeIntegrator
from quadkit.rules.core import simpson_rule


def test_default_rule_is_trapezoidal(rational_integrand, rational_exact):
    """Tests the default rule on the reference problem."""
    value, n = RungeIntegrator(rational_integrand, 0, 2).integrate()
    assert n == 64
    assert abs(value - rational_exact) < 1e-4


def test_uses_registry_order(rational_integrand):
    """Tests that the rule's order from the registry drives the loop."""
    got = RungeIntegrator(rational_integrand, 0.0, 2.0).integrate(rule="Simpson", epsilon=1e-6)
    expected = adapt(partial(simpson_rule, rational_integrand), 4, 0.0, 2.0, 1e-6)
    assert got == expected


def test_forwards_config_and_diagnostics():
    """Tests that config and return_diagnostics reach the engine."""
    with pytest.warns(RuntimeWarning):
        _, n, diag = RungeIntegrator(math.exp, 0.0, 1.0).integrate(
            rule="midpoint",
            epsilon=1e-30,
            config=RungeConfig(max_subdivisions=32),
            return_diagnostics=True,
        )
    assert n == 32
    assert diag["status"] == "degraded"


@pytest.mark.parametrize("eps", [0.0, -1.0, math.inf])
def test_rejects_invalid_epsilon(eps):
    """Tests that a non-positive or infinite epsilon is rejected."""
    with pytest.raises(ValueError, match="epsilon"):
        RungeIntegrator(math.exp, 0.0, 1.0).integrate(epsilon=eps)


def test_rejects_unknown_rule():
    """Tests that unknown rule names are rejected."""
    with pytest.raises(ValueError, match="Unknown quadrature rule"):
        RungeIntegrator(math.exp, 0.0, 1.0).integrate(rule="gauss")


def test_degraded_warning_points_at_caller():
    """Tests that the degraded-run warning is attributed to the calling code."""
    with pytest.warns(RuntimeWarning, match=r"^\[Runge\] ") as record:
        RungeIntegrator(math.exp, 0.0, 1.0).integrate(
            epsilon=1e-30, config=RungeConfig(max_iterations=2)
        )
    assert record[0].filename == __file__
