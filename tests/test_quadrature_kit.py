"""Tests for quadkit.quadrature_kit."""

from __future__ import annotations

import math

import pytest
from numpy.testing import assert_allclose

from quadkit.adaptive.runge_config import RungeConfig
from quadkit.quadrature_kit import QuadratureKit, available_rules
from quadkit.rules.core import central_rectangle_rule, simpson_rule, trapezoidal_rule


def test_integrate_dispatches_by_name():
    """Tests that integrate() evaluates the named rule once."""
    qk = QuadratureKit(math.exp, 0.0, 1.0)
    assert qk.integrate(n=10) == trapezoidal_rule(math.exp, 0.0, 1.0, 10)
    assert qk.integrate(method="midpoint", n=10) == central_rectangle_rule(math.exp, 0.0, 1.0, 10)
    assert qk.integrate(method="simpson", n=9) == simpson_rule(math.exp, 0.0, 1.0, 10)


def test_integrate_degenerate_n():
    """Tests that n <= 0 yields 0 through the front end as well."""
    assert QuadratureKit(math.exp, 0.0, 1.0).integrate(n=0) == 0.0


def test_rule_returns_strategy():
    """Tests that rule() returns a rule(lower, upper, n) callable."""
    rule = QuadratureKit(math.sin, 0.0, math.pi).rule("simpson")
    assert_allclose(rule(0.0, math.pi, 32), 2.0, atol=1e-5)


def test_unknown_method_raises():
    """Tests that an unknown rule name is rejected."""
    with pytest.raises(ValueError, match="Unknown quadrature rule"):
        QuadratureKit(math.exp, 0.0, 1.0).integrate(method="romberg")


def test_size_and_integrate(rational_integrand):
    """Tests the sized call on the reference problem."""
    qk = QuadratureKit(rational_integrand, 0.0, 2.0)
    _, n_rect = qk.size_and_integrate(m2=0.43156, epsilon=1e-4)
    _, n_trap = qk.size_and_integrate(m2=0.43156, epsilon=1e-4, method="trapezoidal")
    assert (n_rect, n_trap) == (38, 54)


def test_adapt_default_and_simpson(rational_integrand, rational_exact):
    """Tests the adaptive call for both order-2 and order-4 rules."""
    qk = QuadratureKit(rational_integrand, 0.0, 2.0)
    v_trap, n_trap = qk.adapt(epsilon=1e-4)
    v_simp, n_simp, diag = qk.adapt(method="simpson", epsilon=1e-4, return_diagnostics=True)
    assert n_trap == 64
    assert n_simp >= 8
    assert diag["status"] == "converged"
    assert abs(v_trap - rational_exact) < 1e-4
    assert abs(v_simp - rational_exact) < 1e-4


def test_compare_returns_four_rows(rational_integrand, rational_exact):
    """Tests that compare() runs all four strategies."""
    rows = QuadratureKit(rational_integrand, 0.0, 2.0).compare(m2=0.43156, exact=rational_exact)
    assert [r.n for r in rows[:2]] == [38, 54]
    assert all(r.target_met for r in rows)


def test_compare_rejects_bad_epsilon(rational_integrand):
    """Tests that compare() validates epsilon."""
    with pytest.raises(ValueError):
        QuadratureKit(rational_integrand, 0.0, 2.0).compare(m2=1.0, exact=0.0, epsilon=0.0)


def test_available_rules_reexported():
    """Tests that the registry listing is available from the front end."""
    assert "simpson" in available_rules()


def test_adapt_degraded_warning_points_at_caller():
    """Tests that adapt() attributes its degraded-run warning to the caller."""
    with pytest.warns(RuntimeWarning, match="maximum subdivision count") as record:
        QuadratureKit(math.exp, 0.0, 1.0).adapt(
            epsilon=1e-30, config=RungeConfig(max_subdivisions=16)
        )
    assert record[0].filename == __file__
