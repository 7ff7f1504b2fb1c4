"""Tests for quadkit.utils.extrapolation."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quadkit.rules.core import central_rectangle_rule, simpson_rule, trapezoidal_rule
from quadkit.utils.extrapolation import (
    richardson_extrapolate,
    runge_error_estimate,
)


def _make_base_values(true_val: float, h0: float, p: int, n: int, r: float = 2.0):
    """Generates synthetic approximations T + c * h^p."""
    c = 2.0
    return [
        true_val + c * (h0 / (r**j)) ** p
        for j in range(n)
    ]


def test_richardson_extrapolate_scalar_recovers_true_value():
    """Tests that richardson_extrapolate cancels the leading error term."""
    base_values = _make_base_values(3.14, 0.1, 2, 3)

    out = richardson_extrapolate(base_values, p=2, r=2.0)

    assert isinstance(out, float)
    assert_allclose(out, 3.14, rtol=1e-12, atol=1e-12)


def test_richardson_two_values_matches_runge_correction():
    """Tests that two-level extrapolation equals I + (I - I_prev) / (2^p - 1)."""
    prev, cur = 1.4875, 1.515514
    for p in (2, 4):
        expected = cur + (cur - prev) / (2**p - 1)
        assert_allclose(richardson_extrapolate([prev, cur], p=p), expected, rtol=1e-14)


def test_richardson_extrapolate_vector_works_componentwise():
    """Tests that richardson_extrapolate works on vector inputs."""
    true_vec = np.array([1.0, -2.0, 0.5])
    base_values = [true_vec + 1.5 * (0.05 / (2.0**j)) ** 4 for j in range(3)]

    out = richardson_extrapolate(base_values, p=4, r=2.0)

    assert out.shape == true_vec.shape
    assert_allclose(out, true_vec, rtol=1e-12, atol=1e-12)


def test_richardson_extrapolate_raises_on_too_few_values():
    """Tests that richardson_extrapolate requires at least two base values."""
    with pytest.raises(ValueError):
        richardson_extrapolate([1.0], p=2, r=2.0)


def test_runge_error_estimate_formula():
    """Tests |I - I_prev| / (2^p - 1) for both signs of the difference."""
    assert runge_error_estimate(1.0, 1.3, 2) == pytest.approx(0.1)
    assert runge_error_estimate(1.3, 1.0, 2) == pytest.approx(0.1)
    assert runge_error_estimate(1.0, 1.15, 4) == pytest.approx(0.01)


def test_runge_error_estimate_tracks_true_error():
    """Tests that Runge's estimate approximates the true trapezoid error."""
    exact = math.e - 1.0
    coarse = trapezoidal_rule(math.exp, 0.0, 1.0, 16)
    fine = trapezoidal_rule(math.exp, 0.0, 1.0, 32)
    assert runge_error_estimate(coarse, fine, 2) == pytest.approx(abs(fine - exact), rel=1e-2)


@pytest.mark.parametrize(
    "rule, order, first_n, last_n",
    [
        (trapezoidal_rule, 2, 4, 2048),
        (central_rectangle_rule, 2, 4, 2048),
        # from the reliability floor up; past 512 the differences reach rounding level
        (simpson_rule, 4, 8, 512),
    ],
)
def test_runge_error_estimate_non_increasing_with_n(rational_integrand, rule, order, first_n,
                                                    last_n):
    """Tests that the Runge estimate does not grow as n is doubled."""
    ns = [first_n // 2]
    while ns[-1] < last_n:
        ns.append(2 * ns[-1])
    values = [rule(rational_integrand, 0.0, 2.0, n) for n in ns]
    errs = [runge_error_estimate(a, b, order) for a, b in zip(values[:-1], values[1:])]

    assert len(errs) >= 7
    assert all(e2 <= e1 for e1, e2 in zip(errs[:-1], errs[1:])), errs


def test_simpson_runge_estimate_rises_below_reliability_floor(rational_integrand):
    """Tests that Simpson's estimate at n=8 exceeds the one at n=4 on this integrand."""
    values = [simpson_rule(rational_integrand, 0.0, 2.0, n) for n in (2, 4, 8)]
    err_4 = runge_error_estimate(values[0], values[1], 4)
    err_8 = runge_error_estimate(values[1], values[2], 4)
    assert err_8 > err_4
