"""Shared typing aliases for QuadKit."""

from __future__ import annotations

from typing import Callable, TypeAlias

Integrand: TypeAlias = Callable[[float], float]
"""A real-valued function of one real argument."""

QuadratureRule: TypeAlias = Callable[[float, float, int], float]
"""A rule bound to its integrand: ``rule(lower, upper, n) -> estimate``."""
