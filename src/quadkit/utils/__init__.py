"""Utility functions for QuadKit package."""

from .extrapolation import (
    richardson_extrapolate,
    runge_error_estimate,
)

__all__ = [
    "richardson_extrapolate",
    "runge_error_estimate",
]
