"""Composite quadrature rules and their registry."""

from quadkit.rules.core import (
    ORDER_OF_ACCURACY,
    central_rectangle_rule,
    simpson_rule,
    trapezoidal_rule,
)
from quadkit.rules.registry import (
    RuleSpec,
    available_rules,
    register_rule,
    resolve_rule,
)

__all__ = [
    "ORDER_OF_ACCURACY",
    "central_rectangle_rule",
    "trapezoidal_rule",
    "simpson_rule",
    "RuleSpec",
    "available_rules",
    "register_rule",
    "resolve_rule",
]
