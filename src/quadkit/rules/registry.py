"""Name-based lookup of quadrature rules.

Rules are registered under a canonical name plus aliases, together with
their order of accuracy. Lookup is case, spacing and punctuation
insensitive, so ``"Central-Rectangle"``, ``"central_rectangle"`` and
``"midpoint"`` all resolve to the same rule.

Registering a new rule:

    >>> from quadkit.rules.registry import register_rule
    >>> def left_rectangle_rule(function, lower, upper, n, n_workers=1):
    ...     ...
    >>> register_rule(
    ...     name="left_rectangle",
    ...     function=left_rectangle_rule,
    ...     order=1,
    ...     aliases=("left", "lr"),
    ... )  # doctest: +SKIP
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Iterable, Mapping, NamedTuple

from quadkit.rules.core import (
    ORDER_OF_ACCURACY,
    central_rectangle_rule,
    simpson_rule,
    trapezoidal_rule,
)

__all__ = [
    "RuleSpec",
    "register_rule",
    "resolve_rule",
    "available_rules",
]


class RuleSpec(NamedTuple):
    """A registered rule: canonical name, rule function and order of accuracy."""

    name: str
    function: Callable[..., float]
    order: int


# Built-in rules available in the package by default.
_RULE_SPECS: list[tuple[str, Callable[..., float], int, list[str]]] = [
    ("central_rectangle", central_rectangle_rule, ORDER_OF_ACCURACY["central_rectangle"],
     ["central-rectangle", "midpoint", "rectangle", "cr"]),
    ("trapezoidal", trapezoidal_rule, ORDER_OF_ACCURACY["trapezoidal"],
     ["trapezoid", "trapezium", "trap"]),
    ("simpson", simpson_rule, ORDER_OF_ACCURACY["simpson"],
     ["simpsons", "simp"]),
]


def _norm(s: str) -> str:
    """Normalize a rule name for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _rule_maps() -> tuple[Mapping[str, RuleSpec], tuple[str, ...]]:
    """Construct and cache lookup tables for quadrature rules.

    Returns:
        A pair ``(rule_map, canonical_names)`` where ``rule_map`` maps
        normalized names and aliases to :class:`RuleSpec` entries and
        ``canonical_names`` lists the sorted canonical names.
    """
    rule_map: dict[str, RuleSpec] = {}
    canonical: set[str] = set()
    for name, function, order, aliases in _RULE_SPECS:
        spec = RuleSpec(name=name, function=function, order=int(order))
        rule_map[_norm(name)] = spec
        canonical.add(name)
        for a in aliases:
            rule_map[_norm(a)] = spec
    return rule_map, tuple(sorted(canonical))


def register_rule(
    name: str,
    function: Callable[..., float],
    order: int,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new quadrature rule.

    Args:
        name: Canonical public name of the rule.
        function: Rule with signature ``function(integrand, lower, upper, n, n_workers=1)``.
        order: Order of accuracy ``p`` of the rule (error ~ h**p).
        aliases: Additional accepted spellings.

    Raises:
        ValueError: If ``order`` is not a positive integer.
    """
    if int(order) != order or order < 1:
        raise ValueError(f"order must be a positive integer; got {order!r}.")
    _RULE_SPECS.append((name, function, int(order), list(aliases)))
    _rule_maps.cache_clear()


def resolve_rule(rule: str) -> RuleSpec:
    """Resolve a user-provided rule name or alias.

    Args:
        rule: Rule name or alias.

    Returns:
        The matching :class:`RuleSpec`.

    Raises:
        ValueError: If the name is not registered.
    """
    rule_map, canon = _rule_maps()
    try:
        return rule_map[_norm(rule)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown quadrature rule '{rule}'. Choose one of {{{opts}}}.") from None


def available_rules() -> list[str]:
    """List canonical rule names."""
    _, canon = _rule_maps()
    return list(canon)
