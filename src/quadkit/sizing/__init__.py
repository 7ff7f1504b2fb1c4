"""A-priori subdivision sizing."""

from quadkit.sizing.apriori import (
    ERROR_BOUND_DIVISOR,
    apriori_error_bound,
    estimate_second_derivative_bound,
    required_subdivisions,
    size_and_integrate,
)

__all__ = [
    "ERROR_BOUND_DIVISOR",
    "apriori_error_bound",
    "estimate_second_derivative_bound",
    "required_subdivisions",
    "size_and_integrate",
]
