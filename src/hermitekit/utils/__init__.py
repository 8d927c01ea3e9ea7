"""Utility functions for hermitekit package."""

from .validate import (
    as_field_vector,
    check_new_abscissa,
    validate_derivative_order,
    validate_sample_arrays,
    validate_sample_vectors,
)

__all__ = [
    "as_field_vector",
    "check_new_abscissa",
    "validate_derivative_order",
    "validate_sample_arrays",
    "validate_sample_vectors",
]
