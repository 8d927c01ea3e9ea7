"""Hermite interpolation: table builder, Newton-form evaluator and façade."""

from hermitekit.hermite.divided_differences import DividedDifferenceTable
from hermitekit.hermite.interpolator import HermiteInterpolator
from hermitekit.hermite.newton_form import (
    evaluate_newton,
    evaluate_newton_derivatives,
    newton_to_monomial,
)
from hermitekit.hermite.tabulated import hermite_from_arrays, hermite_from_table

__all__ = [
    "DividedDifferenceTable",
    "HermiteInterpolator",
    "evaluate_newton",
    "evaluate_newton_derivatives",
    "newton_to_monomial",
    "hermite_from_arrays",
    "hermite_from_table",
]
