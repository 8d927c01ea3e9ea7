"""Provides all hermitekit methods."""

from importlib.metadata import PackageNotFoundError, version

from hermitekit.exceptions import (
    DimensionMismatchError,
    DuplicateAbscissaError,
    HermiteKitError,
    InvalidArgumentError,
    NoDataError,
)
from hermitekit.field import DEFAULT_FIELD, ScalarField
from hermitekit.hermite.interpolator import HermiteInterpolator
from hermitekit.hermite.tabulated import hermite_from_arrays, hermite_from_table

try:
    __version__ = version("hermitekit")
except PackageNotFoundError:
    pass

__all__ = [
    "HermiteInterpolator",
    "ScalarField",
    "DEFAULT_FIELD",
    "hermite_from_arrays",
    "hermite_from_table",
    "HermiteKitError",
    "NoDataError",
    "InvalidArgumentError",
    "DuplicateAbscissaError",
    "DimensionMismatchError",
]
