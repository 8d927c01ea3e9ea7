"""Unit tests for public API."""

from __future__ import annotations

import hermitekit
from hermitekit import (
    DEFAULT_FIELD,
    HermiteInterpolator,
    HermiteKitError,
    NoDataError,
    ScalarField,
    hermite_from_arrays,
    hermite_from_table,
)
from hermitekit.exceptions import (
    DimensionMismatchError,
    DuplicateAbscissaError,
    InvalidArgumentError,
)


def test_public_names_importable_from_top_level():
    """Tests that the public entry points load from the package root."""
    assert HermiteInterpolator is not None
    assert hermite_from_arrays is not None
    assert hermite_from_table is not None
    assert isinstance(DEFAULT_FIELD, ScalarField)


def test_public_all_contains_entry_points():
    """Tests that __all__ lists the interpolator, helpers and errors."""
    expected = {
        "HermiteInterpolator",
        "ScalarField",
        "hermite_from_arrays",
        "hermite_from_table",
        "NoDataError",
        "DuplicateAbscissaError",
        "DimensionMismatchError",
        "InvalidArgumentError",
    }
    assert expected.issubset(set(hermitekit.__all__))


def test_error_hierarchy():
    """Tests that all errors share one base and input errors are ValueErrors."""
    for cls in (NoDataError, InvalidArgumentError, DuplicateAbscissaError, DimensionMismatchError):
        assert issubclass(cls, HermiteKitError)
    for cls in (InvalidArgumentError, DuplicateAbscissaError, DimensionMismatchError):
        assert issubclass(cls, ValueError)
    assert not issubclass(NoDataError, ValueError)


def test_error_attributes():
    """Tests the diagnostic attributes carried by errors."""
    e = DimensionMismatchError("bad", expected=3, actual=2)
    assert (e.expected, e.actual, str(e)) == (3, 2, "bad")
    d = DuplicateAbscissaError("dup", abscissa=1.5)
    assert d.abscissa == 1.5
