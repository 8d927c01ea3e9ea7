"""Unit tests for hermitekit.field."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from hermitekit.exceptions import InvalidArgumentError
from hermitekit.field import DEFAULT_FIELD, FieldElement, ScalarField


def test_default_field_uses_python_integers():
    """Tests that the default identities are the integers 0 and 1."""
    assert DEFAULT_FIELD.zero == 0
    assert DEFAULT_FIELD.one == 1
    assert DEFAULT_FIELD == ScalarField()


def test_from_int_builds_by_repeated_addition():
    """Tests that from_int returns n copies of one added together."""
    field = ScalarField(zero=Fraction(0), one=Fraction(1))
    assert field.from_int(0) == Fraction(0)
    assert field.from_int(5) == Fraction(5)
    assert isinstance(field.from_int(3), Fraction)


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, 2), (3, 6), (5, 120), (8, 40320)])
def test_factorial_values(n, expected):
    """Tests factorial against known values."""
    assert DEFAULT_FIELD.factorial(n) == expected


def test_factorial_keeps_element_type():
    """Tests that factorial is computed in the field's element type."""
    field = ScalarField(zero=Decimal(0), one=Decimal(1))
    out = field.factorial(4)
    assert isinstance(out, Decimal)
    assert out == Decimal(24)


@pytest.mark.parametrize("method", ["from_int", "factorial"])
def test_negative_argument_raises(method):
    """Tests that negative integers are rejected."""
    with pytest.raises(InvalidArgumentError, match="non-negative|n >= 0"):
        getattr(DEFAULT_FIELD, method)(-1)


def test_scalar_field_is_frozen():
    """Tests that the identities cannot be reassigned."""
    with pytest.raises(AttributeError):
        DEFAULT_FIELD.one = 2  # type: ignore[misc]


@pytest.mark.parametrize("value", [1.5, Fraction(1, 3), Decimal("2.5")])
def test_builtin_numbers_satisfy_field_element_protocol(value):
    """Tests that common numeric types are recognised as field elements."""
    assert isinstance(value, FieldElement)
