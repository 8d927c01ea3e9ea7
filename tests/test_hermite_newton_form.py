"""Unit tests for hermitekit.hermite.newton_form."""

from __future__ import annotations

from fractions import Fraction

import numpy as np
import pytest

from hermitekit.exceptions import DimensionMismatchError, NoDataError
from hermitekit.hermite.newton_form import (
    evaluate_newton,
    evaluate_newton_derivatives,
    newton_to_monomial,
)

F = Fraction

# P(t) = 1 + 2 (t - 1) + 3 (t - 1)(t - 2) = 3 t**2 - 7 t + 5
COEFFS = [np.array([F(1)], dtype=object), np.array([F(2)], dtype=object), np.array([F(3)], dtype=object)]
NODES = [F(1), F(2), F(4)]


def test_evaluate_newton_matches_expanded_polynomial():
    """Tests nested evaluation against the expanded polynomial."""
    for t in (F(-3), F(0), F(1, 2), F(1), F(7, 3)):
        assert evaluate_newton(COEFFS, NODES, t)[0] == 3 * t**2 - 7 * t + 5


def test_evaluate_newton_last_abscissa_does_not_matter():
    """Tests that the last node abscissa does not enter the value."""
    t = F(5, 2)
    a = evaluate_newton(COEFFS, NODES, t)
    b = evaluate_newton(COEFFS, [F(1), F(2), F(100)], t)
    assert a[0] == b[0]


def test_evaluate_newton_is_component_wise():
    """Tests vector coefficients with float data."""
    coeffs = [np.array([1.0, 0.0]), np.array([0.0, 1.0])]
    out = evaluate_newton(coeffs, [0.0, 1.0], 3.0)
    np.testing.assert_allclose(out, [1.0, 3.0])


def test_evaluate_newton_requires_coefficients():
    """Tests that an empty table raises NoDataError."""
    with pytest.raises(NoDataError):
        evaluate_newton([], [], 0.0)


def test_evaluate_newton_rejects_length_mismatch():
    """Tests that coefficients and abscissae must pair up."""
    with pytest.raises(DimensionMismatchError):
        evaluate_newton(COEFFS, NODES[:2], F(0))


def test_evaluate_newton_derivatives_matches_expanded_polynomial():
    """Tests value, first and second derivative of 3 t**2 - 7 t + 5."""
    t = F(3, 4)
    out = evaluate_newton_derivatives(COEFFS, NODES, t, order=3)
    assert out.shape == (4, 1)
    assert out[0][0] == 3 * t**2 - 7 * t + 5
    assert out[1][0] == 6 * t - 7
    assert out[2][0] == 6
    assert out[3][0] == 0


def test_evaluate_newton_derivatives_float_vectors():
    """Tests derivative evaluation for several float components at once."""
    # components: t and t**2 on nodes 0, 1, 2
    coeffs = [np.array([0.0, 0.0]), np.array([1.0, 1.0]), np.array([0.0, 1.0])]
    out = evaluate_newton_derivatives(coeffs, [0.0, 1.0, 2.0], 1.5, order=2)
    np.testing.assert_allclose(out, [[1.5, 2.25], [1.0, 3.0], [0.0, 2.0]])


def test_newton_to_monomial_expands_coefficients():
    """Tests conversion to ascending monomial coefficients."""
    out = newton_to_monomial(COEFFS, NODES)
    assert out.shape == (1, 3)
    assert list(out[0]) == [5, -7, 3]


def test_newton_to_monomial_single_coefficient():
    """Tests that a constant stays a constant."""
    out = newton_to_monomial([np.array([2.0, 4.0])], [0.0])
    np.testing.assert_array_equal(out, [[2.0], [4.0]])


def test_newton_to_monomial_agrees_with_numpy_polyval(rng):
    """Tests monomial coefficients against direct evaluation."""
    nodes = list(np.sort(rng.random(6)))
    coeffs = [rng.random(3) for _ in nodes]
    mono = newton_to_monomial(coeffs, nodes)
    for t in np.linspace(-1.0, 2.0, 7):
        expected = evaluate_newton(coeffs, nodes, t)
        got = [np.polynomial.polynomial.polyval(t, row) for row in mono]
        np.testing.assert_allclose(got, expected, rtol=1e-10, atol=1e-12)
