"""Evaluation of polynomials stored in Newton form.

A Newton-form polynomial is given by coefficient vectors ``c_0, ..., c_{n-1}``
and node abscissas ``x_0, ..., x_{n-1}`` (repeated for confluent nodes):

    P(t) = c_0 + (t - x_0) * (c_1 + (t - x_1) * (c_2 + ...))

All routines work component-wise on vector coefficients and use only the
element type's own arithmetic, so exact types stay exact. Arrays always sit
on the left of a product so that element types without reflected operators
still work.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from hermitekit.exceptions import DimensionMismatchError, NoDataError
from hermitekit.field import DEFAULT_FIELD, ScalarField
from hermitekit.logger import hermitekit_logger
from hermitekit.utils.validate import validate_derivative_order

__all__ = [
    "evaluate_newton",
    "evaluate_newton_derivatives",
    "newton_to_monomial",
]


def _check_nodes(
    coefficients: Sequence[NDArray[Any]],
    abscissae: Sequence[Any],
) -> None:
    if len(coefficients) == 0:
        raise NoDataError("no sample point has been added; nothing to evaluate.")
    if len(coefficients) != len(abscissae):
        raise DimensionMismatchError(
            f"got {len(coefficients)} coefficients for {len(abscissae)} abscissae.",
            expected=len(abscissae),
            actual=len(coefficients),
        )


def evaluate_newton(
    coefficients: Sequence[NDArray[Any]],
    abscissae: Sequence[Any],
    x: Any,
) -> NDArray[Any]:
    """Evaluates a Newton-form polynomial at ``x`` by nested multiplication.

    Args:
        coefficients: Newton coefficient vectors ``c_0, ..., c_{n-1}``.
        abscissae: Node abscissas ``x_0, ..., x_{n-1}``. The last one does
            not enter the result but is required for consistency.
        x: Query abscissa. It may lie outside the span of the nodes.

    Returns:
        A new vector ``P(x)`` with the same length as the coefficients.

    Raises:
        NoDataError: If there are no coefficients.
        DimensionMismatchError: If the two sequences differ in length.
    """
    _check_nodes(coefficients, abscissae)

    result = coefficients[-1]
    for k in range(len(coefficients) - 2, -1, -1):
        result = coefficients[k] + result * (x - abscissae[k])
    return np.array(result, copy=True)


def evaluate_newton_derivatives(
    coefficients: Sequence[NDArray[Any]],
    abscissae: Sequence[Any],
    x: Any,
    order: int = 1,
    field: ScalarField = DEFAULT_FIELD,
) -> NDArray[Any]:
    """Evaluates a Newton-form polynomial and its derivatives at ``x``.

    Horner's scheme is extended to carry every derivative up to ``order``.
    Writing the partial polynomial as ``Q(t) = c_k + (t - x_k) P(t)`` gives
    ``Q^(j)(x) = (x - x_k) P^(j)(x) + j P^(j-1)(x)`` for ``j >= 1``, which
    is applied from the highest order down so every update reads the
    previous ``P``.

    Args:
        coefficients: Newton coefficient vectors ``c_0, ..., c_{n-1}``.
        abscissae: Node abscissas ``x_0, ..., x_{n-1}``.
        x: Query abscissa.
        order: Highest derivative order to return. ``0`` returns only the
            value.
        field: Identities of the element type; used for the zero rows and
            the integer factors ``j``.

    Returns:
        Array of shape ``(order + 1, dimension)`` whose row ``j`` holds the
        ``j``-th derivative of every component at ``x``.

    Raises:
        NoDataError: If there are no coefficients.
        InvalidArgumentError: If ``order`` is not a non-negative integer.
        DimensionMismatchError: If the two sequences differ in length.
    """
    order = validate_derivative_order(order)
    _check_nodes(coefficients, abscissae)

    if order >= len(coefficients):
        hermitekit_logger.debug(
            "Derivative order %d exceeds the interpolant degree %d; "
            "higher rows are identically zero.",
            order,
            len(coefficients) - 1,
        )

    factors = [field.from_int(j) for j in range(order + 1)]
    last = coefficients[-1]
    rows = [np.array(last, copy=True)]
    rows.extend(last * field.zero for _ in range(order))

    for k in range(len(coefficients) - 2, -1, -1):
        delta = x - abscissae[k]
        for j in range(order, 0, -1):
            rows[j] = rows[j] * delta + rows[j - 1] * factors[j]
        rows[0] = coefficients[k] + rows[0] * delta

    return np.stack(rows)


def newton_to_monomial(
    coefficients: Sequence[NDArray[Any]],
    abscissae: Sequence[Any],
) -> NDArray[Any]:
    """Expands a Newton-form polynomial into monomial coefficients.

    The expansion starts from the innermost coefficient and repeatedly
    multiplies by ``(t - x_k)`` before adding ``c_k``.

    Args:
        coefficients: Newton coefficient vectors ``c_0, ..., c_{n-1}``.
        abscissae: Node abscissas ``x_0, ..., x_{n-1}``.

    Returns:
        Array of shape ``(dimension, n)``; row ``i`` lists the coefficients
        of component ``i`` by ascending power of ``t``.

    Raises:
        NoDataError: If there are no coefficients.
        DimensionMismatchError: If the two sequences differ in length.
    """
    _check_nodes(coefficients, abscissae)

    poly = [np.array(coefficients[-1], copy=True)]
    for k in range(len(coefficients) - 2, -1, -1):
        a = abscissae[k]
        shifted = [coefficients[k] - poly[0] * a]
        for i in range(1, len(poly)):
            shifted.append(poly[i - 1] - poly[i] * a)
        shifted.append(poly[-1])
        poly = shifted

    return np.stack(poly, axis=1)
