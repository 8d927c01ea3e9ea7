"""Validation utilities for hermitekit."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import (
    DimensionMismatchError,
    DuplicateAbscissaError,
    InvalidArgumentError,
)

__all__ = [
    "as_field_vector",
    "validate_sample_vectors",
    "check_new_abscissa",
    "validate_derivative_order",
    "validate_sample_arrays",
]

# Kinds kept as they are: floating, complex and object (exact element types).
_KEPT_KINDS = frozenset("fcO")
# Kinds promoted to float64.
_PROMOTED_KINDS = frozenset("biu")


def as_field_vector(values: ArrayLike, name: str = "values") -> NDArray[Any]:
    """Converts a value or derivative vector into a fresh 1D NumPy array.

    Floating, complex and ``object`` arrays keep their dtype, so exact element
    types such as ``Fraction`` or ``Decimal`` keep their own arithmetic.
    Integer and boolean input is promoted to ``float64``. A scalar becomes a
    vector of length one.

    Args:
        values: Scalar or 1D array-like.
        name: Argument name used in error messages.

    Returns:
        A new 1D array that does not share memory with ``values``.

    Raises:
        InvalidArgumentError: If ``values`` is empty, has more than one
            dimension, does not hold numeric data, or holds
            objects that do not support subtraction.
    """
    try:
        arr = np.array(values, ndmin=1)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to a vector: {e}") from e

    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"{name}: expected a 1D vector, got {arr.ndim}D with shape {arr.shape}."
        )
    if arr.size == 0:
        raise InvalidArgumentError(f"{name}: vector must not be empty.")
    if arr.dtype.kind in _PROMOTED_KINDS:
        return arr.astype(np.float64)
    if arr.dtype.kind not in _KEPT_KINDS:
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numeric data."
        )
    if arr.dtype.kind == "O":
        # Object entries must support the arithmetic of the recurrence.
        try:
            arr - arr
        except TypeError as e:
            raise InvalidArgumentError(
                f"{name}: entries do not support subtraction: {e}"
            ) from e
    return arr


def validate_sample_vectors(
    vectors: Sequence[ArrayLike],
    dimension: int | None = None,
) -> list[NDArray[Any]]:
    """Coerces the vectors of one sample point and checks their lengths.

    Args:
        vectors: Value vector followed by successive derivative vectors.
        dimension: Length every vector must have, or ``None`` when the
            interpolator has not fixed its dimension yet.

    Returns:
        The coerced vectors, in the order given.

    Raises:
        InvalidArgumentError: If ``vectors`` is empty or a vector is malformed.
        DimensionMismatchError: If the vectors differ in length from each
            other or from ``dimension``.
    """
    if len(vectors) == 0:
        raise InvalidArgumentError("a sample point needs at least a value vector.")

    out = [
        as_field_vector(v, "value" if i == 0 else f"derivative of order {i}")
        for i, v in enumerate(vectors)
    ]

    expected = out[0].shape[0] if dimension is None else dimension
    for i, v in enumerate(out):
        if v.shape[0] != expected:
            what = "value" if i == 0 else f"derivative of order {i}"
            raise DimensionMismatchError(
                f"{what}: expected length {expected}, got {v.shape[0]}.",
                expected=expected,
                actual=v.shape[0],
            )
    return out


def check_new_abscissa(x: Any, existing: Sequence[Any]) -> None:
    """Raises if ``x`` is not a scalar or equals an abscissa in ``existing``.

    Raises:
        InvalidArgumentError: If ``x`` is array-like rather than a scalar, or
            does not support subtraction.
        DuplicateAbscissaError: If ``x == a`` for some ``a`` in ``existing``.
    """
    if np.ndim(x) != 0:
        raise InvalidArgumentError(
            f"abscissa must be a scalar; got shape {np.shape(x)}."
        )
    try:
        x - x
    except TypeError as e:
        raise InvalidArgumentError(
            f"abscissa {x!r} does not support subtraction: {e}"
        ) from e
    for a in existing:
        if bool(x == a):
            raise DuplicateAbscissaError(
                f"abscissa {x!r} is already present in the table.",
                abscissa=x,
            )


def validate_derivative_order(order: int) -> int:
    """Checks that ``order`` is a non-negative integer and returns it as ``int``."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise InvalidArgumentError(
            f"order must be an integer; got {type(order).__name__}."
        )
    if order < 0:
        raise InvalidArgumentError(
            "the derivative order must be at least 0 "
            f"(the interpolant itself), but is {order}."
        )
    return int(order)


def validate_sample_arrays(
    x: ArrayLike,
    tables: Sequence[ArrayLike],
) -> tuple[NDArray[Any], list[NDArray[Any]]]:
    """Validates tabulated abscissas and their value/derivative tables.

    Requirements:
      - ``x`` is 1D and non-empty.
      - Each table has shape ``(N,)`` (scalar output) or ``(N, M)``, where
        ``N == len(x)``; a 1D table is returned as shape ``(N, 1)``.
      - All tables share the same ``M``.

    Uniqueness of ``x`` is left to the interpolator.

    Args:
        x: 1D array-like of abscissas.
        tables: Value table followed by derivative tables.

    Returns:
        Tuple of (x_array, list of 2D tables).

    Raises:
        InvalidArgumentError: If ``x`` or a table is malformed.
        DimensionMismatchError: If the table shapes disagree with ``x`` or
            with each other.
    """
    x_arr = np.asarray(x)
    if x_arr.ndim != 1:
        raise InvalidArgumentError(f"x must be 1D; got shape {x_arr.shape}.")
    if x_arr.shape[0] == 0:
        raise InvalidArgumentError("x must contain at least one abscissa.")
    if len(tables) == 0:
        raise InvalidArgumentError("at least a value table is required.")

    out: list[NDArray[Any]] = []
    for i, table in enumerate(tables):
        t = np.asarray(table)
        if t.ndim == 1:
            t = t[:, np.newaxis]
        if t.ndim != 2:
            raise InvalidArgumentError(
                f"table {i} must be 1D or 2D; got shape {t.shape}."
            )
        if t.shape[0] != x_arr.shape[0]:
            raise DimensionMismatchError(
                f"table {i}: expected {x_arr.shape[0]} rows, got {t.shape[0]}.",
                expected=x_arr.shape[0],
                actual=t.shape[0],
            )
        if out and t.shape[1] != out[0].shape[1]:
            raise DimensionMismatchError(
                f"table {i}: expected {out[0].shape[1]} columns, got {t.shape[1]}.",
                expected=out[0].shape[1],
                actual=t.shape[1],
            )
        out.append(t)
    return x_arr, out
