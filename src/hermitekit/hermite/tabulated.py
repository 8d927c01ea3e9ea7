"""Builders for Hermite interpolators from tabulated data.

Two common entry points are:

* :func:`hermite_from_arrays` with an abscissa array of shape ``(N,)``, a
  value table of shape ``(N,)`` or ``(N, M)`` and optional derivative
  tables of the same shape.
* :func:`hermite_from_table` for simple 2D tables containing x and one or
  more y components in columns, without derivative data.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import InvalidArgumentError
from hermitekit.field import DEFAULT_FIELD, ScalarField
from hermitekit.hermite.interpolator import HermiteInterpolator
from hermitekit.utils.validate import validate_sample_arrays

__all__ = ["hermite_from_arrays", "hermite_from_table", "parse_xy_table"]


def hermite_from_arrays(
    x: ArrayLike,
    y: ArrayLike,
    *dy: ArrayLike,
    field: ScalarField = DEFAULT_FIELD,
) -> HermiteInterpolator:
    """Creates a :class:`HermiteInterpolator` from tabulated samples.

    Row ``r`` of every table belongs to the abscissa ``x[r]``. A 1D table is
    read as scalar output, i.e. a dimension of one.

    For example:
        * ``x`` has shape ``(N,)`` and ``y`` has shape ``(N,)``   -> dimension 1
        * ``x`` has shape ``(N,)`` and ``y`` has shape ``(N, M)`` -> dimension ``M``
        * ``dy[0]`` holds first derivatives, ``dy[1]`` second derivatives, ...

    Example:
        >>> import numpy as np
        >>> from hermitekit import hermite_from_arrays
        >>>
        >>> x = np.array([0.0, 1.0, 2.0])
        >>> hi = hermite_from_arrays(x, x**3, 3 * x**2)
        >>> bool(np.isclose(hi.value(1.5)[0], 3.375))
        True

    Args:
        x: Abscissas with shape ``(N,)``; must be pairwise distinct.
        y: Values with shape ``(N,)`` or ``(N, M)``.
        *dy: Derivative tables, each shaped like ``y``.
        field: Identities of the element type.

    Returns:
        An interpolator holding the ``N`` sample points in table order.

    Raises:
        InvalidArgumentError: If an input array is malformed.
        DimensionMismatchError: If table shapes disagree.
        DuplicateAbscissaError: If ``x`` contains repeated abscissas.
    """
    x_arr, tables = validate_sample_arrays(x, (y, *dy))

    interpolator = HermiteInterpolator(field=field)
    for r in range(x_arr.shape[0]):
        interpolator.add_sample_point(x_arr[r], *(t[r] for t in tables))
    return interpolator


def hermite_from_table(
    table: ArrayLike,
    *,
    field: ScalarField = DEFAULT_FIELD,
) -> HermiteInterpolator:
    """Creates a value-only :class:`HermiteInterpolator` from a 2D ``(x, y)`` table.

    Supported layouts:
        * ``(N, 2)``: column 0 = x, column 1 = scalar y.
        * ``(N, M+1)``: column 0 = x, columns 1..M = components of y.
        * ``(2, N)``: row 0 = x, row 1 = scalar y.

    A table with exactly two rows is always read as ``(2, N)``, so a
    ``(2, 2)`` table holds two samples ``(table[0, j], table[1, j])``. Pass
    such data through :func:`hermite_from_arrays` to read it column-wise.

    Args:
        table: 2D array containing x and y columns.
        field: Identities of the element type.

    Returns:
        A :class:`HermiteInterpolator` through every row of the table.
    """
    x, y = parse_xy_table(table)
    return hermite_from_arrays(x, y, field=field)


def parse_xy_table(table: ArrayLike) -> tuple[NDArray[Any], NDArray[Any]]:
    """Parses a 2D table into ``(x, y)`` arrays.

    The dtype of the table is preserved, so object tables of exact elements
    stay exact. A table with exactly two rows is read row-wise.

    Args:
        table: 2D array with one of the layouts listed in
            :func:`hermite_from_table`.

    Returns:
        A tuple ``(x, y)``; ``x`` is 1D of length ``N`` and ``y`` has shape
        ``(N,)`` or ``(N, M)``.

    Raises:
        InvalidArgumentError: If the input does not match any supported layout.
    """
    arr = np.asarray(table)
    if arr.ndim != 2:
        raise InvalidArgumentError(f"table must be a 2D array; got ndim={arr.ndim}.")

    match arr.shape:
        case (2, n) if n >= 2:
            # row 0 = x, row 1 = y
            x = arr[0, :]
            y = arr[1, :]
        case (n, m) if n >= 1 and m >= 2:
            # column 0 = x, remaining columns = y components
            x = arr[:, 0]
            y = arr[:, 1] if m == 2 else arr[:, 1:]
        case _:
            raise InvalidArgumentError(
                f"Unexpected table shape {arr.shape}; expected (N, 2), (N, M+1) or (2, N)."
            )

    return x, y
