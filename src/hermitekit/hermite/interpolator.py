"""Osculating (Hermite) polynomial interpolation over generic fields.

:class:`HermiteInterpolator` builds, one sample point at a time, the
minimal-degree polynomial matching prescribed values and any number of
derivatives at distinct abscissas, and evaluates it anywhere.

Examples:
=========

Interpolating ``x**8 + 1`` from values, first and second derivatives at three
points with exact rational arithmetic::
>>> from fractions import Fraction
>>> from hermitekit import HermiteInterpolator
>>> F = Fraction
>>> hi = HermiteInterpolator()
>>> hi.add_sample_point(F(-1), [F(2)], [F(-8)], [F(56)])
>>> hi.add_sample_point(F(0), [F(1)], [F(0)], [F(0)])
>>> hi.add_sample_point(F(1), [F(2)], [F(8)], [F(56)])
>>> hi.value(F(1, 2))[0]
Fraction(257, 256)

Vector-valued data and derivative queries with floats::
>>> import numpy as np
>>> hi = HermiteInterpolator()
>>> hi.add_sample_point(0.0, [0.0, 1.0], [1.0, 0.0])
>>> hi.add_sample_point(1.0, [1.0, 2.0])
>>> bool(np.allclose(hi.derivatives(0.0, order=1), [[0.0, 1.0], [1.0, 0.0]]))
True
"""

from __future__ import annotations

from typing import Any

from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import InvalidArgumentError
from hermitekit.field import DEFAULT_FIELD, ScalarField
from hermitekit.hermite.divided_differences import DividedDifferenceTable
from hermitekit.hermite.newton_form import (
    evaluate_newton,
    evaluate_newton_derivatives,
    newton_to_monomial,
)
from hermitekit.logger import hermitekit_logger

__all__ = ["HermiteInterpolator"]


class HermiteInterpolator:
    """Incremental Hermite interpolator for vector-valued samples.

    Each call to :meth:`add_sample_point` supplies an abscissa, a value
    vector and optionally first, second, ... derivative vectors. The
    interpolant matches every supplied value and derivative. Its degree is
    one less than the total number of vectors supplied so far.

    The instance is empty until the first successful
    :meth:`add_sample_point`; it can only grow afterwards. Evaluation never
    modifies the table, so concurrent queries are safe once construction is
    finished. Calls to :meth:`add_sample_point` must be serialised by the
    caller.

    Attributes:
        field: Identities of the element type.
    """

    def __init__(self, *, field: ScalarField = DEFAULT_FIELD) -> None:
        """Initialises an empty interpolator.

        Args:
            field: Identities of the element type. Only needed for element
                types that cannot be mixed with the Python integers 0 and 1.
        """
        self.field = field
        self._table = DividedDifferenceTable(field)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_points={len(self._table.distinct_abscissae)}, "
            f"n_nodes={self._table.n_nodes}, dimension={self._table.dimension})"
        )

    def __len__(self) -> int:
        return self._table.n_nodes

    @property
    def n_nodes(self) -> int:
        """Number of interpolation conditions; the degree plus one."""
        return self._table.n_nodes

    @property
    def dimension(self) -> int | None:
        """Number of interpolated components, ``None`` until the first sample."""
        return self._table.dimension

    @property
    def abscissae(self) -> tuple[Any, ...]:
        """Abscissas of the sample points, in insertion order."""
        return self._table.distinct_abscissae

    @property
    def is_empty(self) -> bool:
        """Whether no sample point has been added yet."""
        return self._table.is_empty

    def add_sample_point(
        self,
        x: Any,
        value: ArrayLike,
        *derivatives: ArrayLike,
    ) -> None:
        """Adds a sample point with its value and optional derivatives.

        Integer and boolean vectors are converted to ``float64`` when stored,
        so integers beyond ``2**53`` lose precision. Integers too large for
        ``int64`` stay Python ints but become floats at the first division.
        Pass ``Fraction`` (or another exact type) to keep integers exact.

        Args:
            x: Abscissa; must differ from every abscissa added before.
            value: Value vector at ``x``. Its length fixes the dimension of
                the interpolator on the first call.
            *derivatives: First, second, ... derivative vectors at ``x``,
                each with the same length as ``value``.

        Raises:
            DuplicateAbscissaError: If ``x`` was already added.
            DimensionMismatchError: If a vector length differs from the
                others or from the dimension fixed by the first sample point.
            InvalidArgumentError: If ``x`` is not a scalar or a vector is
                empty, multi-dimensional or non-numeric, or if ``x`` or the
                vector entries cannot be combined with the stored elements.
        """
        try:
            self._table.add_sample_point(x, (value, *derivatives))
        except InvalidArgumentError as e:
            hermitekit_logger.debug("Rejected sample point x=%r: %s", x, e)
            raise

    def value(self, x: Any) -> NDArray[Any]:
        """Evaluates the interpolant at ``x``.

        Args:
            x: Query abscissa. Points outside the sampled range are
                extrapolated.

        Returns:
            Vector of length :attr:`dimension`.

        Raises:
            NoDataError: If no sample point has been added.
        """
        return evaluate_newton(self._table.coefficients, self._table.abscissae, x)

    def __call__(self, x: Any) -> NDArray[Any]:
        """Evaluates the interpolant at ``x``; same as :meth:`value`."""
        return self.value(x)

    def derivatives(self, x: Any, order: int = 1) -> NDArray[Any]:
        """Evaluates the interpolant and its derivatives at ``x``.

        Args:
            x: Query abscissa.
            order: Highest derivative order. Default is 1.

        Returns:
            Array of shape ``(order + 1, dimension)``; row ``j`` is the
            ``j``-th derivative at ``x`` and row 0 equals :meth:`value`.

        Raises:
            NoDataError: If no sample point has been added.
            InvalidArgumentError: If ``order`` is negative or not an integer.
        """
        return evaluate_newton_derivatives(
            self._table.coefficients,
            self._table.abscissae,
            x,
            order=order,
            field=self.field,
        )

    def polynomial_coefficients(self) -> NDArray[Any]:
        """Returns the interpolant in monomial form.

        Returns:
            Array of shape ``(dimension, n_nodes)``; row ``i`` holds the
            coefficients of component ``i`` by ascending power.

        Raises:
            NoDataError: If no sample point has been added.
        """
        return newton_to_monomial(self._table.coefficients, self._table.abscissae)
