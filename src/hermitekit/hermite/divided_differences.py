"""Incremental confluent divided-difference table.

The table stores the Newton coefficients of the osculating polynomial (the
*top diagonal* of the divided-difference triangle) together with the most
recent row of the recurrence (the *bottom diagonal*). Both are plain lists
with one vector per node, so memory grows linearly with the node count.

A sample point supplying derivatives up to order ``k`` at ``x`` contributes
``k + 1`` nodes sharing the abscissa ``x``. The divided difference over
``j + 1`` coincident nodes is ``f^(j)(x) / j!``, so the derivative data is
seeded into the bottom diagonal directly and the quotient
``(f[...later] - f[earlier...]) / (x_later - x_earlier)`` is only formed
against nodes of earlier sample points, whose abscissas differ from ``x``.

Reference: R. L. Burden and J. D. Faires, *Numerical Analysis*, section 3.4
(Hermite interpolation through divided differences).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import InvalidArgumentError
from hermitekit.field import DEFAULT_FIELD, ScalarField
from hermitekit.logger import hermitekit_logger
from hermitekit.utils.validate import check_new_abscissa, validate_sample_vectors

__all__ = ["DividedDifferenceTable"]


class DividedDifferenceTable:
    """Top and bottom diagonals of a confluent divided-difference table.

    After nodes ``z_0, ..., z_{n-1}`` have been added:

    * ``top[k]`` is ``f[z_0, ..., z_k]``, the ``k``-th Newton coefficient.
    * ``bottom[m]`` is ``f[z_m, ..., z_{n-1}]``.

    Adding a node only appends to ``top``; existing coefficients never
    change, so the polynomial built so far stays a truncation of every
    later one.

    Attributes:
        field: Identities of the element type, used to form ``i!``.
    """

    def __init__(self, field: ScalarField = DEFAULT_FIELD) -> None:
        """Initialises an empty table.

        Args:
            field: Identities of the element type. The default works for all
                built-in and NumPy numeric types.
        """
        self.field = field
        self._abscissae: list[Any] = []
        self._distinct: list[Any] = []
        self._top: list[NDArray[Any]] = []
        self._bottom: list[NDArray[Any]] = []
        self._dimension: int | None = None

    def __len__(self) -> int:
        return len(self._top)

    @property
    def n_nodes(self) -> int:
        """Number of nodes, counting every derivative order separately."""
        return len(self._top)

    @property
    def is_empty(self) -> bool:
        """Whether no sample point has been added yet."""
        return not self._top

    @property
    def dimension(self) -> int | None:
        """Length of every stored vector, or ``None`` while the table is empty."""
        return self._dimension

    @property
    def abscissae(self) -> tuple[Any, ...]:
        """Node abscissas in insertion order, repeated for confluent nodes."""
        return tuple(self._abscissae)

    @property
    def distinct_abscissae(self) -> tuple[Any, ...]:
        """One abscissa per sample point, in insertion order."""
        return tuple(self._distinct)

    @property
    def coefficients(self) -> tuple[NDArray[Any], ...]:
        """Newton coefficient vectors (read-only arrays), one per node."""
        return tuple(self._top)

    def contains(self, x: Any) -> bool:
        """Returns whether ``x`` equals the abscissa of a stored sample point."""
        return any(bool(x == a) for a in self._distinct)
    def add_sample_point(self, x: Any, vectors: Sequence[ArrayLike]) -> None:
        """Adds the nodes of one sample point and extends both diagonals.

        All checks run before the table is touched; the new diagonals are
        built on a local copy of the bottom-diagonal list and only stored
        once complete, so a failing call leaves the table as it was.

        Args:
            x: Abscissa of the sample point.
            vectors: Value vector followed by the first, second, ...
                derivative vectors at ``x``.

        Raises:
            InvalidArgumentError: If ``x`` is not a scalar, ``vectors`` is
                empty, a vector is malformed, or the elements cannot be
                combined with those already stored.
            DuplicateAbscissaError: If ``x`` is already in the table.
            DimensionMismatchError: If the vector lengths disagree with each
                other or with the table dimension.
        """
        check_new_abscissa(x, self._distinct)
        checked = validate_sample_vectors(vectors, self._dimension)

        try:
            bottom, new_top = self._extend(x, checked)
        except TypeError as e:
            raise InvalidArgumentError(
                f"sample point x={x!r} is incompatible with the stored elements: {e}"
            ) from e

        self._bottom = bottom
        self._top.extend(new_top)
        self._abscissae.extend([x] * len(new_top))
        self._distinct.append(x)
        if self._dimension is None:
            self._dimension = checked[0].shape[0]

        hermitekit_logger.debug(
            "Added sample point x=%r with %d derivative order(s); table has %d node(s).",
            x,
            len(new_top) - 1,
            len(self._top),
        )

    def _extend(
        self,
        x: Any,
        vectors: list[NDArray[Any]],
    ) -> tuple[list[NDArray[Any]], list[NDArray[Any]]]:
        """Returns the new bottom diagonal and the new top-diagonal entries."""
        n0 = len(self._abscissae)
        deltas = [x - a for a in self._abscissae]
        bottom = list(self._bottom)
        new_top: list[NDArray[Any]] = []
        for seed in self._seeds(vectors):
            # The seed is the divided difference over all nodes of this call
            # so far; nodes n0.. all share x and need no quotient.
            bottom.insert(n0, seed)
            upper = seed
            for m in range(n0 - 1, -1, -1):
                upper = (upper - bottom[m]) / deltas[m]
                bottom[m] = upper
            coefficient = np.array(upper, copy=True)
            coefficient.flags.writeable = False
            new_top.append(coefficient)
        return bottom, new_top

    def _seeds(self, vectors: list[NDArray[Any]]) -> list[NDArray[Any]]:
        """Returns ``vectors[i] / i!`` for every derivative order ``i``."""
        seeds = []
        factorial = self.field.one
        for i, v in enumerate(vectors):
            if i > 1:
                factorial = factorial * self.field.from_int(i)
                seeds.append(v / factorial)
            else:
                seeds.append(np.array(v, copy=True))
        return seeds
