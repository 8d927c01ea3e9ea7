"""Arithmetic contract for the elements the interpolator works with.

The interpolation routines only ever add, subtract, negate, multiply,
divide and compare their inputs, so any type implementing those operators
can be used: ``float``, NumPy floating types, :class:`fractions.Fraction`,
:class:`decimal.Decimal`, or a user-defined field element.

The only things the routines cannot obtain from the operators alone are the
two identities. They are supplied by a :class:`ScalarField`. The default
field uses the Python integers ``0`` and ``1``, which mix with every
built-in and NumPy numeric type. Custom element types that do not accept
Python integers pass their own identities::

    >>> from hermitekit import HermiteInterpolator, ScalarField
    >>> field = ScalarField(zero=MyElement(0), one=MyElement(1))  # doctest: +SKIP
    >>> interpolator = HermiteInterpolator(field=field)  # doctest: +SKIP
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from hermitekit.exceptions import InvalidArgumentError

__all__ = ["FieldElement", "ScalarField", "DEFAULT_FIELD"]


@runtime_checkable
class FieldElement(Protocol):
    """Structural type of a value usable as abscissa or sample component."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


@dataclass(frozen=True)
class ScalarField:
    """Additive and multiplicative identities of an element type.

    Attributes:
        zero: Additive identity.
        one: Multiplicative identity.
    """

    zero: Any = 0
    one: Any = 1

    def from_int(self, n: int) -> Any:
        """Returns the field image of a non-negative integer.

        The value is built by repeated addition of :attr:`one`, so the
        element type never has to be constructible from an integer.

        Args:
            n: Non-negative integer.

        Returns:
            ``one + one + ... + one`` (``n`` terms), or :attr:`zero` for ``n == 0``.

        Raises:
            InvalidArgumentError: If ``n`` is negative.
        """
        if n < 0:
            raise InvalidArgumentError(f"n must be non-negative; got {n}.")
        out = self.zero
        for _ in range(n):
            out = out + self.one
        return out

    def factorial(self, n: int) -> Any:
        """Returns ``n!`` as a field element.

        Args:
            n: Non-negative integer.

        Returns:
            The product ``1 * 2 * ... * n`` built from :meth:`from_int`
            values; :attr:`one` for ``n`` equal to 0 or 1.

        Raises:
            InvalidArgumentError: If ``n`` is negative.
        """
        if n < 0:
            raise InvalidArgumentError(f"factorial requires n >= 0; got {n}.")
        out = self.one
        k = self.one
        for _ in range(2, n + 1):
            k = k + self.one
            out = out * k
        return out


DEFAULT_FIELD = ScalarField()
