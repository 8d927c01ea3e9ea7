"""Exception hierarchy for hermitekit.

All exceptions inherit from :class:`HermiteKitError` so callers can catch
any library-specific error at once. Input problems additionally inherit
from ``ValueError``.

Every error is a permanent problem with the caller's input. Nothing is
retried, and an interpolator that raised is left exactly as it was before
the offending call.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "HermiteKitError",
    "NoDataError",
    "InvalidArgumentError",
    "DuplicateAbscissaError",
    "DimensionMismatchError",
]


class HermiteKitError(Exception):
    """Base exception for all hermitekit errors."""


class NoDataError(HermiteKitError):
    """An interpolator was queried before any sample point was added."""


class InvalidArgumentError(HermiteKitError, ValueError):
    """An argument violates a precondition of the called operation."""


class DuplicateAbscissaError(InvalidArgumentError):
    """A sample point reuses an abscissa that is already in the table.

    Attributes:
        abscissa: The rejected abscissa.
    """

    def __init__(self, message: str, abscissa: Any = None) -> None:
        super().__init__(message)
        self.abscissa = abscissa


class DimensionMismatchError(InvalidArgumentError):
    """Value or derivative vectors have inconsistent lengths.

    Attributes:
        expected: Length that was required.
        actual: Length that was supplied.
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
