"""Pytest configuration file with shared fixtures for hermitekit tests."""

from __future__ import annotations

import decimal

import numpy as np
import pytest


@pytest.fixture
def decimal_context():
    """Runs the test under a 30-digit ``decimal`` context.

    Yields the active context so tests can build ``Decimal`` values with
    ``ctx.create_decimal``.
    """
    with decimal.localcontext() as ctx:
        ctx.prec = 30
        yield ctx


@pytest.fixture
def rng():
    """Returns a seeded NumPy generator so random tests are reproducible."""
    return np.random.default_rng(0x42B1E7DB)
