"""
pytest configuration and shared fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

import numpy as np
import pytest

from pyalgebra.matrix import DenseMatrix
from pyalgebra.number import Rational


@dataclass(frozen=True)
class Quaternion:
    """
    Quaternion with exact rational components.

    Multiplication does not commute (i·j = k, j·i = -k), so any test
    computing with quaternions catches a swapped product. Not Numeric:
    pivoting falls back to the zero/non-zero ranking.
    """
    a: Fraction
    b: Fraction = Fraction(0)
    c: Fraction = Fraction(0)
    d: Fraction = Fraction(0)

    def __post_init__(self):
        for name in ('a', 'b', 'c', 'd'):
            object.__setattr__(self, name, Fraction(getattr(self, name)))

    def plus(self, that: Quaternion) -> Quaternion:
        return Quaternion(self.a + that.a, self.b + that.b, self.c + that.c, self.d + that.d)

    def opposite(self) -> Quaternion:
        return Quaternion(-self.a, -self.b, -self.c, -self.d)

    def times(self, that: Quaternion) -> Quaternion:
        a1, b1, c1, d1 = self.a, self.b, self.c, self.d
        a2, b2, c2, d2 = that.a, that.b, that.c, that.d
        return Quaternion(
            a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
            a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
            a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
            a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
        )

    def inverse(self) -> Quaternion:
        norm = self.a ** 2 + self.b ** 2 + self.c ** 2 + self.d ** 2
        if norm == 0:
            raise ZeroDivisionError("quaternion zero has no inverse")
        return Quaternion(self.a / norm, -self.b / norm, -self.c / norm, -self.d / norm)

    def __str__(self) -> str:
        return f"({self.a}+{self.b}i+{self.c}j+{self.d}k)"


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def r():
    """Shorthand constructor for Rational elements."""
    return Rational.value_of


@pytest.fixture
def q():
    """Shorthand constructor for Quaternion elements."""
    return Quaternion


@pytest.fixture
def rational_matrix(r):
    """Build a DenseMatrix of Rational from nested integer lists."""
    def build(rows):
        return DenseMatrix.value_of([[r(x) for x in row] for row in rows])
    return build


@pytest.fixture
def random_rational_matrix(rng, r):
    """Random n x m matrix of small-integer Rationals (almost surely regular when square)."""
    def build(n, m=None):
        m = n if m is None else m
        values = rng.integers(-9, 10, size=(n, m))
        return DenseMatrix.value_of([[r(int(x)) for x in row] for row in values])
    return build


@pytest.fixture
def quaternion_matrix(rng):
    """Random n x m matrix of small-integer Quaternions."""
    def build(n, m=None):
        m = n if m is None else m
        values = rng.integers(-5, 6, size=(n, m, 4))
        return DenseMatrix.value_of([
            [Quaternion(*(int(x) for x in cell)) for cell in row] for row in values
        ])
    return build
