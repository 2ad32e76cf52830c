"""
Complex number element type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pyalgebra.number.base import Number


@dataclass(frozen=True)
class Complex(Number):
    """
    An immutable complex number with double-precision parts.

    Ranked by modulus for pivoting.
    """
    real: float
    imaginary: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'real', float(self.real))
        object.__setattr__(self, 'imaginary', float(self.imaginary))

    @classmethod
    def zero(cls) -> Complex:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> Complex:
        return cls(0.0, 1.0)

    def plus(self, that: Complex) -> Complex:
        return Complex(self.real + that.real, self.imaginary + that.imaginary)

    def opposite(self) -> Complex:
        return Complex(-self.real, -self.imaginary)

    def times(self, that: Complex) -> Complex:
        return Complex(
            self.real * that.real - self.imaginary * that.imaginary,
            self.real * that.imaginary + self.imaginary * that.real,
        )

    def inverse(self) -> Complex:
        """
        Reciprocal ``conj(z) / |z|²``.

        Raises:
            ZeroDivisionError: If both parts are zero
        """
        d = self.real * self.real + self.imaginary * self.imaginary
        if d == 0.0:
            raise ZeroDivisionError("Complex: 0 has no inverse")
        return Complex(self.real / d, -self.imaginary / d)

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imaginary)

    def magnitude(self) -> float:
        return math.hypot(self.real, self.imaginary)

    def argument(self) -> float:
        """Angle in radians, in ``(-π, π]``."""
        return math.atan2(self.imaginary, self.real)

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        sign = '-' if self.imaginary < 0 else '+'
        return f"{self.real!r} {sign} {abs(self.imaginary)!r}i"
