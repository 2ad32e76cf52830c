"""
64-bit integer element type.

Integers form a ring, not a field: only ±1 have multiplicative inverses.
Matrices of Integer64 support every operation that needs no division
(sums, products, transpose, tensor, trace, determinant). Inverse and
solve raise SingularMatrixError as soon as an LU pivot is not a unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from pyalgebra.number.base import Number

_MODULUS = 1 << 64
_HALF = 1 << 63


def _wrap(value: int) -> int:
    """Two's-complement wrap into the signed 64-bit range."""
    return ((value + _HALF) % _MODULUS) - _HALF


@dataclass(frozen=True)
class Integer64(Number):
    """A signed 64-bit integer with wrap-around overflow."""
    value: int

    EXACT: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, 'value', _wrap(int(self.value)))

    @classmethod
    def zero(cls) -> Integer64:
        return cls(0)

    @classmethod
    def one(cls) -> Integer64:
        return cls(1)

    def plus(self, that: Integer64) -> Integer64:
        return Integer64(self.value + that.value)

    def opposite(self) -> Integer64:
        return Integer64(-self.value)

    def is_zero(self) -> bool:
        """True only for 0; the wrapped minimum value is also its own opposite."""
        return self.value == 0

    def times(self, that: Integer64) -> Integer64:
        return Integer64(self.value * that.value)

    def inverse(self) -> Integer64:
        """
        Multiplicative inverse, defined only for the units ±1.

        Raises:
            ZeroDivisionError: If the value is zero
            ArithmeticError: If the value is not a unit
        """
        if self.value == 0:
            raise ZeroDivisionError("Integer64: 0 has no inverse")
        if self.value not in (1, -1):
            raise ArithmeticError(f"Integer64: {self.value} has no inverse in the integers")
        return self

    def magnitude(self) -> float:
        return float(abs(self.value))

    def is_larger_than(self, that: Integer64) -> bool:
        return abs(self.value) > abs(that.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
