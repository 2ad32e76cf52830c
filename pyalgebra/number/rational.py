"""
Exact rational element type.

Backed by fractions.Fraction, so every field operation is exact and
matrices of Rational can be inverted and solved without round-off.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar

from pyalgebra.number.base import Number


@dataclass(frozen=True)
class Rational(Number):
    """
    The ratio of two integers, always kept in lowest terms.

    Example:
        >>> Rational.value_of(2, 4)
        Rational(value=Fraction(1, 2))
    """
    value: Fraction

    EXACT: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, 'value', Fraction(self.value))

    @classmethod
    def value_of(cls, dividend: int, divisor: int = 1) -> Rational:
        """
        Build ``dividend / divisor``.

        Raises:
            ZeroDivisionError: If divisor is zero
        """
        return cls(Fraction(dividend, divisor))

    @classmethod
    def zero(cls) -> Rational:
        return cls(Fraction(0))

    @classmethod
    def one(cls) -> Rational:
        return cls(Fraction(1))

    @property
    def dividend(self) -> int:
        return self.value.numerator

    @property
    def divisor(self) -> int:
        return self.value.denominator

    def plus(self, that: Rational) -> Rational:
        return Rational(self.value + that.value)

    def opposite(self) -> Rational:
        return Rational(-self.value)

    def times(self, that: Rational) -> Rational:
        return Rational(self.value * that.value)

    def inverse(self) -> Rational:
        """
        Reciprocal.

        Raises:
            ZeroDivisionError: If the value is zero
        """
        if self.value == 0:
            raise ZeroDivisionError("Rational: 0 has no inverse")
        return Rational(1 / self.value)

    def magnitude(self) -> float:
        return float(abs(self.value))

    def is_larger_than(self, that: Rational) -> bool:
        # Exact comparison; float magnitudes can tie for distinct values
        return abs(self.value) > abs(that.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        if self.value.denominator == 1:
            return str(self.value.numerator)
        return f"{self.value.numerator}/{self.value.denominator}"
