"""
64-bit floating point element type.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyalgebra.number.base import Number


@dataclass(frozen=True)
class Float64(Number):
    """
    A double-precision real number.

    ``0.0`` and ``-0.0`` compare equal, so either serves as the zero of a
    sparse structure.

    Example:
        >>> Float64(2.0).inverse()
        Float64(value=0.5)
    """
    value: float

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    @classmethod
    def zero(cls) -> Float64:
        return cls(0.0)

    @classmethod
    def one(cls) -> Float64:
        return cls(1.0)

    def plus(self, that: Float64) -> Float64:
        return Float64(self.value + that.value)

    def opposite(self) -> Float64:
        return Float64(-self.value)

    def times(self, that: Float64) -> Float64:
        return Float64(self.value * that.value)

    def inverse(self) -> Float64:
        """
        Reciprocal.

        Raises:
            ZeroDivisionError: If the value is zero
        """
        if self.value == 0.0:
            raise ZeroDivisionError("Float64: 0.0 has no inverse")
        return Float64(1.0 / self.value)

    def magnitude(self) -> float:
        return abs(self.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return repr(self.value)
