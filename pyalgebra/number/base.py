"""
Shared behavior of the concrete element types.

Concrete numbers implement the four FieldElement primitives (plus,
opposite, times, inverse) and magnitude(); minus, divide,
ordering and Python operator sugar are derived here.
"""

from typing import Any, ClassVar


class Number:
    """
    Base class for pyalgebra's built-in element types.

    Not required by vectors or matrices: any object satisfying the
    FieldElement protocol works. Subclasses are frozen dataclasses.

    Class Attributes:
        EXACT: True for exact arithmetic (no round-off), used to select
            tolerance tiers
    """

    EXACT: ClassVar[bool] = False

    def minus(self, that: Any) -> Any:
        """Difference ``self - that``."""
        return self.plus(that.opposite())

    def divide(self, that: Any) -> Any:
        """Right division ``self × that⁻¹``."""
        return self.times(that.inverse())

    def is_larger_than(self, that: Any) -> bool:
        """True if ``|self| > |that|``."""
        return self.magnitude() > that.magnitude()

    def is_zero(self) -> bool:
        """True if this is the additive identity."""
        return self == self.opposite()

    # === Operators ===

    def __add__(self, that: Any) -> Any:
        if type(that) is not type(self):
            return NotImplemented
        return self.plus(that)

    def __sub__(self, that: Any) -> Any:
        if type(that) is not type(self):
            return NotImplemented
        return self.minus(that)

    def __mul__(self, that: Any) -> Any:
        if type(that) is not type(self):
            return NotImplemented
        return self.times(that)

    def __truediv__(self, that: Any) -> Any:
        if type(that) is not type(self):
            return NotImplemented
        return self.divide(that)

    def __neg__(self) -> Any:
        return self.opposite()

    def __abs__(self) -> float:
        return self.magnitude()

    def __invert__(self) -> Any:
        return self.inverse()
