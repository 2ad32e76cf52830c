"""
Concrete element types.

Each type is an immutable value implementing the FieldElement protocol
(plus, opposite, times, inverse) and the Numeric ordering capability
(magnitude, is_larger_than).

Public API:
    Float64: double-precision reals
    Complex: double-precision complex numbers
    Rational: exact fractions
    Integer64: 64-bit integers (a ring: only ±1 are invertible)
"""

from pyalgebra.number.base import Number
from pyalgebra.number.float64 import Float64
from pyalgebra.number.complex import Complex
from pyalgebra.number.rational import Rational
from pyalgebra.number.integer64 import Integer64

__all__ = [
    "Number",
    "Float64",
    "Complex",
    "Rational",
    "Integer64",
]
