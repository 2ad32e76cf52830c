"""
PyAlgebra: linear algebra over arbitrary fields and rings.

Vectors and matrices hold any element type that can add, negate,
multiply and invert (exact rationals, complex numbers, 64-bit floats,
user-defined non-commutative rings). Multiplicative order is fixed left
to right everywhere, so non-commutative elements stay exact.

Submodules:
    number: Built-in element types (Float64, Complex, Rational, Integer64)
    vector: Dense and sparse vectors
    matrix: Dense, sparse and transposed matrices with the algebra facade
    decomposition: LU decomposition (generic and LAPACK backends)
"""

__version__ = "0.1.0"

from pyalgebra import number
from pyalgebra import vector
from pyalgebra import matrix
from pyalgebra import decomposition

__all__ = [
    "__version__",
    "number",
    "vector",
    "matrix",
    "decomposition",
]
