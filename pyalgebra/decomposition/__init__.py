"""
LU decomposition.

Public API:
    lu(matrix, ...) -> LUDecomposition
    determinant(matrix, ...) -> element

The lu() function is the main entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Matrix.lu(), inverse() and solve() route through it. determinant() also
falls back to cofactor expansion when a ring pivot has no inverse.

Example:
    >>> from pyalgebra.number import Rational
    >>> from pyalgebra.matrix import DenseMatrix
    >>> from pyalgebra.decomposition import lu
    >>> r = Rational.value_of
    >>> decomposition = lu(DenseMatrix.value_of([[r(2), r(1)], [r(1), r(1)]]))
    >>> print(decomposition.determinant())
    1
"""

from pyalgebra.decomposition.design import LUDesign
from pyalgebra.decomposition.pivoting import (
    PivotComparator,
    nonzero_comparator,
    numeric_comparator,
)
from pyalgebra.decomposition.solution import LUDecomposition, LUParams
from pyalgebra.decomposition.solvers import determinant, lu

__all__ = [
    "lu",
    "determinant",
    "LUDesign",
    "LUDecomposition",
    "LUParams",
    "PivotComparator",
    "numeric_comparator",
    "nonzero_comparator",
]
