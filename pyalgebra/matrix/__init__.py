"""
Matrices over any FieldElement type.

Public API:
    Matrix: the shared contract and algebra facade (abstract)
    DenseMatrix: tuple-of-rows storage
    SparseMatrix: position-map storage with an explicit zero
    TransposedView: O(1) transposed adapter
    float64_matrix(values) -> DenseMatrix of Float64
    to_array(matrix_or_vector) -> numpy float64 array

Example:
    >>> from pyalgebra.number import Rational
    >>> from pyalgebra.matrix import DenseMatrix
    >>> r = Rational.value_of
    >>> m = DenseMatrix.value_of([[r(2), r(1)], [r(1), r(1)]])
    >>> print(m.inverse())
    {{1, -1},
     {-1, 2}}
"""

from pyalgebra.matrix.matrix import Matrix
from pyalgebra.matrix.dense import DenseMatrix
from pyalgebra.matrix.sparse import SparseMatrix
from pyalgebra.matrix.transposed import TransposedView
from pyalgebra.matrix.float64 import float64_matrix, to_array

__all__ = [
    "Matrix",
    "DenseMatrix",
    "SparseMatrix",
    "TransposedView",
    "float64_matrix",
    "to_array",
]
