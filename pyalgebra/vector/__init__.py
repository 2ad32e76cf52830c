"""
Vectors over any FieldElement type.

Public API:
    Vector: the shared contract (abstract)
    DenseVector: tuple-backed storage
    SparseVector: index-map storage with an explicit zero
    float64_vector(values) -> DenseVector of Float64
    vector_to_array(vector) -> numpy float64 array
    norm(vector) -> Euclidean norm as Float64

Example:
    >>> from pyalgebra.number import Rational
    >>> from pyalgebra.vector import DenseVector, SparseVector
    >>> ones = DenseVector.value_of([Rational.one()] * 5)
    >>> three = SparseVector.value_of(2, Rational.value_of(3), 5)
    >>> print(three.plus(ones))
    {1, 1, 4, 1, 1}
"""

from pyalgebra.vector.vector import Vector
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.sparse import SparseVector
from pyalgebra.vector.float64 import float64_vector, norm, vector_to_array

__all__ = [
    "Vector",
    "DenseVector",
    "SparseVector",
    "float64_vector",
    "vector_to_array",
    "norm",
]
