"""
Float64 convenience constructors for matrices.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.validation import check_array, check_ndim, check_non_empty
from pyalgebra.matrix.dense import DenseMatrix
from pyalgebra.matrix.matrix import Matrix
from pyalgebra.number.float64 import Float64
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.float64 import vector_to_array
from pyalgebra.vector.vector import Vector


def float64_matrix(values: ArrayLike) -> DenseMatrix:
    """
    Dense matrix of Float64 from a 2D array-like of real numbers.

    Args:
        values: Nested lists or a 2D numpy array

    Returns:
        DenseMatrix of Float64

    Raises:
        ValidationError: If values are non-numeric or empty
        DimensionError: If values are not two-dimensional
    """
    array = check_array(values, 'values')
    check_ndim(array, 2, 'values')
    check_non_empty(array, 'values')
    check_non_empty(array[0], 'values[0]')
    return DenseMatrix(tuple(
        DenseVector(tuple(Float64(float(x)) for x in row)) for row in array
    ))


def to_array(value: Matrix | Vector) -> NDArray[np.floating[Any]]:
    """
    Float64 copy of a matrix (2D) or vector (1D).

    Elements must support ``float()`` (Float64, Rational, Integer64).
    """
    if isinstance(value, Vector):
        return vector_to_array(value)
    array = np.empty(value.shape, dtype=np.float64)
    for i in range(value.n_rows):
        for j in range(value.n_columns):
            array[i, j] = float(value.get(i, j))
    return array
