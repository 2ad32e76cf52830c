"""
Float64 convenience constructors.

Bridge between native floating-point arrays (anything numpy accepts) and
vectors of Float64 elements.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.validation import check_array, check_ndim, check_non_empty
from pyalgebra.number.float64 import Float64
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.vector import Vector


def float64_vector(values: ArrayLike) -> DenseVector:
    """
    Dense vector of Float64 from a 1D array-like of real numbers.

    Args:
        values: Sequence or array of real numbers

    Returns:
        DenseVector of Float64

    Raises:
        ValidationError: If values are non-numeric or empty
        DimensionError: If values are not one-dimensional
    """
    array = check_array(values, 'values')
    check_ndim(array, 1, 'values')
    check_non_empty(array, 'values')
    return DenseVector(tuple(Float64(float(x)) for x in array))


def vector_to_array(vector: Vector) -> NDArray[np.floating[Any]]:
    """
    Float64 copy of a vector whose elements support ``float()``.

    Args:
        vector: Vector of Float64 (or any element type convertible to float)

    Returns:
        1D numpy array of length ``vector.dimension``
    """
    return np.fromiter((float(e) for e in vector), dtype=np.float64, count=vector.dimension)


def norm(vector: Vector) -> Float64:
    """
    Euclidean norm ``sqrt(v₀² + v₁² + ...)`` of a real vector.

    Args:
        vector: Vector of Float64 (or any element type convertible to float)

    Returns:
        The norm as a Float64
    """
    return Float64(float(np.linalg.norm(vector_to_array(vector))))
