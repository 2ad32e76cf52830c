"""
Input validation utilities for pyalgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every dimension check runs
before any partial result is built.

Design principles:
    - No silent coercion of element types
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import (
    DimensionError,
    IllegalConfigurationError,
    IndexOutOfRangeError,
    ValidationError,
)
from pyalgebra.core.protocols import is_zero


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify a single-element index lies in ``[0, size)``.

    Args:
        index: Index to check
        size: Exclusive upper bound
        name: Parameter name for error messages

    Raises:
        IndexOutOfRangeError: If index is negative or >= size
    """
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {size})",
            index=index,
            size=size,
        )


def check_indices(indices: Sequence[int], size: int, name: str) -> None:
    """
    Verify every index of a sub-selection lies in ``[0, size)``.

    Sub-selections report a dimension mismatch rather than an index error:
    the selection as a whole does not fit the operand.

    Args:
        indices: Indices to check (reordering and repeats are allowed)
        size: Exclusive upper bound
        name: Parameter name for error messages

    Raises:
        DimensionError: If any index is negative or >= size
    """
    bad = [i for i in indices if i < 0 or i >= size]
    if bad:
        raise DimensionError(
            f"{name}: indices {bad} out of range for dimension {size}",
            expected=size,
            actual=bad[0],
        )


def check_same_dimension(left: int, right: int, name: str) -> None:
    """
    Verify two vector dimensions are equal.

    Args:
        left: Dimension of the left operand
        right: Dimension of the right operand
        name: Operation name for error messages

    Raises:
        DimensionError: If dimensions differ
    """
    if left != right:
        raise DimensionError(
            f"{name}: dimension mismatch, {left} vs {right}",
            expected=left,
            actual=right,
        )


def check_shape_match(
    left: tuple[int, int],
    right: tuple[int, int],
    name: str
) -> None:
    """
    Verify two matrix shapes are equal.

    Args:
        left: (rows, columns) of the left operand
        right: (rows, columns) of the right operand
        name: Operation name for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{name}: shape mismatch, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            expected=left,
            actual=right,
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix is square.

    Args:
        shape: (rows, columns)
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows != columns
    """
    m, n = shape
    if m != n:
        raise DimensionError(
            f"{name}: expected square matrix, got {m}x{n}",
            expected=(m, m),
            actual=(m, n),
        )


def check_min_dimension(dimension: int, minimum: int, name: str) -> None:
    """
    Verify a square matrix is at least ``minimum`` x ``minimum``.

    Args:
        dimension: Dimension of the square matrix
        minimum: Smallest accepted dimension
        name: Parameter name for error messages

    Raises:
        DimensionError: If dimension < minimum
    """
    if dimension < minimum:
        raise DimensionError(
            f"{name}: requires dimension >= {minimum}, got {dimension}",
            expected=minimum,
            actual=dimension,
        )


def check_non_empty(elements: Sequence[Any], name: str) -> None:
    """
    Verify an element sequence is not empty.

    Args:
        elements: Sequence to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If the sequence has no elements
    """
    if len(elements) == 0:
        raise ValidationError(f"{name}: requires at least one element")


def check_element_types(elements: Iterable[Any], name: str) -> type:
    """
    Verify all elements share one runtime type.

    Args:
        elements: Elements to check (must be non-empty)
        name: Parameter name for error messages

    Returns:
        The shared element type

    Raises:
        ValidationError: If elements have mixed types or none is given
    """
    element_type = None
    for element in elements:
        if element_type is None:
            element_type = type(element)
        elif type(element) is not element_type:
            raise ValidationError(
                f"{name}: mixed element types {element_type.__name__} "
                f"and {type(element).__name__}"
            )
    if element_type is None:
        raise ValidationError(f"{name}: requires at least one element")
    return element_type


def check_zero(zero: Any, name: str) -> None:
    """
    Verify a declared zero behaves as the additive identity.

    Uses the same is_zero test that discovers zeros among elements.

    Args:
        zero: Declared zero element
        name: Parameter name for error messages

    Raises:
        IllegalConfigurationError: If zero is missing or not a zero
    """
    if zero is None:
        raise IllegalConfigurationError(f"{name}: no zero element available")
    if not is_zero(zero):
        raise IllegalConfigurationError(
            f"{name}: {zero} is not a zero element"
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or element
    objects rather than native numbers).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-real dtypes (strings, bytes, datetime, complex, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )

