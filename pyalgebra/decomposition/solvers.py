"""
Solver dispatch for LU decomposition.

This module provides the lu() and determinant() functions (public API)
and backend selection.
"""

from __future__ import annotations

from typing import Any, Literal, TYPE_CHECKING

from pyalgebra.core.capabilities import CAPABILITY_COMMUTATIVE, CAPABILITY_FLOAT64_NATIVE
from pyalgebra.core.exceptions import SingularMatrixError, ValidationError
from pyalgebra.decomposition.backends.float64 import LapackLUBackend
from pyalgebra.decomposition.backends.generic import GenericLUBackend
from pyalgebra.decomposition.design import LUDesign
from pyalgebra.decomposition.expansion import expansion_determinant
from pyalgebra.decomposition.pivoting import PivotComparator, numeric_comparator
from pyalgebra.decomposition.solution import LUDecomposition

if TYPE_CHECKING:
    from pyalgebra.matrix.matrix import Matrix


# Type alias for backend selection
BackendChoice = Literal['auto', 'generic', 'float64']


def lu(
    matrix: Matrix,
    *,
    comparator: PivotComparator | None = numeric_comparator,
    backend: BackendChoice = 'auto',
) -> LUDecomposition:
    """
    LU decomposition with partial pivoting: ``P·A = L·U``.

    L is unit lower-triangular, U upper-triangular and P the row
    permutation chosen by ``comparator``.

    Args:
        matrix: Square matrix of any element type
        comparator: Pivot ranking (see pyalgebra.decomposition.pivoting).
            None disables row exchanges.
        backend: Computational backend to use:
            - 'auto': LAPACK for finite Float64 matrices with the default
              comparator, generic elimination otherwise
            - 'generic': Doolittle elimination over FieldElement
            - 'float64': LAPACK getrf through scipy

    Returns:
        LUDecomposition with determinant, solve, inverse and the factors

    Raises:
        DimensionError: If the matrix is not square
        ValidationError: If 'float64' is requested for unsupported input
        SingularMatrixError: If a non-zero pivot has no inverse

    Example:
        >>> from pyalgebra.matrix import float64_matrix
        >>> from pyalgebra.decomposition import lu
        >>> decomposition = lu(float64_matrix([[0, 1], [1, 0]]))
        >>> decomposition.swap_count
        1
        >>> decomposition.determinant()
        Float64(value=-1.0)
    """
    # === Construct Design ===
    design = LUDesign.from_matrix(matrix, comparator)

    # === Select Backend ===
    backend_impl = _get_backend(backend, design)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LUDecomposition(_result=result, _design=design)


def determinant(
    matrix: Matrix,
    *,
    comparator: PivotComparator | None = numeric_comparator,
) -> Any:
    """
    Determinant of a square matrix.

    Computed from the LU factors. When elimination meets a pivot without
    an inverse and the elements commute (a ring such as Integer64), the
    determinant is expanded by cofactors instead, which needs no division.

    Args:
        matrix: Square matrix of any element type
        comparator: Pivot ranking for the LU path

    Returns:
        The determinant; the zero element for singular matrices

    Raises:
        DimensionError: If the matrix is not square
        SingularMatrixError: If a pivot has no inverse and the elements
            are not known to commute

    Example:
        >>> from pyalgebra.matrix import DenseMatrix
        >>> from pyalgebra.number import Integer64
        >>> m = DenseMatrix.value_of([[Integer64(2), Integer64(1)],
        ...                           [Integer64(1), Integer64(1)]])
        >>> print(determinant(m))
        1
    """
    design = LUDesign.from_matrix(matrix, comparator)
    backend_impl = _get_backend('auto', design)

    try:
        result = backend_impl.solve(design)
    except SingularMatrixError:
        if not design.supports(CAPABILITY_COMMUTATIVE):
            raise
        return expansion_determinant(design.rows)

    return LUDecomposition(_result=result, _design=design).determinant()


def _get_backend(choice: BackendChoice, design: LUDesign):
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference
        design: The LU design (used for the Float64 capability check)

    Returns:
        Backend instance ready to solve

    Raises:
        ValueError: If unknown backend specified
        ValidationError: If 'float64' requested for unsupported input
    """
    if choice == 'auto':
        if (
            design.comparator is numeric_comparator
            and design.supports(CAPABILITY_FLOAT64_NATIVE)
        ):
            return LapackLUBackend()
        return GenericLUBackend()

    elif choice == 'generic':
        return GenericLUBackend()

    elif choice == 'float64':
        if not design.supports(CAPABILITY_FLOAT64_NATIVE):
            raise ValidationError(
                "backend: 'float64' requires a matrix of finite Float64 elements"
            )
        if design.comparator is not numeric_comparator:
            raise ValidationError(
                "backend: 'float64' pivots by magnitude and accepts only "
                "the default numeric_comparator"
            )
        return LapackLUBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
