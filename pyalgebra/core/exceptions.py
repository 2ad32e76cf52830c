"""
Exception hierarchy for pyalgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyAlgebraError(Exception):
    """Base exception for all pyalgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (mixed
    element types, empty element sequences, ...).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible.

    Raised for vector/vector, matrix/matrix and matrix/vector size
    mismatches, for non-square input to square-only operations and for
    out-of-bound indices in a sub-selection.

    Attributes:
        expected: The size the operation required, if known
        actual: The size that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IllegalConfigurationError(ValidationError):
    """
    A storage structure cannot be built from the given configuration.

    Raised for sparse constructions with an index beyond the declared
    dimension, or when no zero element can be derived.
    """
    pass


class IndexOutOfRangeError(PyAlgebraError, IndexError):
    """
    Single-element access outside the valid range.

    Also an IndexError so that iteration protocols and generic callers
    behave as they do for built-in sequences.

    Attributes:
        index: The offending index
        size: The valid exclusive upper bound
    """

    def __init__(self, message: str, index: int | None = None, size: int | None = None):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a pivot has no multiplicative inverse during or after
    LU construction.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column at which the pivot had no inverse, if known
        dimension: Dimension of the square matrix, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        dimension: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.dimension = dimension


class IllConditionedWarning(RuntimeWarning):
    """Non-fatal: a factorization succeeded but its pivots span many orders of magnitude."""
    pass
