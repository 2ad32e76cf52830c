"""
Core infrastructure for pyalgebra.

This module provides shared abstractions, utilities, and compute
infrastructure used by the vector, matrix and decomposition packages.

Key components:
    protocols: FieldElement, Numeric, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Fork-join execution, timing, tolerance tiers
"""

from pyalgebra.core.protocols import FieldElement, Numeric, Backend
from pyalgebra.core.result import Result
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    IllegalConfigurationError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    IllConditionedWarning,
)

__all__ = [
    # Protocols
    "FieldElement",
    "Numeric",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "IllegalConfigurationError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "IllConditionedWarning",
]
