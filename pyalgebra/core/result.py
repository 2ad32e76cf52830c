"""
Generic result container for pyalgebra backends.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing and diagnostics while
allowing each computation to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting, swap count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can be shared across threads
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computation-specific payload (LU buffer, pivots, ...)
        info: Structured metadata (method, pivoting, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LUParams(...),
        ...     info={'method': 'doolittle', 'pivoting': True, 'swap_count': 1},
        ...     timing={'total_seconds': 0.01, 'factorization': 0.009},
        ...     backend_name='generic_doolittle'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
