"""
LU Design.

The design captures what a backend needs to factor a matrix: the square
table of elements and the pivot comparator. It is built once at the
public boundary (``lu()``), validated there, and trusted by every backend.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyalgebra.core.capabilities import (
    CAPABILITY_COMMUTATIVE,
    CAPABILITY_FLOAT64_NATIVE,
)
from pyalgebra.core.validation import check_non_empty, check_square
from pyalgebra.decomposition.pivoting import PivotComparator, numeric_comparator
from pyalgebra.number.base import Number
from pyalgebra.number.float64 import Float64

if TYPE_CHECKING:
    from pyalgebra.matrix.matrix import Matrix


@dataclass(frozen=True)
class LUDesign:
    """
    LU decomposition input specification.

    Immutable after construction.

    Construction:
        LUDesign.from_matrix(m)                          # default pivoting
        LUDesign.from_matrix(m, comparator=None)         # no row exchanges
        LUDesign.from_rows([[a, b], [c, d]], comparator)
    """
    _rows: tuple[tuple[Any, ...], ...]
    _n: int
    _comparator: PivotComparator | None

    @classmethod
    def from_matrix(
        cls,
        matrix: Matrix,
        comparator: PivotComparator | None = numeric_comparator,
    ) -> LUDesign:
        """
        Build design from any Matrix.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(matrix.shape, 'matrix')
        rows = tuple(tuple(row) for row in matrix)
        return cls._build(rows, comparator)

    @classmethod
    def from_rows(
        cls,
        rows: Any,
        comparator: PivotComparator | None = numeric_comparator,
    ) -> LUDesign:
        """Build design from nested element sequences."""
        rows = tuple(tuple(row) for row in rows)
        return cls._build(rows, comparator)

    @classmethod
    def _build(
        cls,
        rows: tuple[tuple[Any, ...], ...],
        comparator: PivotComparator | None,
    ) -> LUDesign:
        """Internal builder with validation."""
        check_non_empty(rows, 'rows')
        n = len(rows)
        for row in rows:
            check_square((n, len(row)), 'matrix')
        return cls(_rows=rows, _n=n, _comparator=comparator)

    # === Properties ===

    @property
    def rows(self) -> tuple[tuple[Any, ...], ...]:
        """Elements, row by row."""
        return self._rows

    @property
    def n(self) -> int:
        """Dimension of the square matrix."""
        return self._n

    @property
    def comparator(self) -> PivotComparator | None:
        """Pivot comparator, or None when pivoting is disabled."""
        return self._comparator

    @property
    def element_type(self) -> type:
        return type(self._rows[0][0])

    def supports(self, capability: str) -> bool:
        """Check if the elements support a capability."""
        elements = [e for row in self._rows for e in row]
        if capability == CAPABILITY_FLOAT64_NATIVE:
            return all(
                type(e) is Float64 and math.isfinite(e.value) for e in elements
            )
        if capability == CAPABILITY_COMMUTATIVE:
            return all(isinstance(e, Number) for e in elements)
        return False
