"""
Sparse matrix storage.

Non-zero elements live in a ``{(i, j): element}`` map; every absent
position holds the matrix's designated zero. As for SparseVector the map
is canonical: sums and scalar products never store a zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from pyalgebra.core.exceptions import IllegalConfigurationError
from pyalgebra.core.validation import (
    check_element_types,
    check_index,
    check_non_empty,
    check_shape_match,
    check_zero,
)
from pyalgebra.matrix.matrix import Matrix
from pyalgebra.vector.sparse import SparseVector
from pyalgebra.vector.vector import Vector


@dataclass(frozen=True, eq=False, repr=False)
class SparseMatrix(Matrix):
    """
    Matrix backed by a position map plus an explicit zero.

    Construction:
        SparseMatrix.from_map({(0, 1): a}, zero, 3, 3)
        SparseMatrix.from_matrix(m)             # discovers the zero
        SparseMatrix.from_matrix(m, zero, cmp)  # zero given, cmp decides
        SparseMatrix.from_rows([v0, v1])        # rows sparsified
    """
    _n_rows: int
    _n_columns: int
    _zero: Any
    _elements: Mapping[tuple[int, int], Any]

    @classmethod
    def from_map(
        cls,
        elements: Mapping[tuple[int, int], Any],
        zero: Any,
        n_rows: int,
        n_columns: int,
    ) -> SparseMatrix:
        """
        Matrix from a position map and a declared zero.

        Entries equal to the zero are dropped.

        Raises:
            IllegalConfigurationError: If a position is outside the shape,
                the shape is not positive, or zero is not a zero
            ValidationError: If elements and zero mix element types
        """
        if n_rows < 1 or n_columns < 1:
            raise IllegalConfigurationError(
                f"shape: must be positive, got {n_rows}x{n_columns}"
            )
        check_zero(zero, 'zero')
        check_element_types([zero, *elements.values()], 'elements')
        for i, j in elements:
            if not (0 <= i < n_rows and 0 <= j < n_columns):
                raise IllegalConfigurationError(
                    f"elements: found position ({i}, {j}) but matrix shape "
                    f"is {n_rows}x{n_columns}"
                )
        return cls._build(
            n_rows, n_columns, zero, {k: e for k, e in elements.items() if e != zero}
        )

    @classmethod
    def from_matrix(
        cls,
        that: Matrix,
        zero: Any = None,
        comparator: Callable[[Any, Any], int] | None = None,
    ) -> SparseMatrix:
        """
        Sparse copy of any matrix.

        Args:
            that: Source matrix
            zero: Declared zero. If None, the first element for which
                ``is_zero`` holds is used; failing that, one is derived from
                ``that.get(0, 0)``.
            comparator: Decides which elements count as zero when ``zero``
                is given. Defaults to exact equality.

        Raises:
            IllegalConfigurationError: If the declared zero is not a zero
        """
        if zero is None and isinstance(that, SparseMatrix):
            return that
        rows = [
            SparseVector.from_vector(that.get_row(i), zero, comparator)
            for i in range(that.n_rows)
        ]
        if zero is None:
            # Rows discover zeros independently; share the first one found
            found = [row.zero for row in rows if row.nnz < row.dimension]
            zero = found[0] if found else rows[0].zero
        elements = {
            (i, j): e for i, row in enumerate(rows) for j, e in row.elements.items()
        }
        return cls._build(that.n_rows, that.n_columns, zero, elements)

    @classmethod
    def from_rows(cls, rows: Sequence[Vector], zero: Any = None) -> SparseMatrix:
        """
        Matrix whose rows are the given vectors (sparsified).

        Raises:
            ValidationError: If there are no rows
            DimensionError: If rows have different dimensions
        """
        from pyalgebra.matrix.dense import DenseMatrix

        check_non_empty(rows, 'rows')
        if zero is None:
            zero = next(
                (row.zero for row in rows if isinstance(row, SparseVector)), None
            )
        return cls.from_matrix(DenseMatrix.from_rows(rows), zero)

    @classmethod
    def _build(
        cls,
        n_rows: int,
        n_columns: int,
        zero: Any,
        elements: dict[tuple[int, int], Any],
    ) -> SparseMatrix:
        """Internal builder; ``elements`` must already be canonical."""
        return cls(n_rows, n_columns, zero, MappingProxyType(dict(sorted(elements.items()))))

    # === Properties ===

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_columns(self) -> int:
        return self._n_columns

    @property
    def zero(self) -> Any:
        """Value of every absent position."""
        return self._zero

    @property
    def elements(self) -> Mapping[tuple[int, int], Any]:
        """Read-only view of the stored entries, in row-major order."""
        return self._elements

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self._elements)

    @property
    def element_type(self) -> type:
        return type(self._zero)

    # === Storage primitives ===

    def get(self, i: int, j: int) -> Any:
        check_index(i, self._n_rows, 'i')
        check_index(j, self._n_columns, 'j')
        return self._elements.get((i, j), self._zero)

    def get_row(self, i: int) -> SparseVector:
        check_index(i, self._n_rows, 'i')
        return SparseVector._build(
            self._n_columns,
            self._zero,
            {j: e for (r, j), e in self._elements.items() if r == i},
        )

    def get_column(self, j: int) -> SparseVector:
        check_index(j, self._n_columns, 'j')
        return SparseVector._build(
            self._n_rows,
            self._zero,
            {i: e for (i, c), e in self._elements.items() if c == j},
        )

    def opposite(self) -> SparseMatrix:
        return SparseMatrix._build(
            self._n_rows,
            self._n_columns,
            self._zero,
            {k: e.opposite() for k, e in self._elements.items()},
        )

    def plus(self, that: Matrix) -> Matrix:
        """
        Element-wise sum.

        Sparse operands merge their maps and drop totals equal to the zero;
        any other operand gives a dense result.
        """
        check_shape_match(self.shape, that.shape, 'plus')
        if not isinstance(that, SparseMatrix):
            return super().plus(that)
        zero = self._zero
        elements = dict(self._elements)
        for k, e in that._elements.items():
            if k not in elements:
                elements[k] = e
                continue
            total = elements[k].plus(e)
            if zero == total:
                del elements[k]
            else:
                elements[k] = total
        return SparseMatrix._build(self._n_rows, self._n_columns, zero, elements)

    def times(self, k: Any) -> SparseMatrix:
        zero = self._zero
        elements = {}
        for position, e in self._elements.items():
            product = e.times(k)
            if zero != product:
                elements[position] = product
        return SparseMatrix._build(self._n_rows, self._n_columns, zero, elements)

    def __repr__(self) -> str:
        return f"SparseMatrix({self._n_rows}x{self._n_columns}, nnz={self.nnz})"
