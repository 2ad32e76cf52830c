"""
Dense matrix storage.

Rows are stored as a tuple of DenseVector, so element access is O(1) and
row extraction is free.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from pyalgebra.core.exceptions import DimensionError
from pyalgebra.core.validation import (
    check_element_types,
    check_index,
    check_indices,
    check_non_empty,
    check_shape_match,
)
from pyalgebra.matrix.matrix import Matrix
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.vector import Vector


@dataclass(frozen=True, eq=False, repr=False)
class DenseMatrix(Matrix):
    """
    Matrix backed by a tuple of DenseVector rows.

    Construction:
        DenseMatrix.value_of([[a, b], [c, d]])      # nested sequences
        DenseMatrix.from_rows([v0, v1])             # row vectors
        DenseMatrix.from_flat(2, 2, [a, b, c, d])   # row-major elements
        DenseMatrix.from_matrix(m)                  # densify any matrix
        DenseMatrix.identity(3, one)                # identity of a ring

    The constructor itself trusts its input; the classmethods validate.
    """
    _rows: tuple[DenseVector, ...]

    @classmethod
    def value_of(cls, elements: Sequence[Sequence[Any]]) -> DenseMatrix:
        """
        Matrix from nested sequences, one inner sequence per row.

        Raises:
            ValidationError: If there are no rows, an empty row, or mixed types
            DimensionError: If rows have different lengths
        """
        check_non_empty(elements, 'elements')
        return cls.from_rows([DenseVector(tuple(row)) for row in elements])

    @classmethod
    def from_rows(cls, rows: Sequence[Vector]) -> DenseMatrix:
        """
        Matrix whose rows are the given vectors (densified).

        Raises:
            ValidationError: If there are no rows, an empty row, or mixed types
            DimensionError: If rows have different dimensions
        """
        check_non_empty(rows, 'rows')
        dense = tuple(DenseVector.from_vector(row) for row in rows)
        n_columns = dense[0].dimension
        for i, row in enumerate(dense):
            if row.dimension != n_columns:
                raise DimensionError(
                    f"rows: row {i} has {row.dimension} elements, expected {n_columns}",
                    expected=n_columns,
                    actual=row.dimension,
                )
        check_non_empty(dense[0].elements, 'rows[0]')
        check_element_types((e for row in dense for e in row), 'rows')
        return cls(dense)

    @classmethod
    def from_flat(cls, n_rows: int, n_columns: int, elements: Sequence[Any]) -> DenseMatrix:
        """
        Matrix from ``n_rows·n_columns`` elements in row-major order.

        Raises:
            DimensionError: If the element count does not match the shape
        """
        elements = tuple(elements)
        if n_rows < 1 or n_columns < 1 or len(elements) != n_rows * n_columns:
            raise DimensionError(
                f"elements: expected {n_rows}x{n_columns} = {n_rows * n_columns} "
                f"elements, got {len(elements)}",
                expected=n_rows * n_columns,
                actual=len(elements),
            )
        check_element_types(elements, 'elements')
        return cls(tuple(
            DenseVector(elements[i * n_columns:(i + 1) * n_columns]) for i in range(n_rows)
        ))

    @classmethod
    def from_matrix(cls, that: Matrix) -> DenseMatrix:
        """Dense copy of any matrix (returns ``that`` if already dense)."""
        if isinstance(that, DenseMatrix):
            return that
        return cls(tuple(
            DenseVector(tuple(that.get(i, j) for j in range(that.n_columns)))
            for i in range(that.n_rows)
        ))

    @classmethod
    def diagonal(cls, n: int, diagonal: Any, other: Any) -> DenseMatrix:
        """``n x n`` matrix with ``diagonal`` on the diagonal and ``other`` elsewhere."""
        if n < 1:
            raise DimensionError(f"n: must be positive, got {n}", expected=1, actual=n)
        check_element_types([diagonal, other], 'diagonal')
        return cls(tuple(
            DenseVector(tuple(diagonal if i == j else other for j in range(n)))
            for i in range(n)
        ))

    @classmethod
    def identity(cls, n: int, one: Any, zero: Any = None) -> DenseMatrix:
        """
        ``n x n`` identity.

        If ``zero`` is None it is derived as ``one.plus(one.opposite())``.
        """
        if zero is None:
            zero = one.plus(one.opposite())
        return cls.diagonal(n, one, zero)

    # === Properties ===

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_columns(self) -> int:
        return self._rows[0].dimension

    @property
    def rows(self) -> tuple[DenseVector, ...]:
        """The stored row vectors."""
        return self._rows

    # === Storage primitives ===

    def get(self, i: int, j: int) -> Any:
        check_index(i, len(self._rows), 'i')
        return self._rows[i].get(j)

    def get_row(self, i: int) -> DenseVector:
        check_index(i, len(self._rows), 'i')
        return self._rows[i]

    def get_column(self, j: int) -> DenseVector:
        check_index(j, self.n_columns, 'j')
        return DenseVector(tuple(row.elements[j] for row in self._rows))

    def get_sub_matrix(self, rows: Sequence[int], columns: Sequence[int]) -> DenseMatrix:
        check_indices(rows, self.n_rows, 'rows')
        check_non_empty(rows, 'rows')
        return DenseMatrix(tuple(self._rows[i].sub_vector(columns) for i in rows))

    def opposite(self) -> DenseMatrix:
        return DenseMatrix(tuple(row.opposite() for row in self._rows))

    def plus(self, that: Matrix) -> DenseMatrix:
        check_shape_match(self.shape, that.shape, 'plus')
        return DenseMatrix(tuple(
            row.plus(that.get_row(i)) for i, row in enumerate(self._rows)
        ))

    def times(self, k: Any) -> DenseMatrix:
        return DenseMatrix(tuple(row.times(k) for row in self._rows))

    def __iter__(self) -> Iterator[DenseVector]:
        return iter(self._rows)
