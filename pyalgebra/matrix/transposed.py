"""
Transposed view.

``transpose()`` costs O(1): the view forwards every access to its source
with the indices swapped. Operations rewrite themselves through the
transpose identities so that they stay views:

    (Aᵗ)ᵗ     = A
    -(Aᵗ)     = (-A)ᵗ
    Aᵗ + B    = (A + Bᵗ)ᵗ
    Aᵗ × k    = (A × k)ᵗ
    Aᵗ[r, c]  = (A[c, r])ᵗ

Matrix multiplication has no such identity and densifies the view first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from pyalgebra.core.validation import check_shape_match
from pyalgebra.matrix.matrix import Matrix
from pyalgebra.vector.vector import Vector


@dataclass(frozen=True, eq=False, repr=False)
class TransposedView(Matrix):
    """Read-only transposed adapter over a source matrix."""
    _source: Matrix

    @property
    def source(self) -> Matrix:
        """The matrix this view transposes."""
        return self._source

    @property
    def n_rows(self) -> int:
        return self._source.n_columns

    @property
    def n_columns(self) -> int:
        return self._source.n_rows

    def get(self, i: int, j: int) -> Any:
        return self._source.get(j, i)

    def get_row(self, i: int) -> Vector:
        return self._source.get_column(i)

    def get_column(self, j: int) -> Vector:
        return self._source.get_row(j)

    def get_sub_matrix(self, rows: Sequence[int], columns: Sequence[int]) -> Matrix:
        return self._source.get_sub_matrix(columns, rows).transpose()

    def opposite(self) -> Matrix:
        return self._source.opposite().transpose()

    def plus(self, that: Matrix) -> Matrix:
        check_shape_match(self.shape, that.shape, 'plus')
        return self._source.plus(that.transpose()).transpose()

    def times(self, k: Any) -> Matrix:
        return self._source.times(k).transpose()

    def transpose(self) -> Matrix:
        return self._source

    def __repr__(self) -> str:
        return f"TransposedView({self._source!r})"
