"""
Tests for SparseMatrix.
"""

import pytest

from pyalgebra.core.exceptions import DimensionError, IllegalConfigurationError
from pyalgebra.matrix import DenseMatrix, SparseMatrix
from pyalgebra.number import Rational
from pyalgebra.vector import SparseVector


def r(x):
    return Rational.value_of(x)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_map(self):
        m = SparseMatrix.from_map({(0, 1): r(5), (2, 2): r(0)}, r(0), 3, 3)
        assert m.shape == (3, 3)
        assert m.nnz == 1
        assert m.get(0, 1) == r(5)
        assert m.get(2, 2) == r(0)

    def test_from_map_position_out_of_range(self):
        with pytest.raises(IllegalConfigurationError, match=r"\(3, 0\)"):
            SparseMatrix.from_map({(3, 0): r(1)}, r(0), 3, 3)

    def test_from_map_rejects_non_zero(self):
        with pytest.raises(IllegalConfigurationError):
            SparseMatrix.from_map({}, r(2), 2, 2)

    def test_from_matrix_discovers_zero(self, rational_matrix):
        dense = rational_matrix([[0, 2], [3, 0]])
        sparse = SparseMatrix.from_matrix(dense)
        assert sparse.nnz == 2
        assert sparse.zero == r(0)
        assert sparse == dense

    def test_from_matrix_dense_without_zeros(self, rational_matrix):
        sparse = SparseMatrix.from_matrix(rational_matrix([[1, 2], [3, 4]]))
        assert sparse.nnz == 4
        assert sparse.zero == r(0)

    def test_from_rows(self):
        rows = [SparseVector.value_of(0, r(1), 3), SparseVector.value_of(2, r(4), 3)]
        m = SparseMatrix.from_rows(rows)
        assert m.nnz == 2
        assert m.get(1, 2) == r(4)


# ═══════════════════════════════════════════════════════════════════════
# Access and arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_rows_and_columns_are_sparse(self):
        m = SparseMatrix.from_map({(0, 1): r(5), (1, 1): r(6)}, r(0), 2, 3)
        row = m.get_row(0)
        column = m.get_column(1)
        assert isinstance(row, SparseVector)
        assert row.nnz == 1
        assert column.nnz == 2
        assert list(column) == [r(5), r(6)]

    def test_plus_sparse_drops_cancelled(self):
        a = SparseMatrix.from_map({(0, 0): r(1), (1, 1): r(2)}, r(0), 2, 2)
        b = SparseMatrix.from_map({(0, 0): r(-1)}, r(0), 2, 2)
        total = a.plus(b)
        assert isinstance(total, SparseMatrix)
        assert total.nnz == 1
        assert total.get(1, 1) == r(2)

    def test_plus_dense_gives_dense(self, rational_matrix):
        a = SparseMatrix.from_map({(0, 0): r(1)}, r(0), 2, 2)
        total = a.plus(rational_matrix([[1, 1], [1, 1]]))
        assert isinstance(total, DenseMatrix)
        assert total == rational_matrix([[2, 1], [1, 1]])

    def test_plus_shape_mismatch(self):
        a = SparseMatrix.from_map({}, r(0), 2, 2)
        b = SparseMatrix.from_map({}, r(0), 2, 3)
        with pytest.raises(DimensionError):
            a.plus(b)

    def test_times_scalar_drops_zeros(self):
        m = SparseMatrix.from_map({(0, 0): r(3)}, r(0), 2, 2)
        assert m.times(r(0)).nnz == 0
        assert m.times(r(2)).get(0, 0) == r(6)

    def test_opposite(self):
        m = SparseMatrix.from_map({(0, 1): r(3)}, r(0), 2, 2)
        assert m.opposite().get(0, 1) == r(-3)
        assert m.opposite().nnz == 1

    def test_product_matches_dense(self, rational_matrix):
        dense_a = rational_matrix([[0, 2, 0], [1, 0, 0]])
        dense_b = rational_matrix([[1, 2], [3, 4], [5, 6]])
        sparse_a = SparseMatrix.from_matrix(dense_a)
        assert sparse_a.times_matrix(dense_b) == dense_a.times_matrix(dense_b)
        assert sparse_a @ dense_b == rational_matrix([[6, 8], [1, 2]])

    def test_determinant(self, rational_matrix):
        sparse = SparseMatrix.from_matrix(rational_matrix([[0, 3], [2, 0]]))
        assert sparse.determinant() == r(-6)

    def test_repr(self):
        m = SparseMatrix.from_map({(0, 1): r(3)}, r(0), 2, 2)
        assert repr(m) == "SparseMatrix(2x2, nnz=1)"
