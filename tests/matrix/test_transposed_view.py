"""
Tests for TransposedView.

The view is O(1) and forwards through the transpose identities; only
multiplication densifies it.
"""

from pyalgebra.matrix import DenseMatrix, SparseMatrix, TransposedView
from pyalgebra.number import Rational


def r(x):
    return Rational.value_of(x)


class TestTransposedView:

    def test_transpose_is_view(self, rational_matrix):
        m = rational_matrix([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert isinstance(t, TransposedView)
        assert t.source is m
        assert t.shape == (3, 2)
        assert t.get(2, 1) == r(6)
        assert m.T == t

    def test_double_transpose_returns_source(self, rational_matrix):
        m = rational_matrix([[1, 2], [3, 4]])
        assert m.transpose().transpose() is m

    def test_rows_are_source_columns(self, rational_matrix):
        m = rational_matrix([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.get_row(2) == m.get_column(2)
        assert t.get_column(0) == m.get_row(0)

    def test_opposite_stays_view(self, rational_matrix):
        m = rational_matrix([[1, 2], [3, 4]])
        negated = m.transpose().opposite()
        assert isinstance(negated, TransposedView)
        assert negated == rational_matrix([[-1, -3], [-2, -4]])

    def test_plus_stays_view(self, rational_matrix):
        m = rational_matrix([[1, 2], [3, 4]])
        b = rational_matrix([[10, 20], [30, 40]])
        total = m.transpose().plus(b)
        assert isinstance(total, TransposedView)
        assert total == rational_matrix([[11, 23], [32, 44]])

    def test_times_scalar_stays_view(self, rational_matrix):
        m = rational_matrix([[1, 2], [3, 4]])
        scaled = m.transpose().times(r(2))
        assert isinstance(scaled, TransposedView)
        assert scaled == rational_matrix([[2, 6], [4, 8]])

    def test_sub_matrix(self, rational_matrix):
        m = rational_matrix([[1, 2, 3], [4, 5, 6]])
        assert m.transpose().get_sub_matrix([2, 0], [1]) == rational_matrix([[6], [4]])

    def test_times_matrix_densifies(self, rational_matrix):
        m = rational_matrix([[1, 2], [3, 4]])
        product = m.transpose().times_matrix(m)
        assert isinstance(product, DenseMatrix)
        assert product == rational_matrix([[10, 14], [14, 20]])

    def test_view_of_sparse(self):
        m = SparseMatrix.from_map({(0, 2): r(7)}, r(0), 2, 3)
        t = m.transpose()
        assert t.get(2, 0) == r(7)
        assert t.get(0, 0) == r(0)

    def test_repr(self, rational_matrix):
        assert repr(rational_matrix([[1]]).transpose()) == "TransposedView(DenseMatrix(1x1))"
