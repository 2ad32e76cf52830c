"""
Tests for SparseVector.

Validates:
    - Zero discovery and declared zeros
    - Canonical storage (no stored zeros after plus/times)
    - Mixed sparse/dense arithmetic and storage-independent equality
"""

import pytest

from pyalgebra.core.compute.tolerances import FLOAT64, approximate_comparator
from pyalgebra.core.exceptions import (
    DimensionError,
    IllegalConfigurationError,
    IndexOutOfRangeError,
)
from pyalgebra.number import Float64, Integer64, Rational
from pyalgebra.vector import DenseVector, SparseVector


def r(x):
    return Rational.value_of(x)


def rv(*values):
    return DenseVector.value_of([r(v) for v in values])


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_value_of_single_entry(self):
        v = SparseVector.value_of(2, r(3), 5)
        assert v.dimension == 5
        assert v.nnz == 1
        assert v.get(2) == r(3)
        assert v.get(0) == r(0)
        assert v.zero == r(0)

    def test_value_of_index_out_of_range(self):
        with pytest.raises(IllegalConfigurationError):
            SparseVector.value_of(5, r(3), 5)

    def test_from_map_drops_zeros(self):
        v = SparseVector.from_map({0: r(1), 3: r(0)}, r(0), 4)
        assert v.nnz == 1
        assert dict(v.elements) == {0: r(1)}

    def test_from_map_index_beyond_dimension(self):
        with pytest.raises(IllegalConfigurationError, match="index 4"):
            SparseVector.from_map({4: r(1)}, r(0), 4)

    def test_from_map_rejects_non_zero(self):
        with pytest.raises(IllegalConfigurationError):
            SparseVector.from_map({0: r(1)}, r(1), 4)

    def test_from_vector_discovers_zero(self):
        v = SparseVector.from_vector(rv(0, 5, 0, 7))
        assert v.nnz == 2
        assert v.zero == r(0)
        assert v == rv(0, 5, 0, 7)

    def test_from_vector_without_zeros_derives_one(self):
        v = SparseVector.from_vector(rv(1, 2))
        assert v.nnz == 2
        assert v.zero == r(0)

    def test_from_vector_with_comparator(self):
        dense = DenseVector.value_of([Float64(1e-15), Float64(1.0)])
        v = SparseVector.from_vector(dense, Float64(0.0), approximate_comparator(FLOAT64))
        assert v.nnz == 1
        assert v.get(0) == Float64(0.0)

    def test_from_sparse_returns_same(self):
        v = SparseVector.value_of(0, r(1), 3)
        assert SparseVector.from_vector(v) is v

    def test_get_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            SparseVector.value_of(0, r(1), 3).get(3)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_plus_dense_ones(self):
        three = SparseVector.value_of(2, r(3), 5)
        ones = rv(1, 1, 1, 1, 1)
        total = three.plus(ones)
        assert total == rv(1, 1, 4, 1, 1)
        assert str(total) == "{1, 1, 4, 1, 1}"

    def test_plus_drops_cancelled_entries(self):
        a = SparseVector.from_map({0: r(2), 1: r(3)}, r(0), 3)
        b = SparseVector.from_map({0: r(-2)}, r(0), 3)
        total = a.plus(b)
        assert total.nnz == 1
        assert 0 not in total.elements

    def test_times_drops_zeros(self):
        v = SparseVector.from_map({0: r(2), 2: r(5)}, r(0), 3)
        assert v.times(r(0)).nnz == 0

    def test_dot_over_stored_entries(self):
        v = SparseVector.from_map({1: r(2)}, r(0), 3)
        assert v.dot(rv(7, 3, 9)) == r(6)

    def test_dot_all_zero(self):
        v = SparseVector.from_map({}, r(0), 3)
        assert v.dot(rv(7, 3, 9)) == r(0)

    def test_opposite_and_sub_vector(self):
        v = SparseVector.from_map({0: r(2), 2: r(5)}, r(0), 3)
        assert v.opposite() == rv(-2, 0, -5)
        sub = v.sub_vector([2, 1, 2])
        assert sub == rv(5, 0, 5)
        assert sub.nnz == 2

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            SparseVector.value_of(0, r(1), 3).plus(rv(1, 2))


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_sparse_equals_dense(self):
        sparse = SparseVector.from_map({1: r(4)}, r(0), 3)
        dense = rv(0, 4, 0)
        assert sparse == dense
        assert dense == sparse
        assert hash(sparse) == hash(dense)


# ═══════════════════════════════════════════════════════════════════════
# Wrap-around integers
# ═══════════════════════════════════════════════════════════════════════


class TestInteger64Zero:
    """The most negative Integer64 equals its own opposite but is not zero."""

    MIN = Integer64(-2 ** 63)

    def test_minimum_is_not_discovered_as_zero(self):
        v = SparseVector.from_vector(DenseVector.value_of([self.MIN, Integer64(5)]))
        assert v.zero == Integer64(0)
        assert v.elements == {0: self.MIN, 1: Integer64(5)}

    def test_sum_keeps_minimum(self):
        v = SparseVector.from_vector(DenseVector.value_of([self.MIN, Integer64(5)]))
        ones = DenseVector.value_of([Integer64(1), Integer64(1)])
        assert v.plus(ones) == DenseVector.value_of([Integer64(-2 ** 63 + 1), Integer64(6)])

    def test_minimum_rejected_as_declared_zero(self):
        with pytest.raises(IllegalConfigurationError, match="not a zero"):
            SparseVector.from_map({}, self.MIN, 3)

    def test_value_of_minimum_is_stored(self):
        v = SparseVector.value_of(1, self.MIN, 3)
        assert v.nnz == 1
        assert v.get(0) == Integer64(0)
