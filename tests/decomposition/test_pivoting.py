"""
Tests for pivot comparators.
"""

from pyalgebra.decomposition.pivoting import (
    is_zero,
    nonzero_comparator,
    numeric_comparator,
)
from pyalgebra.number import Complex, Float64, Rational


class TestNumericComparator:

    def test_larger_magnitude_wins(self):
        assert numeric_comparator(Float64(-3.0), Float64(2.0)) == 1
        assert numeric_comparator(Float64(2.0), Float64(-3.0)) == -1

    def test_tie_keeps_current(self):
        """Equal magnitudes never replace the current pivot."""
        assert numeric_comparator(Float64(2.0), Float64(-2.0)) < 1

    def test_complex_by_modulus(self):
        assert numeric_comparator(Complex(0.0, 5.0), Complex(3.0, 3.0)) == 1

    def test_exact_rationals(self):
        assert numeric_comparator(Rational.value_of(1, 3), Rational.value_of(1, 4)) == 1

    def test_non_numeric_prefers_non_zero(self, q):
        zero, one = q(0), q(1)
        assert numeric_comparator(one, zero) == 1
        assert numeric_comparator(zero, one) == -1
        assert numeric_comparator(one, q(0, 7)) == 0


class TestNonzeroComparator:

    def test_only_replaces_zero(self):
        assert nonzero_comparator(Rational.one(), Rational.zero()) == 1
        assert nonzero_comparator(Rational.value_of(9), Rational.one()) == 0
        assert nonzero_comparator(Rational.zero(), Rational.one()) == 0

    def test_fewer_swaps_than_numeric(self, rational_matrix):
        a = rational_matrix([[1, 2], [5, 3]])
        assert a.lu(comparator=nonzero_comparator).swap_count == 0
        assert a.lu().swap_count == 1
        assert a.lu(comparator=nonzero_comparator).determinant() == a.determinant()


class TestIsZero:

    def test_is_zero(self, q):
        assert is_zero(Float64(-0.0))
        assert is_zero(q(0))
        assert not is_zero(Rational.one())
