"""
Tests for tolerance tiers, comparators and timing.
"""

import pytest

from pyalgebra.core.compute.timing import Timer
from pyalgebra.core.compute.tolerances import (
    EXACT,
    FLOAT64,
    FLOAT64_ILL_CONDITIONED,
    approximate_comparator,
    exact_comparator,
    select_tolerance,
)
from pyalgebra.number import Complex, Float64, Integer64, Rational


# ═══════════════════════════════════════════════════════════════════════
# Comparators
# ═══════════════════════════════════════════════════════════════════════


class TestComparators:

    def test_exact(self):
        assert exact_comparator(Rational.one(), Rational.one()) == 0
        assert exact_comparator(Rational.one(), Rational.zero()) != 0

    def test_exact_tier_returns_exact_comparator(self):
        assert approximate_comparator(EXACT) is exact_comparator

    def test_float64_within_tolerance(self):
        compare = approximate_comparator(FLOAT64)
        assert compare(Float64(1.0), Float64(1.0 + 1e-13)) == 0

    def test_float64_outside_tolerance_is_ordered(self):
        compare = approximate_comparator(FLOAT64)
        assert compare(Float64(2.0), Float64(1.0)) == 1
        assert compare(Float64(1.0), Float64(2.0)) == -1

    def test_ill_conditioned_is_looser(self):
        compare = approximate_comparator(FLOAT64_ILL_CONDITIONED)
        assert compare(Float64(1.0), Float64(1.0 + 1e-6)) == 0
        assert approximate_comparator(FLOAT64)(Float64(1.0), Float64(1.0 + 1e-6)) != 0

    def test_non_numeric_falls_back_to_equality(self, q):
        compare = approximate_comparator(FLOAT64)
        assert compare(q(1), q(1)) == 0
        assert compare(q(1), q(1, 1)) != 0


class TestSelectTolerance:

    def test_exact_types(self):
        assert select_tolerance(Rational) is EXACT
        assert select_tolerance(Integer64) is EXACT

    def test_floating_types(self):
        assert select_tolerance(Float64) is FLOAT64
        assert select_tolerance(Complex, is_ill_conditioned=True) is FLOAT64_ILL_CONDITIONED

    def test_undeclared_type_compared_exactly(self, q):
        assert select_tolerance(q) is EXACT


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('factorization'):
            pass
        with timer.section('factorization'):
            pass
        timer.stop()
        result = timer.result()
        assert 'total_seconds' in result
        assert result['factorization'] >= 0.0

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()
