"""
Tests for LU backend selection and the LAPACK backend.

Validates:
    - 'auto' picks LAPACK only for finite Float64 with the default comparator
    - Both backends agree on Float64 input
    - LAPACK singular and ill-conditioned handling
    - LUDesign capabilities
"""

import warnings

import numpy as np
import pytest

from pyalgebra.core.capabilities import (
    CAPABILITY_COMMUTATIVE,
    CAPABILITY_FLOAT64_NATIVE,
)
from pyalgebra.core.exceptions import (
    IllConditionedWarning,
    SingularMatrixError,
    ValidationError,
)
from pyalgebra.decomposition import LUDesign, lu, nonzero_comparator, numeric_comparator
from pyalgebra.decomposition.backends import GenericLUBackend, LapackLUBackend
from pyalgebra.matrix import DenseMatrix, float64_matrix, to_array
from pyalgebra.number import Float64


# ═══════════════════════════════════════════════════════════════════════
# Backend selection
# ═══════════════════════════════════════════════════════════════════════


class TestBackendSelection:

    def test_auto_float64_uses_lapack(self):
        decomposition = lu(float64_matrix([[1.0, 2.0], [3.0, 4.0]]))
        assert decomposition.backend_name == 'float64_lapack'
        assert decomposition.info['method'] == 'getrf'

    def test_auto_rational_uses_generic(self, rational_matrix):
        assert lu(rational_matrix([[1, 2], [3, 4]])).backend_name == 'generic_doolittle'

    def test_auto_custom_comparator_uses_generic(self):
        decomposition = lu(float64_matrix([[1.0, 2.0], [3.0, 4.0]]), comparator=nonzero_comparator)
        assert decomposition.backend_name == 'generic_doolittle'

    def test_auto_non_finite_uses_generic(self):
        decomposition = lu(float64_matrix([[np.inf, 0.0], [0.0, 1.0]]))
        assert decomposition.backend_name == 'generic_doolittle'

    def test_explicit_generic(self):
        decomposition = lu(float64_matrix([[1.0, 2.0], [3.0, 4.0]]), backend='generic')
        assert decomposition.backend_name == 'generic_doolittle'

    def test_explicit_float64_rejects_rationals(self, rational_matrix):
        with pytest.raises(ValidationError, match="Float64"):
            lu(rational_matrix([[1, 2], [3, 4]]), backend='float64')

    def test_explicit_float64_rejects_comparator(self):
        with pytest.raises(ValidationError, match="comparator"):
            lu(float64_matrix([[1.0]]), comparator=None, backend='float64')

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            lu(float64_matrix([[1.0]]), backend='gpu')


# ═══════════════════════════════════════════════════════════════════════
# Backend agreement
# ═══════════════════════════════════════════════════════════════════════


class TestBackendAgreement:

    def test_same_pivots_and_factors(self, rng):
        a = float64_matrix(rng.standard_normal((6, 6)))
        generic = lu(a, backend='generic')
        lapack = lu(a, backend='float64')
        assert generic.get_pivots() == lapack.get_pivots()
        assert generic.swap_count == lapack.swap_count
        np.testing.assert_allclose(
            to_array(generic.get_lu()), to_array(lapack.get_lu()), rtol=1e-10, atol=1e-12
        )

    def test_anti_diagonal(self):
        decomposition = lu(float64_matrix([[0.0, 1.0], [1.0, 0.0]]), backend='float64')
        assert decomposition.swap_count == 1
        assert decomposition.determinant() == Float64(-1.0)

    def test_pivot_composition(self):
        """getrf interchanges are composed into a row order."""
        a = float64_matrix([[1.0, 0.0, 0.0], [2.0, 0.0, 1.0], [3.0, 1.0, 0.0]])
        decomposition = lu(a, backend='float64')
        p = to_array(decomposition.get_permutation())
        lower = to_array(decomposition.get_lower())
        upper = to_array(decomposition.get_upper())
        np.testing.assert_allclose(p @ to_array(a), lower @ upper)


# ═══════════════════════════════════════════════════════════════════════
# LAPACK singular and ill-conditioned input
# ═══════════════════════════════════════════════════════════════════════


class TestLapackDiagnostics:

    def test_exactly_singular(self):
        decomposition = lu(float64_matrix([[1.0, 2.0], [2.0, 4.0]]))
        assert decomposition.backend_name == 'float64_lapack'
        assert decomposition.is_singular
        assert decomposition.determinant().is_zero()
        with pytest.raises(SingularMatrixError):
            decomposition.inverse()

    def test_ill_conditioned_warns(self):
        a = float64_matrix([[1.0, 0.0], [0.0, 1e-14]])
        with pytest.warns(IllConditionedWarning, match="pivot ratio"):
            decomposition = lu(a)
        assert decomposition.warnings
        assert not decomposition.is_singular

    def test_well_conditioned_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            decomposition = lu(float64_matrix([[2.0, 1.0], [1.0, 3.0]]))
        assert decomposition.warnings == ()

    def test_backends_directly(self):
        design = LUDesign.from_matrix(float64_matrix([[4.0, 3.0], [6.0, 3.0]]))
        generic = GenericLUBackend().solve(design)
        lapack = LapackLUBackend().solve(design)
        assert generic.params.pivots == lapack.params.pivots == (1, 0)
        assert generic.backend_name == 'generic_doolittle'
        assert lapack.backend_name == 'float64_lapack'
        assert lapack.timing['total_seconds'] >= 0.0


# ═══════════════════════════════════════════════════════════════════════
# LUDesign
# ═══════════════════════════════════════════════════════════════════════


class TestLUDesign:

    def test_capabilities_float64(self):
        design = LUDesign.from_matrix(float64_matrix([[1.0, 2.0], [3.0, 4.0]]))
        assert design.n == 2
        assert design.element_type is Float64
        assert design.supports(CAPABILITY_FLOAT64_NATIVE)
        assert design.supports(CAPABILITY_COMMUTATIVE)
        assert not design.supports('unknown')

    def test_capabilities_quaternion(self, q):
        design = LUDesign.from_matrix(DenseMatrix.value_of([[q(1)]]))
        assert not design.supports(CAPABILITY_FLOAT64_NATIVE)
        assert not design.supports(CAPABILITY_COMMUTATIVE)

    def test_from_rows(self, r):
        design = LUDesign.from_rows([[r(1), r(2)], [r(3), r(4)]])
        assert design.rows[1][0] == r(3)
        assert design.comparator is numeric_comparator
