"""
Tolerance tiers for element comparison.

Defines precision expectations for different element types:
- EXACT: Rational, Integer64 and other exact rings (no tolerance)
- FLOAT64: well-conditioned double precision
- FLOAT64_ILL_CONDITIONED: relaxed for ill-conditioned problems

Matrix.equals and Vector.equals pick a tier with select_tolerance() when no
comparator is given; the LAPACK backend uses CONDITION_THRESHOLD.
"""

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from pyalgebra.core.protocols import Numeric


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact rings: equality only
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic, elements must compare equal',
)

# Double precision, well-conditioned
FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision, round-off of a few ulps per operation',
)

# Double precision, ill-conditioned problems (cond > 1e4)
FLOAT64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='float64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)

# Smallest accepted ratio min|U_ii| / max|U_ii| before the LAPACK backend
# warns. At 1e-12 the factors carry about four significant digits.
CONDITION_THRESHOLD = 1e-12


Comparator = Callable[[Any, Any], int]


def exact_comparator(left: Any, right: Any) -> int:
    """Comparator returning 0 for equal elements and 1 otherwise."""
    return 0 if left == right else 1


def approximate_comparator(tier: ToleranceTier) -> Comparator:
    """
    Build an element comparator honoring a tolerance tier.

    Two Numeric elements compare equal (0) when
    ``|a - b| <= atol + rtol * |b|``, the same formula as numpy.isclose.
    Non-numeric elements fall back to exact equality.

    Args:
        tier: Tolerance tier to apply

    Returns:
        Comparator ``(left, right) -> int`` with 0 meaning "equal"
    """
    if tier.rtol == 0.0 and tier.atol == 0.0:
        return exact_comparator

    def compare(left: Any, right: Any) -> int:
        if left == right:
            return 0
        if not (isinstance(left, Numeric) and isinstance(right, Numeric)):
            return 1
        difference = left.plus(right.opposite()).magnitude()
        if difference <= tier.atol + tier.rtol * right.magnitude():
            return 0
        return 1 if left.is_larger_than(right) else -1

    return compare


def select_tolerance(element_type: type, is_ill_conditioned: bool = False) -> ToleranceTier:
    """
    Select appropriate tolerance tier for an element type.

    Types that do not declare ``EXACT`` (user-defined elements) are compared
    exactly.
    """
    if getattr(element_type, 'EXACT', True):
        return EXACT
    if is_ill_conditioned:
        return FLOAT64_ILL_CONDITIONED
    return FLOAT64
