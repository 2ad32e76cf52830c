"""
Pivot comparators for LU decomposition.

A pivot comparator ranks two candidate pivots of the same column:
``comparator(candidate, current) > 0`` makes the candidate the new pivot.
Rows are scanned top to bottom, so on ties the upper row is kept.

The comparator is an explicit argument of ``lu()``; passing None disables
row exchanges entirely.
"""

from typing import Any, Callable

from pyalgebra.core.protocols import Numeric, is_zero

PivotComparator = Callable[[Any, Any], int]


def numeric_comparator(left: Any, right: Any) -> int:
    """
    Default pivot ranking.

    Numeric elements are ranked by magnitude (larger first) for numerical
    stability. Other elements only distinguish zero from non-zero, which
    is all exact arithmetic needs.

    Returns:
        1 if ``left`` is the better pivot, -1 if ``right`` is, else 0
    """
    if isinstance(left, Numeric) and isinstance(right, Numeric):
        return 1 if left.is_larger_than(right) else -1
    if is_zero(left):
        return -1
    if is_zero(right):
        return 1
    return 0


def nonzero_comparator(left: Any, right: Any) -> int:
    """
    Ranks any non-zero element above a zero and otherwise keeps the row order.

    Suited to exact rings where magnitude plays no role; fewer row
    exchanges than ``numeric_comparator``.
    """
    if is_zero(right) and not is_zero(left):
        return 1
    return 0
