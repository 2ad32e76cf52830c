"""
Division-free determinant by cofactor expansion.

Used when LU elimination stops at a pivot without an inverse, as happens
for the non-units of a ring such as Integer64. Only plus, opposite and
times are applied, so the result is exact in any commutative ring.
"""

from functools import lru_cache
from typing import Any, Sequence


def expansion_determinant(rows: Sequence[Sequence[Any]]) -> Any:
    """
    Determinant by Laplace expansion along successive rows.

    Minors are memoized on the columns they keep, which brings the cost
    down from n! products to about n·2ⁿ.

    Args:
        rows: Square matrix elements, row by row

    Returns:
        The determinant, of the element type of ``rows``
    """
    n = len(rows)

    @lru_cache(maxsize=None)
    def minor(columns: tuple[int, ...]) -> Any:
        k = n - len(columns)
        if len(columns) == 1:
            return rows[k][columns[0]]
        total = None
        for position, j in enumerate(columns):
            term = rows[k][j].times(minor(columns[:position] + columns[position + 1:]))
            if position % 2:
                term = term.opposite()
            total = term if total is None else total.plus(term)
        return total

    return minor(tuple(range(n)))
