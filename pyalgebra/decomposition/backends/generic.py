"""
Generic LU backend.

Doolittle elimination written against the FieldElement protocol only, so
it factors matrices of any element type (exact rationals, complex numbers,
non-commutative rings). Multipliers are formed as ``a_ik × u_kk⁻¹`` and
updates as ``a_ij - l_ik × u_kj``; the order matters when multiplication
does not commute.
"""

from typing import Any

from pyalgebra.core.exceptions import SingularMatrixError
from pyalgebra.core.result import Result
from pyalgebra.core.compute.timing import Timer
from pyalgebra.decomposition.design import LUDesign
from pyalgebra.decomposition.pivoting import is_zero
from pyalgebra.decomposition.solution import LUParams


class GenericLUBackend:
    """
    Doolittle LU with comparator-driven partial pivoting.

    Implements the Backend protocol for LUDesign -> LUParams.

    A zero pivot left after pivoting means the whole remaining column is
    zero: the matrix is singular, the column is skipped, and elimination
    goes on so the determinant still comes out as zero. A zero pivot with
    non-zero entries below it (pivoting disabled) or a non-zero pivot
    without an inverse (a non-unit of a ring) raises immediately.
    """

    @property
    def name(self) -> str:
        return 'generic_doolittle'

    def solve(self, design: LUDesign) -> Result[LUParams]:
        """
        Factor the design's matrix.

        Args:
            design: Validated LU design

        Returns:
            Result containing LUParams

        Raises:
            SingularMatrixError: If a pivot cannot be inverted and the
                matrix is not provably singular
        """
        timer = Timer()
        timer.start()

        n = design.n
        comparator = design.comparator
        lu = [list(row) for row in design.rows]
        pivots = list(range(n))
        swap_count = 0
        singular_index = None

        with timer.section('factorization'):
            for k in range(n):
                # === Row exchange ===
                if comparator is not None:
                    pivot = k
                    for i in range(k + 1, n):
                        if comparator(lu[i][k], lu[pivot][k]) > 0:
                            pivot = i
                    if pivot != k:
                        lu[k], lu[pivot] = lu[pivot], lu[k]
                        pivots[k], pivots[pivot] = pivots[pivot], pivots[k]
                        swap_count += 1

                # === Elimination ===
                ukk = lu[k][k]
                if is_zero(ukk):
                    if all(is_zero(lu[i][k]) for i in range(k + 1, n)):
                        if singular_index is None:
                            singular_index = k
                        continue
                    raise SingularMatrixError(
                        f"matrix: zero pivot at column {k} with non-zero entries below it",
                        matrix_name='matrix',
                        pivot_index=k,
                        dimension=n,
                    )
                ukk_inverse = _reciprocal(ukk, k, n)
                for i in range(k + 1, n):
                    row = lu[i]
                    lik = row[k].times(ukk_inverse)
                    row[k] = lik
                    pivot_row = lu[k]
                    for j in range(k + 1, n):
                        row[j] = row[j].plus(lik.times(pivot_row[j]).opposite())

        timer.stop()

        params = LUParams(
            lu=tuple(tuple(row) for row in lu),
            pivots=tuple(pivots),
            swap_count=swap_count,
            singular_index=singular_index,
        )

        info: dict[str, Any] = {
            'method': 'doolittle',
            'pivoting': comparator is not None,
            'swap_count': swap_count,
            'singular': singular_index is not None,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


def _reciprocal(pivot: Any, index: int, n: int) -> Any:
    try:
        return pivot.inverse()
    except ArithmeticError as e:
        raise SingularMatrixError(
            f"matrix: pivot {pivot} at column {index} has no inverse",
            matrix_name='matrix',
            pivot_index=index,
            dimension=n,
        ) from e
