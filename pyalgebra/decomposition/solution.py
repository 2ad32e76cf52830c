"""
LU decomposition solution types.

Contains the parameter payload produced by backends and the user-facing
LUDecomposition wrapper (determinant, solve, inverse, factors).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyalgebra.core.exceptions import SingularMatrixError
from pyalgebra.core.result import Result
from pyalgebra.core.validation import check_same_dimension
from pyalgebra.decomposition.pivoting import is_zero
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.vector import Vector

if TYPE_CHECKING:
    from pyalgebra.decomposition.design import LUDesign
    from pyalgebra.matrix.dense import DenseMatrix
    from pyalgebra.matrix.matrix import Matrix


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for LU decomposition.

    This is the immutable data computed by backends.

    Attributes:
        lu: Combined factors, row by row. Strictly below the diagonal is L
            (unit diagonal implied); on and above is U.
        pivots: ``pivots[i]`` is the source row placed at row i
        swap_count: Number of row exchanges performed
        singular_index: First column whose pivot is zero, or None
    """
    lu: tuple[tuple[Any, ...], ...]
    pivots: tuple[int, ...]
    swap_count: int
    singular_index: int | None = None


@dataclass(frozen=True)
class LUDecomposition:
    """
    User-facing LU decomposition ``P·A = L·U``.

    Wraps the backend Result. Every operation works on the stored factors;
    no element of the source matrix is read again.
    """
    _result: Result[LUParams]
    _design: 'LUDesign'

    # === Envelope ===

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # === Factors ===

    @property
    def n(self) -> int:
        return len(self._result.params.pivots)

    @property
    def swap_count(self) -> int:
        """Number of row exchanges performed during factorization."""
        return self._result.params.swap_count

    @property
    def is_singular(self) -> bool:
        """True if a zero pivot was met (the determinant is zero)."""
        return self._result.params.singular_index is not None

    def get_pivots(self) -> tuple[int, ...]:
        """Source row index for each row of ``L·U``."""
        return self._result.params.pivots

    def get_permutation(self) -> DenseMatrix:
        """Permutation matrix P with ``P·A = L·U``."""
        zero, one = self._zero(), self._one()
        return self._matrix(
            [
                [one if j == pivot else zero for j in range(self.n)]
                for pivot in self.get_pivots()
            ]
        )

    def get_lower(self) -> DenseMatrix:
        """
        Unit lower-triangular factor L.

        Also defined for singular matrices: a skipped column keeps zeros
        below its zero pivot.
        """
        lu = self._result.params.lu
        zero, one = self._zero(), self._one()
        return self._matrix(
            [
                [lu[i][j] if j < i else one if j == i else zero for j in range(self.n)]
                for i in range(self.n)
            ]
        )

    def get_upper(self) -> DenseMatrix:
        """Upper-triangular factor U."""
        lu = self._result.params.lu
        zero = self._zero()
        return self._matrix(
            [[lu[i][j] if j >= i else zero for j in range(self.n)] for i in range(self.n)]
        )

    def get_lu(self) -> DenseMatrix:
        """Combined factors in one matrix (L below the diagonal, U on and above)."""
        return self._matrix(self._result.params.lu)

    # === Operations ===

    def determinant(self) -> Any:
        """
        Product of U's diagonal, negated for an odd number of exchanges.

        Singular matrices yield the zero element.
        """
        lu = self._result.params.lu
        product = lu[0][0]
        for i in range(1, self.n):
            product = product.times(lu[i][i])
        if self.swap_count % 2:
            return product.opposite()
        return product

    def solve(self, b: Vector | Matrix) -> Vector | Matrix:
        """
        Solution X of ``A·X = b`` by forward then back substitution.

        Args:
            b: Vector of dimension n, or matrix with n rows

        Returns:
            DenseVector for a vector right-hand side, DenseMatrix otherwise

        Raises:
            DimensionError: If b does not have n rows
            SingularMatrixError: If the matrix is singular
        """
        if isinstance(b, Vector):
            check_same_dimension(self.n, b.dimension, 'solve')
            columns = [[b.get(i)] for i in range(self.n)]
            x = self._substitute(columns)
            return DenseVector(tuple(row[0] for row in x))
        check_same_dimension(self.n, b.n_rows, 'solve')
        x = self._substitute(
            [[b.get(i, j) for j in range(b.n_columns)] for i in range(b.n_rows)]
        )
        return self._matrix(x)

    def inverse(self) -> DenseMatrix:
        """
        Inverse of the source matrix.

        Inverts U, solves ``X·L = U⁻¹``, then undoes the row exchanges on
        the columns of X.

        Raises:
            SingularMatrixError: If the matrix is singular
        """
        self._check_regular()
        n = self.n
        lu = self._result.params.lu
        r: list[list[Any]] = [
            [lu[i][j] if j >= i else None for j in range(n)] for i in range(n)
        ]

        # U⁻¹, column by column from the right
        for j in range(n - 1, -1, -1):
            r[j][j] = self._reciprocal(r[j][j], j)
            for i in range(j - 1, -1, -1):
                total = r[i][j].times(r[j][j]).opposite()
                for k in range(j - 1, i, -1):
                    total = total.plus(r[i][k].times(r[k][j]).opposite())
                r[i][j] = self._reciprocal(r[i][i], i).times(total)

        # X·L = U⁻¹
        for i in range(n):
            for j in range(n - 2, -1, -1):
                for k in range(j + 1, n):
                    term = r[i][k].times(lu[k][j]).opposite()
                    r[i][j] = term if r[i][j] is None else r[i][j].plus(term)

        pivots = self.get_pivots()
        result = []
        for row in r:
            scattered = [None] * n
            for j in range(n):
                scattered[pivots[j]] = row[j]
            result.append(scattered)
        return self._matrix(result)

    # === Internals ===

    def _substitute(self, b: list[list[Any]]) -> list[list[Any]]:
        """Solve ``L·U·X = P·b`` for a row-major right-hand side."""
        self._check_regular()
        n = self.n
        lu = self._result.params.lu
        x = [list(b[p]) for p in self.get_pivots()]
        width = len(x[0])

        # L·Y = P·b
        for k in range(n):
            for i in range(k + 1, n):
                lik = lu[i][k]
                for j in range(width):
                    x[i][j] = x[i][j].plus(lik.times(x[k][j]).opposite())

        # U·X = Y
        for k in range(n - 1, -1, -1):
            ukk_inverse = self._reciprocal(lu[k][k], k)
            for j in range(width):
                x[k][j] = ukk_inverse.times(x[k][j])
            for i in range(k):
                uik = lu[i][k]
                for j in range(width):
                    x[i][j] = x[i][j].plus(uik.times(x[k][j]).opposite())
        return x

    def _check_regular(self) -> None:
        index = self._result.params.singular_index
        if index is not None:
            raise SingularMatrixError(
                f"matrix: zero pivot at column {index}, matrix is singular",
                matrix_name='matrix',
                pivot_index=index,
                dimension=self.n,
            )

    def _reciprocal(self, pivot: Any, index: int) -> Any:
        try:
            return pivot.inverse()
        except ArithmeticError as e:
            raise SingularMatrixError(
                f"matrix: pivot {pivot} at column {index} has no inverse",
                matrix_name='matrix',
                pivot_index=index,
                dimension=self.n,
            ) from e

    def _zero(self) -> Any:
        e = self._result.params.lu[0][0]
        return e.plus(e.opposite())

    def _one(self) -> Any:
        one = getattr(type(self._result.params.lu[0][0]), 'one', None)
        if callable(one):
            return one()
        for row in self._design.rows:
            for e in row:
                if is_zero(e):
                    continue
                try:
                    return e.times(e.inverse())
                except ArithmeticError:
                    continue
        raise SingularMatrixError(
            "matrix: no unit element can be derived from its elements",
            matrix_name='matrix',
            dimension=self.n,
        )

    @staticmethod
    def _matrix(rows: Any) -> DenseMatrix:
        from pyalgebra.matrix.dense import DenseMatrix

        return DenseMatrix(tuple(DenseVector(tuple(row)) for row in rows))
