"""
Matrix contract and algebra facade.

A Matrix is an immutable ``n_rows x n_columns`` table of elements of one
runtime type. Storage is a closed set of variants:

    DenseMatrix      tuple of DenseVector rows
    SparseMatrix     {(i, j): element} map plus an explicit zero
    TransposedView   O(1) adapter forwarding to a source matrix

This base class holds every algorithm the variants share: element-wise
arithmetic, multiplication (through matrix/kernels.py), the LU-backed
operations (determinant, inverse, solve, pseudo-inverse), and the algebra
facade (pow, tensor, cofactor, adjoint, vectorization, divide).

Multiplicative order is always left to right: ``get(i, k).times(...)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Executor
from typing import Any, Callable, Iterator, Sequence, TYPE_CHECKING

from pyalgebra.core.compute.parallel import DEFAULT_MAX_WORKERS, PARALLEL_THRESHOLD
from pyalgebra.core.compute.tolerances import approximate_comparator, select_tolerance
from pyalgebra.core.validation import (
    check_index,
    check_indices,
    check_min_dimension,
    check_non_empty,
    check_same_dimension,
    check_shape_match,
    check_square,
)
from pyalgebra.decomposition.pivoting import PivotComparator, numeric_comparator
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.vector import Vector

if TYPE_CHECKING:
    from pyalgebra.decomposition.solution import LUDecomposition
    from pyalgebra.matrix.dense import DenseMatrix


class Matrix(ABC):
    """
    Abstract rectangular matrix.

    Subclasses provide ``n_rows``, ``n_columns`` and ``get``; they may
    override any other operation with a storage-specific version.
    Equality and hashing are element-wise and independent of storage.
    """

    __slots__ = ()

    # === Storage primitives ===

    @property
    @abstractmethod
    def n_rows(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def n_columns(self) -> int:
        """Number of columns."""
        ...

    @abstractmethod
    def get(self, i: int, j: int) -> Any:
        """
        Element at row ``i``, column ``j``.

        Raises:
            IndexOutOfRangeError: If i or j is out of range
        """
        ...

    # === Accessors ===

    @property
    def shape(self) -> tuple[int, int]:
        """(n_rows, n_columns)."""
        return (self.n_rows, self.n_columns)

    @property
    def element_type(self) -> type:
        """Runtime type shared by every element."""
        return type(self.get(0, 0))

    @property
    def T(self) -> Matrix:
        """Shorthand for ``transpose()``."""
        return self.transpose()

    def is_square(self) -> bool:
        return self.n_rows == self.n_columns

    def get_row(self, i: int) -> Vector:
        check_index(i, self.n_rows, 'i')
        return DenseVector(tuple(self.get(i, j) for j in range(self.n_columns)))

    def get_column(self, j: int) -> Vector:
        check_index(j, self.n_columns, 'j')
        return DenseVector(tuple(self.get(i, j) for i in range(self.n_rows)))

    def get_diagonal(self) -> Vector:
        """Elements ``get(i, i)`` for i < min(n_rows, n_columns)."""
        return DenseVector(tuple(
            self.get(i, i) for i in range(min(self.n_rows, self.n_columns))
        ))

    def get_sub_matrix(self, rows: Sequence[int], columns: Sequence[int]) -> Matrix:
        """
        Matrix whose (k, l) element is ``get(rows[k], columns[l])``.

        Indices may be reordered and repeated.

        Raises:
            DimensionError: If any index is out of range
            ValidationError: If rows or columns is empty
        """
        from pyalgebra.matrix.dense import DenseMatrix

        check_indices(rows, self.n_rows, 'rows')
        check_indices(columns, self.n_columns, 'columns')
        check_non_empty(rows, 'rows')
        check_non_empty(columns, 'columns')
        return DenseMatrix(tuple(
            DenseVector(tuple(self.get(i, j) for j in columns)) for i in rows
        ))

    # === Element-wise arithmetic ===

    def opposite(self) -> Matrix:
        from pyalgebra.matrix.dense import DenseMatrix

        return DenseMatrix(tuple(
            DenseVector(tuple(self.get(i, j).opposite() for j in range(self.n_columns)))
            for i in range(self.n_rows)
        ))

    def plus(self, that: Matrix) -> Matrix:
        """
        Element-wise sum.

        Raises:
            DimensionError: If shapes differ
        """
        from pyalgebra.matrix.dense import DenseMatrix

        check_shape_match(self.shape, that.shape, 'plus')
        return DenseMatrix(tuple(
            DenseVector(tuple(
                self.get(i, j).plus(that.get(i, j)) for j in range(self.n_columns)
            ))
            for i in range(self.n_rows)
        ))

    def minus(self, that: Matrix) -> Matrix:
        """
        Element-wise difference ``self + (-that)``.

        Raises:
            DimensionError: If shapes differ
        """
        check_shape_match(self.shape, that.shape, 'minus')
        return self.plus(that.opposite())

    def times(self, k: Any) -> Matrix:
        """Scalar right product: element (i, j) is ``get(i, j).times(k)``."""
        from pyalgebra.matrix.dense import DenseMatrix

        return DenseMatrix(tuple(
            DenseVector(tuple(self.get(i, j).times(k) for j in range(self.n_columns)))
            for i in range(self.n_rows)
        ))

    # === Products ===

    def times_vector(self, v: Vector) -> DenseVector:
        """
        Matrix-vector product: element i is ``get_row(i).dot(v)``.

        Raises:
            DimensionError: If n_columns != v.dimension
        """
        check_same_dimension(self.n_columns, v.dimension, 'times_vector')
        return DenseVector(tuple(self.get_row(i).dot(v) for i in range(self.n_rows)))

    def times_matrix(
        self,
        that: Matrix,
        *,
        executor: Executor | None = None,
        threshold: int = PARALLEL_THRESHOLD,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> DenseMatrix:
        """
        Matrix product.

        Element (i, j) accumulates ``get(i, k).times(that.get(k, j))`` from
        k = 0 upward. Outputs with at least ``threshold`` columns are split
        into column blocks evaluated concurrently; the result is identical
        to sequential evaluation.

        Args:
            that: Right operand (n_columns x p)
            executor: Executor for the column blocks. If None, a thread
                pool is created for the call.
            threshold: Minimum output columns for concurrent evaluation
            max_workers: Upper bound on concurrent blocks

        Raises:
            DimensionError: If n_columns != that.n_rows
        """
        from pyalgebra.matrix.kernels import multiply

        return multiply(
            self, that, executor=executor, threshold=threshold, max_workers=max_workers
        )

    def tensor(self, that: Matrix) -> DenseMatrix:
        """
        Kronecker product.

        The result is ``(n_rows·that.n_rows) x (n_columns·that.n_columns)``
        and block (i, j) is ``that.times(get(i, j))``.
        """
        from pyalgebra.matrix.dense import DenseMatrix

        blocks = [
            [that.times(self.get(i, j)) for j in range(self.n_columns)]
            for i in range(self.n_rows)
        ]
        rows = []
        for i in range(self.n_rows):
            for r in range(that.n_rows):
                rows.append(DenseVector(tuple(
                    blocks[i][j].get(r, c)
                    for j in range(self.n_columns)
                    for c in range(that.n_columns)
                )))
        return DenseMatrix(tuple(rows))

    # === Structure ===

    def transpose(self) -> Matrix:
        """O(1) transposed view; no element is copied."""
        from pyalgebra.matrix.transposed import TransposedView

        return TransposedView(self)

    def trace(self) -> Any:
        """Sum of the diagonal elements, accumulated from (0, 0)."""
        diagonal = self.get_diagonal()
        total = diagonal.get(0)
        for i in range(1, diagonal.dimension):
            total = total.plus(diagonal.get(i))
        return total

    def vectorization(self) -> DenseVector:
        """Columns stacked top to bottom into a single vector."""
        return DenseVector(tuple(
            self.get(i, j) for j in range(self.n_columns) for i in range(self.n_rows)
        ))

    # === LU-backed operations ===

    def lu(
        self,
        comparator: PivotComparator | None = numeric_comparator,
        backend: str = 'auto',
    ) -> LUDecomposition:
        """
        LU decomposition of this (square) matrix.

        The factorization is recomputed on every call; keep the returned
        object to solve several systems against the same coefficients.

        Args:
            comparator: Pivot ranking. None disables pivoting.
            backend: 'auto', 'generic' or 'float64'

        Raises:
            DimensionError: If the matrix is not square
        """
        from pyalgebra.decomposition.solvers import lu

        return lu(self, comparator=comparator, backend=backend)

    def determinant(self) -> Any:
        """
        Determinant via LU decomposition.

        Singular matrices yield the zero element rather than raising. Rings
        whose pivots lack inverses fall back to cofactor expansion.

        Raises:
            DimensionError: If the matrix is not square
        """
        from pyalgebra.decomposition.solvers import determinant

        check_square(self.shape, 'matrix')
        return determinant(self)

    def inverse(self) -> Matrix:
        """
        Multiplicative inverse via LU decomposition.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is singular
        """
        check_square(self.shape, 'matrix')
        return self.lu().inverse()

    def solve(self, y: Vector | Matrix) -> Vector | Matrix:
        """
        Solution X of ``self × X = y``.

        Raises:
            DimensionError: If not square or y has the wrong row count
            SingularMatrixError: If the matrix is singular
        """
        check_square(self.shape, 'matrix')
        return self.lu().solve(y)

    def pseudo_inverse(self) -> Matrix:
        """
        Moore-Penrose style inverse.

        Square matrices route through ``inverse()``; otherwise
        ``(Aᵗ·A)⁻¹·Aᵗ``.

        Raises:
            SingularMatrixError: If Aᵗ·A (or A) is singular
        """
        if self.is_square():
            return self.inverse()
        transposed = self.transpose()
        return transposed.times_matrix(self).inverse().times_matrix(transposed)

    def divide(self, that: Matrix) -> Matrix:
        """Right division ``self × that⁻¹``."""
        return self.times_matrix(that.inverse())

    def cofactor(self, i: int, j: int) -> Any:
        """
        Determinant of the minor without row ``i`` and column ``j``.

        Raises:
            DimensionError: If not square or dimension < 2
            IndexOutOfRangeError: If i or j is out of range
        """
        check_square(self.shape, 'matrix')
        check_min_dimension(self.n_rows, 2, 'matrix')
        check_index(i, self.n_rows, 'i')
        check_index(j, self.n_columns, 'j')
        rows = [k for k in range(self.n_rows) if k != i]
        columns = [k for k in range(self.n_columns) if k != j]
        return self.get_sub_matrix(rows, columns).determinant()

    def adjoint(self) -> Matrix:
        """
        Adjugate: signed cofactors ``(-1)^(i+j)·cofactor(i, j)``, transposed.

        Raises:
            DimensionError: If not square or dimension < 2
        """
        from pyalgebra.matrix.dense import DenseMatrix

        check_square(self.shape, 'matrix')
        check_min_dimension(self.n_rows, 2, 'matrix')
        n = self.n_rows
        cofactors = []
        for i in range(n):
            row = []
            for j in range(n):
                c = self.cofactor(i, j)
                row.append(c if (i + j) % 2 == 0 else c.opposite())
            cofactors.append(DenseVector(tuple(row)))
        return DenseMatrix(tuple(cofactors)).transpose()

    def pow(self, exp: int) -> Matrix:
        """
        Integer power by binary exponentiation.

        ``exp == 0`` yields ``self × self⁻¹`` (the ring's identity, no
        numeric "1" needed); ``exp < 0`` yields ``pow(-exp)⁻¹``.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If exp <= 0 and the matrix is singular
        """
        check_square(self.shape, 'matrix')
        if exp == 0:
            return self.times_matrix(self.inverse())
        if exp < 0:
            return self.pow(-exp).inverse()
        power = self
        result = None
        while exp:
            if exp & 1:
                result = power if result is None else result.times_matrix(power)
            exp >>= 1
            if exp:
                power = power.times_matrix(power)
        return result

    # === Comparison ===

    def equals(
        self,
        that: Matrix,
        comparator: Callable[[Any, Any], int] | None = None,
    ) -> bool:
        """
        Element-wise equality through a comparator.

        Args:
            that: Matrix to compare with
            comparator: Returns 0 when two elements are considered equal,
                e.g. ``approximate_comparator(FLOAT64)``. Defaults to the
                tolerance tier of this matrix's element type.
        """
        if self is that:
            return True
        if self.shape != that.shape:
            return False
        if comparator is None:
            comparator = approximate_comparator(select_tolerance(self.element_type))
        return all(
            comparator(self.get(i, j), that.get(i, j)) == 0
            for i in range(self.n_rows)
            for j in range(self.n_columns)
        )

    # === Python protocol ===

    def __iter__(self) -> Iterator[Vector]:
        for i in range(self.n_rows):
            yield self.get_row(i)

    def __getitem__(self, index: tuple[int, int]) -> Any:
        i, j = index
        return self.get(i, j)

    def __eq__(self, that: object) -> bool:
        if self is that:
            return True
        if not isinstance(that, Matrix):
            return NotImplemented
        if self.shape != that.shape:
            return False
        return all(
            self.get(i, j) == that.get(i, j)
            for i in range(self.n_rows)
            for j in range(self.n_columns)
        )

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self))

    def __neg__(self) -> Matrix:
        return self.opposite()

    def __add__(self, that: Any) -> Matrix:
        if not isinstance(that, Matrix):
            return NotImplemented
        return self.plus(that)

    def __sub__(self, that: Any) -> Matrix:
        if not isinstance(that, Matrix):
            return NotImplemented
        return self.minus(that)

    def __mul__(self, k: Any) -> Matrix:
        if isinstance(k, (Matrix, Vector)):
            return NotImplemented
        return self.times(k)

    def __matmul__(self, that: Any) -> Matrix | Vector:
        if isinstance(that, Matrix):
            return self.times_matrix(that)
        if isinstance(that, Vector):
            return self.times_vector(that)
        return NotImplemented

    def __pow__(self, exp: int) -> Matrix:
        return self.pow(exp)

    def __str__(self) -> str:
        return '{' + ',\n '.join(str(row) for row in self) + '}'

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.n_rows}x{self.n_columns})"
