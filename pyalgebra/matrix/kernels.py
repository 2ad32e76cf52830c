"""
Matrix multiplication kernel.

Output element (i, j) is ``left.get_row(i).dot(right.get_column(j))``,
so each storage contributes its own dot product (sparse rows skip their
zeros). Wide outputs are split into column blocks and evaluated through
``fork_join``; every block computes exactly what the sequential loop
would, so both paths return identical matrices.
"""

from __future__ import annotations

from concurrent.futures import Executor
from functools import partial
from typing import Any, Sequence, TYPE_CHECKING

from pyalgebra.core.compute.parallel import (
    DEFAULT_MAX_WORKERS,
    PARALLEL_THRESHOLD,
    column_blocks,
    fork_join,
)
from pyalgebra.core.validation import check_same_dimension
from pyalgebra.vector.dense import DenseVector
from pyalgebra.vector.vector import Vector

if TYPE_CHECKING:
    from pyalgebra.matrix.dense import DenseMatrix
    from pyalgebra.matrix.matrix import Matrix


def multiply(
    left: Matrix,
    right: Matrix,
    *,
    executor: Executor | None = None,
    threshold: int = PARALLEL_THRESHOLD,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> DenseMatrix:
    """
    Product ``left × right`` as a DenseMatrix.

    Raises:
        DimensionError: If left.n_columns != right.n_rows
    """
    from pyalgebra.matrix.dense import DenseMatrix
    from pyalgebra.matrix.transposed import TransposedView

    check_same_dimension(left.n_columns, right.n_rows, 'times_matrix')
    if isinstance(left, TransposedView):
        # Rows of a view are source columns; copy once instead of per product
        left = DenseMatrix.from_matrix(left)

    rows = [left.get_row(i) for i in range(left.n_rows)]
    blocks = column_blocks(right.n_columns, threshold, max_workers)
    if len(blocks) == 1:
        columns = _multiply_block(rows, right, 0, right.n_columns)
    else:
        parts = fork_join(
            [partial(_multiply_block, rows, right, start, end) for start, end in blocks],
            executor=executor,
            max_workers=max_workers,
        )
        columns = [column for part in parts for column in part]

    return DenseMatrix(tuple(
        DenseVector(tuple(column[i] for column in columns)) for i in range(len(rows))
    ))


def _multiply_block(
    rows: Sequence[Vector],
    right: Matrix,
    start: int,
    end: int,
) -> list[tuple[Any, ...]]:
    """Output columns ``start`` to ``end - 1``, each as a tuple over the rows."""
    columns = []
    for j in range(start, end):
        column = right.get_column(j)
        columns.append(tuple(row.dot(column) for row in rows))
    return columns
