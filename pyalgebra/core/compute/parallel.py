"""
Fork-join execution of independent closures.

The only concurrency in pyalgebra: large bulk constructions (matrix
multiplication) split their output into disjoint column blocks, submit one
closure per block, and block until every closure has finished. Tasks read
only immutable operands and return their own slice, so no locking is
needed.

There is no cancellation and no timeout. A task failure is re-raised in the
caller after all sibling tasks have completed.
"""

from __future__ import annotations

import os
from concurrent.futures import Executor, ThreadPoolExecutor, wait
from typing import Callable, Sequence, TypeVar

T = TypeVar('T')

# Output columns below which multiplication stays sequential. Also the
# smallest block handed to a worker.
PARALLEL_THRESHOLD = 32

# Upper bound on worker threads for executors created per call
DEFAULT_MAX_WORKERS = min(8, os.cpu_count() or 1)


def partition(start: int, end: int, n_blocks: int) -> list[tuple[int, int]]:
    """
    Split ``[start, end)`` into ``n_blocks`` contiguous, disjoint ranges.

    Block sizes differ by at most one; empty blocks are never produced.

    Args:
        start: Inclusive lower bound
        end: Exclusive upper bound
        n_blocks: Requested number of blocks (clamped to the range length)

    Returns:
        List of (block_start, block_end) pairs covering the range in order
    """
    n = end - start
    n_blocks = max(1, min(n_blocks, n))
    return [
        (start + i * n // n_blocks, start + (i + 1) * n // n_blocks)
        for i in range(n_blocks)
    ]


def column_blocks(
    n_columns: int,
    threshold: int = PARALLEL_THRESHOLD,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[tuple[int, int]]:
    """
    Choose the column blocks for an output of ``n_columns`` columns.

    Returns a single block (sequential evaluation) when the output is
    narrower than ``threshold`` or only one worker is available.
    """
    if n_columns < threshold or max_workers < 2:
        return [(0, n_columns)]
    n_blocks = min(max_workers, max(2, n_columns // threshold))
    return partition(0, n_columns, n_blocks)


def fork_join(
    tasks: Sequence[Callable[[], T]],
    executor: Executor | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[T]:
    """
    Run independent closures and return their results in submission order.

    Args:
        tasks: Zero-argument callables with no shared mutable state
        executor: Executor to submit to. If None, a ThreadPoolExecutor is
            created for this call and shut down before returning.
        max_workers: Worker count for the per-call executor

    Returns:
        Results, one per task, in the order the tasks were given

    Raises:
        Exception: The first failing task's exception, re-raised after all
            tasks have completed
    """
    if executor is None:
        with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(tasks)))) as pool:
            return _submit_and_join(pool, tasks)
    return _submit_and_join(executor, tasks)


def _submit_and_join(executor: Executor, tasks: Sequence[Callable[[], T]]) -> list[T]:
    futures = [executor.submit(task) for task in tasks]
    # Strict join: no detached work survives a sibling's failure
    wait(futures)
    return [future.result() for future in futures]
