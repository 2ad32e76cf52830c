"""
Shared compute infrastructure for pyalgebra.

This module provides timing utilities, tolerance tiers and the fork-join
facility shared by the vector, matrix and decomposition packages.

IMPORTANT: This is NOT where backends live. Those go in
decomposition/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    parallel: Fork-join execution of independent closures
    timing: Execution timing utilities
    tolerances: Tolerance tiers and element comparators
"""

from pyalgebra.core.compute.parallel import (
    PARALLEL_THRESHOLD,
    DEFAULT_MAX_WORKERS,
    column_blocks,
    fork_join,
    partition,
)
from pyalgebra.core.compute.timing import Timer
from pyalgebra.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FLOAT64,
    FLOAT64_ILL_CONDITIONED,
    approximate_comparator,
    exact_comparator,
    select_tolerance,
)

__all__ = [
    # Parallel
    "PARALLEL_THRESHOLD",
    "DEFAULT_MAX_WORKERS",
    "column_blocks",
    "fork_join",
    "partition",
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FLOAT64",
    "FLOAT64_ILL_CONDITIONED",
    "approximate_comparator",
    "exact_comparator",
    "select_tolerance",
]
