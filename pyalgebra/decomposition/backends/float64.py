"""
LAPACK LU backend for Float64 matrices.

Factors through scipy.linalg.lu_factor (LAPACK getrf). getrf uses
partial pivoting on the largest magnitude with the upper row kept on ties,
the same ranking as numeric_comparator, so both backends agree on the
permutation for well-separated pivots.
"""

import warnings
from typing import Any

import numpy as np
from scipy import linalg

from pyalgebra.core.compute.timing import Timer
from pyalgebra.core.compute.tolerances import CONDITION_THRESHOLD
from pyalgebra.core.exceptions import IllConditionedWarning
from pyalgebra.core.result import Result
from pyalgebra.decomposition.design import LUDesign
from pyalgebra.decomposition.solution import LUParams
from pyalgebra.number.float64 import Float64


class LapackLUBackend:
    """
    Float64 LU through LAPACK.

    Implements the Backend protocol for LUDesign -> LUParams. The design
    must support CAPABILITY_FLOAT64_NATIVE (all elements finite Float64).
    """

    @property
    def name(self) -> str:
        return 'float64_lapack'

    def solve(self, design: LUDesign) -> Result[LUParams]:
        """
        Factor the design's matrix with getrf.

        Exactly zero diagonal entries of U mark the matrix singular. A
        ratio min|U_ii| / max|U_ii| below CONDITION_THRESHOLD emits
        IllConditionedWarning.

        Args:
            design: Validated LU design of finite Float64 elements

        Returns:
            Result containing LUParams
        """
        timer = Timer()
        timer.start()

        n = design.n
        with timer.section('to_array'):
            a = np.array([[e.value for e in row] for row in design.rows], dtype=np.float64)

        with timer.section('factorization'):
            with warnings.catch_warnings():
                # Exact singularity is reported through singular_index
                warnings.simplefilter('ignore', linalg.LinAlgWarning)
                lu, piv = linalg.lu_factor(a, check_finite=False)

        # getrf records sequential interchanges; compose them into row order
        pivots = list(range(n))
        for i, p in enumerate(piv):
            pivots[i], pivots[p] = pivots[p], pivots[i]
        swap_count = int(np.count_nonzero(piv != np.arange(n)))

        diagonal = np.abs(np.diag(lu))
        zero_pivots = np.flatnonzero(diagonal == 0.0)
        singular_index = int(zero_pivots[0]) if zero_pivots.size else None

        messages: list[str] = []
        if singular_index is None and diagonal.max() > 0.0:
            ratio = diagonal.min() / diagonal.max()
            if ratio < CONDITION_THRESHOLD:
                message = (
                    f"matrix: pivot ratio {ratio:.3e} below {CONDITION_THRESHOLD:.0e}, "
                    f"results may have lost most significant digits"
                )
                warnings.warn(message, IllConditionedWarning, stacklevel=3)
                messages.append(message)

        timer.stop()

        params = LUParams(
            lu=tuple(tuple(Float64(float(x)) for x in row) for row in lu),
            pivots=tuple(pivots),
            swap_count=swap_count,
            singular_index=singular_index,
        )

        info: dict[str, Any] = {
            'method': 'getrf',
            'pivoting': True,
            'swap_count': swap_count,
            'singular': singular_index is not None,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(messages),
        )
