"""
CPU backend for Gaussian elimination.

Runs the pivot loop in Python and vectorizes the row updates below the
pivot with NumPy. At a fixed pivot column those updates are independent,
and each element still sees exactly one multiply and one subtract, so the
result is bit-identical to the scalar reference backend.
"""

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import EliminationParams
from pymatrix.elimination._common import build_result


def select_pivot(column: NDArray[np.float64]) -> int:
    """
    Offset of the largest-magnitude entry of column.

    Ties go to the first occurrence. NaN never wins a comparison, so a
    NaN is only selected when it sits at offset 0 (the scalar scan's
    starting candidate).
    """
    mags = np.abs(column)
    if np.isnan(mags[0]):
        return 0
    mags = np.where(np.isnan(mags), -np.inf, mags)
    return int(np.argmax(mags))


class CPUEliminationBackend:
    """
    CPU backend with row-vectorized elimination.

    Implements the Backend protocol for EliminationDesign -> EliminationParams.
    """

    @property
    def name(self) -> str:
        return 'cpu'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        """
        Reduce to row-echelon form with partial pivoting.

        Algorithm (cursors h = pivot row, k = pivot column):
            1. Pivot = largest |A[i, k]| for i >= h
            2. Zero pivot: skip column k, keep h
            3. Otherwise swap rows h and pivot (counting swaps), zero
               A[h+1:, k] exactly and update A[h+1:, k+1:]
            4. Advance h and k

        Args:
            design: Validated elimination design

        Returns:
            Result containing EliminationParams
        """
        timer = Timer()
        timer.start()

        A = design.working_copy()
        m, n = design.m, design.n

        h = 0
        k = 0
        swaps = 0
        pivot_columns: list[int] = []
        skipped: list[tuple[int, int]] = []

        while h < m and k < n:
            with timer.section('pivot_search'):
                i_max = h + select_pivot(A[h:, k])

            if A[i_max, k] == 0.0:
                skipped.append((k, h))
                k += 1
                continue

            with timer.section('elimination'):
                if i_max != h:
                    A[[h, i_max]] = A[[i_max, h]]
                    swaps += 1

                # IEEE overflow/nan propagate silently, as in the scalar loop
                with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
                    f = A[h + 1:, k] / A[h, k]
                    A[h + 1:, k] = 0.0
                    A[h + 1:, k + 1:] -= np.outer(f, A[h, k + 1:])

            pivot_columns.append(k)
            h += 1
            k += 1

        timer.stop()

        return build_result(A, swaps, pivot_columns, skipped, timer, self.name)
