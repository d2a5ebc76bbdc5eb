"""
Reference backend for Gaussian elimination.

A literal scalar implementation over the flat row-major buffer
(element (i, j) at i * n + j), using Python floats. Slow, but every
step maps one-to-one onto the textbook algorithm; the CPU backend is
validated against it.
"""

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import EliminationParams
from pymatrix.elimination._common import build_result


class ReferenceEliminationBackend:
    """
    Scalar triple-loop backend.

    Implements the Backend protocol for EliminationDesign -> EliminationParams.
    """

    @property
    def name(self) -> str:
        return 'reference'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        """Reduce to row-echelon form with partial pivoting, one element at a time."""
        timer = Timer()
        timer.start()

        m, n = design.m, design.n
        a = design.working_copy().reshape(-1).tolist()

        h = 0
        k = 0
        swaps = 0
        pivot_columns: list[int] = []
        skipped: list[tuple[int, int]] = []

        while h < m and k < n:
            with timer.section('pivot_search'):
                i_max = h
                for i in range(h + 1, m):
                    if abs(a[i * n + k]) > abs(a[i_max * n + k]):
                        i_max = i

            if a[i_max * n + k] == 0.0:
                skipped.append((k, h))
                k += 1
                continue

            with timer.section('elimination'):
                if i_max != h:
                    for j in range(n):
                        a[h * n + j], a[i_max * n + j] = a[i_max * n + j], a[h * n + j]
                    swaps += 1

                for i in range(h + 1, m):
                    f = a[i * n + k] / a[h * n + k]
                    a[i * n + k] = 0.0
                    for j in range(k + 1, n):
                        a[i * n + j] = a[i * n + j] - a[h * n + j] * f

            pivot_columns.append(k)
            h += 1
            k += 1

        timer.stop()

        echelon = np.array(a, dtype=np.float64).reshape(m, n)
        return build_result(echelon, swaps, pivot_columns, skipped, timer, self.name)
