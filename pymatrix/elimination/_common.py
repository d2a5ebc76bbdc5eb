"""
Shared helpers for the elimination backends.

Both backends report the same payload, info keys and warnings; only the
inner loops differ.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.elimination.solution import EliminationParams

METHOD = 'gaussian_partial_pivot'


def skipped_column_warning(col: int, row: int) -> str:
    return (
        f"column {col} has no nonzero pivot at or below row {row}; "
        f"column skipped (matrix is rank-deficient)"
    )


def build_result(
    echelon: NDArray[np.float64],
    swaps: int,
    pivot_columns: list[int],
    skipped: list[tuple[int, int]],
    timer: Timer,
    backend_name: str,
) -> Result[EliminationParams]:
    """
    Package a finished reduction.

    Args:
        echelon: Reduced m x n array
        swaps: Row interchanges performed
        pivot_columns: Columns that received a pivot
        skipped: (column, pivot row cursor) for each skipped column
        timer: Stopped timer
        backend_name: Producing backend
    """
    params = EliminationParams(
        echelon=echelon,
        swaps=swaps,
        pivot_columns=tuple(pivot_columns),
        skipped_columns=tuple(col for col, _ in skipped),
    )

    info: dict[str, Any] = {
        'method': METHOD,
        'swaps': swaps,
        'rank': len(pivot_columns),
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend_name,
        warnings=tuple(skipped_column_warning(col, row) for col, row in skipped),
    )
