"""
Gaussian elimination solution types.

Contains the parameter payload and the user-facing solution wrapper. The
row-swap count lives here, bundled with the echelon form it belongs to,
rather than on Matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.elimination.design import EliminationDesign


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for Gaussian elimination.

    Attributes:
        echelon: Row-echelon form, shape (m, n)
        swaps: Number of row interchanges performed
        pivot_columns: Columns in which a pivot was placed, in order
        skipped_columns: Columns passed over because every candidate
            pivot was exactly zero
    """
    echelon: NDArray[np.float64]
    swaps: int
    pivot_columns: tuple[int, ...]
    skipped_columns: tuple[int, ...]


@dataclass
class EliminationSolution:
    """
    User-facing Gaussian elimination results.

    Wraps Result[EliminationParams] and provides convenient accessors.
    """
    _result: Result[EliminationParams]
    _design: 'EliminationDesign'

    @property
    def echelon(self) -> Matrix:
        """Row-echelon form as a new Matrix."""
        return Matrix.from_array(self._result.params.echelon)

    @property
    def swaps(self) -> int:
        """Number of row interchanges performed during elimination."""
        return self._result.params.swaps

    @property
    def sign(self) -> float:
        """Permutation sign: -1.0 for an odd number of swaps, else 1.0."""
        return -1.0 if self.swaps % 2 else 1.0

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def skipped_columns(self) -> tuple[int, ...]:
        return self._result.params.skipped_columns

    @property
    def rank(self) -> int:
        """Number of pivots (exact-zero test, no tolerance)."""
        return len(self._result.params.pivot_columns)

    @property
    def diagonal(self) -> NDArray[np.float64]:
        """Main diagonal of the echelon form, length min(m, n)."""
        return np.diag(self._result.params.echelon).copy()

    @property
    def shape(self) -> tuple[int, int]:
        return self._design.shape

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short report of the reduction."""
        m, n = self.shape
        lines = [
            "Gaussian elimination (partial pivoting)",
            f"  shape:           {m} x {n}",
            f"  backend:         {self.backend_name}",
            f"  rank:            {self.rank}",
            f"  row swaps:       {self.swaps}",
            f"  pivot columns:   {list(self.pivot_columns)}",
        ]
        if self.skipped_columns:
            lines.append(f"  skipped columns: {list(self.skipped_columns)}")
        lines.append("Echelon form:")
        lines.append(str(self.echelon))
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self.shape
        return (
            f"EliminationSolution(m={m}, n={n}, rank={self.rank}, "
            f"swaps={self.swaps}, backend={self.backend_name!r})"
        )
