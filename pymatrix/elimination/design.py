"""
EliminationDesign: validated working input for Gaussian elimination.

Holds an owned float64 copy of the matrix to reduce. Backends never
modify the design; each takes its own working copy via working_copy().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.validation import check_nonempty, check_square
from pymatrix.matrix import Matrix


@dataclass(frozen=True)
class EliminationDesign:
    """
    Design for Gaussian elimination.

    Wraps an m x n matrix with at least one element. Immutable after
    construction.

    Construction:
        EliminationDesign.from_matrix(matrix)
        EliminationDesign.from_matrix(matrix, require_square=True)
        EliminationDesign.from_array(array)
    """
    _data: NDArray[np.float64]
    _m: int
    _n: int

    @classmethod
    def from_matrix(cls, matrix: Matrix, *, require_square: bool = False) -> EliminationDesign:
        """
        Build a design from a Matrix.

        Parameters
        ----------
        matrix : Matrix
            Matrix to reduce. It is copied; later changes to it do not
            affect the design.
        require_square : bool
            If True, reject non-square input before the emptiness check
            (determinant-style callers).

        Raises
        ------
        NotSquareError
            If require_square and rows != cols.
        EmptyMatrixError
            If the matrix has no elements.
        """
        rows, cols = matrix.shape
        if require_square:
            check_square(rows, cols)
        check_nonempty(rows, cols)
        return cls(_data=matrix.as_array(), _m=rows, _n=cols)

    @classmethod
    def from_array(cls, data: Any, *, require_square: bool = False) -> EliminationDesign:
        """Build a design from a rectangular 2D array-like."""
        return cls.from_matrix(Matrix.from_array(data), require_square=require_square)

    def working_copy(self) -> NDArray[np.float64]:
        """Fresh m x n float64 array for a backend to reduce in place."""
        return self._data.copy()

    @property
    def m(self) -> int:
        """Number of rows."""
        return self._m

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._m, self._n)

    @property
    def is_square(self) -> bool:
        return self._m == self._n

    def __repr__(self) -> str:
        return f"EliminationDesign(m={self._m}, n={self._n})"
