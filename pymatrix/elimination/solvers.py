"""
Solver dispatch for Gaussian elimination.

Provides gaussian_elimination() as the core entry point, plus the
quantities derived from a single reduction: determinant(), slogdet()
and rank().
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.core.validation import check_square
from pymatrix.matrix import Matrix
from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import EliminationParams, EliminationSolution
from pymatrix.elimination.backends.cpu import CPUEliminationBackend
from pymatrix.elimination.backends.reference import ReferenceEliminationBackend


BackendChoice = Literal['cpu', 'reference']


def _ensure_design(
    data: Matrix | EliminationDesign | Any,
    *,
    require_square: bool = False,
) -> EliminationDesign:
    """Convert a Matrix or raw 2D array to EliminationDesign if needed."""
    if isinstance(data, EliminationDesign):
        if require_square:
            check_square(data.m, data.n)
        return data
    if isinstance(data, Matrix):
        return EliminationDesign.from_matrix(data, require_square=require_square)
    return EliminationDesign.from_array(data, require_square=require_square)


def _get_backend(backend: BackendChoice) -> Backend[EliminationDesign, EliminationParams]:
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUEliminationBackend()
    if backend == 'reference':
        return ReferenceEliminationBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Must be 'cpu' or 'reference'."
    )


def gaussian_elimination(
    data: Matrix | EliminationDesign | Any,
    *,
    backend: BackendChoice = 'cpu',
) -> EliminationSolution:
    """
    Reduce a matrix to row-echelon form with partial pivoting.

    The input is copied; it is never modified.

    Parameters
    ----------
    data : Matrix, EliminationDesign or 2D array-like
        Matrix to reduce. Any shape with at least one element.
    backend : str
        'cpu' (row-vectorized, default) or 'reference' (scalar loops).
        Both produce identical results.

    Returns
    -------
    EliminationSolution with echelon form, swap count, pivot columns.

    Raises
    ------
    EmptyMatrixError
        If the matrix has no elements.
    """
    design = _ensure_design(data)
    be = _get_backend(backend)
    result = be.solve(design)
    return EliminationSolution(_result=result, _design=design)


def determinant(
    data: Matrix | EliminationDesign | Any,
    *,
    backend: BackendChoice = 'cpu',
) -> float:
    """
    Determinant via Gaussian elimination.

    Product of the echelon diagonal, negated when the number of row
    swaps is odd. Singular matrices give 0 (a skipped column leaves a
    zero on the diagonal).

    Parameters
    ----------
    data : Matrix, EliminationDesign or 2D array-like
        Square matrix.
    backend : str
        'cpu' or 'reference'.

    Raises
    ------
    NotSquareError
        If rows != cols.
    EmptyMatrixError
        If the matrix is 0 x 0.
    """
    design = _ensure_design(data, require_square=True)
    solution = gaussian_elimination(design, backend=backend)

    result = 1.0
    for value in solution.diagonal:
        result *= float(value)

    if solution.swaps % 2 != 0:
        result = -result
    return result


def slogdet(
    data: Matrix | EliminationDesign | Any,
    *,
    backend: BackendChoice = 'cpu',
) -> tuple[float, float]:
    """
    Sign and natural log of the absolute determinant.

    Same convention as numpy.linalg.slogdet: det = sign * exp(logabsdet),
    and a singular matrix gives (0.0, -inf). Useful when the determinant
    itself would overflow or underflow.

    Raises
    ------
    NotSquareError
        If rows != cols.
    EmptyMatrixError
        If the matrix is 0 x 0.
    """
    design = _ensure_design(data, require_square=True)
    solution = gaussian_elimination(design, backend=backend)
    diag = solution.diagonal

    if np.any(diag == 0.0):
        return 0.0, float('-inf')

    sign = solution.sign * float(np.prod(np.sign(diag)))
    logabsdet = float(np.sum(np.log(np.abs(diag))))
    return sign, logabsdet


def rank(
    data: Matrix | EliminationDesign | Any,
    *,
    backend: BackendChoice = 'cpu',
) -> int:
    """
    Number of pivots found by Gaussian elimination.

    Pivots are detected with an exact-zero test, so round-off can make a
    numerically rank-deficient matrix report full rank. Exact for
    matrices whose elimination is exact (e.g. small integers).

    Raises
    ------
    EmptyMatrixError
        If the matrix has no elements.
    """
    return gaussian_elimination(data, backend=backend).rank
