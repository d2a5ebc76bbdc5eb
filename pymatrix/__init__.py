"""
PyMatrix: a small dense-matrix value type for Python.

A float64 matrix stored as a flat row-major buffer, with elementwise and
scalar arithmetic, matrix product, Frobenius norm, and determinant via
Gaussian elimination with partial pivoting.

Submodules:
    matrix: The Matrix type
    elimination: Gaussian elimination, determinant, slogdet, rank
    core: Exceptions, validation, result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix
from pymatrix.elimination import (
    gaussian_elimination,
    determinant,
    slogdet,
    rank,
    EliminationSolution,
)
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NumericalError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
    IncompatibleShapesError,
    ShapeMismatchError,
    NotSquareError,
    EmptyMatrixError,
    DivideByZeroError,
)

__all__ = [
    "__version__",
    "Matrix",
    "gaussian_elimination",
    "determinant",
    "slogdet",
    "rank",
    "EliminationSolution",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "IncompatibleShapesError",
    "ShapeMismatchError",
    "NotSquareError",
    "EmptyMatrixError",
    "DivideByZeroError",
]
