"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
Matrix type and the elimination subpackage.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.result import Result
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
    # Result
    "Result",
    # Exceptions
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
