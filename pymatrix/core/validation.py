"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
    NotSquareError,
    EmptyMatrixError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Object dtype is
    accepted only when every element is a real number (Python ints beyond
    int64 land there); otherwise it indicates mixed types or non-numeric
    data and is rejected, as are non-numeric dtypes. Complex input is rejected:
    matrices hold real values only.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        result = _object_to_float(result, name)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return np.array(result, dtype=np.float64)


def _object_to_float(result: NDArray[Any], name: str) -> NDArray[np.float64]:
    """
    Float64 copy of an object array whose elements are all real numbers.

    Python ints beyond the int64 range land in object arrays; they are
    accepted as long as they fit in float64.
    """
    for value in result.ravel():
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
    try:
        return result.astype(np.float64)
    except OverflowError as e:
        raise ValidationError(f"{name}: value out of float64 range: {e}") from e


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension (row or column count).

    Args:
        value: Candidate dimension; any integral type is accepted
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected a non-negative integer, got bool {value!r}")
    try:
        n = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        ) from e
    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")
    return n


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar operand.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Returns:
        The scalar as a Python float

    Raises:
        ValidationError: If value is not a real number (bools rejected) or
            does not fit in float64
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(f"{name}: value out of float64 range: {e}") from e


def check_index(row: Any, col: Any, rows: int, cols: int) -> tuple[int, int]:
    """
    Verify (row, col) addresses an element of a rows x cols matrix.

    Negative indices are out of bounds; there is no wrap-around.

    Returns:
        (row, col) as plain ints

    Raises:
        ValidationError: If an index is not an integer
        IndexOutOfBoundsError: If either coordinate is outside the shape
    """
    if isinstance(row, (bool, np.bool_)) or isinstance(col, (bool, np.bool_)):
        raise ValidationError(f"index: expected integers, got ({row!r}, {col!r})")
    try:
        r = operator.index(row)
        c = operator.index(col)
    except TypeError as e:
        raise ValidationError(f"index: expected integers, got ({row!r}, {col!r})") from e

    if r < 0 or r >= rows or c < 0 or c >= cols:
        raise IndexOutOfBoundsError(r, c, rows, cols)
    return r, c


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation share a shape.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(left, right, operation)


def check_square(rows: int, cols: int, operation: str = 'determinant') -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if rows != cols:
        raise NotSquareError(rows, cols, operation)


def check_nonempty(rows: int, cols: int) -> None:
    """
    Verify a matrix has at least one element.

    Raises:
        EmptyMatrixError: If rows * cols == 0
    """
    if rows * cols == 0:
        raise EmptyMatrixError((rows, cols))
