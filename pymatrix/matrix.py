"""
Matrix: dense 2D float64 container over a flat row-major buffer.

Element (r, c) lives at position r * cols + c of a 1D numpy array, so
reshape is a pure metadata change and every operation works on one
contiguous buffer.

Ownership:
    - Every Matrix owns its buffer; constructors copy their input and
      accessors that return arrays return copies.
    - get/set/reshape act on self in place (numpy-style container).
    - Arithmetic, dot and elimination never touch their operands and
      always return a new Matrix.

Floating point:
    Arithmetic, dot and frobenius follow IEEE 754 without raising or
    warning: overflow gives inf and invalid operations give nan. The one
    exception is scalar division by zero, which raises DivideByZeroError.

Construction:
    Matrix(rows, cols)                 zero-filled
    Matrix.from_rows([[1, 2], [3]])    ragged rows, right-padded with 0.0
    Matrix.from_array(ndarray)         rectangular 2D array-like
    Matrix.from_flat(buffer, r, c)     flat row-major buffer
    Matrix.eye(n), Matrix.random(r, c)
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import (
    ValidationError,
    DivideByZeroError,
    IncompatibleShapesError,
    ShapeMismatchError,
)
from pymatrix.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_dimension,
    check_scalar,
    check_index,
    check_same_shape,
)

if TYPE_CHECKING:
    from pymatrix.elimination.solution import EliminationSolution
    from pymatrix.elimination.solvers import BackendChoice


Scalar = float | int


class Matrix:
    """
    Dense real matrix backed by a flat, row-major float64 buffer.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        shape: (rows, cols)

    The buffer always holds exactly rows * cols elements.
    """

    __slots__ = ('_data', '_rows', '_cols')

    # Mutable container: not hashable.
    __hash__ = None  # type: ignore[assignment]

    # Make numpy defer to our reflected operators (np.float64(2) * m).
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int):
        """
        Create a zero-filled rows x cols matrix.

        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)

        Raises:
            ValidationError: If a dimension is not a non-negative integer
        """
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._data: NDArray[np.float64] = np.zeros(self._rows * self._cols, dtype=np.float64)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64], rows: int, cols: int) -> Matrix:
        """Internal builder: adopt a fresh flat buffer without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        obj._rows = rows
        obj._cols = cols
        return obj

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[ArrayLike]) -> Matrix:
        """
        Build a Matrix from a possibly ragged sequence of rows.

        The column count is the longest row length across all rows;
        shorter rows are padded on the right with 0.0. An empty
        sequence gives a 0 x 0 matrix and a sequence of empty rows
        gives an R x 0 matrix.

        Args:
            rows: Iterable of 1D numeric sequences

        Returns:
            New Matrix of shape (len(rows), max row length)

        Raises:
            ValidationError: If input is not iterable or holds non-numeric data
            DimensionError: If a row is not one-dimensional
        """
        try:
            row_list = list(rows)
        except TypeError as e:
            raise ValidationError(f"rows: expected an iterable of rows: {e}") from e

        arrays = []
        for i, row in enumerate(row_list):
            arr = check_array(row, f"rows[{i}]")
            check_1d(arr, f"rows[{i}]")
            arrays.append(arr)

        n_rows = len(arrays)
        n_cols = max((arr.size for arr in arrays), default=0)

        data = np.zeros(n_rows * n_cols, dtype=np.float64)
        for i, arr in enumerate(arrays):
            start = i * n_cols
            data[start:start + arr.size] = arr

        return cls._wrap(data, n_rows, n_cols)

    @classmethod
    def from_array(cls, array: Any) -> Matrix:
        """
        Build a Matrix from a rectangular 2D array-like.

        Args:
            array: 2D numpy array, nested rectangular sequence, or any
                object with a .values attribute (e.g. a DataFrame)

        Raises:
            ValidationError: If input cannot be converted to a numeric array
            DimensionError: If input is not 2D
        """
        if hasattr(array, 'values') and not callable(array.values):
            array = array.values

        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        rows, cols = arr.shape
        return cls._wrap(np.ascontiguousarray(arr).reshape(-1), rows, cols)

    @classmethod
    def from_flat(cls, data: ArrayLike, rows: int, cols: int) -> Matrix:
        """
        Build a Matrix from a flat row-major buffer.

        Raises:
            ShapeMismatchError: If len(data) != rows * cols
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
        if arr.size != rows * cols:
            raise ShapeMismatchError((arr.size, 1), (rows, cols))
        return cls._wrap(arr, rows, cols)

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """Identity matrix of size n x n."""
        n = check_dimension(n, 'n')
        return cls._wrap(np.eye(n, dtype=np.float64).reshape(-1), n, n)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        *,
        seed: int | np.random.Generator | None = None,
    ) -> Matrix:
        """
        Matrix of independent uniform draws from [0, 1).

        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)
            seed: Seed or Generator for reproducibility; None draws
                fresh entropy from the OS

        Returns:
            New rows x cols Matrix
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        rng = np.random.default_rng(seed)
        return cls._wrap(rng.random(rows * cols), rows, cols)

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._data.size

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def data(self) -> NDArray[np.float64]:
        """Copy of the flat row-major buffer."""
        return self._data.copy()

    def as_array(self) -> NDArray[np.float64]:
        """New rows x cols float64 array with the matrix contents."""
        return self._data.reshape(self._rows, self._cols).copy()

    def to_list(self) -> list[list[float]]:
        """Nested lists of floats, one list per row."""
        return self.as_array().tolist()

    def copy(self) -> Matrix:
        """Independent copy with its own buffer."""
        return Matrix._wrap(self._data.copy(), self._rows, self._cols)

    def reshape(self, rows: int, cols: int) -> None:
        """
        Reinterpret the buffer with a new shape, in place.

        Only the shape metadata changes; the linear (row-major) order of
        the elements is preserved.

        Raises:
            ShapeMismatchError: If rows * cols differs from the current size
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if rows * cols != self._rows * self._cols:
            raise ShapeMismatchError(self.shape, (rows, cols))
        self._rows = rows
        self._cols = cols

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> float:
        """
        Value at (row, col).

        Raises:
            IndexOutOfBoundsError: If (row, col) is outside the matrix
        """
        r, c = check_index(row, col, self._rows, self._cols)
        return float(self._data[r * self._cols + c])

    def set(self, row: int, col: int, value: Scalar) -> None:
        """
        Store value at (row, col), in place.

        Raises:
            IndexOutOfBoundsError: If (row, col) is outside the matrix
            ValidationError: If value is not a real number
        """
        r, c = check_index(row, col, self._rows, self._cols)
        self._data[r * self._cols + c] = check_scalar(value, 'value')

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"index: expected a (row, col) pair, got {key!r}")
        return key

    # ------------------------------------------------------------------
    # Elementwise and scalar arithmetic
    # ------------------------------------------------------------------

    def _operand(self, other: Matrix | Scalar, operation: str) -> NDArray[np.float64] | float:
        """Right-hand side buffer or scalar, after shape/type checks."""
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, operation)
            return other._data
        return check_scalar(other, 'other')

    def add(self, other: Matrix | Scalar) -> Matrix:
        """
        Elementwise sum with a matrix of the same shape, or add a scalar
        to every element.

        Raises:
            DimensionMismatchError: If other is a Matrix of a different shape
            ValidationError: If other is neither a Matrix nor a real scalar
        """
        rhs = self._operand(other, 'add')
        with np.errstate(over='ignore', invalid='ignore'):
            out = self._data + rhs
        return Matrix._wrap(out, self._rows, self._cols)

    def sub(self, other: Matrix | Scalar) -> Matrix:
        """Elementwise difference (matrix or scalar). See add()."""
        rhs = self._operand(other, 'sub')
        with np.errstate(over='ignore', invalid='ignore'):
            out = self._data - rhs
        return Matrix._wrap(out, self._rows, self._cols)

    def mul(self, other: Matrix | Scalar) -> Matrix:
        """Elementwise (Hadamard) product or scaling. See add()."""
        rhs = self._operand(other, 'mul')
        with np.errstate(over='ignore', invalid='ignore'):
            out = self._data * rhs
        return Matrix._wrap(out, self._rows, self._cols)

    def div(self, other: Matrix | Scalar) -> Matrix:
        """
        Elementwise quotient.

        Matrix divisors follow IEEE semantics: zero elements produce
        inf or nan, never an error. A scalar divisor of exactly zero
        is rejected.

        Raises:
            DimensionMismatchError: If other is a Matrix of a different shape
            DivideByZeroError: If other is the scalar 0.0
        """
        rhs = self._operand(other, 'div')
        if not isinstance(rhs, np.ndarray) and rhs == 0.0:
            raise DivideByZeroError('div')
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            out = self._data / rhs
        return Matrix._wrap(out, self._rows, self._cols)

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, (Matrix, numbers.Real))

    def __add__(self, other: Matrix | Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix | Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        lhs = check_scalar(other, 'other')
        with np.errstate(over='ignore', invalid='ignore'):
            out = lhs - self._data
        return Matrix._wrap(out, self._rows, self._cols)

    def __mul__(self, other: Matrix | Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Matrix | Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Scalar) -> Matrix:
        if not self._is_operand(other):
            return NotImplemented
        lhs = check_scalar(other, 'other')
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            out = lhs / self._data
        return Matrix._wrap(out, self._rows, self._cols)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data, self._rows, self._cols)

    def __pos__(self) -> Matrix:
        return self.copy()

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def dot(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Args:
            other: Matrix with other.rows == self.cols

        Returns:
            New (self.rows, other.cols) Matrix; an inner dimension of 0
            gives a zero matrix

        Each cell is the float64 sum of products as computed by numpy
        (BLAS). Its summation order may differ from a left-to-right scalar
        loop, so results can differ from one in the last bits.

        Raises:
            IncompatibleShapesError: If self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected a Matrix, got {type(other).__name__}"
            )
        if self._cols != other._rows:
            raise IncompatibleShapesError(self.shape, other.shape)

        left = self._data.reshape(self._rows, self._cols)
        right = other._data.reshape(other._rows, other._cols)
        with np.errstate(over='ignore', invalid='ignore'):
            product = left @ right
        return Matrix._wrap(product.reshape(-1), self._rows, other._cols)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def frobenius(self) -> float:
        """Frobenius norm sqrt(sum of squared elements); 0.0 when empty."""
        with np.errstate(over='ignore'):
            return float(np.sqrt(np.sum(self._data * self._data)))

    # ------------------------------------------------------------------
    # Elimination-based decompositions
    # ------------------------------------------------------------------

    def gaussian_elimination(self, *, backend: BackendChoice = 'cpu') -> EliminationSolution:
        """
        Row-echelon form via Gaussian elimination with partial pivoting.

        The matrix itself is not modified. See
        pymatrix.elimination.gaussian_elimination.
        """
        from pymatrix.elimination.solvers import gaussian_elimination
        return gaussian_elimination(self, backend=backend)

    def determinant(self, *, backend: BackendChoice = 'cpu') -> float:
        """Determinant of a square matrix. See pymatrix.elimination.determinant."""
        from pymatrix.elimination.solvers import determinant
        return determinant(self, backend=backend)

    def slogdet(self, *, backend: BackendChoice = 'cpu') -> tuple[float, float]:
        """(sign, log|det|) of a square matrix. See pymatrix.elimination.slogdet."""
        from pymatrix.elimination.solvers import slogdet
        return slogdet(self, backend=backend)

    def rank(self, *, backend: BackendChoice = 'cpu') -> int:
        """Number of pivots found by elimination."""
        from pymatrix.elimination.solvers import rank
        return rank(self, backend=backend)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Matrix,
        rtol: float = CPU_FP64.rtol,
        atol: float = CPU_FP64.atol,
    ) -> bool:
        """
        True if shapes match and all elements agree within tolerance.

        Uses |a - b| <= atol + rtol * |b|, as numpy.allclose.
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __str__(self) -> str:
        lines = ["["]
        for r in range(self._rows):
            row = self._data[r * self._cols:(r + 1) * self._cols]
            lines.append(" [" + " ".join(repr(float(v)) for v in row) + "]")
        lines.append("]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"
