"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each concrete error kind carries its diagnostic
context as attributes and a class-level ``kind`` tag, so callers can
branch on the failure without parsing messages:

    try:
        m.get(5, 0)
    except IndexOutOfBoundsError as e:
        print(e.row, e.rows)

    match err:
        case NotSquareError(rows=r, cols=c):
            ...

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

Shape = tuple[int, int]


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    kind: str = 'pymatrix_error'


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = 'validation'


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple matrices have inconsistent shapes.
    """
    kind = 'dimension'


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    kind = 'numerical'


class IndexOutOfBoundsError(DimensionError):
    """
    Element coordinates fall outside the matrix.

    Attributes:
        row: Requested row index
        col: Requested column index
        rows: Number of rows of the matrix
        cols: Number of columns of the matrix
    """
    kind = 'index_out_of_bounds'
    __match_args__ = ('row', 'col', 'rows', 'cols')

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"Outside bounds for row {row} and col {col}: "
            f"matrix shape is ({rows}, {cols})"
        )
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class DimensionMismatchError(DimensionError):
    """
    Elementwise operation on matrices of different shapes.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Name of the elementwise operation ('add', 'sub', ...)
    """
    kind = 'dimension_mismatch'
    __match_args__ = ('left_shape', 'right_shape', 'operation')

    def __init__(
        self,
        left_shape: Shape,
        right_shape: Shape,
        operation: str | None = None,
    ):
        op = f"{operation}: " if operation else ""
        super().__init__(
            f"{op}the matrices must have the same shape, "
            f"got {left_shape} and {right_shape}"
        )
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class IncompatibleShapesError(DimensionError):
    """
    Matrix product with mismatched inner dimensions.

    Attributes:
        left_shape: Shape of the left factor
        right_shape: Shape of the right factor
    """
    kind = 'incompatible_shapes'
    __match_args__ = ('left_shape', 'right_shape')

    def __init__(self, left_shape: Shape, right_shape: Shape):
        super().__init__(
            f"Incompatible shapes for matrix product: {left_shape} @ {right_shape} "
            f"(inner dimensions {left_shape[1]} != {right_shape[0]})"
        )
        self.left_shape = left_shape
        self.right_shape = right_shape


class ShapeMismatchError(DimensionError):
    """
    Reshape or flat construction with the wrong number of elements.

    Attributes:
        shape: Current shape (or element count as (n, 1) for flat input)
        requested_shape: Requested shape
    """
    kind = 'shape_mismatch'
    __match_args__ = ('shape', 'requested_shape')

    def __init__(self, shape: Shape, requested_shape: Shape):
        super().__init__(
            f"{shape[0]} x {shape[1]} matrix can't be reshaped to "
            f"{requested_shape[0]} x {requested_shape[1]}"
        )
        self.shape = shape
        self.requested_shape = requested_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        rows: Number of rows
        cols: Number of columns
    """
    kind = 'not_square'
    __match_args__ = ('rows', 'cols')

    def __init__(self, rows: int, cols: int, operation: str = 'determinant'):
        super().__init__(
            f"{operation}: it has to be a square matrix, got shape ({rows}, {cols})"
        )
        self.rows = rows
        self.cols = cols


class EmptyMatrixError(DimensionError):
    """
    Operation requires at least one element.

    Attributes:
        shape: Shape of the empty matrix
    """
    kind = 'empty_matrix'
    __match_args__ = ('shape',)

    def __init__(self, shape: Shape):
        super().__init__(f"Empty matrix: shape {shape} has no elements")
        self.shape = shape


class DivideByZeroError(NumericalError):
    """
    Scalar division by exactly zero.

    Elementwise matrix division follows IEEE semantics and never
    raises this; only the scalar form does.

    Attributes:
        operation: Name of the operation that attempted the division
    """
    kind = 'divide_by_zero'
    __match_args__ = ('operation',)

    def __init__(self, operation: str = 'div'):
        super().__init__(f"{operation}: Division by zero")
        self.operation = operation
