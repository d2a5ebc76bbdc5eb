"""
Tests for bounds-checked element access.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import IndexOutOfBoundsError, ValidationError


class TestGet:

    def test_values(self, square2):
        assert square2.get(0, 0) == 1.0
        assert square2.get(0, 1) == 2.0
        assert square2.get(1, 1) == 4.0

    def test_returns_python_float(self, square2):
        assert type(square2.get(0, 0)) is float

    def test_out_of_bounds(self, square2):
        with pytest.raises(IndexOutOfBoundsError, match="Outside bounds for row 2 and col 2") as exc_info:
            square2.get(2, 2)
        err = exc_info.value
        assert (err.row, err.col) == (2, 2)
        assert (err.rows, err.cols) == (2, 2)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1)])
    def test_negative_index_is_out_of_bounds(self, square2, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            square2.get(row, col)

    def test_numpy_integer_index(self, square2):
        assert square2.get(np.int64(1), np.int32(0)) == 3.0


class TestSet:

    def test_set_then_get(self, square2):
        square2.set(1, 1, 3)
        assert square2.get(1, 1) == 3.0
        square2.set(0, 1, 5)
        assert square2.get(0, 1) == 5.0

    def test_set_then_get_every_cell(self, rng):
        m = Matrix(3, 4)
        values = rng.standard_normal((3, 4))
        for r in range(3):
            for c in range(4):
                m.set(r, c, values[r, c])
        for r in range(3):
            for c in range(4):
                assert m.get(r, c) == values[r, c]

    def test_set_writes_row_major_position(self):
        m = Matrix(2, 3)
        m.set(1, 2, 7.0)
        assert m.data[1 * 3 + 2] == 7.0

    def test_out_of_bounds(self, square2):
        with pytest.raises(IndexOutOfBoundsError, match="Outside bounds for row 2 and col 2"):
            square2.set(2, 2, 1)

    def test_out_of_bounds_leaves_matrix_untouched(self, square2):
        with pytest.raises(IndexOutOfBoundsError):
            square2.set(0, 5, 1)
        np.testing.assert_array_equal(square2.data, [1, 2, 3, 4])

    def test_non_numeric_value(self, square2):
        with pytest.raises(ValidationError, match="value"):
            square2.set(0, 0, "x")

    def test_reshape_moves_bounds(self, square2):
        square2.reshape(4, 1)
        assert square2.get(3, 0) == 4.0
        with pytest.raises(IndexOutOfBoundsError):
            square2.get(0, 1)


class TestItemSyntax:

    def test_getitem(self, square2):
        assert square2[1, 0] == 3.0

    def test_setitem(self, square2):
        square2[0, 0] = -2.5
        assert square2.get(0, 0) == -2.5

    def test_getitem_out_of_bounds(self, square2):
        with pytest.raises(IndexOutOfBoundsError):
            square2[2, 0]

    @pytest.mark.parametrize("key", [0, (0,), (0, 0, 0), slice(0, 1)])
    def test_key_must_be_pair(self, square2, key):
        with pytest.raises(ValidationError, match="pair"):
            square2[key]
