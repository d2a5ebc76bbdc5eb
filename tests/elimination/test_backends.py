"""
Backend tests: the row-vectorized CPU backend must reproduce the scalar
reference backend bit for bit.
"""

import numpy as np
import pytest

from pymatrix import Matrix, gaussian_elimination, determinant
from pymatrix.core.protocols import Backend
from pymatrix.elimination import EliminationDesign
from pymatrix.elimination.backends import CPUEliminationBackend, ReferenceEliminationBackend
from pymatrix.elimination.backends.cpu import select_pivot


def _assert_identical(data):
    cpu = gaussian_elimination(data, backend='cpu')
    ref = gaussian_elimination(data, backend='reference')
    np.testing.assert_array_equal(cpu.echelon.as_array(), ref.echelon.as_array())
    assert cpu.swaps == ref.swaps
    assert cpu.pivot_columns == ref.pivot_columns
    assert cpu.skipped_columns == ref.skipped_columns
    assert cpu.warnings == ref.warnings


class TestProtocol:

    @pytest.mark.parametrize("cls", [CPUEliminationBackend, ReferenceEliminationBackend])
    def test_satisfies_backend_protocol(self, cls):
        assert isinstance(cls(), Backend)

    def test_names(self):
        assert CPUEliminationBackend().name == 'cpu'
        assert ReferenceEliminationBackend().name == 'reference'

    def test_solve_directly(self, square2):
        design = EliminationDesign.from_matrix(square2)
        result = ReferenceEliminationBackend().solve(design)
        assert result.params.swaps == 1
        assert result.backend_name == 'reference'

    def test_design_not_consumed(self, square2):
        design = EliminationDesign.from_matrix(square2)
        first = CPUEliminationBackend().solve(design)
        second = CPUEliminationBackend().solve(design)
        np.testing.assert_array_equal(first.params.echelon, second.params.echelon)


class TestCPUMatchesReference:

    @pytest.mark.parametrize("shape", [(1, 1), (2, 2), (5, 5), (8, 8), (4, 7), (7, 4)])
    def test_random_normal(self, rng, shape):
        _assert_identical(rng.standard_normal(shape))

    def test_random_uniform(self):
        _assert_identical(Matrix.random(10, 10, seed=3))

    def test_integer_entries_with_ties(self, rng):
        _assert_identical(rng.integers(-3, 4, size=(9, 9)).astype(float))

    def test_fixtures(self, square2, ragged3, square4, rank_deficient3):
        for m in (square2, ragged3, square4, rank_deficient3):
            _assert_identical(m)

    def test_zero_columns(self):
        _assert_identical(Matrix.from_rows([[0, 0, 1], [0, 0, 2], [0, 3, 4]]))

    def test_determinant_equal(self, rng):
        data = rng.standard_normal((6, 6))
        assert determinant(data, backend='cpu') == determinant(data, backend='reference')

    @pytest.mark.filterwarnings("error")
    @pytest.mark.parametrize("rows", [
        [[1, 1e308], [1, -1e308]],
        [[1, np.inf], [1, np.inf]],
    ])
    def test_overflow_and_invalid_are_silent(self, rows):
        data = np.array(rows, dtype=float)
        _assert_identical(data)
        np.testing.assert_equal(
            determinant(data, backend='cpu'), determinant(data, backend='reference')
        )

    def test_overflow_reaches_echelon(self):
        sol = gaussian_elimination(np.array([[1, 1e308], [1, -1e308]]))
        assert sol.echelon.get(1, 1) == -np.inf

    def test_nan_and_inf(self):
        data = np.array([[1.0, np.nan], [np.inf, 2.0]])
        cpu = gaussian_elimination(data, backend='cpu')
        ref = gaussian_elimination(data, backend='reference')
        np.testing.assert_array_equal(cpu.echelon.as_array(), ref.echelon.as_array())
        assert cpu.swaps == ref.swaps


class TestSelectPivot:

    def test_largest_magnitude(self):
        assert select_pivot(np.array([1.0, -5.0, 3.0])) == 1

    def test_first_of_ties(self):
        assert select_pivot(np.array([2.0, -2.0, 2.0])) == 0
        assert select_pivot(np.array([0.0, 4.0, -4.0])) == 1

    def test_all_zero(self):
        assert select_pivot(np.zeros(3)) == 0

    def test_nan_never_wins_after_start(self):
        assert select_pivot(np.array([1.0, np.nan, 0.5])) == 0

    def test_nan_at_start_kept(self):
        assert select_pivot(np.array([np.nan, 3.0])) == 0
