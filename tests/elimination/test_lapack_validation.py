"""
Validation against LAPACK.

Compares pymatrix determinants, slogdet and rank with scipy.linalg and
numpy.linalg on random well-conditioned matrices, using the CPU_FP64
tolerance tier. Results differ only by floating-point summation order.

Run:
    pytest tests/elimination/test_lapack_validation.py -v
"""

import numpy as np
import pytest
import scipy.linalg

from pymatrix import Matrix, determinant, slogdet, rank
from pymatrix.core.compute.tolerances import CPU_FP64, select_tolerance


SIZES = [1, 2, 3, 5, 10, 25]


def _well_conditioned(rng, n):
    """Random n x n matrix with a boosted diagonal."""
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.mark.parametrize("backend", ['cpu', 'reference'])
class TestLapackValidation:

    @pytest.mark.parametrize("n", SIZES)
    def test_determinant(self, rng, backend, n):
        data = _well_conditioned(rng, n)
        tol = select_tolerance(backend)
        assert determinant(data, backend=backend) == pytest.approx(
            scipy.linalg.det(data), rel=tol.rtol, abs=tol.atol
        )

    @pytest.mark.parametrize("n", SIZES)
    def test_slogdet(self, rng, backend, n):
        data = _well_conditioned(rng, n)
        sign, logabsdet = slogdet(data, backend=backend)
        np_sign, np_logabsdet = np.linalg.slogdet(data)
        assert sign == np_sign
        assert logabsdet == pytest.approx(np_logabsdet, rel=CPU_FP64.rtol, abs=CPU_FP64.atol)

    def test_general_random(self, rng, backend):
        data = rng.standard_normal((8, 8))
        assert determinant(data, backend=backend) == pytest.approx(
            scipy.linalg.det(data), rel=CPU_FP64.rtol, abs=CPU_FP64.atol
        )

    def test_rank(self, rng, backend):
        data = rng.standard_normal((6, 4))
        assert rank(data, backend=backend) == np.linalg.matrix_rank(data)

    def test_random_generator_matrix(self, backend):
        m = Matrix.random(12, 12, seed=11)
        assert m.determinant(backend=backend) == pytest.approx(
            scipy.linalg.det(m.as_array()), rel=CPU_FP64.rtol, abs=CPU_FP64.atol
        )
