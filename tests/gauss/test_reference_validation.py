"""
Validation of the elimination engines against LAPACK (via scipy/numpy).

The raw (unrounded) last column of the reduced matrix is compared with
scipy.linalg.solve, and determinants with numpy.linalg.det, using the
tolerance tier each backend is expected to meet.
"""

import numpy as np
import pytest

scipy_linalg = pytest.importorskip("scipy.linalg")

from pymatrix.core.compute.tolerances import CPU_FP64, DISPLAY, select_tolerance
from pymatrix.determinant import det
from pymatrix.gauss import solve_system
from pymatrix.core.datasource import MatrixSource


BACKENDS = ['cpu_inrow', 'cpu_partial']


@pytest.mark.parametrize("backend", BACKENDS)
class TestAgainstScipy:

    def test_diagonally_dominant(self, backend, diagonally_dominant_system):
        A, b, _ = diagonally_dominant_system
        result = solve_system(A, b, backend=backend)
        reference = scipy_linalg.solve(A, b)
        tol = select_tolerance(result.backend_name)
        np.testing.assert_allclose(
            result.reduced_matrix[:, -1], reference, rtol=tol.rtol, atol=tol.atol,
        )

    def test_rounded_solution(self, backend, diagonally_dominant_system):
        A, b, _ = diagonally_dominant_system
        result = solve_system(A, b, backend=backend)
        reference = scipy_linalg.solve(A, b)
        np.testing.assert_allclose(
            result.solution, reference, rtol=DISPLAY.rtol, atol=DISPLAY.atol + 1e-9,
        )

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_generated_systems(self, backend, seed):
        # Coefficient block plus a right-hand side, as the console generates them
        M = MatrixSource.random(5, 6, rng=seed).matrix
        result = solve_system(M[:, :-1], M[:, -1], backend=backend)
        reference = scipy_linalg.solve(M[:, :-1], M[:, -1])
        tol = select_tolerance(result.backend_name)
        np.testing.assert_allclose(
            result.reduced_matrix[:, -1], reference, rtol=tol.rtol, atol=tol.atol,
        )


class TestSelectTolerance:

    def test_tiers(self):
        assert select_tolerance('cpu_partial') is CPU_FP64
        assert select_tolerance('cpu_inrow').rtol > CPU_FP64.rtol


class TestDeterminantAgainstNumpy:

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_generated_matrices(self, seed):
        A = MatrixSource.random(6, 6, rng=seed).matrix
        tol = select_tolerance('cpu_triangular')
        np.testing.assert_allclose(det(A), np.linalg.det(A), rtol=tol.rtol, atol=tol.atol)

    def test_matches_scipy(self, envelope_matrix):
        np.testing.assert_allclose(
            det(envelope_matrix), scipy_linalg.det(envelope_matrix), rtol=1e-7,
        )
