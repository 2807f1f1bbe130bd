"""
CPU backend for triangularization.

Row elimination without pivoting. Validated against numpy.linalg.det on
matrices whose leading principal minors are nonzero.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.determinant.design import SquareDesign
from pymatrix.determinant.solution import TriangularParams


def eliminate_below(matrix: NDArray[np.floating[Any]]) -> tuple[int, ...]:
    """
    Reduce a square matrix to upper-triangular form in place.

    For each pivot row i, row j > i loses (A[j][i] / A[i][i]) times row i.
    Only columns i..N-1 are updated: entries left of i are already zero.

    No rows are exchanged. An exact-zero pivot makes the coefficient
    infinite or NaN and the remaining rows non-finite; this is reported,
    not prevented.

    Returns:
        Indices of pivot rows whose pivot was exactly zero
    """
    n = matrix.shape[0]
    zero_pivots = []
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for i in range(n - 1):
            if matrix[i, i] == 0:
                zero_pivots.append(i)
            for j in range(i + 1, n):
                coefficient = matrix[j, i] / matrix[i, i]
                matrix[j, i:] -= coefficient * matrix[i, i:]
    return tuple(zero_pivots)


class CPUTriangularBackend:
    """CPU backend: upper-triangular reduction without pivoting."""

    @property
    def name(self) -> str:
        return 'cpu_triangular'

    def solve(self, design: SquareDesign) -> Result[TriangularParams]:
        timer = Timer()
        timer.start()

        with timer.section('copy'):
            working = design.matrix.copy()

        with timer.section('eliminate'):
            zero_pivots = eliminate_below(working)

        with timer.section('diagonal_product'):
            with np.errstate(invalid='ignore', over='ignore'):
                determinant = float(np.prod(np.diag(working)))

        timer.stop()

        warnings_list = [
            f"zero pivot at row {i}; result contains non-finite values"
            for i in zero_pivots
        ]

        return Result(
            params=TriangularParams(
                triangular=working,
                determinant=determinant,
                zero_pivots=zero_pivots,
            ),
            info={
                'method': 'row_elimination',
                'pivoting': 'none',
                'n': design.n,
                'zero_pivots': zero_pivots,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
