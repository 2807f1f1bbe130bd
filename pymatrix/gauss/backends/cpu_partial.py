"""
CPU Gauss-Jordan backend with partial pivoting.

For each column the row (at or below the diagonal) with the largest
magnitude entry is swapped into place before normalizing and clearing
the column in every other row. Handles systems whose diagonal has zeros
as long as the coefficient matrix is nonsingular.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.precision import round_display
from pymatrix.gauss.design import AugmentedDesign
from pymatrix.gauss.solution import GaussParams
from pymatrix.gauss._common import zero_pivot_rows, zero_pivot_warnings, raise_if_singular


def gauss_jordan(
    working: NDArray[np.floating[Any]],
) -> tuple[tuple[float, ...], tuple[int | None, ...], tuple[tuple[int, int], ...]]:
    """
    Reduce an augmented matrix in place to [I | x].

    A column whose best pivot is exactly zero is left as it is.

    Returns:
        (pivot values, pivot column per row or None when skipped,
        row swaps performed as (i, p) pairs)
    """
    n = working.shape[0]
    pivots = []
    pivot_columns = []
    swaps = []

    for i in range(n):
        p = i + int(np.argmax(np.abs(working[i:, i])))
        pivot = float(working[p, i])
        pivots.append(pivot)
        if pivot == 0:
            pivot_columns.append(None)
            continue

        if p != i:
            working[[i, p], :] = working[[p, i], :]
            swaps.append((i, p))

        working[i, :] /= pivot
        pivot_columns.append(i)

        for k in range(n):
            if k != i:
                working[k, :] -= working[k, i] * working[i, :]

    return tuple(pivots), tuple(pivot_columns), tuple(swaps)


class CPUPartialPivotGaussBackend:
    """
    Gauss-Jordan elimination with partial (row) pivoting.

    Args:
        check_singular: Raise SingularMatrixError instead of returning an
            unreliable answer when a pivot is (near) zero.
    """

    def __init__(self, *, check_singular: bool = False):
        self._check_singular = check_singular

    @property
    def name(self) -> str:
        return 'cpu_partial'

    def solve(self, design: AugmentedDesign) -> Result[GaussParams]:
        timer = Timer()
        timer.start()

        with timer.section('copy'):
            working = design.matrix.copy()

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            with timer.section('eliminate'):
                pivots, pivot_columns, swaps = gauss_jordan(working)

        zero_pivots = zero_pivot_rows(pivots)
        if self._check_singular:
            raise_if_singular(zero_pivots, design.n)

        with timer.section('extract'):
            solution = round_display(working[:, -1].copy())

        timer.stop()

        return Result(
            params=GaussParams(
                solution=solution,
                reduced=working,
                pivots=pivots,
                pivot_columns=pivot_columns,
                zero_pivots=zero_pivots,
            ),
            info={
                'method': 'gauss_jordan',
                'pivoting': 'partial',
                'n': design.n,
                'row_swaps': swaps,
                'zero_pivots': zero_pivots,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=zero_pivot_warnings(zero_pivots),
        )
