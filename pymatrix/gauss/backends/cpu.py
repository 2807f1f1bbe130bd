"""
CPU in-row Gauss backend.

Forward sweep to a unit upper-triangular system, back sweep to a unit
coefficient block, then the last column is the solution. The divisor
for each row is searched within that row only and rows are never
exchanged, so a zero on the diagonal gives an unspecified answer.
Division by an exact zero is replaced by division by one.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.precision import not_zero, round_display
from pymatrix.gauss.design import AugmentedDesign
from pymatrix.gauss.solution import GaussParams
from pymatrix.gauss._common import (
    find_divisor_column,
    zero_pivot_rows,
    zero_pivot_warnings,
    raise_if_singular,
)


def _divisor(matrix: NDArray[np.floating[Any]], row: int, col: int | None) -> float:
    if col is None:
        return 0.0
    return float(matrix[row, col])


def forward_sweep(
    working: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], tuple[float, ...], tuple[int | None, ...]]:
    """
    Normalize each row by its in-row divisor and clear the column below.

    Returns:
        (committed matrix, diagonal pivots before normalization,
        divisor column of each row)
    """
    n = working.shape[0]
    committed = working.copy()
    pivots = []
    pivot_columns = []

    for i in range(n):
        col = find_divisor_column(committed, i)
        divisor = _divisor(committed, i, col)
        pivots.append(float(committed[i, i]))
        pivot_columns.append(col)

        if divisor != 0:
            working[i, :] /= divisor

        for k in range(i + 1, n):
            coefficient = working[k, i] / not_zero(_divisor(working, i, col))
            working[k, :] -= coefficient * working[i, :]

        committed = working.copy()

    return committed, tuple(pivots), tuple(pivot_columns)


def back_sweep(
    working: NDArray[np.floating[Any]],
    committed: NDArray[np.floating[Any]],
) -> None:
    """
    Clear every column above the diagonal, bottom row first, in place.

    Divisors are located in the committed forward-sweep result, where
    each usable row already has a unit divisor.
    """
    n = working.shape[0]
    for i in range(n - 1, -1, -1):
        col = find_divisor_column(committed, i)
        working[i, :] /= not_zero(_divisor(committed, i, col))

        for k in range(i - 1, -1, -1):
            coefficient = working[k, i] / not_zero(working[i, i])
            working[k, :] -= coefficient * working[i, :]


class CPUInRowGaussBackend:
    """
    Gauss elimination with in-row divisor search and no row interchange.

    Args:
        check_singular: Raise SingularMatrixError instead of returning an
            unreliable answer when a diagonal pivot is (near) zero.
    """

    def __init__(self, *, check_singular: bool = False):
        self._check_singular = check_singular

    @property
    def name(self) -> str:
        return 'cpu_inrow'

    def solve(self, design: AugmentedDesign) -> Result[GaussParams]:
        timer = Timer()
        timer.start()

        with timer.section('copy'):
            working = design.matrix.copy()

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            with timer.section('forward'):
                committed, pivots, pivot_columns = forward_sweep(working)

            zero_pivots = zero_pivot_rows(pivots)
            if self._check_singular:
                raise_if_singular(zero_pivots, design.n)

            with timer.section('back'):
                back_sweep(working, committed)

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
                'method': 'gauss_inrow',
                'pivoting': 'none',
                'n': design.n,
                'pivot_columns': pivot_columns,
                'zero_pivots': zero_pivots,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=zero_pivot_warnings(zero_pivots),
        )
