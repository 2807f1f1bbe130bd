"""
Helpers shared by the Gauss backends.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import SINGULAR_PIVOT_ATOL
from pymatrix.core.exceptions import SingularMatrixError


def find_divisor_column(matrix: NDArray[np.floating[Any]], row: int) -> int | None:
    """
    First column at or right of the diagonal whose entry in `row` is nonzero.

    The search stays inside the row (columns row..R, the RHS included)
    and never looks at other rows. None means the row is zero from the
    diagonal on, and its divisor counts as zero.
    """
    for col in range(row, matrix.shape[1]):
        if matrix[row, col] != 0:
            return col
    return None


def zero_pivot_rows(pivots: tuple[float, ...]) -> tuple[int, ...]:
    """Rows whose pivot magnitude is below SINGULAR_PIVOT_ATOL."""
    return tuple(i for i, p in enumerate(pivots) if not abs(p) >= SINGULAR_PIVOT_ATOL)


def zero_pivot_warnings(zero_pivots: tuple[int, ...]) -> tuple[str, ...]:
    return tuple(
        f"zero pivot at row {i}; system may be singular, inconsistent or need row "
        f"interchange, solution is unreliable"
        for i in zero_pivots
    )


def raise_if_singular(zero_pivots: tuple[int, ...], n: int) -> None:
    """
    Raise SingularMatrixError when any pivot was (near) zero.

    Raises:
        SingularMatrixError: With the number of usable pivots as rank
    """
    if zero_pivots:
        rank = n - len(zero_pivots)
        raise SingularMatrixError(
            f"coefficient matrix is singular: zero pivot in rows {list(zero_pivots)} "
            f"(rank {rank}, expected {n})",
            matrix_name='coefficient matrix',
            rank=rank,
            expected_rank=n,
            zero_pivots=zero_pivots,
        )
