"""
SquareDesign: input wrapper for triangularization and determinants.

Validates once at construction; backends trust it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import check_array, check_2d, check_finite, check_square


@dataclass(frozen=True)
class SquareDesign:
    """
    Square matrix ready for elimination. Immutable after construction.

    Construction:
        SquareDesign.from_array(A)
    """
    _matrix: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, A: ArrayLike, *, operation: str = 'triangularize') -> SquareDesign:
        """
        Build a SquareDesign from any array-like.

        Args:
            A: Square matrix
            operation: Name reported if A is not square
        """
        matrix = check_array(A, 'A')
        check_2d(matrix, 'A')
        check_finite(matrix, 'A')
        check_square(matrix, 'A', operation)
        matrix.setflags(write=False)
        return cls(_matrix=matrix, _n=matrix.shape[0])

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Read-only N x N matrix."""
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix size."""
        return self._n

    def __repr__(self) -> str:
        return f"SquareDesign(n={self._n})"
