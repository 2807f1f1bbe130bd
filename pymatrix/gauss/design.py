"""
AugmentedDesign: input wrapper for the Gauss solver.

Holds an R x (R+1) augmented matrix: R equations in R unknowns with the
right-hand side as the last column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_array, check_2d, check_finite, check_augmented


@dataclass(frozen=True)
class AugmentedDesign:
    """
    Augmented linear system. Immutable after construction.

    Construction:
        AugmentedDesign.from_array(M)             # M is R x (R+1)
        AugmentedDesign.from_system(A, b)         # A is R x R, b has R entries
    """
    _matrix: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, M: ArrayLike) -> AugmentedDesign:
        """Build from an augmented matrix."""
        matrix = check_array(M, 'M')
        check_2d(matrix, 'M')
        return cls._build(matrix)

    @classmethod
    def from_system(cls, A: ArrayLike, b: ArrayLike) -> AugmentedDesign:
        """Build from a coefficient matrix and a right-hand side."""
        coefficients = check_array(A, 'A')
        check_2d(coefficients, 'A')
        rhs = check_array(b, 'b').reshape(-1, 1)
        if rhs.shape[0] != coefficients.shape[0]:
            raise DimensionError(
                f"b: expected {coefficients.shape[0]} entries, got {rhs.shape[0]}"
            )
        return cls._build(np.hstack([coefficients, rhs]))

    @classmethod
    def _build(cls, matrix: NDArray) -> AugmentedDesign:
        """Internal builder with validation."""
        check_finite(matrix, 'M')
        check_augmented(matrix, 'M')
        matrix.setflags(write=False)
        return cls(_matrix=matrix, _n=matrix.shape[0])

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Read-only R x (R+1) augmented matrix."""
        return self._matrix

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient block, R x R."""
        return self._matrix[:, :-1]

    @property
    def rhs(self) -> NDArray[np.floating[Any]]:
        """Right-hand side, length R."""
        return self._matrix[:, -1]

    def __repr__(self) -> str:
        return f"AugmentedDesign(n={self._n})"
