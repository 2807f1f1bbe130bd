"""
Triangularization solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.precision import round_display
from pymatrix.core.display import format_matrix

if TYPE_CHECKING:
    from pymatrix.determinant.design import SquareDesign


@dataclass(frozen=True)
class TriangularParams:
    """
    Parameter payload for triangularization.

    This is the immutable data computed by backends.
    """
    triangular: NDArray[np.floating[Any]]
    determinant: float
    zero_pivots: tuple[int, ...]


@dataclass
class TriangularSolution:
    """
    User-facing triangularization results.

    Wraps the backend Result and exposes the upper-triangular matrix and
    the determinant (product of its diagonal).
    """
    _result: Result[TriangularParams]
    _design: 'SquareDesign'

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Upper-triangular form of the input."""
        return self._result.params.triangular

    @property
    def determinant(self) -> float:
        return self._result.params.determinant

    @property
    def zero_pivots(self) -> tuple[int, ...]:
        """Rows whose pivot was exactly zero (result is then non-finite)."""
        return self._result.params.zero_pivots

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Triangular matrix followed by the determinant."""
        lines = [format_matrix(self.matrix), f"Determinant: {round_display(self.determinant)}"]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TriangularSolution(n={self.n}, determinant={self.determinant!r})"
