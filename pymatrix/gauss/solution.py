"""
Gauss solver solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.display import format_solution

if TYPE_CHECKING:
    from pymatrix.gauss.design import AugmentedDesign


@dataclass(frozen=True)
class GaussParams:
    """
    Parameter payload for the Gauss solver.

    This is the immutable data computed by backends.
    """
    solution: NDArray[np.floating[Any]]
    reduced: NDArray[np.floating[Any]]
    pivots: tuple[float, ...]
    pivot_columns: tuple[int | None, ...]
    zero_pivots: tuple[int, ...]


@dataclass
class GaussSolution:
    """
    User-facing Gauss solver results.

    The solution vector is rounded to three decimals. For singular,
    inconsistent, or duplicate-row systems it is unspecified and may
    contain NaN or Inf; ``zero_pivots`` and ``warnings`` say when.
    """
    _result: Result[GaussParams]
    _design: 'AugmentedDesign'

    @property
    def solution(self) -> NDArray[np.floating[Any]]:
        """x1..xR, rounded to three decimals."""
        return self._result.params.solution

    @property
    def reduced_matrix(self) -> NDArray[np.floating[Any]]:
        """Final working matrix, unrounded; identity block on success."""
        return self._result.params.reduced

    @property
    def pivots(self) -> tuple[float, ...]:
        """Diagonal entry of each row before it was normalized."""
        return self._result.params.pivots

    @property
    def pivot_columns(self) -> tuple[int | None, ...]:
        """Column whose entry divided each row (None for an all-zero row)."""
        return self._result.params.pivot_columns

    @property
    def zero_pivots(self) -> tuple[int, ...]:
        return self._result.params.zero_pivots

    @property
    def is_reliable(self) -> bool:
        """False when elimination met a zero pivot."""
        return not self.zero_pivots

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
        """One 'x<i> = value' line per unknown, then any warnings."""
        lines = [format_solution(self.solution)]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GaussSolution(n={self.n}, backend={self.backend_name!r})"
