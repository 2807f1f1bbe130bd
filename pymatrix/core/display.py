"""
Text rendering of matrices and solution vectors.

Every value is rounded to DISPLAY_DECIMALS places before rendering.
Rendering never modifies the array it is given.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.precision import round_display


def format_value(value: float) -> str:
    """One value, rounded for display ('inf'/'nan' pass through)."""
    return repr(round_display(float(value)))


def format_matrix(matrix: NDArray[np.floating[Any]]) -> str:
    """
    Right-aligned grid, one matrix row per line.

    Example:
        >>> print(format_matrix(np.array([[1.0, -2.5], [10.1234, 0.0]])))
           1.0    -2.5
        10.123     0.0
    """
    cells = [[format_value(v) for v in row] for row in np.atleast_2d(matrix)]
    width = max(len(c) for row in cells for c in row)
    return "\n".join("  ".join(c.rjust(width) for c in row) for row in cells)


def format_solution(solution: NDArray[np.floating[Any]]) -> str:
    """One 'x<i> = value' line per unknown, 1-based."""
    return "\n".join(f"x{i + 1} = {format_value(v)}" for i, v in enumerate(solution))
