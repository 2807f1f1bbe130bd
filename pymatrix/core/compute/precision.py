"""
Numerical precision constants and utilities.

Provides the zero-divisor guard used by in-row elimination and the
rounding applied to displayed values and solution vectors.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pymatrix.core.limits import DISPLAY_DECIMALS


def not_zero(value: float) -> float:
    """
    Divisor guard: return 1.0 for an exact zero, the value otherwise.

    Substituting 1 keeps elimination free of division faults. When the
    true pivot is zero the eliminated row is wrong, which is why
    solvers using this guard only promise correct answers for systems
    whose pivots are nonzero.
    """
    if value == 0:
        return 1.0
    return float(value)


def round_display(
    values: NDArray[np.floating[Any]] | float,
    decimals: int = DISPLAY_DECIMALS,
) -> NDArray[np.floating[Any]] | float:
    """
    Round to the display precision.

    Uses numpy rounding (half to even). Negative zero is normalized to
    positive zero so rendered output never shows "-0.0".
    """
    rounded = np.round(values, decimals) + 0.0
    if np.ndim(rounded) == 0:
        return float(rounded)
    return rounded
