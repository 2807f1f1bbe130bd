"""
Shared compute infrastructure for PyMatrix.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Zero-divisor guard and display rounding
    tolerances: Tolerance tiers for comparisons and singularity checks
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.precision import not_zero, round_display

__all__ = [
    # Timing
    "Timer",
    # Precision
    "not_zero",
    "round_display",
]
