"""
Operating envelope constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for the accepted matrix sizes,
entry range, and display precision. Import from here, never use raw numbers.

The numerical engine does not enforce these limits. They are applied where
matrices enter the system (MatrixSource, console prompts).

Usage:
    from pymatrix.core.limits import MAX_DIMENSION, VALUE_BOUND

    if not MIN_DIMENSION <= rows <= MAX_DIMENSION:
        ...
"""

# Smallest accepted row/column count
MIN_DIMENSION = 1

# Largest accepted row/column count
MAX_DIMENSION = 10

# Entries and scalars must satisfy -VALUE_BOUND <= x <= VALUE_BOUND
VALUE_BOUND = 100.0

# Decimal places kept on entry and shown on display
DISPLAY_DECIMALS = 3

__all__ = [
    'MIN_DIMENSION',
    'MAX_DIMENSION',
    'VALUE_BOUND',
    'DISPLAY_DECIMALS',
]
