"""
Elementary matrix algebra.

Public API:
    add(A, B)             - Elementwise sum (identical shapes)
    subtract(A, B)        - Elementwise difference (identical shapes)
    scalar_multiply(A, k) - Every entry times k
    multiply(A, B)        - Matrix product (cols of A == rows of B)
    transpose(A)          - Rows and columns swapped
    trace(A)              - Diagonal sum (square only)
    identity(n)           - n x n identity

Example:
    >>> from pymatrix.algebra import multiply, identity
    >>> multiply([[1, 2], [3, 4]], identity(2))
    array([[1., 2.],
           [3., 4.]])
"""

from pymatrix.algebra.ops import (
    add,
    subtract,
    scalar_multiply,
    multiply,
    transpose,
    trace,
    identity,
    can_multiply,
)

__all__ = [
    "add",
    "subtract",
    "scalar_multiply",
    "multiply",
    "transpose",
    "trace",
    "identity",
    "can_multiply",
]
