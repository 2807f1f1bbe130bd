"""
Gaussian elimination for square linear systems.

Public API:
    solve(M, ...)           -> GaussSolution   (M is the augmented matrix)
    solve_system(A, b, ...) -> GaussSolution

Example:
    >>> from pymatrix.gauss import solve
    >>> result = solve([[2, 1, 3], [1, -1, 0]])
    >>> print(result.summary())
    x1 = 1.0
    x2 = 1.0
"""

from pymatrix.gauss.design import AugmentedDesign
from pymatrix.gauss.solution import GaussSolution, GaussParams
from pymatrix.gauss.solvers import solve, solve_system

__all__ = [
    "solve",
    "solve_system",
    "AugmentedDesign",
    "GaussSolution",
    "GaussParams",
]
