"""
Triangularization and determinants.

Public API:
    triangularize(A) -> TriangularSolution
    det(A)           -> float

Elimination does not exchange rows. A matrix whose elimination meets a
zero diagonal entry yields non-finite values, reported as warnings on
the solution rather than raised.
"""

from pymatrix.determinant.design import SquareDesign
from pymatrix.determinant.solution import TriangularSolution, TriangularParams
from pymatrix.determinant.solvers import triangularize, det

__all__ = [
    "triangularize",
    "det",
    "SquareDesign",
    "TriangularSolution",
    "TriangularParams",
]
