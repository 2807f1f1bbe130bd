"""
Solver dispatch for triangularization and determinants.

This module provides triangularize() and det() (public API).
"""

from typing import Literal
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.determinant.design import SquareDesign
from pymatrix.determinant.solution import TriangularSolution
from pymatrix.determinant.backends.cpu import CPUTriangularBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_triangular']


def _ensure_design(A: ArrayLike | SquareDesign, operation: str) -> SquareDesign:
    """Convert raw array to SquareDesign if needed."""
    if isinstance(A, SquareDesign):
        return A
    return SquareDesign.from_array(A, operation=operation)


def _get_backend(choice: BackendChoice) -> CPUTriangularBackend:
    if choice in ('auto', 'cpu', 'cpu_triangular'):
        return CPUTriangularBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


def triangularize(
    A: ArrayLike | SquareDesign,
    *,
    backend: BackendChoice = 'auto',
) -> TriangularSolution:
    """
    Reduce a square matrix to upper-triangular form.

    Row j below pivot row i loses (A[j][i] / A[i][i]) times row i. Rows
    are never exchanged, so a zero on the diagonal during elimination
    yields Inf/NaN entries; such pivots are listed in
    ``solution.zero_pivots`` and in ``solution.warnings``.

    Args:
        A: Square matrix (N x N). Not modified.
        backend: 'auto', 'cpu' or 'cpu_triangular' (all the same backend)

    Returns:
        TriangularSolution with the triangular matrix and determinant

    Raises:
        NotSquareError: If A is not square
        ValidationError: If A is not a finite real matrix
    """
    design = _ensure_design(A, 'triangularize')
    result = _get_backend(backend).solve(design)
    return TriangularSolution(_result=result, _design=design)


def det(A: ArrayLike | SquareDesign) -> float:
    """
    Determinant as the product of the triangular form's diagonal.

    Elimination runs on a copy; the caller's matrix is left untouched.

    Example:
        >>> det([[4, 3], [6, 3]])
        -6.0

    Raises:
        NotSquareError: If A is not square
    """
    design = _ensure_design(A, 'determinant')
    return CPUTriangularBackend().solve(design).params.determinant
