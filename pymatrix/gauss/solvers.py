"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from __future__ import annotations

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.gauss.design import AugmentedDesign
from pymatrix.gauss.solution import GaussParams, GaussSolution
from pymatrix.gauss.backends.cpu import CPUInRowGaussBackend
from pymatrix.gauss.backends.cpu_partial import CPUPartialPivotGaussBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_inrow', 'cpu_partial']


def solve(
    M: ArrayLike | AugmentedDesign,
    *,
    backend: BackendChoice = 'auto',
    check_singular: bool = False,
) -> GaussSolution:
    """
    Solve R linear equations in R unknowns by Gaussian elimination.

    The input is the augmented matrix [A | b]. The default backend
    ('cpu_inrow') searches each row for its own divisor and never exchanges
    rows. It returns the correct answer, rounded to three decimals, for
    systems with a unique solution and no zero diagonal pivot. For
    singular, inconsistent or duplicate-row systems, or systems that need
    a row interchange, the answer is unspecified: a full-length vector is
    still returned and a RuntimeWarning is issued.

    Args:
        M: Augmented matrix, R x (R+1), or an AugmentedDesign
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_inrow': in-row divisor, no row interchange
            - 'cpu_partial': Gauss-Jordan with partial pivoting
        check_singular: Raise SingularMatrixError on a (near) zero pivot
            instead of returning an unreliable answer

    Returns:
        GaussSolution with the rounded solution vector and diagnostics

    Raises:
        DimensionContractError: If M does not have exactly rows + 1 columns
        ValidationError: If M is not a finite real matrix
        SingularMatrixError: If check_singular and a pivot is (near) zero

    Example:
        >>> solve([[2, 1, 3], [1, -1, 0]]).solution
        array([1., 1.])
    """
    design = M if isinstance(M, AugmentedDesign) else AugmentedDesign.from_array(M)

    backend_impl = _get_backend(backend, check_singular=check_singular)
    result = backend_impl.solve(design)

    if result.warnings:
        warnings.warn(
            f"Gauss elimination met zero pivots in rows {list(result.params.zero_pivots)}; "
            f"the solution is unreliable",
            RuntimeWarning,
            stacklevel=2,
        )

    return GaussSolution(_result=result, _design=design)


def solve_system(
    A: ArrayLike,
    b: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
    check_singular: bool = False,
) -> GaussSolution:
    """Solve A x = b; same as solve() on the augmented matrix [A | b]."""
    design = AugmentedDesign.from_system(A, b)
    return solve(design, backend=backend, check_singular=check_singular)


def _get_backend(
    choice: BackendChoice,
    *,
    check_singular: bool,
) -> Backend[AugmentedDesign, GaussParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_inrow'):
        return CPUInRowGaussBackend(check_singular=check_singular)

    elif choice == 'cpu_partial':
        return CPUPartialPivotGaussBackend(check_singular=check_singular)

    raise ValidationError(f"Unknown backend: {choice!r}")
