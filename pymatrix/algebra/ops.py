"""
Elementwise and structural matrix operations.

Every function validates its inputs at the boundary, works on fresh
copies, and returns a new float64 array. Inputs are never modified.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_array,
    check_2d,
    check_finite,
    check_scalar,
    check_square,
    check_same_shape,
    check_chained_shape,
)


def _as_matrix(A: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate a 2D finite real matrix and return a private copy."""
    matrix = check_array(A, name)
    check_2d(matrix, name)
    check_finite(matrix, name)
    return matrix


def add(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Elementwise sum C[i][j] = A[i][j] + B[i][j].

    Raises:
        ShapeMismatchError: If A and B differ in shape
    """
    left = _as_matrix(A, 'A')
    right = _as_matrix(B, 'B')
    check_same_shape(left, right, 'add')
    return left + right


def subtract(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Elementwise difference C[i][j] = A[i][j] - B[i][j].

    Raises:
        ShapeMismatchError: If A and B differ in shape
    """
    left = _as_matrix(A, 'A')
    right = _as_matrix(B, 'B')
    check_same_shape(left, right, 'subtract')
    return left - right


def scalar_multiply(A: ArrayLike, k: float) -> NDArray[np.floating[Any]]:
    """Every entry of A multiplied by the real scalar k."""
    matrix = _as_matrix(A, 'A')
    return matrix * check_scalar(k, 'k')


def multiply(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product of an m x n and an n x p matrix.

    C[i][j] is the dot product of row i of A with column j of B. At the
    sizes PyMatrix handles (at most 10 x 10) no blocking is worthwhile.

    Raises:
        ShapeMismatchError: If columns of A != rows of B
    """
    left = _as_matrix(A, 'A')
    right = _as_matrix(B, 'B')
    check_chained_shape(left, right, 'multiply')

    m, n = left.shape
    p = right.shape[1]
    product = np.zeros((m, p), dtype=np.float64)
    for i in range(m):
        for j in range(p):
            product[i, j] = np.dot(left[i, :], right[:, j])
    return product


def transpose(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """The columns x rows matrix with C[j][i] = A[i][j]."""
    matrix = _as_matrix(A, 'A')
    return np.ascontiguousarray(matrix.T)


def trace(A: ArrayLike) -> float:
    """
    Sum of the main diagonal.

    Raises:
        NotSquareError: If A is not square
    """
    matrix = _as_matrix(A, 'A')
    check_square(matrix, 'A', 'trace')
    return float(np.sum(np.diag(matrix)))


def identity(n: int) -> NDArray[np.floating[Any]]:
    """The n x n identity matrix."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ValidationError(f"n: expected a positive integer, got {n!r}")
    return np.eye(int(n), dtype=np.float64)


def can_multiply(shape_a: tuple[int, int], shape_b: tuple[int, int]) -> bool:
    """True if matrices of these shapes can be multiplied in this order."""
    return shape_a[1] == shape_b[0]
