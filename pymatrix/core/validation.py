"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NotSquareError,
    DimensionContractError,
)
from pymatrix.core.limits import MIN_DIMENSION, MAX_DIMENSION, VALUE_BOUND


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged rows, mixed types) or a
    non-numeric dtype. Complex input is rejected: matrices are real.

    The returned array is always a new copy, so callers may modify it
    without touching the caller's data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a non-empty 2-dimensional matrix.

    Raises:
        DimensionError: If array is not 2D or has a zero-length axis
    """
    check_ndim(array, 2, name)
    if array.shape[0] < 1 or array.shape[1] < 1:
        raise DimensionError(
            f"{name}: matrix must have at least one row and one column, got shape {array.shape}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str, operation: str) -> None:
    """
    Verify matrix is square.

    Args:
        array: 2D array to check
        name: Parameter name for error messages
        operation: Operation requiring the square matrix

    Raises:
        NotSquareError: If rows != columns
    """
    rows, columns = array.shape
    if rows != columns:
        raise NotSquareError(
            f"{operation}: {name} must be square, got {rows}x{columns}",
            operation=operation,
            shape=array.shape,
        )


def check_same_shape(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify two matrices have identical shape (addition, subtraction).

    Raises:
        ShapeMismatchError: If shapes differ
    """
    if left.shape != right.shape:
        raise ShapeMismatchError(
            f"{operation}: shapes must match, got "
            f"{left.shape[0]}x{left.shape[1]} and {right.shape[0]}x{right.shape[1]}",
            operation=operation,
            left_shape=left.shape,
            right_shape=right.shape,
        )


def check_chained_shape(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows (matrix product).

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left.shape[1] != right.shape[0]:
        raise ShapeMismatchError(
            f"{operation}: left operand has {left.shape[1]} columns but right "
            f"operand has {right.shape[0]} rows",
            operation=operation,
            left_shape=left.shape,
            right_shape=right.shape,
        )


def check_augmented(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify matrix is R x (R+1): R equations in R unknowns plus RHS column.

    Raises:
        DimensionContractError: If columns != rows + 1
    """
    rows, columns = array.shape
    if columns != rows + 1:
        raise DimensionContractError(
            f"{name}: augmented matrix needs {rows + 1} columns for {rows} rows, "
            f"got {columns}",
            shape=array.shape,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a finite real scalar and return it as float.

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.floating, np.integer)):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_dimension(value: int, name: str) -> int:
    """
    Verify a row/column count lies in [MIN_DIMENSION, MAX_DIMENSION].

    Raises:
        ValidationError: If value is not an integer in range
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if not MIN_DIMENSION <= value <= MAX_DIMENSION:
        raise ValidationError(
            f"{name}: must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {value}"
        )
    return int(value)


def check_in_envelope(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry satisfies |x| <= VALUE_BOUND.

    Raises:
        ValidationError: If any entry is out of range, naming the first one
    """
    outside = np.abs(array) > VALUE_BOUND
    if np.any(outside):
        loc = np.argwhere(outside)[0]
        raise ValidationError(
            f"{name}: values must lie in [-{VALUE_BOUND:g}, {VALUE_BOUND:g}], "
            f"got {array[tuple(loc)]:g} at {tuple(int(i) for i in loc)}"
        )
