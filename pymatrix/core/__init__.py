"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by all
domain-specific submodules (algebra, determinant, gauss).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    limits: Operating envelope constants
    datasource: MatrixSource (generation, text rows, files)
    compute: Timing, precision, tolerances
"""

from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.core.datasource import MatrixSource
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NotSquareError,
    DimensionContractError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Construction
    "MatrixSource",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "NotSquareError",
    "DimensionContractError",
    "NumericalError",
    "SingularMatrixError",
]
