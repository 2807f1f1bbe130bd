"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    entries, non-finite values, values or dimensions outside the accepted
    envelope, malformed text rows.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Two matrices cannot be combined by the requested operation.

    Addition and subtraction need identical shapes; multiplication needs
    the columns of the left operand to equal the rows of the right one.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        operation: Name of the operation that was attempted
        shape: Actual shape of the matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class DimensionContractError(DimensionError):
    """
    Augmented matrix does not have exactly one more column than rows.

    Attributes:
        shape: Actual shape of the matrix
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Only raised when singularity detection is explicitly requested;
    the default elimination policy returns an unspecified result instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of usable pivots found
        expected_rank: Number of pivots a nonsingular system needs
        zero_pivots: Row indices whose pivot was (near) zero
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        zero_pivots: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
        self.zero_pivots = zero_pivots
