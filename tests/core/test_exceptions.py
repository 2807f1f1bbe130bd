"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Shape errors are DimensionErrors, hence ValidationErrors
    - Diagnostic attributes on the shape errors and SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionContractError,
    DimensionError,
    NotSquareError,
    NumericalError,
    PyMatrixError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        ShapeMismatchError,
        NotSquareError,
        DimensionContractError,
        NumericalError,
        SingularMatrixError,
    ])
    def test_is_pymatrix_error(self, exc_type):
        with pytest.raises(PyMatrixError):
            raise exc_type("failure")

    @pytest.mark.parametrize("exc_type", [
        ShapeMismatchError,
        NotSquareError,
        DimensionContractError,
    ])
    def test_shape_errors_are_dimension_errors(self, exc_type):
        with pytest.raises(DimensionError):
            raise exc_type("bad shape")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        """Numerical degeneracy is not an input-shape problem."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# ShapeMismatchError
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:

    def test_all_attributes(self):
        err = ShapeMismatchError(
            "multiply: left operand has 3 columns but right operand has 2 rows",
            operation="multiply",
            left_shape=(2, 3),
            right_shape=(2, 2),
        )
        assert "3 columns" in str(err)
        assert err.operation == "multiply"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 2)

    def test_defaults_are_none(self):
        err = ShapeMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


# ═══════════════════════════════════════════════════════════════════════
# NotSquareError / DimensionContractError
# ═══════════════════════════════════════════════════════════════════════


class TestNotSquareError:

    def test_all_attributes(self):
        err = NotSquareError("trace: A must be square, got 2x3", operation="trace", shape=(2, 3))
        assert err.operation == "trace"
        assert err.shape == (2, 3)

    def test_defaults_are_none(self):
        err = NotSquareError("not square")
        assert err.operation is None
        assert err.shape is None


class TestDimensionContractError:

    def test_shape_attribute(self):
        err = DimensionContractError("needs 3 columns", shape=(2, 2))
        assert err.shape == (2, 2)
        assert str(err) == "needs 3 columns"

    def test_default_shape_none(self):
        assert DimensionContractError("bad").shape is None


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "coefficient matrix is singular",
            matrix_name="coefficient matrix",
            rank=1,
            expected_rank=2,
            zero_pivots=(1,),
        )
        assert str(err) == "coefficient matrix is singular"
        assert err.matrix_name == "coefficient matrix"
        assert err.rank == 1
        assert err.expected_rank == 2
        assert err.zero_pivots == (1,)

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None
        assert err.zero_pivots is None

    def test_catchable_with_attributes(self):
        """Attributes accessible in except block."""
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", rank=0)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.rank == 0
