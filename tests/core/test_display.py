"""
Tests for display rounding and text rendering.
"""

import numpy as np

from pymatrix.core.compute.precision import not_zero, round_display
from pymatrix.core.display import format_matrix, format_solution, format_value


class TestNotZero:

    def test_zero_becomes_one(self):
        assert not_zero(0.0) == 1.0
        assert not_zero(-0.0) == 1.0

    def test_nonzero_passes_through(self):
        assert not_zero(-2.5) == -2.5
        assert not_zero(1e-300) == 1e-300


class TestRoundDisplay:

    def test_scalar(self):
        assert round_display(1.23456) == 1.235
        assert isinstance(round_display(1.0), float)

    def test_array(self):
        np.testing.assert_array_equal(round_display(np.array([0.1234, 2.0])), [0.123, 2.0])

    def test_negative_zero_normalized(self):
        assert str(round_display(-0.0001)) == "0.0"

    def test_non_finite_passes_through(self):
        out = round_display(np.array([np.inf, np.nan]))
        assert np.isinf(out[0])
        assert np.isnan(out[1])


class TestFormatting:

    def test_format_value(self):
        assert format_value(2.0) == "2.0"
        assert format_value(-1.23456) == "-1.235"

    def test_format_matrix_aligned(self):
        text = format_matrix(np.array([[1.0, -2.5], [10.1234, 0.0]]))
        assert text.splitlines() == ["   1.0    -2.5", "10.123     0.0"]

    def test_format_matrix_does_not_modify(self):
        m = np.array([[1.23456]])
        format_matrix(m)
        assert m[0, 0] == 1.23456

    def test_format_solution(self):
        assert format_solution(np.array([1.0, -0.5])) == "x1 = 1.0\nx2 = -0.5"
