"""
Tests for MatrixSource construction.

Covers the three ways a matrix enters the calculator (generation, typed
rows, file) and the envelope every one of them enforces.
"""

import numpy as np
import pytest

from pymatrix.core.datasource import MatrixSource, parse_row, parse_scalar, parse_value
from pymatrix.core.exceptions import DimensionError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# parse_value / parse_row
# ═══════════════════════════════════════════════════════════════════════


class TestParsing:

    @pytest.mark.parametrize("token, expected", [
        ("1", 1.0),
        ("-2.5", -2.5),
        ("100", 100.0),
        ("-100", -100.0),
        ("3.14159", 3.142),
    ])
    def test_parse_value(self, token, expected):
        assert parse_value(token, "x") == expected

    @pytest.mark.parametrize("token", ["abc", "1,5", "nan", "inf", "100.01", "-101"])
    def test_parse_value_rejects(self, token):
        with pytest.raises(ValidationError):
            parse_value(token, "x")

    def test_parse_scalar_not_rounded(self):
        assert parse_scalar("0.0004", "k") == 0.0004

    def test_parse_scalar_range_checked(self):
        with pytest.raises(ValidationError, match="outside"):
            parse_scalar("100.5", "k")

    def test_parse_row_ignores_repeated_spaces(self):
        assert parse_row("  1   2\t3 ", 3, 0) == [1.0, 2.0, 3.0]

    def test_parse_row_wrong_count(self):
        with pytest.raises(ValidationError, match="row 2: expected 3 values, got 2"):
            parse_row("1 2", 3, 1)

    def test_parse_row_names_bad_cell(self):
        with pytest.raises(ValidationError, match="row 1, column 2"):
            parse_row("1 x 3", 3, 0)


# ═══════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════


class TestFromRows:

    def test_basic(self):
        src = MatrixSource.from_rows(["1 2 3", "4 5 6"], rows=2, columns=3)
        assert src.shape == (2, 3)
        np.testing.assert_array_equal(src.matrix, [[1, 2, 3], [4, 5, 6]])
        assert src.metadata["source"] == "rows"

    def test_wrong_row_count(self):
        with pytest.raises(ValidationError, match="expected 2 rows, got 1"):
            MatrixSource.from_rows(["1 2"], rows=2, columns=2)

    def test_dimension_out_of_range(self):
        with pytest.raises(ValidationError, match="between 1 and 10"):
            MatrixSource.from_rows(["1"] * 11, rows=11, columns=1)

    def test_matrix_property_is_a_copy(self):
        src = MatrixSource.from_rows(["1 2"], rows=1, columns=2)
        m = src.matrix
        m[0, 0] = 50.0
        assert src.matrix[0, 0] == 1.0


class TestFromArray:

    def test_rounds_to_three_decimals(self):
        src = MatrixSource.from_array([[1.23456, -0.0004]])
        np.testing.assert_array_equal(src.matrix, [[1.235, 0.0]])

    def test_rejects_out_of_envelope(self):
        with pytest.raises(ValidationError, match="values must lie in"):
            MatrixSource.from_array([[1.0, 150.0]])

    def test_rejects_too_large(self):
        with pytest.raises(ValidationError, match="columns"):
            MatrixSource.from_array(np.zeros((2, 11)))

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            MatrixSource.from_array([[np.nan]])


class TestRandom:

    def test_shape_and_range(self):
        src = MatrixSource.random(3, 7, rng=1)
        assert src.shape == (3, 7)
        assert np.all(np.abs(src.matrix) <= 100.0)
        assert src.metadata["source"] == "random"

    def test_three_decimals(self):
        m = MatrixSource.random(5, 5, rng=2).matrix
        np.testing.assert_array_equal(m, np.round(m, 3))

    def test_seed_reproducible(self):
        a = MatrixSource.random(4, 4, rng=123).matrix
        b = MatrixSource.random(4, 4, rng=123).matrix
        np.testing.assert_array_equal(a, b)

    def test_accepts_generator(self, rng):
        assert MatrixSource.random(2, 2, rng=rng).shape == (2, 2)

    def test_rejects_zero_rows(self):
        with pytest.raises(ValidationError):
            MatrixSource.random(0, 3)


class TestFromFile:

    def test_text_file(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("1 2 3\n\n4 5 6\n")
        src = MatrixSource.from_file(path, rows=2, columns=3)
        np.testing.assert_array_equal(src.matrix, [[1, 2, 3], [4, 5, 6]])
        assert src.metadata == {"source": "file", "source_path": str(path)}

    def test_text_file_infers_shape(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_text("1 0\n0 1\n")
        assert MatrixSource.from_file(path).shape == (2, 2)

    def test_text_file_reads_first_rows_only(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_text("1 2\n3 4\n5 6\n")
        src = MatrixSource.from_file(path, rows=2, columns=2)
        np.testing.assert_array_equal(src.matrix, [[1, 2], [3, 4]])

    def test_text_file_too_few_rows(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_text("1 2\n")
        with pytest.raises(ValidationError, match="expected 3 rows"):
            MatrixSource.from_file(path, rows=3, columns=2)

    def test_text_file_bad_value(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_text("1 2\n3 999\n")
        with pytest.raises(ValidationError, match="outside"):
            MatrixSource.from_file(path, rows=2, columns=2)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_text("\n\n")
        with pytest.raises(ValidationError, match="no rows"):
            MatrixSource.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            MatrixSource.from_file(tmp_path / "absent.txt")

    def test_npy_file(self, tmp_path):
        path = tmp_path / "m.npy"
        np.save(path, np.array([[1.0, 2.0], [3.0, 4.0]]))
        src = MatrixSource.from_file(path, rows=2)
        np.testing.assert_array_equal(src.matrix, [[1, 2], [3, 4]])

    def test_npy_shape_mismatch(self, tmp_path):
        path = tmp_path / "m.npy"
        np.save(path, np.zeros((2, 2)))
        with pytest.raises(DimensionError, match="expected 3 columns"):
            MatrixSource.from_file(path, columns=3)

    def test_csv_file(self, tmp_path):
        pytest.importorskip("pandas")
        path = tmp_path / "m.csv"
        path.write_text("1,2,3\n4,5,6\n")
        src = MatrixSource.from_file(path, rows=2, columns=3)
        np.testing.assert_array_equal(src.matrix, [[1, 2, 3], [4, 5, 6]])

    def test_text_file_bad_encoding(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_bytes(b"\xff\xfe 1 2\n3 4\n")
        with pytest.raises(ValidationError, match="not a readable text file"):
            MatrixSource.from_file(path, rows=2, columns=2)

    def test_csv_non_numeric(self, tmp_path):
        pytest.importorskip("pandas")
        path = tmp_path / "m.csv"
        path.write_text("1,a\n2,3\n")
        with pytest.raises(ValidationError, match="cannot read matrix"):
            MatrixSource.from_file(path)

    def test_npy_object_array(self, tmp_path):
        path = tmp_path / "m.npy"
        np.save(path, np.array([[1, "a"]], dtype=object), allow_pickle=True)
        with pytest.raises(ValidationError, match="cannot read matrix"):
            MatrixSource.from_file(path)
