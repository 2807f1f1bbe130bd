"""
MatrixSource: where matrices enter PyMatrix.

MatrixSource is the "I have a matrix" abstraction. It doesn't know or care
which operation will consume the matrix. It only guarantees that what it
holds lies inside the operating envelope: dimensions within
[MIN_DIMENSION, MAX_DIMENSION], entries within [-VALUE_BOUND, VALUE_BOUND],
rounded to DISPLAY_DECIMALS places.

Usage:
    from pymatrix.core.datasource import MatrixSource

    src = MatrixSource.random(3, 4, rng=42)
    src = MatrixSource.from_rows(["1 2", "3 4"], rows=2, columns=2)
    src = MatrixSource.from_file("input.txt", rows=2, columns=3)
    src = MatrixSource.from_array(np.eye(3))

    A = src.matrix
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError, DimensionError
from pymatrix.core.limits import VALUE_BOUND, DISPLAY_DECIMALS
from pymatrix.core.validation import (
    check_array,
    check_2d,
    check_finite,
    check_dimension,
    check_in_envelope,
)


def parse_scalar(token: str, name: str) -> float:
    """
    Parse a finite number within [-VALUE_BOUND, VALUE_BOUND], unrounded.

    Raises:
        ValidationError: If the token is not a finite number within the envelope
    """
    try:
        value = float(token)
    except ValueError as e:
        raise ValidationError(f"{name}: {token!r} is not a number") from e
    if not math.isfinite(value):
        raise ValidationError(f"{name}: {token!r} is not a finite number")
    if abs(value) > VALUE_BOUND:
        raise ValidationError(
            f"{name}: {value:g} is outside [-{VALUE_BOUND:g}, {VALUE_BOUND:g}]"
        )
    return value


def parse_value(token: str, name: str) -> float:
    """
    Parse one matrix entry typed by a user, rounded to DISPLAY_DECIMALS.

    Raises:
        ValidationError: If the token is not a finite number within the envelope
    """
    return round(parse_scalar(token, name), DISPLAY_DECIMALS)


def parse_row(line: str, columns: int, row_index: int) -> list[float]:
    """
    Parse one whitespace-separated row of a matrix.

    Args:
        line: Text of the row; repeated spaces are ignored
        columns: Number of values the row must contain
        row_index: 0-based row index, used in error messages

    Returns:
        List of parsed values

    Raises:
        ValidationError: On a wrong value count or an unusable value
    """
    tokens = line.split()
    if len(tokens) != columns:
        raise ValidationError(
            f"row {row_index + 1}: expected {columns} values, got {len(tokens)}"
        )
    return [
        parse_value(token, f"row {row_index + 1}, column {j + 1}")
        for j, token in enumerate(tokens)
    ]


@dataclass(frozen=True)
class MatrixSource:
    """
    Validated matrix container. Operation-agnostic.

    Construct via factory classmethods, not directly.
    """
    _matrix: NDArray[np.floating[Any]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Properties ===

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """A copy of the held matrix."""
        return self._matrix.copy()

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self._matrix.shape

    @property
    def rows(self) -> int:
        return self._matrix.shape[0]

    @property
    def columns(self) -> int:
        return self._matrix.shape[1]

    @property
    def metadata(self) -> dict[str, Any]:
        """Where the matrix came from ('source', optionally 'source_path')."""
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_array(cls, array: ArrayLike, *, source: str = 'array') -> MatrixSource:
        """Construct from any 2D array-like."""
        matrix = check_array(array, 'matrix')
        return cls._build(matrix, {'source': source})

    @classmethod
    def from_rows(
        cls,
        lines: Iterable[str],
        *,
        rows: int,
        columns: int,
    ) -> MatrixSource:
        """
        Construct from text rows, top row first (keyboard entry).

        Exactly `rows` lines must be supplied, each holding `columns`
        whitespace-separated numbers.
        """
        check_dimension(rows, 'rows')
        check_dimension(columns, 'columns')
        lines = list(lines)
        if len(lines) != rows:
            raise ValidationError(f"expected {rows} rows, got {len(lines)}")
        data = [parse_row(line, columns, i) for i, line in enumerate(lines)]
        return cls._build(np.array(data, dtype=np.float64), {'source': 'rows'})

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        rows: int | None = None,
        columns: int | None = None,
    ) -> MatrixSource:
        """
        Construct from file (whitespace text, NPY, CSV).

        Text files hold one row per line; blank lines are skipped. When
        `rows` is given only the first `rows` rows are read. When `columns`
        is omitted it is taken from the first row. For NPY and CSV input the
        optional dimensions must match the stored matrix.
        """
        path = Path(path)
        suffix = path.suffix.lower()

        try:
            if suffix == '.npy':
                raw = np.load(path)
            elif suffix == '.csv':
                import pandas as pd
                raw = pd.read_csv(path, header=None).to_numpy(dtype=np.float64)
            else:
                text = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ValidationError(f"{path}: not a readable text file ({e.reason})") from e
        except ValueError as e:
            raise ValidationError(f"{path}: cannot read matrix: {e}") from e

        if suffix in ('.npy', '.csv'):
            matrix = check_array(raw, 'matrix')
        else:
            lines = [line for line in text.splitlines() if line.strip()]
            if not lines:
                raise ValidationError(f"{path}: file contains no rows")
            n_rows = len(lines) if rows is None else rows
            n_columns = len(lines[0].split()) if columns is None else columns
            if len(lines) < n_rows:
                raise ValidationError(
                    f"{path}: expected {n_rows} rows, file has {len(lines)}"
                )
            source = cls.from_rows(lines[:n_rows], rows=n_rows, columns=n_columns)
            return cls(_matrix=source._matrix, _metadata={
                'source': 'file',
                'source_path': str(path),
            })

        check_2d(matrix, 'matrix')
        if rows is not None and matrix.shape[0] != rows:
            raise DimensionError(f"{path}: expected {rows} rows, got {matrix.shape[0]}")
        if columns is not None and matrix.shape[1] != columns:
            raise DimensionError(
                f"{path}: expected {columns} columns, got {matrix.shape[1]}"
            )
        return cls._build(matrix, {'source': 'file', 'source_path': str(path)})

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        *,
        rng: np.random.Generator | int | None = None,
    ) -> MatrixSource:
        """
        Generate a matrix of uniform values in [-VALUE_BOUND, VALUE_BOUND).

        Args:
            rows: Number of rows
            columns: Number of columns
            rng: Generator or seed; None draws fresh entropy
        """
        check_dimension(rows, 'rows')
        check_dimension(columns, 'columns')
        generator = np.random.default_rng(rng)
        values = generator.uniform(-VALUE_BOUND, VALUE_BOUND, size=(rows, columns))
        return cls._build(np.round(values, DISPLAY_DECIMALS), {'source': 'random'})

    @classmethod
    def _build(cls, matrix: NDArray, metadata: dict[str, Any]) -> MatrixSource:
        """Internal builder with envelope validation."""
        check_2d(matrix, 'matrix')
        check_finite(matrix, 'matrix')
        check_dimension(matrix.shape[0], 'rows')
        check_dimension(matrix.shape[1], 'columns')
        check_in_envelope(matrix, 'matrix')
        matrix = np.round(matrix, DISPLAY_DECIMALS)
        return cls(_matrix=matrix, _metadata=metadata)

    def __repr__(self) -> str:
        return f"MatrixSource(rows={self.rows}, columns={self.columns}, source={self._metadata.get('source')!r})"
