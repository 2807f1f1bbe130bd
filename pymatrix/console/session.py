"""
Interactive matrix session.

MatrixSession walks a user through choosing a size, obtaining a matrix
(generated, typed, or read from a file) and applying menu actions to it.
Invalid answers are re-asked; the engine only ever sees validated input.

Input and output are injected so the session can be driven by tests:

    lines = iter(["2", "2", "", "F", "X"])
    session = MatrixSession(input_fn=lambda _prompt: next(lines), output_fn=out.append)
    session.run()
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatrix import algebra
from pymatrix.core.datasource import MatrixSource, parse_row, parse_scalar
from pymatrix.core.display import format_matrix, format_value
from pymatrix.core.exceptions import (
    ValidationError,
    NotSquareError,
    DimensionContractError,
)
from pymatrix.core.limits import MIN_DIMENSION, MAX_DIMENSION, VALUE_BOUND
from pymatrix.determinant import triangularize
from pymatrix.gauss import solve


MENU = (
    "A - add another matrix",
    "B - subtract another matrix",
    "C - multiply by a number",
    "D - multiply by another matrix",
    "E - determinant",
    "F - trace",
    "H - transpose",
    "G - solve the linear system (Gauss)",
    "Q - start over",
    "anything else - quit",
)


class MatrixSession:
    """
    Menu-driven calculator over one working matrix.

    Args:
        input_fn: Called with a prompt, returns the user's line (default: input)
        output_fn: Called with each line of output (default: print)
        rng: Generator or seed for random matrices
        file_path: Text file read when the user picks file entry
    """

    def __init__(
        self,
        *,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], Any] | None = None,
        rng: np.random.Generator | int | None = None,
        file_path: str | Path = 'input.txt',
    ):
        self._input = input_fn if input_fn is not None else input
        self._output = output_fn if output_fn is not None else print
        self._rng = np.random.default_rng(rng)
        self._file_path = Path(file_path)
        self.matrix: NDArray[np.floating[Any]] | None = None

    # === Driver ===

    def run(self) -> None:
        """Obtain a matrix, then serve menu actions until the user quits."""
        self._say("Let's start with a matrix.")
        self.start()
        while True:
            self._show_menu()
            choice = self._ask("Action: ").strip().upper()
            if choice == 'Q':
                self.start()
                continue
            action = self._actions().get(choice)
            if action is None:
                self._say("Bye.")
                return
            action()

    def start(self) -> None:
        """Pick a size and an entry mode and load the working matrix."""
        rows, columns = self.ask_dimensions()
        mode = self._ask(
            "Press Enter to generate the matrix, or type anything to enter it yourself: "
        )
        if mode == '':
            source = MatrixSource.random(rows, columns, rng=self._rng)
        elif self._ask("Send 0 to read it from a file, anything else for the keyboard: ").strip() == '0':
            source = self.load_file(rows, columns)
        else:
            source = self.ask_matrix(rows, columns)
        self.matrix = source.matrix
        self._show(self.matrix)

    # === Prompts ===

    def ask_dimensions(self) -> tuple[int, int]:
        """Rows and columns, each an integer in [MIN_DIMENSION, MAX_DIMENSION]."""
        columns = self._ask_int("Number of columns")
        rows = self._ask_int("Number of rows")
        self._say(f"Matrix size: {rows}x{columns}")
        return rows, columns

    def ask_matrix(self, rows: int, columns: int) -> MatrixSource:
        """Typed entry, top row first. Any bad row restarts the entry."""
        self._say(
            f"Enter {rows} rows of {columns} numbers separated by spaces, "
            f"each within [-{VALUE_BOUND:g}, {VALUE_BOUND:g}]."
        )
        while True:
            try:
                lines = []
                for i in range(rows):
                    line = self._ask(f"Row {i + 1}: ")
                    parse_row(line, columns, i)
                    lines.append(line)
                return MatrixSource.from_rows(lines, rows=rows, columns=columns)
            except ValidationError as e:
                self._say(f"{e}. Let's start the entry again.")

    def load_file(self, rows: int, columns: int) -> MatrixSource:
        """Read the matrix from the session file, waiting for fixes on failure."""
        while True:
            try:
                return MatrixSource.from_file(self._file_path, rows=rows, columns=columns)
            except (ValidationError, OSError) as e:
                self._say(f"Could not read {self._file_path}: {e}")
                self._ask(
                    f"Put a {rows}x{columns} matrix into {self._file_path} "
                    f"and press Enter when ready."
                )

    def ask_scalar(self) -> float:
        """A factor within the value range, used as typed (not rounded)."""
        while True:
            try:
                return parse_scalar(self._ask("Number: ").strip(), 'number')
            except ValidationError as e:
                self._say(f"{e}. Try again.")

    # === Menu actions ===

    def _actions(self) -> dict[str, Callable[[], None]]:
        return {
            'A': self.do_add,
            'B': self.do_subtract,
            'C': self.do_scalar_multiply,
            'D': self.do_multiply,
            'E': self.do_determinant,
            'F': self.do_trace,
            'H': self.do_transpose,
            'G': self.do_gauss,
        }

    def do_add(self) -> None:
        rows, columns = self.matrix.shape
        self._say("The second matrix must have the same size.")
        other = self.ask_matrix(rows, columns).matrix
        self._show(algebra.add(self.matrix, other), "Sum:")

    def do_subtract(self) -> None:
        rows, columns = self.matrix.shape
        self._say("The second matrix must have the same size.")
        other = self.ask_matrix(rows, columns).matrix
        self._show(algebra.subtract(self.matrix, other), "Difference:")

    def do_scalar_multiply(self) -> None:
        k = self.ask_scalar()
        self._show(algebra.scalar_multiply(self.matrix, k), "Product:")

    def do_multiply(self) -> None:
        columns = self.matrix.shape[1]
        self._say(f"The second matrix needs {columns} rows.")
        while True:
            other_rows, other_columns = self.ask_dimensions()
            if algebra.can_multiply(self.matrix.shape, (other_rows, other_columns)):
                break
            self._say(f"That does not fit: {columns} rows are needed.")
        other = self.ask_matrix(other_rows, other_columns).matrix
        self._show(algebra.multiply(self.matrix, other), "Product:")

    def do_determinant(self) -> None:
        try:
            solution = triangularize(self.matrix)
        except NotSquareError:
            self._say("The determinant needs a square matrix.")
            return
        self._say(f"Determinant: {format_value(solution.determinant)}")
        for w in solution.warnings:
            self._say(f"Warning: {w}")

    def do_trace(self) -> None:
        try:
            value = algebra.trace(self.matrix)
        except NotSquareError:
            self._say("The trace needs a square matrix.")
            return
        self._say(f"Trace: {format_value(value)}")

    def do_transpose(self) -> None:
        self._show(algebra.transpose(self.matrix), "Transposed:")

    def do_gauss(self) -> None:
        try:
            with warnings.catch_warnings():
                # Zero pivots are printed from the solution's own warnings
                warnings.simplefilter('ignore', RuntimeWarning)
                result = solve(self.matrix)
        except DimensionContractError:
            self._say("The solver needs exactly one more column than rows.")
            return
        self._say(
            "The answer is correct only without zero or duplicate rows; "
            "values are rounded to 3 decimals."
        )
        self._say(result.summary())

    # === Output helpers ===

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _ask_int(self, label: str) -> int:
        while True:
            text = self._ask(f"{label} ({MIN_DIMENSION}-{MAX_DIMENSION}): ").strip()
            try:
                value = int(text)
            except ValueError:
                self._say(f"{text!r} is not a whole number. Try again.")
                continue
            if MIN_DIMENSION <= value <= MAX_DIMENSION:
                return value
            self._say(f"It must be between {MIN_DIMENSION} and {MAX_DIMENSION}. Try again.")

    def _say(self, text: str) -> None:
        self._output(text)

    def _show(self, matrix: NDArray[np.floating[Any]], title: str = "Matrix:") -> None:
        self._say(title)
        self._say(format_matrix(matrix))

    def _show_menu(self) -> None:
        self._say("")
        for line in MENU:
            self._say(line)
