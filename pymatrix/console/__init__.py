"""
Interactive console for PyMatrix.

Public API:
    MatrixSession - menu-driven session with injectable input/output
    main(args)    - `pymatrix` command entry point
"""

from pymatrix.console.session import MatrixSession
from pymatrix.console.cli import main

__all__ = ["MatrixSession", "main"]
