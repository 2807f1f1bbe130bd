"""
PyMatrix: a dense real matrix calculator.

Matrix construction (random generation, typed rows, files), elementary
algebra, determinants by triangularization, and Gaussian elimination for
square linear systems.

Submodules:
    algebra: add, subtract, scalar_multiply, multiply, transpose, trace
    determinant: triangularize, det
    gauss: solve, solve_system
    console: interactive menu session
"""

__version__ = "0.1.0"

from pymatrix import algebra
from pymatrix import determinant
from pymatrix import gauss
from pymatrix.core.datasource import MatrixSource

__all__ = [
    "__version__",
    "algebra",
    "determinant",
    "gauss",
    "MatrixSource",
]
