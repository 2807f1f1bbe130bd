"""Gauss solver backends."""

from pymatrix.gauss.backends.cpu import CPUInRowGaussBackend
from pymatrix.gauss.backends.cpu_partial import CPUPartialPivotGaussBackend

__all__ = ["CPUInRowGaussBackend", "CPUPartialPivotGaussBackend"]
