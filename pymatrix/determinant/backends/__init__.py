"""Triangularization backends."""

from pymatrix.determinant.backends.cpu import CPUTriangularBackend, eliminate_below

__all__ = ["CPUTriangularBackend", "eliminate_below"]
