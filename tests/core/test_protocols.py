"""
Every backend satisfies the structural Backend protocol.
"""

import pytest

from pymatrix.core.protocols import Backend
from pymatrix.determinant.backends import CPUTriangularBackend
from pymatrix.gauss.backends import CPUInRowGaussBackend, CPUPartialPivotGaussBackend


@pytest.mark.parametrize("backend, name", [
    (CPUTriangularBackend(), 'cpu_triangular'),
    (CPUInRowGaussBackend(), 'cpu_inrow'),
    (CPUPartialPivotGaussBackend(check_singular=True), 'cpu_partial'),
])
def test_backend_protocol(backend, name):
    assert isinstance(backend, Backend)
    assert backend.name == name


def test_plain_object_is_not_backend():
    assert not isinstance(object(), Backend)
