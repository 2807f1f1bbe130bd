"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of comparison:
- CPU FP64: raw engine output against a reference (numpy, scipy)
- Round trip: algebraic identities such as (A + B) - B == A
- Display: values already rounded to DISPLAY_DECIMALS

Used by the test suite and by the singularity check of the Gauss backends.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Engine output vs LAPACK reference on well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches numpy/scipy',
)

# Elimination without pivoting loses digits on ill-conditioned input
CPU_FP64_NO_PIVOTING = ToleranceTier(
    rtol=1e-7,
    atol=1e-9,
    name='cpu_fp64_no_pivoting',
    description='CPU double precision, elimination without row interchange',
)

# Algebraic identities over entries bounded by VALUE_BOUND
ROUND_TRIP = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='round_trip',
    description='Identity checks such as (A + B) - B == A',
)

# Values rounded to three decimals
DISPLAY = ToleranceTier(
    rtol=0.0,
    atol=5e-4,
    name='display',
    description='Half a unit in the third decimal place',
)

# A pivot smaller than this (in magnitude) counts as zero when singularity
# detection is requested.
SINGULAR_PIVOT_ATOL = 1e-12


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier a backend's raw output should meet."""
    if backend_name in ('cpu_inrow', 'cpu_triangular'):
        return CPU_FP64_NO_PIVOTING
    return CPU_FP64
