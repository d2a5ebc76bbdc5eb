"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the elimination backends:
- CPU FP64: both backends run in double precision and agree bit-for-bit;
  comparisons against LAPACK (scipy/numpy) differ only by summation order
- CPU FP64 ill-conditioned: relaxed for matrices with cond > 1e4

Used by Matrix.allclose and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision: matches LAPACK to machine precision on well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches LAPACK reference',
)

# Double precision, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    # All backends compute in float64.
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
