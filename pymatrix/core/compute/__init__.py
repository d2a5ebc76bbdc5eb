"""
Shared compute infrastructure for PyMatrix.

This module provides timing utilities and tolerance tiers shared by the
elimination backends and the test suite.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
