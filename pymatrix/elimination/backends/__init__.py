"""
Elimination backends.

    cpu:       row-vectorized inner loop (default)
    reference: scalar loops over the flat row-major buffer
"""

from pymatrix.elimination.backends.cpu import CPUEliminationBackend
from pymatrix.elimination.backends.reference import ReferenceEliminationBackend

__all__ = [
    "CPUEliminationBackend",
    "ReferenceEliminationBackend",
]
