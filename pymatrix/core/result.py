"""
Generic result container for PyMatrix computations.

The Result class provides a standardized envelope that algorithm results
use. This enables shared tooling for timing, reproducibility and
diagnostics while letting each algorithm define its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, swaps, rank)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every result unless overridden."""
    from pymatrix import __version__

    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The algorithm-specific parameter payload type

    Attributes:
        params: Algorithm-specific payload (echelon form, swap count, ...)
        info: Structured metadata (method, rank, swaps)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=EliminationParams(...),
        ...     info={'method': 'gaussian_partial_pivot', 'swaps': 1},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
