"""
Core protocols for PyMatrix.

These define structural interfaces that algorithm implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so backends need no common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pymatrix.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take an algorithm-specific design (a
    validated, owned copy of the input) and produce a parameter payload
    wrapped in a Result.

    Backends are stateless: all inputs arrive through the design. This
    makes them easy to test and to swap against each other.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'cpu', 'reference'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
