"""
Core protocols for pyalgebra.

These define structural interfaces that element types and backends must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that any user type exposing the right methods can be placed in
a vector or matrix without inheriting from a library class.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Capability-driven: ordering (Numeric) is optional, not required
    - Type-safe: use generics to preserve element types through pipelines
"""

from typing import Any, Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pyalgebra.core.result import Result

F = TypeVar('F', bound='FieldElement')  # Element type
D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class FieldElement(Protocol):
    """
    Capability set every vector/matrix element must expose.

    Addition must commute; multiplication need not (quaternions,
    matrix-valued elements). Every algorithm in pyalgebra fixes the
    left-to-right order of ``times`` so non-commutative rings stay exact.

    Equality is exact (``==``). A value equal to its own opposite is
    treated as the additive identity unless the type defines
    ``is_zero()`` (see is_zero below).
    """

    def plus(self: F, that: F) -> F:
        """Sum ``self + that``."""
        ...

    def opposite(self: F) -> F:
        """Additive inverse ``-self``."""
        ...

    def times(self: F, that: F) -> F:
        """Product ``self × that`` (order matters)."""
        ...

    def inverse(self: F) -> F:
        """
        Multiplicative inverse.

        Raises:
            ArithmeticError: If the element has no inverse (zero, or a
                non-unit of a ring). ZeroDivisionError is a subclass.
        """
        ...


def is_zero(element: Any) -> bool:
    """
    True if ``element`` is the additive identity.

    Types that define ``is_zero()`` answer for themselves. This matters for
    wrap-around integers, where the most negative value is also its own
    opposite. Any other element counts as zero when it equals its opposite.
    """
    test = getattr(element, 'is_zero', None)
    if callable(test):
        return test()
    return element == element.opposite()


@runtime_checkable
class Numeric(Protocol):
    """
    Optional ordering capability used for pivoting and tolerances.

    Elements implementing it are ranked by magnitude by the default pivot
    comparator, and can be compared approximately by tolerance tiers.
    """

    def magnitude(self) -> float:
        """Absolute value (modulus) as a float."""
        ...

    def is_larger_than(self, that: 'Numeric') -> bool:
        """True if ``|self| > |that|``."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result envelope.

    Backends are stateless: all configuration is passed via the design
    or at construction time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'generic_doolittle', 'float64_lapack'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
