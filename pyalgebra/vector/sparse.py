"""
Sparse vector storage.

Only non-zero elements are stored, in an index map; every absent index
holds the vector's designated zero. The map is kept canonical: no stored
element ever equals the zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from pyalgebra.core.exceptions import IllegalConfigurationError
from pyalgebra.core.protocols import is_zero
from pyalgebra.core.validation import (
    check_element_types,
    check_index,
    check_indices,
    check_non_empty,
    check_same_dimension,
    check_zero,
)
from pyalgebra.vector.vector import Vector


@dataclass(frozen=True, eq=False, repr=False)
class SparseVector(Vector):
    """
    Vector backed by an ``{index: element}`` map plus an explicit zero.

    Construction:
        SparseVector.value_of(2, x, 5)              # single entry x at index 2
        SparseVector.from_map({0: a, 3: b}, zero, 5)
        SparseVector.from_vector(v)                 # discovers the zero
        SparseVector.from_vector(v, zero, cmp)      # zero given, cmp decides

    The zero must satisfy ``is_zero(zero)``.
    """
    _dimension: int
    _zero: Any
    _elements: Mapping[int, Any]

    @classmethod
    def value_of(cls, index: int, element: Any, dimension: int) -> SparseVector:
        """
        Vector of ``dimension`` zeros except ``element`` at ``index``.

        The zero is derived as ``element.plus(element.opposite())``; if
        ``element`` is itself a zero, the vector is all zeros.

        Raises:
            IllegalConfigurationError: If index is outside [0, dimension)
        """
        if index < 0 or index >= dimension:
            raise IllegalConfigurationError(
                f"index: {index} out of range for dimension {dimension}"
            )
        if is_zero(element):
            return cls._build(dimension, element, {})
        return cls._build(dimension, element.plus(element.opposite()), {index: element})

    @classmethod
    def from_map(cls, elements: Mapping[int, Any], zero: Any, dimension: int) -> SparseVector:
        """
        Vector from an index map and a declared zero.

        Entries equal to the zero are dropped.

        Raises:
            IllegalConfigurationError: If an index is outside [0, dimension),
                dimension is not positive, or zero is not a zero
            ValidationError: If elements and zero mix element types
        """
        if dimension < 1:
            raise IllegalConfigurationError(f"dimension: must be positive, got {dimension}")
        check_zero(zero, 'zero')
        check_element_types([zero, *elements.values()], 'elements')
        for index in elements:
            if index < 0 or index >= dimension:
                raise IllegalConfigurationError(
                    f"elements: found index {index} but vector dimension is {dimension}"
                )
        return cls._build(
            dimension, zero, {i: e for i, e in elements.items() if e != zero}
        )

    @classmethod
    def from_vector(
        cls,
        that: Vector,
        zero: Any = None,
        comparator: Callable[[Any, Any], int] | None = None,
    ) -> SparseVector:
        """
        Sparse copy of any vector.

        Args:
            that: Source vector
            zero: Declared zero. If None, the first element for which
                ``is_zero`` holds is used; failing that, a zero is derived from
                ``that.get(0)``.
            comparator: Decides which elements count as zero when ``zero``
                is given (``comparator(e, zero) == 0`` drops ``e``).
                Defaults to exact equality.

        Raises:
            IllegalConfigurationError: If the declared zero is not a zero
        """
        if zero is None:
            if isinstance(that, SparseVector):
                return that
            elements = {}
            for i, element in enumerate(that):
                if is_zero(element):
                    if zero is None:
                        zero = element
                else:
                    elements[i] = element
            if zero is None:
                first = that.get(0)
                zero = first.plus(first.opposite())
            return cls._build(that.dimension, zero, elements)

        check_zero(zero, 'zero')
        if comparator is None:
            keep = {i: e for i, e in enumerate(that) if e != zero}
        else:
            keep = {i: e for i, e in enumerate(that) if comparator(e, zero) != 0}
        return cls._build(that.dimension, zero, keep)

    @classmethod
    def _build(cls, dimension: int, zero: Any, elements: dict[int, Any]) -> SparseVector:
        """Internal builder; ``elements`` must already be canonical."""
        return cls(dimension, zero, MappingProxyType(dict(sorted(elements.items()))))

    # === Properties ===

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def zero(self) -> Any:
        """Value of every absent index."""
        return self._zero

    @property
    def elements(self) -> Mapping[int, Any]:
        """Read-only view of the stored (non-zero) entries, by ascending index."""
        return self._elements

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self._elements)

    @property
    def element_type(self) -> type:
        return type(self._zero)

    # === Storage primitives ===

    def get(self, i: int) -> Any:
        check_index(i, self._dimension, 'i')
        return self._elements.get(i, self._zero)

    def sub_vector(self, indices: Sequence[int]) -> SparseVector:
        check_indices(indices, self._dimension, 'indices')
        check_non_empty(indices, 'indices')
        elements = {
            k: self._elements[i]
            for k, i in enumerate(indices)
            if i in self._elements
        }
        return SparseVector._build(len(indices), self._zero, elements)

    def opposite(self) -> SparseVector:
        return SparseVector._build(
            self._dimension,
            self._zero,
            {i: e.opposite() for i, e in self._elements.items()},
        )

    def plus(self, that: Vector) -> SparseVector:
        check_same_dimension(self._dimension, that.dimension, 'plus')
        if not isinstance(that, SparseVector):
            that = SparseVector.from_vector(that, self._zero)
        zero = self._zero
        elements = dict(self._elements)
        for i, e in that._elements.items():
            if i not in elements:
                elements[i] = e
                continue
            total = elements[i].plus(e)
            if zero == total:
                del elements[i]
            else:
                elements[i] = total
        return SparseVector._build(self._dimension, zero, elements)

    def times(self, k: Any) -> SparseVector:
        zero = self._zero
        elements = {}
        for i, e in self._elements.items():
            product = e.times(k)
            if zero != product:
                elements[i] = product
        return SparseVector._build(self._dimension, zero, elements)

    def dot(self, that: Vector) -> Any:
        """
        Scalar product over the stored entries only.

        Absent entries contribute ``zero × x == zero`` and are skipped;
        stored entries are accumulated by ascending index.
        """
        check_same_dimension(self._dimension, that.dimension, 'dot')
        total = None
        for i, e in self._elements.items():
            product = e.times(that.get(i))
            total = product if total is None else total.plus(product)
        return self._zero if total is None else total
