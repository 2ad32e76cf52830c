"""
Dense vector storage.

Every element is stored explicitly in a tuple, so access is O(1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from pyalgebra.core.validation import (
    check_element_types,
    check_index,
    check_indices,
    check_non_empty,
    check_same_dimension,
)
from pyalgebra.vector.vector import Vector


@dataclass(frozen=True, eq=False, repr=False)
class DenseVector(Vector):
    """
    Vector backed by a tuple of elements.

    Construction:
        DenseVector.value_of([a, b, c])      # from elements
        DenseVector.from_vector(v)           # densify any vector

    The constructor itself trusts its input; the classmethods validate.
    """
    _elements: tuple

    @classmethod
    def value_of(cls, elements: Iterable[Any]) -> DenseVector:
        """
        Build a vector from a non-empty sequence of same-typed elements.

        Raises:
            ValidationError: If elements is empty or mixes element types
        """
        elements = tuple(elements)
        check_non_empty(elements, 'elements')
        check_element_types(elements, 'elements')
        return cls(elements)

    @classmethod
    def from_vector(cls, that: Vector) -> DenseVector:
        """Dense copy of any vector (returns ``that`` if already dense)."""
        if isinstance(that, DenseVector):
            return that
        return cls(tuple(that))

    # === Properties ===

    @property
    def dimension(self) -> int:
        return len(self._elements)

    @property
    def elements(self) -> tuple:
        """The stored elements, in order."""
        return self._elements

    # === Storage primitives ===

    def get(self, i: int) -> Any:
        check_index(i, len(self._elements), 'i')
        return self._elements[i]

    def sub_vector(self, indices: Sequence[int]) -> DenseVector:
        check_indices(indices, len(self._elements), 'indices')
        check_non_empty(indices, 'indices')
        return DenseVector(tuple(self._elements[i] for i in indices))

    def opposite(self) -> DenseVector:
        return DenseVector(tuple(e.opposite() for e in self._elements))

    def plus(self, that: Vector) -> DenseVector:
        check_same_dimension(self.dimension, that.dimension, 'plus')
        return DenseVector(tuple(a.plus(b) for a, b in zip(self._elements, that)))

    def times(self, k: Any) -> DenseVector:
        return DenseVector(tuple(e.times(k) for e in self._elements))

    def dot(self, that: Vector) -> Any:
        check_same_dimension(self.dimension, that.dimension, 'dot')
        elements = self._elements
        total = elements[0].times(that.get(0))
        for i in range(1, len(elements)):
            total = total.plus(elements[i].times(that.get(i)))
        return total

    def __iter__(self):
        return iter(self._elements)

    def __hash__(self) -> int:
        return hash(self._elements)
