"""
Vector contract.

A Vector is an immutable, fixed-dimension ordered sequence of elements of
one runtime type. Storage is a closed set of variants (DenseVector,
SparseVector); this base class holds the algorithms every variant shares
and leaves the storage-specific operations abstract.

Every product accumulates left to right and keeps ``left.times(right)``
order, so vectors over non-commutative rings stay exact.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Sequence, TYPE_CHECKING

from pyalgebra.core.compute.tolerances import approximate_comparator, select_tolerance
from pyalgebra.core.validation import check_same_dimension

if TYPE_CHECKING:
    from pyalgebra.matrix.dense import DenseMatrix
    from pyalgebra.vector.dense import DenseVector


class Vector(ABC):
    """
    Abstract fixed-dimension vector.

    Subclasses provide ``dimension``, ``get``, ``sub_vector``, ``opposite``,
    ``plus`` and ``times``. Equality and hashing are element-wise and
    independent of storage: a SparseVector equals the DenseVector holding
    the same elements.
    """

    __slots__ = ()

    # === Storage primitives ===

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def get(self, i: int) -> Any:
        """
        Element at index ``i``.

        Raises:
            IndexOutOfRangeError: If i is outside [0, dimension)
        """
        ...

    @abstractmethod
    def sub_vector(self, indices: Sequence[int]) -> Vector:
        """
        Vector whose element k is ``get(indices[k])``.

        Indices may be reordered and repeated.

        Raises:
            DimensionError: If any index is outside [0, dimension)
        """
        ...

    @abstractmethod
    def opposite(self) -> Vector:
        """Element-wise additive inverse."""
        ...

    @abstractmethod
    def plus(self, that: Vector) -> Vector:
        """
        Element-wise sum.

        Raises:
            DimensionError: If dimensions differ
        """
        ...

    @abstractmethod
    def times(self, k: Any) -> Vector:
        """Element-wise right product ``get(i).times(k)``."""
        ...

    # === Shared algorithms ===

    def minus(self, that: Vector) -> Vector:
        """
        Element-wise difference ``self + (-that)``.

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_dimension(self.dimension, that.dimension, 'minus')
        return self.plus(that.opposite())

    def dot(self, that: Vector) -> Any:
        """
        Scalar product.

        Accumulates ``get(i).times(that.get(i))`` from i = 0 upward.

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_dimension(self.dimension, that.dimension, 'dot')
        total = self.get(0).times(that.get(0))
        for i in range(1, self.dimension):
            total = total.plus(self.get(i).times(that.get(i)))
        return total

    def cross(self, that: Vector) -> DenseVector:
        """
        Cross product of two 3-dimensional vectors.

        Raises:
            DimensionError: If either operand is not 3-dimensional
        """
        from pyalgebra.vector.dense import DenseVector

        check_same_dimension(3, self.dimension, 'cross')
        check_same_dimension(3, that.dimension, 'cross')
        a0, a1, a2 = self.get(0), self.get(1), self.get(2)
        b0, b1, b2 = that.get(0), that.get(1), that.get(2)
        return DenseVector((
            a1.times(b2).plus(a2.times(b1).opposite()),
            a2.times(b0).plus(a0.times(b2).opposite()),
            a0.times(b1).plus(a1.times(b0).opposite()),
        ))

    def as_row_matrix(self) -> DenseMatrix:
        """This vector as a ``1 × dimension`` matrix."""
        from pyalgebra.matrix.dense import DenseMatrix
        from pyalgebra.vector.dense import DenseVector

        return DenseMatrix((DenseVector(tuple(self)),))

    def as_column_matrix(self) -> DenseMatrix:
        """This vector as a ``dimension × 1`` matrix."""
        from pyalgebra.matrix.dense import DenseMatrix
        from pyalgebra.vector.dense import DenseVector

        return DenseMatrix(tuple(DenseVector((e,)) for e in self))

    def equals(
        self,
        that: Vector,
        comparator: Callable[[Any, Any], int] | None = None,
    ) -> bool:
        """
        Element-wise equality through a comparator.

        Args:
            that: Vector to compare with
            comparator: Returns 0 when two elements are considered equal,
                e.g. ``approximate_comparator(FLOAT64)``. Defaults to the
                tolerance tier of this vector's element type.

        Returns:
            True if dimensions match and every element pair compares 0
        """
        if self is that:
            return True
        if self.dimension != that.dimension:
            return False
        if comparator is None:
            comparator = approximate_comparator(select_tolerance(self.element_type))
        return all(
            comparator(self.get(i), that.get(i)) == 0
            for i in range(self.dimension)
        )

    @property
    def element_type(self) -> type:
        """Runtime type shared by every element."""
        return type(self.get(0))

    # === Python protocol ===

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.dimension):
            yield self.get(i)

    def __getitem__(self, i: int) -> Any:
        return self.get(i)

    def __eq__(self, that: object) -> bool:
        if self is that:
            return True
        if not isinstance(that, Vector):
            return NotImplemented
        if self.dimension != that.dimension:
            return False
        return all(self.get(i) == that.get(i) for i in range(self.dimension))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __neg__(self) -> Vector:
        return self.opposite()

    def __add__(self, that: Any) -> Vector:
        if not isinstance(that, Vector):
            return NotImplemented
        return self.plus(that)

    def __sub__(self, that: Any) -> Vector:
        if not isinstance(that, Vector):
            return NotImplemented
        return self.minus(that)

    def __mul__(self, k: Any) -> Vector:
        if isinstance(k, Vector):
            return NotImplemented
        return self.times(k)

    def __matmul__(self, that: Any) -> Any:
        if not isinstance(that, Vector):
            return NotImplemented
        return self.dot(that)

    def __str__(self) -> str:
        return '{' + ', '.join(str(e) for e in self) + '}'

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
