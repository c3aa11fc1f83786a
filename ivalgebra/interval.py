from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, Protocol, Self, TypeVar


class Comparable(Protocol):
    """Anything with a total order usable as an interval endpoint."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


class Interval(ABC, Generic[T]):
    """A range over an ordered domain with independently inclusive endpoints.

    Subclasses supply ``start``, ``start_inclusive``, ``end`` and
    ``end_inclusive`` (as fields or properties) and implement
    :meth:`with_bounds`, which the algebra uses to build derived intervals
    of the same concrete type.

    Instances are immutable. Operators delegate to :mod:`ivalgebra.core`:
    ``a & b`` is :func:`intersect`, ``a | b`` is :func:`union`, ``a - b`` is
    :func:`difference` and ``x in a`` is :func:`contains`.

    Example:
        >>> from ivalgebra import NumericInterval
        >>> a = NumericInterval.closed_open(0, 3)
        >>> b = NumericInterval.closed(2, 5)
        >>> str(a & b)
        '[2,3)'
        >>> [str(piece) for piece in a - b]
        ['[0,2)']
        >>> 3 in a
        False
    """

    start: T
    start_inclusive: bool
    end: T
    end_inclusive: bool

    @abstractmethod
    def with_bounds(
        self, start: T, start_inclusive: bool, end: T, end_inclusive: bool
    ) -> Self:
        """Return a new interval of this type with the given bounds."""
        pass

    @property
    def bounds(self) -> tuple[T, bool, T, bool]:
        """The resolved ``(start, start_inclusive, end, end_inclusive)`` tuple."""
        return (self.start, self.start_inclusive, self.end, self.end_inclusive)

    @property
    def is_empty(self) -> bool:
        from ivalgebra.core import is_empty

        return is_empty(self)

    def __contains__(self, item: "T | Interval[T] | None") -> bool:
        from ivalgebra.core import contains

        return contains(self, item)

    def __and__(self, other: "Interval[T] | None") -> "Interval[T] | None":
        from ivalgebra.core import intersect

        return intersect(self, other)

    def __or__(
        self, other: "Interval[T] | Iterable[Interval[T]] | None"
    ) -> "list[Interval[T]] | None":
        from ivalgebra.core import union

        return union(self, other)

    def __sub__(
        self, other: "Interval[T] | Iterable[Interval[T]] | None"
    ) -> "list[Interval[T]] | None":
        from ivalgebra.core import difference

        return difference(self, other)

    def __str__(self) -> str:
        """Mathematical notation, e.g. ``[0,3)``."""
        return (
            ("[" if self.start_inclusive else "(")
            + f"{self.start},{self.end}"
            + ("]" if self.end_inclusive else ")")
        )


Ivl = TypeVar("Ivl", bound="Interval[Any]")
