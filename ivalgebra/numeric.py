from dataclasses import dataclass, replace
from typing import Generic

from typing_extensions import override

from ivalgebra.interval import Interval, T


@dataclass(frozen=True, kw_only=True)
class NumericInterval(Interval[T], Generic[T]):
    """Interval between numbers, each endpoint independently inclusive.

    No ordering is enforced between ``start`` and ``end``: a reversed
    interval is simply empty.
    """

    start: T
    start_inclusive: bool = True
    end: T
    end_inclusive: bool = True

    @classmethod
    def closed(cls, start: T, end: T) -> "NumericInterval[T]":
        """``[start, end]``"""
        return cls(start=start, start_inclusive=True, end=end, end_inclusive=True)

    @classmethod
    def open(cls, start: T, end: T) -> "NumericInterval[T]":
        """``(start, end)``"""
        return cls(start=start, start_inclusive=False, end=end, end_inclusive=False)

    @classmethod
    def closed_open(cls, start: T, end: T) -> "NumericInterval[T]":
        """``[start, end)``"""
        return cls(start=start, start_inclusive=True, end=end, end_inclusive=False)

    @classmethod
    def open_closed(cls, start: T, end: T) -> "NumericInterval[T]":
        """``(start, end]``"""
        return cls(start=start, start_inclusive=False, end=end, end_inclusive=True)

    @classmethod
    def point(cls, value: T) -> "NumericInterval[T]":
        """The degenerate interval ``[value, value]``."""
        return cls.closed(value, value)

    @override
    def with_bounds(
        self, start: T, start_inclusive: bool, end: T, end_inclusive: bool
    ) -> "NumericInterval[T]":
        return replace(
            self,
            start=start,
            start_inclusive=start_inclusive,
            end=end,
            end_inclusive=end_inclusive,
        )
