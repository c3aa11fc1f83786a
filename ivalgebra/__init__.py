from .core import contains, difference, intersect, is_empty, same_bounds, simplify, union
from .interval import Comparable, Interval
from .numeric import NumericInterval
from .text import StringInterval

__all__ = [
    "Interval",
    "Comparable",
    "NumericInterval",
    "StringInterval",
    "is_empty",
    "contains",
    "intersect",
    "union",
    "simplify",
    "difference",
    "same_bounds",
]
