import logging
from collections import deque
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any, overload

from ivalgebra.interval import Comparable, Interval, Ivl, T

logger = logging.getLogger(__name__)


def _compare(left: Comparable, right: Comparable) -> int:
    """Three-way comparison using only ``<`` and ``>``."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _is_single(item: Any) -> bool:
    return item is None or isinstance(item, Interval)


def _require_collection(item: Any, role: str) -> None:
    if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
        raise TypeError(
            f"{role} must be an Interval, an iterable of Intervals, or None.\n"
            f"Got {type(item).__name__!r}: {item!r}\n"
            f"Hint: wrap a single interval in a list: [interval]"
        )


def _members(item: Any, role: str) -> list[Interval[Any]]:
    """Materialise an interval, collection or None into a list of intervals."""
    if item is None:
        return []
    if isinstance(item, Interval):
        return [item]
    _require_collection(item, role)
    return list(item)


def same_bounds(a: "Interval[Any] | None", b: "Interval[Any] | None") -> bool:
    """True if both intervals resolve to the same endpoints and inclusivity.

    Concrete representation is ignored, so a ``StringInterval`` and a
    ``NumericInterval`` covering ``[2, 5)`` compare equal here.
    """
    if a is None or b is None:
        return a is b
    return (
        _compare(a.start, b.start) == 0
        and a.start_inclusive == b.start_inclusive
        and _compare(a.end, b.end) == 0
        and a.end_inclusive == b.end_inclusive
    )


@overload
def is_empty(item: "Interval[Any] | None") -> bool: ...


@overload
def is_empty(item: "Iterable[Interval[Any]]") -> bool: ...


def is_empty(item: "Interval[Any] | Iterable[Interval[Any]] | None") -> bool:
    """True if ``item`` covers no values.

    An interval is empty when its start lies after its end, or when both
    are equal and either endpoint is exclusive. A collection is empty when
    every member is. ``None`` is always empty.
    """
    if item is None:
        return True

    if isinstance(item, Interval):
        start_to_end = _compare(item.start, item.end)
        if start_to_end > 0:
            return True
        if start_to_end == 0 and not (item.start_inclusive and item.end_inclusive):
            return True
        return False

    _require_collection(item, "is_empty() argument")
    for interval in item:
        if not is_empty(interval):
            return False
    return True


def contains(
    container: "Interval[T] | Iterable[Interval[T]] | None",
    item: "T | Interval[T] | None",
) -> bool:
    """Test whether ``container`` holds a value or wholly holds an interval.

    ``item`` is treated as an interval when it is an ``Interval`` or
    ``None``, and as a domain value otherwise. Every interval, including an
    empty one, contains every empty interval.

    A collection container is only supported for values: it contains the
    value if any member does.
    """
    if _is_single(item):
        return _contains_interval(container, item)  # type: ignore[arg-type]

    if _is_single(container):
        return _contains_value(container, item)  # type: ignore[arg-type]

    return any(
        _contains_value(interval, item)
        for interval in _members(container, "contains() container")
    )


def _contains_value(interval: "Interval[T] | None", value: T) -> bool:
    if interval is None or is_empty(interval):
        return False

    start = _compare(interval.start, value)
    end = _compare(interval.end, value)

    if (interval.start_inclusive and start == 0) or (
        interval.end_inclusive and end == 0
    ):
        return True

    if start >= 0 or end <= 0:
        return False

    return True


def _contains_interval(
    container: "Interval[T] | Iterable[Interval[T]] | None",
    other: "Interval[T] | None",
) -> bool:
    if is_empty(other):
        return True

    if not _is_single(container):
        raise TypeError(
            f"contains() only tests interval containment against a single interval.\n"
            f"Got container of type {type(container).__name__!r}\n"
            f"Hint: simplify the collection and test each member, or use "
            f"difference(other, collection) is None"
        )

    intersection = intersect(other, container)  # type: ignore[arg-type]
    return not is_empty(intersection) and same_bounds(intersection, other)


def intersect(a: "Ivl | None", b: "Ivl | None") -> "Ivl | None":
    """Return the values common to ``a`` and ``b``, or None if there are none.

    Algorithm: take the later start and the earlier end. On a tie the bound
    is inclusive only if it is inclusive in both. Provenance flags record
    whether each resolved bound is exactly ``a``'s or ``b``'s, so that an
    input which already equals the result is returned as-is rather than
    copied. New intervals are built with ``a.with_bounds``.
    """
    if a is None or b is None or is_empty(a) or is_empty(b):
        return None

    start_from_a = start_from_b = end_from_a = end_from_b = False

    start_to_start = _compare(a.start, b.start)
    if start_to_start > 0:
        start, start_inclusive = a.start, a.start_inclusive
        start_from_a = True
    elif start_to_start < 0:
        start, start_inclusive = b.start, b.start_inclusive
        start_from_b = True
    else:
        start = a.start
        start_inclusive = a.start_inclusive and b.start_inclusive
        start_from_a = start_inclusive == a.start_inclusive
        start_from_b = start_inclusive == b.start_inclusive

    end_to_end = _compare(a.end, b.end)
    if end_to_end < 0:
        end, end_inclusive = a.end, a.end_inclusive
        end_from_a = True
    elif end_to_end > 0:
        end, end_inclusive = b.end, b.end_inclusive
        end_from_b = True
    else:
        end = a.end
        end_inclusive = a.end_inclusive and b.end_inclusive
        end_from_a = end_inclusive == a.end_inclusive
        end_from_b = end_inclusive == b.end_inclusive

    start_to_end = _compare(start, end)
    if start_to_end > 0:
        return None
    if start_to_end == 0 and not (start_inclusive and end_inclusive):
        return None

    if start_from_a and end_from_a:
        return a
    if start_from_b and end_from_b:
        return b

    return a.with_bounds(start, start_inclusive, end, end_inclusive)


def union(
    a: "Ivl | Iterable[Ivl] | None", b: "Ivl | Iterable[Ivl] | None"
) -> "list[Ivl] | None":
    """Return the values in either ``a`` or ``b``.

    For two single intervals the result is ``[merged]`` when they overlap or
    touch at a point included by at least one side, and ``[a, b]`` unchanged
    otherwise. An input equal to the merged interval is returned by
    identity.

    When either argument is a collection, all members are pooled and
    passed through :func:`simplify`.
    """
    if _is_single(a) and _is_single(b):
        return _union_pair(a, b)  # type: ignore[arg-type]

    pooled = _members(a, "union() left operand") + _members(
        b, "union() right operand"
    )
    return simplify(pooled)  # type: ignore[return-value]


def _union_pair(a: "Ivl | None", b: "Ivl | None") -> "list[Ivl] | None":
    a_empty = is_empty(a)
    b_empty = is_empty(b)

    if a_empty and b_empty:
        return None
    if a_empty:
        return [b]  # type: ignore[list-item]
    if b_empty:
        return [a]  # type: ignore[list-item]
    assert a is not None and b is not None

    # Connectivity: the gap between the later start and the earlier end.
    start_to_start = _compare(a.start, b.start)
    if start_to_start > 0:
        inner_start, inner_start_inclusive = a.start, a.start_inclusive
    elif start_to_start < 0:
        inner_start, inner_start_inclusive = b.start, b.start_inclusive
    else:
        inner_start = a.start
        inner_start_inclusive = a.start_inclusive and b.start_inclusive

    end_to_end = _compare(a.end, b.end)
    if end_to_end < 0:
        inner_end, inner_end_inclusive = a.end, a.end_inclusive
    elif end_to_end > 0:
        inner_end, inner_end_inclusive = b.end, b.end_inclusive
    else:
        inner_end = a.end
        inner_end_inclusive = a.end_inclusive and b.end_inclusive

    inner_to_inner = _compare(inner_start, inner_end)
    if inner_to_inner > 0:
        return [a, b]
    if inner_to_inner == 0 and not (inner_start_inclusive or inner_end_inclusive):
        return [a, b]

    start_from_a = start_from_b = end_from_a = end_from_b = False

    if start_to_start < 0:
        start, start_inclusive = a.start, a.start_inclusive
        start_from_a = True
    elif start_to_start > 0:
        start, start_inclusive = b.start, b.start_inclusive
        start_from_b = True
    else:
        start = a.start
        start_inclusive = a.start_inclusive or b.start_inclusive
        start_from_a = start_inclusive == a.start_inclusive
        start_from_b = start_inclusive == b.start_inclusive

    if end_to_end > 0:
        end, end_inclusive = a.end, a.end_inclusive
        end_from_a = True
    elif end_to_end < 0:
        end, end_inclusive = b.end, b.end_inclusive
        end_from_b = True
    else:
        end = a.end
        end_inclusive = a.end_inclusive or b.end_inclusive
        end_from_a = end_inclusive == a.end_inclusive
        end_from_b = end_inclusive == b.end_inclusive

    if start_from_a and end_from_a:
        return [a]
    if start_from_b and end_from_b:
        return [b]

    return [a.with_bounds(start, start_inclusive, end, end_inclusive)]


def _compare_starts(a: "Interval[Any]", b: "Interval[Any]") -> int:
    # Inclusive starts sort ahead of exclusive ones at the same value.
    start_to_start = _compare(a.start, b.start)
    if start_to_start != 0:
        return start_to_start
    return int(b.start_inclusive) - int(a.start_inclusive)


def simplify(intervals: "Iterable[Ivl] | None") -> "list[Ivl] | None":
    """Reduce a collection to the minimal ascending list of disjoint intervals.

    Algorithm: drop empty members and sort the rest by start, inclusive
    starts first on ties. A stack holds finished intervals with the current
    merge candidate on top. Each next interval is unioned with the
    candidate: a single result replaces the candidate, while two results
    finalize the lower one and make the upper one the new candidate.
    Nothing sorted later can reach back past a finalized interval, so one
    pass suffices.

    Returns None if no non-empty intervals remain.
    """
    pending = deque(
        sorted(
            (
                interval
                for interval in _members(intervals, "simplify() argument")
                if not is_empty(interval)
            ),
            key=cmp_to_key(_compare_starts),
        )
    )

    if not pending:
        return None

    received = len(pending)
    results: list[Ivl] = [pending.popleft()]

    while pending:
        candidate = results.pop()
        merged = _union_pair(candidate, pending.popleft())
        assert merged is not None
        results.extend(merged)

    logger.debug("simplify merged %d intervals into %d", received, len(results))
    return results


def difference(
    a: "Ivl | Iterable[Ivl] | None", b: "Ivl | Iterable[Ivl] | None"
) -> "list[Ivl] | None":
    """Return the parts of ``a`` not covered by ``b``, or None if nothing is left.

    ``a`` is always the source and ``b`` always the part to exclude, whether
    each is a single interval or a collection. Pieces are built with the
    source interval's ``with_bounds``.
    """
    if _is_single(a) and _is_single(b):
        return _difference_pair(a, b)  # type: ignore[arg-type]

    return _difference_sets(
        _members(a, "difference() left operand"),  # type: ignore[arg-type]
        _members(b, "difference() right operand"),  # type: ignore[arg-type]
    )


def _difference_pair(a: "Ivl | None", b: "Ivl | None") -> "list[Ivl] | None":
    if a is None or is_empty(a):
        return None

    intersection = intersect(a, b)

    if intersection is None:
        return [a]
    if same_bounds(intersection, a):
        return None

    pieces: list[Ivl] = []

    if _compare(a.start, intersection.start) != 0 or (
        a.start_inclusive and not intersection.start_inclusive
    ):
        pieces.append(
            a.with_bounds(
                a.start,
                a.start_inclusive,
                intersection.start,
                not intersection.start_inclusive,
            )
        )

    if _compare(a.end, intersection.end) != 0 or (
        a.end_inclusive and not intersection.end_inclusive
    ):
        pieces.append(
            a.with_bounds(
                intersection.end,
                not intersection.end_inclusive,
                a.end,
                a.end_inclusive,
            )
        )

    return pieces


def _difference_sets(
    source: "list[Ivl]", excluded: "list[Ivl]"
) -> "list[Ivl] | None":
    if is_empty(source):
        return None
    if is_empty(excluded):
        return source

    remaining = source
    for hole in excluded:
        carved: list[Ivl] = []
        for interval in remaining:
            pieces = _difference_pair(interval, hole)
            if pieces is not None:
                carved.extend(pieces)

        if not carved:
            logger.debug("difference exhausted the source at %s", hole)
            return None
        remaining = carved

    return remaining
