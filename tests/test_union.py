"""Tests for union and simplify."""

import logging

import pytest

from ivalgebra import NumericInterval, contains, is_empty, same_bounds, simplify, union
from samples import (
    BOOLEANS,
    EMPTY_INTERVALS,
    NON_EMPTY_INTERVALS,
    SMALL_NON_EMPTY,
    Rank,
    ivl,
)


def bounds_of(intervals):
    return None if intervals is None else [interval.bounds for interval in intervals]


class TestUnionPair:
    def test_both_empty_is_none(self):
        assert union(None, None) is None
        for a in EMPTY_INTERVALS:
            for b in EMPTY_INTERVALS:
                assert union(a, b) is None

    def test_empty_side_returns_the_other(self):
        for a in NON_EMPTY_INTERVALS:
            for empty in EMPTY_INTERVALS:
                assert union(a, empty) == [a]
                assert union(empty, a)[0] is a

    def test_disjoint_intervals_are_returned_unchanged(self):
        a = ivl(0, False, 1, False)
        b = ivl(2, False, 3, False)

        actual = union(a, b)

        assert actual[0] is a
        assert actual[1] is b

    def test_touching_at_an_excluded_point_stays_disjoint(self):
        a = ivl(0, False, 2, False)
        b = ivl(2, False, 3, False)

        actual = union(a, b)

        assert len(actual) == 2
        assert actual[0] is a and actual[1] is b

    @pytest.mark.parametrize("a_end, b_start", [(False, True), (True, False), (True, True)])
    def test_touching_at_an_included_point_merges(self, a_end, b_start):
        a = ivl(0, False, 2, a_end)
        b = ivl(2, b_start, 3, False)

        (single,) = union(a, b)

        assert contains(single, a)
        assert contains(single, b)
        assert single.bounds == (0, False, 3, False)

    def test_half_open_neighbours_merge(self):
        (single,) = union(NumericInterval.closed_open(0, 2), NumericInterval.closed_open(2, 3))
        assert single.bounds == (0, True, 3, False)

    def test_overlapping_intervals_merge(self):
        a = ivl(0, False, 2, False)
        b = ivl(1, False, 3, False)

        (single,) = union(a, b)

        assert single is not a and single is not b
        assert single.bounds == (0, False, 3, False)

    def test_other_containing_this_returns_other(self):
        a = ivl(1, False, 2, False)
        b = ivl(0, False, 3, False)

        (single,) = union(a, b)

        assert single is b

    def test_this_containing_other_returns_this(self):
        a = ivl(0, False, 3, False)
        b = ivl(1, False, 2, False)

        (single,) = union(a, b)

        assert single is a

    def test_same_span_takes_most_permissive_inclusivity(self):
        for a_start in BOOLEANS:
            for b_end in BOOLEANS:
                a = ivl(0, a_start, 3, False)
                b = ivl(0, False, 3, b_end)

                (single,) = union(a, b)

                assert single.bounds == (0, a_start, 3, b_end)

    def test_union_covers_both_operands(self):
        for a in SMALL_NON_EMPTY:
            for b in SMALL_NON_EMPTY:
                actual = union(a, b)
                assert any(contains(piece, a) for piece in actual)
                assert any(contains(piece, b) for piece in actual)

    def test_operator(self):
        a = NumericInterval.closed(0, 1)
        b = NumericInterval.open_closed(1, 2)

        assert bounds_of(a | b) == [(0, True, 2, True)]


class TestUnionCollections:
    def test_set_with_bridging_interval_collapses(self):
        collection = [ivl(0, True, 1, False), ivl(2, True, 3, False)]

        (single,) = union(collection, ivl(1, True, 2, False))

        assert single.start == 0
        assert single.end == 3

    def test_touching_set_with_inner_interval_collapses(self):
        collection = [ivl(0, True, 2, False), ivl(2, True, 3, False)]

        actual = union(collection, ivl(1, True, 2, False))

        assert bounds_of(actual) == [(0, True, 3, False)]

    def test_interval_with_set(self):
        actual = union(ivl(5, True, 6, True), [ivl(0, True, 1, True), ivl(1, False, 2, True)])
        assert bounds_of(actual) == [(0, True, 2, True), (5, True, 6, True)]

    def test_two_sets(self):
        left = [ivl(0, True, 1, True), ivl(4, True, 5, True)]
        right = (interval for interval in [ivl(1, True, 4, False), ivl(7, False, 8, False)])

        actual = union(left, right)

        assert bounds_of(actual) == [(0, True, 5, True), (7, False, 8, False)]

    def test_none_sets_are_empty(self):
        assert union(None, []) is None
        assert bounds_of(union([ivl(0, True, 1, True)], None)) == [(0, True, 1, True)]

    def test_rejects_non_collection(self):
        with pytest.raises(TypeError, match="union"):
            union(ivl(0, True, 1, True), 5)  # type: ignore[arg-type]


class TestSimplify:
    def test_empty_inputs_simplify_to_none(self):
        assert simplify(None) is None
        assert simplify([]) is None
        assert simplify(EMPTY_INTERVALS) is None

    def test_single_interval_is_kept_by_identity(self):
        a = ivl(0, True, 1, False)
        assert simplify([a])[0] is a

    def test_results_are_sorted_ascending(self):
        collection = [
            ivl(8, True, 9, True),
            ivl(0, True, 1, True),
            ivl(4, True, 5, True),
        ]

        actual = simplify(collection)

        assert [interval.start for interval in actual] == [0, 4, 8]
        assert actual[0] is collection[1]

    def test_overlapping_members_merge(self):
        collection = [
            ivl(3, True, 6, False),
            ivl(0, True, 2, True),
            ivl(1, False, 4, False),
            ivl(10, False, 12, False),
            ivl(12, True, 12, True),
        ]

        actual = simplify(collection)

        assert bounds_of(actual) == [(0, True, 6, False), (10, False, 12, True)]

    def test_contained_members_are_absorbed(self):
        outer = ivl(0, True, 10, True)
        collection = [ivl(2, True, 3, True), outer, ivl(5, False, 6, False)]

        actual = simplify(collection)

        assert actual == [outer]
        assert actual[0] is outer

    def test_shared_start_prefers_inclusive_member(self):
        collection = [ivl(0, True, 2, False), ivl(2, False, 3, False), ivl(2, True, 5, True)]

        actual = simplify(collection)

        assert bounds_of(actual) == [(0, True, 5, True)]

    def test_shared_start_tie_break_uses_only_the_ordering(self):
        """Values without __eq__ still sort inclusive starts first."""
        r0, r2, r3, r5 = Rank(0), Rank(2), Rank(3), Rank(5)
        collection = [
            NumericInterval.closed_open(r0, r2),
            NumericInterval.open(r2, r3),
            NumericInterval.closed(Rank(2), r5),
        ]

        actual = simplify(collection)

        assert len(actual) == 1
        (merged,) = actual
        assert merged.start is r0 and merged.start_inclusive
        assert merged.end is r5 and merged.end_inclusive
        assert len(simplify(actual)) == 1

    def test_idempotent(self):
        samples = list(SMALL_NON_EMPTY)
        for a in samples:
            for b in samples[::3]:
                for c in samples[::7]:
                    once = simplify([a, b, c])
                    assert bounds_of(simplify(once)) == bounds_of(once)

    def test_results_are_pairwise_disjoint(self):
        samples = list(SMALL_NON_EMPTY)
        for a in samples:
            for b in samples[::2]:
                actual = simplify([b, a, b])
                for lower, upper in zip(actual, actual[1:]):
                    assert len(union(lower, upper)) == 2

    def test_keeps_the_value_set(self):
        collection = [ivl(0, False, 1, True), ivl(1, False, 2, False), ivl(3, True, 3, True)]
        actual = simplify(collection)

        for value in (0, 0.5, 1, 1.5, 2, 2.5, 3):
            assert contains(actual, value) == contains(collection, value)

    def test_accepts_a_generator(self):
        actual = simplify(ivl(i, True, i + 1, False) for i in range(5))
        assert bounds_of(actual) == [(0, True, 5, False)]

    def test_works_over_strings(self):
        actual = simplify(
            [NumericInterval.closed("m", "p"), NumericInterval.closed("a", "f"), NumericInterval.closed("e", "h")]
        )
        assert bounds_of(actual) == [("a", True, "h", True), ("m", True, "p", True)]

    def test_result_is_not_empty(self):
        assert not is_empty(simplify([None, ivl(0, True, 1, True)]))

    def test_logs_merge_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ivalgebra.core"):
            simplify([ivl(0, True, 2, True), ivl(1, True, 3, True)])

        assert "simplify merged 2 intervals into 1" in caplog.text

    def test_cross_representation_equality(self):
        from ivalgebra import StringInterval

        text = StringInterval(source="abcdef", start=1, length=3)
        assert same_bounds(text, NumericInterval.closed_open(1, 4))
        assert not same_bounds(text, NumericInterval.closed(1, 4))
