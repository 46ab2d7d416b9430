"""Property-based tests for the interval algebra, plus the function-style API."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

import closedintervals as ci
from closedintervals import ClosedInterval, EmptyIntervalError

from strategies import integer_intervals, intervals, real_intervals

EMPTY = ClosedInterval.empty(int)


@given(st.integers(), st.integers())
def test_construction_is_order_independent(a: int, b: int) -> None:
    assert ClosedInterval(a, b) == ClosedInterval(b, a)


@given(real_intervals(finite=False))
def test_left_never_exceeds_right(ivl: ClosedInterval[float]) -> None:
    assert ivl.left <= ivl.right


@given(intervals(), intervals())
def test_intersection_commutes(a: ClosedInterval[int], b: ClosedInterval[int]) -> None:
    assert a * b == b * a


@given(intervals(), intervals(), intervals())
def test_intersection_associates(
    a: ClosedInterval[int], b: ClosedInterval[int], c: ClosedInterval[int]
) -> None:
    assert (a * b) * c == a * (b * c)


@given(intervals())
def test_intersection_idempotent(a: ClosedInterval[int]) -> None:
    assert a * a == a


@given(intervals())
def test_empty_absorbs_intersection(a: ClosedInterval[int]) -> None:
    assert (a * EMPTY).is_empty
    assert (EMPTY * a).is_empty


@given(intervals(), intervals())
def test_hull_commutes(a: ClosedInterval[int], b: ClosedInterval[int]) -> None:
    assert a + b == b + a


@given(intervals(), intervals(), intervals())
def test_hull_associates(
    a: ClosedInterval[int], b: ClosedInterval[int], c: ClosedInterval[int]
) -> None:
    assert (a + b) + c == a + (b + c)


@given(intervals())
def test_hull_idempotent(a: ClosedInterval[int]) -> None:
    assert a + a == a


@given(intervals())
def test_empty_is_hull_identity(a: ClosedInterval[int]) -> None:
    assert a + EMPTY == a
    assert EMPTY + a == a


@given(integer_intervals(), integer_intervals())
def test_hull_contains_both_and_intersection_within_both(
    a: ClosedInterval[int], b: ClosedInterval[int]
) -> None:
    joined = a + b
    met = a * b
    for x in (a.left, a.right, b.left, b.right):
        assert x in joined
    if not met.is_empty:
        assert met.left in a and met.left in b
        assert met.right in a and met.right in b


@given(st.integers())
def test_empty_contains_nothing(x: int) -> None:
    assert x not in EMPTY


@given(integer_intervals(), integer_intervals())
def test_left_of_implies_disjoint(a: ClosedInterval[int], b: ClosedInterval[int]) -> None:
    if a << b:
        assert (a * b).is_empty
        assert b >> a
        assert a < b


@given(real_intervals(), real_intervals())
def test_order_is_total(a: ClosedInterval[float], b: ClosedInterval[float]) -> None:
    assert sum((a < b, a == b, b < a)) == 1


def test_empty_precedes_point():
    assert ci.less_than(ClosedInterval.empty(), ClosedInterval(0))
    assert not ci.less_than(ClosedInterval(0), ClosedInterval.empty())


class TestReducers:
    def test_hull_many(self):
        result = ci.hull(ClosedInterval(1, 5), ClosedInterval(7, 9), ClosedInterval(-2, 0))
        assert result == ClosedInterval(-2, 9)

    def test_intersection_many(self):
        result = ci.intersection(
            ClosedInterval(1, 6), ClosedInterval(8, 3), ClosedInterval(4, 10)
        )
        assert result == ClosedInterval(4, 6)

    def test_single_argument(self):
        ivl = ClosedInterval(1, 2)
        assert ci.hull(ivl) is ivl
        assert ci.intersection(ivl) is ivl

    def test_empty_arguments(self):
        assert ci.hull(ClosedInterval.empty(), ClosedInterval.empty()).is_empty
        assert ci.intersection(ClosedInterval(1, 2), ClosedInterval.empty(int)).is_empty

    def test_no_arguments(self):
        with pytest.raises(ValueError, match="at least one"):
            ci.hull()
        with pytest.raises(ValueError, match="at least one"):
            ci.intersection()


class TestFunctions:
    def test_accessors(self):
        ivl = ClosedInterval(5, 1)
        assert ci.left(ivl) == 1
        assert ci.right(ivl) == 5
        assert ci.length(ivl) == 4
        assert not ci.is_empty(ivl)
        assert ci.render(ivl) == "[1,5]"

    def test_empty(self):
        empty = ClosedInterval.empty(int)
        assert ci.is_empty(empty)
        assert ci.length(empty) == 0
        assert not ci.contains(0, empty)
        assert ci.render(empty) == "[]"
        with pytest.raises(EmptyIntervalError):
            ci.left(empty)
        with pytest.raises(EmptyIntervalError):
            ci.right(empty)

    def test_operators(self):
        a = ClosedInterval(1, 5)
        b = ClosedInterval(7, 9)
        assert ci.contains(3, a)
        assert ci.intersect(a, b).is_empty
        assert ci.equals(ci.hull(a, b), ClosedInterval(9, 1))
        assert ci.left_of(a, b)
        assert not ci.left_of(a, ClosedInterval(3, 8))
        assert ci.right_of(b, a)
