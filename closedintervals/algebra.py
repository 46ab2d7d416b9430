"""Function-style access to the interval algebra.

``hull`` and ``intersection`` fold any number of intervals, mirroring the
binary ``+`` and ``*`` operators. The remaining helpers are thin wrappers
around ``ClosedInterval`` members for callers that prefer plain functions.
"""

from functools import reduce
from typing import Any

from closedintervals.interval import ClosedInterval


def hull(*intervals: ClosedInterval[Any]) -> ClosedInterval[Any]:
    """Smallest interval containing every argument (equivalent to chaining `+`)."""

    if not intervals:
        raise ValueError(
            f"hull() requires at least one interval argument.\n"
            f"Example: hull(ClosedInterval(1, 5), ClosedInterval(7, 9))"
        )

    def reducer(acc: ClosedInterval[Any], nxt: ClosedInterval[Any]):
        return acc + nxt

    return reduce(reducer, intervals)


def intersection(*intervals: ClosedInterval[Any]) -> ClosedInterval[Any]:
    """Interval common to every argument (equivalent to chaining `*`)."""

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(ClosedInterval(1, 6), ClosedInterval(3, 8))"
        )

    def reducer(acc: ClosedInterval[Any], nxt: ClosedInterval[Any]):
        return acc * nxt

    return reduce(reducer, intervals)


def intersect(first: ClosedInterval[Any], second: ClosedInterval[Any]) -> ClosedInterval[Any]:
    return first.intersect(second)


def left(interval: ClosedInterval[Any]) -> Any:
    return interval.left


def right(interval: ClosedInterval[Any]) -> Any:
    return interval.right


def is_empty(interval: ClosedInterval[Any]) -> bool:
    return interval.is_empty


def length(interval: ClosedInterval[Any]) -> Any:
    return interval.length


def contains(x: Any, interval: ClosedInterval[Any]) -> bool:
    return interval.contains(x)


def render(interval: ClosedInterval[Any]) -> str:
    return str(interval)


def equals(first: ClosedInterval[Any], second: ClosedInterval[Any]) -> bool:
    return first == second


def less_than(first: ClosedInterval[Any], second: ClosedInterval[Any]) -> bool:
    return first < second


def left_of(first: ClosedInterval[Any], second: ClosedInterval[Any]) -> bool:
    return first.left_of(second)


def right_of(first: ClosedInterval[Any], second: ClosedInterval[Any]) -> bool:
    return first.right_of(second)
