from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Generic, TypeVar

from typing_extensions import override

from closedintervals.coercion import common_kind, comparing, unify
from closedintervals.errors import EmptyIntervalError, TypeUnificationError
from closedintervals.util import DEFAULT_KIND, one, zero, zero_length

T = TypeVar("T")


def _is_nan(value: Any) -> bool:
    # NaN is the only value that is not equal to itself
    return value != value


def _unpack_pair(pair: tuple[Any, ...]) -> tuple[Any, Any]:
    if len(pair) != 2:
        raise ValueError(
            f"An interval pair must have exactly two end points, "
            f"got {len(pair)}: {pair!r}"
        )
    return pair[0], pair[1]


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class ClosedInterval(Generic[T]):
    """The closed interval ``[lo, hi]`` of a totally ordered endpoint type.

    Construction accepts the usual shorthands and always stores the end
    points in order, with mixed numeric types promoted to a common type
    (see ``closedintervals.coercion``):

        >>> ClosedInterval(9, 1)
        ClosedInterval(1, 9)
        >>> ClosedInterval((1, 2.5))
        ClosedInterval(1.0, 2.5)
        >>> ClosedInterval(4)
        ClosedInterval(4, 4)
        >>> ClosedInterval(kind=int)
        ClosedInterval(kind=int)

    A missing right end point is the single-point shorthand, so
    ``ClosedInterval(5, None)`` is ``[5,5]``; a missing left end point is an
    error. With no end points the interval is empty. ``kind`` records the endpoint
    type, which the empty interval still carries for ``length`` and for
    unifying it with other intervals.

    Operators:
        ``I * K`` / ``I & K``: intersection (empty is absorbing)
        ``I + K`` / ``I | K``: smallest interval containing both (empty is
        the identity)
        ``x in I``: membership (always False for the empty interval)
        ``I < K``: lexicographic order with the empty interval first
        ``I << K`` / ``I >> K``: ``I`` lies entirely left/right of ``K``
    """

    lo: Any = None
    hi: Any = None
    kind: type = field(default=None, kw_only=True)  # pyright: ignore[reportAssignmentType]

    def __post_init__(self) -> None:
        lo, hi = self.lo, self.hi

        if lo is None and hi is None:
            object.__setattr__(self, "kind", self.kind or DEFAULT_KIND)
            return
        if lo is None:
            raise ValueError(
                f"Interval left end point is missing (right end point is {hi!r}).\n"
                f"Hint: Use ClosedInterval({hi!r}) for a single point"
            )
        if hi is None:
            lo, hi = _unpack_pair(lo) if isinstance(lo, tuple) else (lo, lo)

        if _is_nan(lo) or _is_nan(hi):
            raise ValueError(f"Interval end points must not be NaN, got {lo!r}, {hi!r}")

        lo, hi, kind = unify(lo, hi, self.kind)
        with comparing(type(lo), type(hi)):
            if lo > hi:
                lo, hi = hi, lo

        object.__setattr__(self, "lo", lo)
        object.__setattr__(self, "hi", hi)
        object.__setattr__(self, "kind", kind)

    @classmethod
    def from_endpoints(cls, a: T, b: T) -> "ClosedInterval[T]":
        """Interval between ``a`` and ``b``, in either order."""
        return cls(a, b)

    @classmethod
    def from_pair(cls, pair: tuple[T, T]) -> "ClosedInterval[T]":
        return cls(*_unpack_pair(tuple(pair)))

    @classmethod
    def from_point(cls, a: T) -> "ClosedInterval[T]":
        """Degenerate interval ``[a, a]``."""
        return cls(a, a)

    @classmethod
    def unit(cls, kind: type = DEFAULT_KIND) -> "ClosedInterval[Any]":
        """The interval ``[0, 1]`` over ``kind``."""
        return cls(zero(kind), one(kind))

    @classmethod
    def empty(cls, kind: type = DEFAULT_KIND) -> "ClosedInterval[Any]":
        """The empty interval over ``kind``."""
        return cls(kind=kind)

    @property
    def is_empty(self) -> bool:
        return self.lo is None

    @property
    def left(self) -> T:
        """Left end point.

        Raises:
            EmptyIntervalError: If the interval is empty
        """
        if self.is_empty:
            raise EmptyIntervalError("left")
        return self.lo

    @property
    def right(self) -> T:
        """Right end point.

        Raises:
            EmptyIntervalError: If the interval is empty
        """
        if self.is_empty:
            raise EmptyIntervalError("right")
        return self.hi

    @property
    def length(self) -> Any:
        """``right - left``, or the domain's zero for the empty interval."""
        if self.is_empty:
            return zero_length(self.kind)
        return self.hi - self.lo

    def contains(self, x: Any) -> bool:
        if self.is_empty:
            return False
        common_kind(self.kind, type(x))
        with comparing(self.kind, type(x)):
            return self.lo <= x <= self.hi

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def intersect(self, other: "ClosedInterval[Any]") -> "ClosedInterval[Any]":
        """Largest interval contained in both ``self`` and ``other``."""
        kind = common_kind(self.kind, other.kind)
        if self.is_empty or other.is_empty:
            return ClosedInterval(kind=kind)

        with comparing(self.kind, other.kind):
            lo = max(self.lo, other.lo)
            hi = min(self.hi, other.hi)
            if lo > hi:
                return ClosedInterval(kind=kind)
        return ClosedInterval(lo, hi, kind=kind)

    def hull(self, other: "ClosedInterval[Any]") -> "ClosedInterval[Any]":
        """Smallest interval containing both ``self`` and ``other``.

        This is their union whenever they overlap. An empty operand leaves
        the other one unchanged apart from promoting it to the common kind.
        """
        kind = common_kind(self.kind, other.kind)
        if self.is_empty:
            return other._as_kind(kind)
        if other.is_empty:
            return self._as_kind(kind)

        with comparing(self.kind, other.kind):
            lo = min(self.lo, other.lo)
            hi = max(self.hi, other.hi)
        return ClosedInterval(lo, hi, kind=kind)

    def _as_kind(self, kind: type) -> "ClosedInterval[Any]":
        if self.kind is kind:
            return self
        return ClosedInterval(self.lo, self.hi, kind=kind)

    def left_of(self, other: "ClosedInterval[Any]") -> bool:
        """True if ``self`` lies entirely to the left of ``other``.

        Touching end points do not count, and the empty interval is never
        left of anything.
        """
        if self.is_empty or other.is_empty:
            return False
        common_kind(self.kind, other.kind)
        with comparing(self.kind, other.kind):
            return self.hi < other.lo

    def right_of(self, other: "ClosedInterval[Any]") -> bool:
        return other.left_of(self)

    def __mul__(self, other: object) -> "ClosedInterval[Any]":
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.intersect(other)

    __and__ = __mul__

    def __add__(self, other: object) -> "ClosedInterval[Any]":
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.hull(other)

    __or__ = __add__

    def __lshift__(self, other: object) -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.left_of(other)

    def __rshift__(self, other: object) -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.right_of(other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        if self.is_empty or other.is_empty:
            return self.is_empty and other.is_empty
        try:
            common_kind(self.kind, other.kind)
        except TypeUnificationError:
            return False
        return self.lo == other.lo and self.hi == other.hi

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        if other.is_empty:
            return False
        if self.is_empty:
            return True

        common_kind(self.kind, other.kind)
        with comparing(self.kind, other.kind):
            return (self.lo, self.hi) < (other.lo, other.hi)

    @override
    def __hash__(self) -> int:
        return hash((self.lo, self.hi))

    @override
    def __str__(self) -> str:
        if self.is_empty:
            return "[]"
        return f"[{self.lo},{self.hi}]"

    @override
    def __repr__(self) -> str:
        if self.is_empty:
            return f"ClosedInterval(kind={self.kind.__name__})"
        return f"ClosedInterval({self.lo!r}, {self.hi!r})"
