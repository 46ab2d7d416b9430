"""Endpoint type unification for closedintervals.

Endpoints of different types are brought to one common type before they are
compared or stored. Which pairs unify, and to what, is decided by an explicit
table rather than by whatever the comparison operators happen to accept:

============================  ==========
pair (after canonicalising)   result
============================  ==========
same type                     that type
int, Fraction                 Fraction
int, float                    float
Fraction, float               float
int, Decimal                  Decimal
anything else                 error
============================  ==========

Canonicalising maps ``bool`` and other ``numbers.Integral`` types to ``int``,
other ``numbers.Rational`` types to ``Fraction`` and other ``numbers.Real``
types to ``float``. ``Decimal`` is kept apart because it does not mix with
binary floats.
"""

import logging
import numbers
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from fractions import Fraction
from typing import Any

from closedintervals.errors import TypeUnificationError

logger = logging.getLogger(__name__)

# Promotions between distinct canonical kinds. Missing pairs do not unify.
PROMOTIONS: dict[frozenset[type], type] = {
    frozenset({int, Fraction}): Fraction,
    frozenset({int, float}): float,
    frozenset({Fraction, float}): float,
    frozenset({int, Decimal}): Decimal,
}


def canonical(kind: type) -> type:
    """Return the representative type ``kind`` is promoted through."""
    if issubclass(kind, Decimal):
        return Decimal
    if issubclass(kind, numbers.Integral):
        return int
    if issubclass(kind, numbers.Rational):
        return Fraction
    if issubclass(kind, numbers.Real):
        return float
    return kind


def common_kind(first: type, second: type) -> type:
    """Return the type endpoints of ``first`` and ``second`` unify to.

    Raises:
        TypeUnificationError: If the promotion table has no entry for the pair
    """
    if first is second:
        return first

    a, b = canonical(first), canonical(second)
    if a is b:
        return a
    try:
        return PROMOTIONS[frozenset({a, b})]
    except KeyError:
        raise TypeUnificationError(first, second) from None


def convert(value: Any, kind: type) -> Any:
    """Return ``value`` as an instance of ``kind`` (unchanged if it already is one)."""
    if type(value) is kind:
        return value
    return kind(value)


def unify(a: Any, b: Any, kind: type | None = None) -> tuple[Any, Any, type]:
    """Convert two endpoints (and optionally a requested kind) to one common type.

    Returns:
        The converted endpoints and their common type
    """
    target = common_kind(type(a), type(b))
    if kind is not None:
        target = common_kind(target, kind)

    if type(a) is not target or type(b) is not target:
        logger.debug(
            "Promoting endpoints %r (%s) and %r (%s) to %s",
            a,
            type(a).__name__,
            b,
            type(b).__name__,
            target.__name__,
        )
    return convert(a, target), convert(b, target), target


@contextmanager
def comparing(first: type, second: type) -> Iterator[None]:
    """Report endpoint comparisons that fail as ``TypeUnificationError``.

    Some same-typed values still cannot be ordered against each other, e.g.
    naive and timezone-aware datetimes.
    """
    try:
        yield
    except TypeUnificationError:
        raise
    except TypeError as exc:
        raise TypeUnificationError(first, second, reason=str(exc)) from exc
