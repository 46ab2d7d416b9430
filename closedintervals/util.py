"""Defaults and endpoint-domain capabilities for closedintervals.

Comparison, hull, intersection and ordering only need endpoints that can be
ordered. The helpers here are the narrower capabilities needed by the few
operations that also do arithmetic: ``ClosedInterval.unit`` needs ``zero``
and ``one``, ``ClosedInterval.length`` needs ``zero_length``.
"""

import numbers
from datetime import date, timedelta
from decimal import Decimal

from closedintervals.coercion import canonical

# Endpoint type used by ClosedInterval.unit() and ClosedInterval.empty()
DEFAULT_KIND: type = float


def _is_numeric(kind: type) -> bool:
    # Decimal is not registered as numbers.Real
    return issubclass(kind, (numbers.Real, Decimal))


def _numeric(kind: type, value: int):
    try:
        return kind(value)
    except (TypeError, ValueError):
        return canonical(kind)(value)


def zero(kind: type):
    """Return the additive identity of ``kind``.

    Raises:
        TypeError: If ``kind`` has no additive identity
    """
    if _is_numeric(kind):
        return _numeric(kind, 0)
    if issubclass(kind, timedelta):
        return kind(0)
    raise TypeError(
        f"Endpoint type {kind.__name__!r} has no additive identity (zero).\n"
        f"Supported: real numbers, Decimal, timedelta"
    )


def one(kind: type):
    """Return the multiplicative identity of ``kind``.

    Raises:
        TypeError: If ``kind`` has no multiplicative identity
    """
    if _is_numeric(kind):
        return _numeric(kind, 1)
    raise TypeError(
        f"Endpoint type {kind.__name__!r} has no multiplicative identity (one).\n"
        f"Supported: real numbers, Decimal"
    )


def zero_length(kind: type):
    """Return the zero of ``hi - lo`` for intervals over ``kind``."""
    # datetime is a subclass of date
    if issubclass(kind, date):
        return timedelta(0)
    # True - False is an int
    if issubclass(kind, bool):
        return 0
    return zero(kind)
