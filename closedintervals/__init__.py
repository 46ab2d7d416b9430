from .algebra import (
    contains,
    equals,
    hull,
    intersect,
    intersection,
    is_empty,
    left,
    left_of,
    length,
    less_than,
    render,
    right,
    right_of,
)
from .coercion import PROMOTIONS, common_kind
from .errors import EmptyIntervalError, TypeUnificationError
from .interval import ClosedInterval
from .util import DEFAULT_KIND, one, zero

__all__ = [
    "ClosedInterval",
    "EmptyIntervalError",
    "TypeUnificationError",
    "hull",
    "intersection",
    "intersect",
    "left",
    "right",
    "is_empty",
    "length",
    "contains",
    "render",
    "equals",
    "less_than",
    "left_of",
    "right_of",
    "common_kind",
    "PROMOTIONS",
    "DEFAULT_KIND",
    "zero",
    "one",
]
