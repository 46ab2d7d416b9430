"""Exceptions raised by closedintervals.

Both errors extend a built-in exception so callers can catch them the usual
way (``except ValueError`` / ``except TypeError``).
"""


class EmptyIntervalError(ValueError):
    """Raised when reading an endpoint of the empty interval."""

    def __init__(self, endpoint: str):
        super().__init__(
            f"An empty interval does not have a {endpoint} end point.\n"
            f"Hint: Check `interval.is_empty` before reading "
            f"`interval.{endpoint}`"
        )
        self.endpoint: str = endpoint


class TypeUnificationError(TypeError):
    """Raised when two endpoint types have no common representation."""

    def __init__(self, first: type, second: type, reason: str | None = None):
        message = (
            f"Cannot unify endpoint types {first.__name__!r} and "
            f"{second.__name__!r}."
        )
        if reason:
            message += f"\n{reason}"
        message += (
            "\nHint: Convert both endpoints to the same type first, e.g.\n"
            "  ClosedInterval(Decimal(1), Decimal('2.5'))  # not Decimal and float"
        )
        super().__init__(message)
        self.first: type = first
        self.second: type = second
