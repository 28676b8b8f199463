"""Comparison outcomes used by every canonical ordering.

Values are the classic cmp integers so an Ordering can be handed directly
to functools.cmp_to_key.
"""

from collections.abc import Callable
from enum import IntEnum


class Ordering(IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_cmp(cls, result: int) -> "Ordering":
        """Convert any cmp-style integer (negative, zero, positive)."""
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def of(cls, lhs: object, rhs: object) -> "Ordering":
        """Compare two values by their natural ordering (``<`` and ``>``)."""
        if lhs < rhs:  # type: ignore[operator]
            return cls.LESS
        if lhs > rhs:  # type: ignore[operator]
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)

    def then(self, other: "Ordering") -> "Ordering":
        """Chain a secondary ordering, used only if this one is EQUAL."""
        return other if self is Ordering.EQUAL else self

    def then_with(self, secondary: Callable[[], "Ordering"]) -> "Ordering":
        """Like then(), but the secondary ordering is computed lazily.

        The callable is only invoked when this ordering is EQUAL, which is
        what keeps the tie-break precondition intact.
        """
        return secondary() if self is Ordering.EQUAL else self
