"""Atomic scalar types: inherently canonical, naturally ordered.

Immutable scalars have a single representation per value, so they are
canonical as they are, canonicalize to themselves and use their natural
ordering as the primary ordering. Floats are the exception: NaN has no
place in a total order and is never canonical.

Subclasses that define their own contract methods (e.g. a str subclass
with a lowercase rule) are not affected by these registrations.
"""

import math
from decimal import Decimal
from typing import Any

from nonicle.contracts.enums import Ordering
from nonicle.core.canonicalize import register_canonicalizer
from nonicle.core.ordering import register_cmp
from nonicle.core.predicate import register_predicate

ATOMIC_TYPES: tuple[type, ...] = (bool, int, str, bytes, Decimal)


def _natural_cmp(lhs: Any, rhs: Any) -> Ordering:
    return Ordering.of(lhs, rhs)


def _always_canonical(value: Any) -> bool:
    return True


def _already_canonical(value: Any) -> None:
    return None


def register_atomic(*types: type) -> None:
    """Register types as always canonical with natural ordering.

    Registrations are process-wide and permanent.

    Example:
        register_atomic(datetime.date, uuid.UUID)
    """
    for cls in types:
        register_cmp(cls, _natural_cmp)
        register_predicate(cls, _always_canonical)
        register_canonicalizer(cls, _already_canonical)


register_atomic(*ATOMIC_TYPES)


@register_predicate(float)
def _is_canonical_float(value: float) -> bool:
    return not math.isnan(value)


register_cmp(float, _natural_cmp)
register_canonicalizer(float, _already_canonical)
