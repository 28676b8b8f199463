"""Comparator dispatch: primary ordering, dedup tie-break and sortedness.

Types implementing the CanonicalOrd protocol are compared through their
methods. Types that cannot carry methods register an implementation:

    @register_cmp(Version)
    def _(lhs: Version, rhs: Version) -> Ordering:
        return Ordering.of(lhs.release, rhs.release)

A method defined on a subclass wins over an implementation registered for
its base class (see nonicle.core.dispatch). Results may be plain cmp
integers; they are normalized to Ordering.
"""

from collections.abc import Callable, Iterable
from functools import singledispatch
from typing import Any, TypeVar

from nonicle.contracts.enums import Ordering
from nonicle.core.assertions import fail_invariant
from nonicle.core.config import get_settings
from nonicle.core.dispatch import host_method

T = TypeVar("T")


@singledispatch
def _cmp_dispatch(lhs: Any, rhs: Any) -> Ordering:
    raise TypeError(f"{type(lhs).__name__} does not implement canonical_cmp")


@singledispatch
def _dedup_dispatch(lhs: Any, rhs: Any) -> Ordering:
    return Ordering.EQUAL


register_cmp = _cmp_dispatch.register
register_dedup_cmp = _dedup_dispatch.register


def canonical_cmp(lhs: Any, rhs: Any) -> Ordering:
    """Primary ordering that decides the canonical position of a value.

    Raises:
        TypeError: If the type implements no primary ordering
    """
    method = host_method(lhs, "canonical_cmp", _cmp_dispatch.registry)
    if method is not None:
        return Ordering.from_cmp(method(rhs))
    return Ordering.from_cmp(_cmp_dispatch(lhs, rhs))


def canonical_dedup_cmp(lhs: Any, rhs: Any) -> Ordering:
    """Tie-break ordering among values the primary ordering reports EQUAL.

    LESS means lhs wins the tie and survives deduplication. Types without
    a tie-break compare EQUAL, so the first of the tied values is kept.

    Precondition: canonical_cmp(lhs, rhs) is EQUAL. Calling this on values
    that are not primary-equal is a programming error. It is checked while
    debug assertions are enabled, or always when
    NonicleSettings.tiebreak_precondition is "always".

    Raises:
        CanonicalInvariantError: If the precondition is checked and violated
    """
    if get_settings().tiebreak_checked and canonical_cmp(lhs, rhs) != Ordering.EQUAL:
        fail_invariant(
            "dedup-precondition",
            (lhs, rhs),
            "tie-break compared values that are not equal under the primary ordering",
        )
    method = host_method(lhs, "canonical_dedup_cmp", _dedup_dispatch.registry)
    if method is not None:
        return Ordering.from_cmp(method(rhs))
    return Ordering.from_cmp(_dedup_dispatch(lhs, rhs))


def sort_cmp(lhs: Any, rhs: Any) -> Ordering:
    """Primary ordering, then the tie-break only to resolve primary ties."""
    return canonical_cmp(lhs, rhs).then_with(lambda: canonical_dedup_cmp(lhs, rhs))


def is_strictly_sorted(
    iterable: Iterable[T],
    cmp: Callable[[T, T], int] = canonical_cmp,
) -> bool:
    """Check if an iterable is sorted and does not contain duplicates.

    Every element must compare LESS than its successor. Empty and
    single-element iterables are trivially strictly sorted.
    """
    iterator = iter(iterable)
    try:
        prev = next(iterator)
    except StopIteration:
        return True
    for item in iterator:
        if Ordering.from_cmp(cmp(prev, item)) is not Ordering.LESS:
            return False
        prev = item
    return True
