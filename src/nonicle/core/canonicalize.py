# src/nonicle/core/canonicalize.py
"""The canonicalizer, its sequence algorithm and the canonicalize-and-seal adapter."""

from functools import cmp_to_key, singledispatch
from typing import Any, TypeVar

from nonicle.contracts.enums import Ordering
from nonicle.core.assertions import debug_assert
from nonicle.core.dispatch import host_method
from nonicle.core.envelope import Canonical
from nonicle.core.ordering import canonical_cmp, sort_cmp
from nonicle.core.predicate import is_canonical

T = TypeVar("T")


@singledispatch
def _canonicalize_dispatch(value: Any) -> None:
    raise TypeError(f"{type(value).__name__} does not implement canonicalize")


register_canonicalizer = _canonicalize_dispatch.register


def canonicalize(value: Any) -> None:
    """Mutate value into its canonical representation, in place.

    Afterwards is_canonical(value) is True. Canonicalization is a
    normalization, not a parse: it cannot fail for a correctly implemented
    type. A post-condition failure is reported as CanonicalInvariantError
    while debug assertions are enabled.

    Raises:
        TypeError: If the type implements no canonicalizer
    """
    method = host_method(value, "canonicalize", _canonicalize_dispatch.registry)
    if method is None:
        _canonicalize_dispatch(value)
        return
    method()
    debug_assert(lambda: is_canonical(value), "canonicalize", value)


@register_canonicalizer(type(None))
def _canonicalize_none(value: None) -> None:
    # An absent optional is canonical as it is
    return None


@register_canonicalizer(tuple)
def _canonicalize_tuple(value: tuple[Any, ...]) -> None:
    raise TypeError("tuple is immutable and cannot be canonicalized in place; use a list")


@register_canonicalizer(list)
def _canonicalize_list(value: list[Any]) -> None:
    """Sort and deduplicate a list in place.

    1. Canonicalize every element (children before the parent).
    2. Stable sort by canonical_cmp, ties broken by canonical_dedup_cmp.
    3. Keep only the first element of each run that canonical_cmp reports
       EQUAL, i.e. the one the tie-break ranks least.
    """
    for element in value:
        canonicalize(element)
    value.sort(key=cmp_to_key(sort_cmp))
    value[:] = _dedup_sorted(value)
    debug_assert(lambda: is_canonical(value), "canonicalize", value)


def _dedup_sorted(items: list[Any]) -> list[Any]:
    kept: list[Any] = []
    for item in items:
        if kept and canonical_cmp(kept[-1], item) == Ordering.EQUAL:
            continue
        kept.append(item)
    return kept


def canonicalize_into(value: T) -> Canonical[Any]:
    """Canonicalize value and seal it in a Canonical envelope.

    Types implementing CanonicalizeInto decide their own canonical
    representation, which might be of a different type. Everything else is
    canonicalized in place and sealed with a checked construction.
    """
    method = getattr(value, "canonicalize_into", None)
    if method is not None:
        sealed: Canonical[Any] = method()
        return sealed
    canonicalize(value)
    return Canonical.tie(value)
