"""Capability protocols a host type may implement.

The three capabilities are independent: a type that is inherently always
canonical only needs IsCanonical, a sortable key type only needs
CanonicalOrd, and so on. Sequences and optionals get blanket
implementations in nonicle.core, parameterized over the capabilities of
their elements.

Types that cannot carry methods (built-ins, third-party classes) register
implementations with the singledispatch functions in nonicle.core instead.
"""

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from nonicle.contracts.enums import Ordering

if TYPE_CHECKING:
    from nonicle.core.envelope import Canonical

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class CanonicalOrd(Protocol):
    """Primary ordering plus an optional dedup tie-break.

    Subclass explicitly to inherit the default tie-break ("always equal").
    Structural implementers without canonical_dedup_cmp get the same
    default from nonicle.core.canonical_dedup_cmp.
    """

    def canonical_cmp(self, other: "CanonicalOrd", /) -> Ordering:
        """Total order that decides the canonical position of a value."""
        ...

    def canonical_dedup_cmp(self, other: "CanonicalOrd", /) -> Ordering:
        """Ordering for deduplication.

        Only used for disambiguation, i.e. chained after the primary
        comparison canonical_cmp() and only invoked when that reported
        EQUAL.

        Should return Ordering.LESS for items that should take precedence
        during deduplication. A result of Ordering.EQUAL will eventually
        cause the removal of one of the items.
        """
        return Ordering.EQUAL


@runtime_checkable
class IsCanonical(Protocol):
    def is_canonical(self) -> bool:
        """Check if the representation of self is canonical.

        Must be pure and total: no side effects, never raises.
        """
        ...


@runtime_checkable
class Canonicalize(IsCanonical, Protocol):
    def canonicalize(self) -> None:
        """Mutate self into a canonical representation.

        Afterwards is_canonical() must return True and self may be sealed
        with Canonical.tie() or Canonical.tie_unchecked().
        """
        ...


@runtime_checkable
class CanonicalizeInto(Protocol[T_co]):
    def canonicalize_into(self) -> "Canonical[T_co]":
        """Transform self into a sealed canonical representation.

        The type of the underlying canonical representation might differ
        from the type of self. Often both are identical, in which case
        nonicle.core.canonicalize_into() provides this for free.
        """
        ...
