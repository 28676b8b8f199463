# src/nonicle/core/envelope.py
"""Type-safe envelope for immutable, canonical data.

If a Canonical[T] exists, its value is in canonical form. Downstream code
that receives an envelope can skip re-verification: is_canonical() on an
envelope answers True without inspecting the value.

Trust boundary:
    Checked construction verifies canonical form only while debug
    assertions are enabled (NonicleSettings.debug_assertions, which
    defaults to __debug__). In optimized runs the argument is trusted, so
    misuse is only caught during development and testing. Unchecked
    construction never verifies. The envelope cannot stop a caller from
    mutating the wrapped object through a reference obtained from value;
    doing so voids the guarantee.
"""

import copy
from collections.abc import Iterator
from functools import total_ordering
from typing import Any, Generic, TypeVar

from nonicle.core.assertions import debug_assert
from nonicle.core.predicate import is_canonical
from nonicle.core.views import read_only_view

T = TypeVar("T")


@total_ordering
class Canonical(Generic[T]):
    """Opaque, immutable carrier of exactly one canonical value.

    Construction:
        Canonical(value) / Canonical.tie(value): checked (debug assertion)
        Canonical.tie_unchecked(value): trusted, no verification

    Release:
        envelope.untie() returns the plain value and ends the guarantee.
    """

    __slots__ = ("_value",)

    _value: T

    def __init__(self, value: T) -> None:
        """Enclose value into an immutable Canonical envelope.

        The caller is responsible to ensure that value is canonical, e.g. by
        calling canonicalize() beforehand. A debug assertion verifies it.

        Raises:
            CanonicalInvariantError: If debug assertions are enabled and
                value is not canonical
        """
        debug_assert(lambda: is_canonical(value), "tie", value)
        object.__setattr__(self, "_value", value)

    @classmethod
    def tie(cls, value: T) -> "Canonical[T]":
        """Checked construction, same as Canonical(value)."""
        return cls(value)

    @classmethod
    def tie_unchecked(cls, value: T) -> "Canonical[T]":
        """Enclose value without any verification. Use deliberately!

        Meant for values that are canonical by construction, e.g. an empty
        list, where verification would be wasted work.
        """
        envelope = cls.__new__(cls)
        object.__setattr__(envelope, "_value", value)
        return envelope

    def untie(self) -> T:
        """Release the enclosed value from the envelope."""
        return self._value

    @property
    def value(self) -> T:
        return self._value

    def as_ref(self) -> T:
        return self._value

    def as_canonical_ref(self) -> "Canonical[T]":
        """Envelope over the same object, not re-verified."""
        return Canonical.tie_unchecked(self._value)

    def as_canonical_view(self) -> "Canonical[Any]":
        """Envelope over a read-only view of the value, not re-verified.

        A list becomes a SequenceView over its elements and a dict becomes
        a MappingProxyType. Canonical form of the whole implies canonical
        form of the view.
        """
        return Canonical.tie_unchecked(read_only_view(self._value))

    def as_canonical_str(self) -> "Canonical[str]":
        """Envelope over the value as a plain str, not re-verified.

        Raises:
            TypeError: If the enclosed value is not a string
        """
        if not isinstance(self._value, str):
            raise TypeError(f"Canonical[{type(self._value).__name__}] does not enclose a str")
        return Canonical.tie_unchecked(str(self._value))

    def is_canonical(self) -> bool:
        return True

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Canonical envelope is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Canonical envelope is immutable: cannot delete '{name}'")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canonical):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Canonical):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Canonical({self._value!r})"

    def __bool__(self) -> bool:
        return bool(self._value)

    def __len__(self) -> int:
        return len(self._value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)  # type: ignore[call-overload]

    def __contains__(self, item: object) -> bool:
        return item in self._value  # type: ignore[operator]

    def __getitem__(self, index: Any) -> Any:
        return self._value[index]  # type: ignore[index]

    def __copy__(self) -> "Canonical[T]":
        return Canonical.tie_unchecked(copy.copy(self._value))

    def __deepcopy__(self, memo: dict[int, Any]) -> "Canonical[T]":
        return Canonical.tie_unchecked(copy.deepcopy(self._value, memo))
