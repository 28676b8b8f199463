"""Read-only views over canonical containers."""

from collections.abc import Iterator, Sequence
from types import MappingProxyType
from typing import Any, TypeVar, overload

T = TypeVar("T")


class SequenceView(Sequence[T]):
    """Read-only, non-copying view of a list.

    Exposes the Sequence interface only: no append, sort or item
    assignment. Slicing yields another view over the same list. Mutating
    the underlying list through another reference is still visible here;
    a full view follows its length, a sliced view keeps the index range it
    was cut with.
    """

    __slots__ = ("_items", "_indices")

    def __init__(self, items: Sequence[T], indices: range | None = None) -> None:
        self._items = items
        self._indices = indices

    def _range(self) -> range:
        if self._indices is None:
            return range(len(self._items))
        return self._indices

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "SequenceView[T]": ...

    def __getitem__(self, index: int | slice) -> "T | SequenceView[T]":
        if isinstance(index, slice):
            return SequenceView(self._items, self._range()[index])
        return self._items[self._range()[index]]

    def __len__(self) -> int:
        return len(self._range())

    def __iter__(self) -> Iterator[T]:
        return (self._items[i] for i in self._range())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SequenceView | list | tuple):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r})"


def read_only_view(value: Any) -> Any:
    """Return a read-only view of value without copying it.

    Lists become SequenceView, dicts become MappingProxyType, anything else
    is returned as-is.
    """
    if isinstance(value, list):
        return SequenceView(value)
    if isinstance(value, dict):
        return MappingProxyType(value)
    return value
