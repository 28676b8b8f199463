"""The canonical-form predicate and its blanket implementations.

- None (an absent optional) is canonical.
- Sequences are canonical iff every element is canonical and they are
  strictly sorted by canonical_cmp (no adjacent ties).
- Objects with an is_canonical() method decide for themselves, including
  subclasses of registered types; the Canonical envelope always answers
  True.
- Anything else raises TypeError.
"""

from collections.abc import Sequence
from functools import singledispatch
from typing import Any

from nonicle.core.dispatch import host_method
from nonicle.core.ordering import is_strictly_sorted
from nonicle.core.views import SequenceView


@singledispatch
def _predicate_dispatch(value: Any) -> bool:
    raise TypeError(f"{type(value).__name__} does not implement is_canonical")


register_predicate = _predicate_dispatch.register


def is_canonical(value: Any) -> bool:
    """Check if the representation of value is canonical.

    Pure and total for every supported type.

    Raises:
        TypeError: If the type implements no canonical-form predicate
    """
    method = host_method(value, "is_canonical", _predicate_dispatch.registry)
    if method is not None:
        return bool(method())
    return bool(_predicate_dispatch(value))


@register_predicate(type(None))
def _is_canonical_none(value: None) -> bool:
    return True


@register_predicate(list)
@register_predicate(tuple)
@register_predicate(SequenceView)
def _is_canonical_sequence(value: Sequence[Any]) -> bool:
    return all(is_canonical(element) for element in value) and is_strictly_sorted(value)
