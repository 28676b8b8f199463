"""Method-first lookup for the contract dispatchers.

A host type's own contract method takes priority over a registered
implementation for one of its base classes: a str subclass with a
lowercase is_canonical() must not fall back to the str rule. The MRO is
walked from the most derived class; whichever comes first wins, a class
defining the method or a class with a registered implementation.
"""

from collections.abc import Callable, Mapping
from typing import Any


def host_method(value: Any, name: str, registry: Mapping[Any, Any]) -> Callable[..., Any] | None:
    """Return value's bound contract method, or None to use the registry.

    Args:
        value: Object whose type is inspected
        name: Contract method name, e.g. "is_canonical"
        registry: singledispatch registry of the matching dispatcher

    Returns:
        The bound method if a class defines it before any registered class
        in type(value).__mro__, otherwise None.
    """
    for cls in type(value).__mro__:
        if cls is object or cls in registry:
            return None
        if name in vars(cls):
            method: Callable[..., Any] = getattr(value, name)
            return method
    return None
