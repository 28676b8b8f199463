"""Shared contracts: the ordering enum, capability protocols and errors.

This package is a LEAF MODULE with no outbound dependencies to core.
Dispatch functions and the envelope live in nonicle.core.

Import patterns:
    # Contracts (lightweight, no dependencies)
    from nonicle.contracts import CanonicalOrd, IsCanonical, Ordering

    # Operations and the envelope
    from nonicle.core import Canonical, canonicalize, is_canonical
"""

from nonicle.contracts.enums import Ordering
from nonicle.contracts.errors import CanonicalInvariantError
from nonicle.contracts.protocols import (
    Canonicalize,
    CanonicalizeInto,
    CanonicalOrd,
    IsCanonical,
)

__all__ = [
    "CanonicalInvariantError",
    "CanonicalOrd",
    "Canonicalize",
    "CanonicalizeInto",
    "IsCanonical",
    "Ordering",
]
