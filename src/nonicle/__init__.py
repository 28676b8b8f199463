"""
Nonicle: type-safe, canonical data representations.

Canonical form is the single designated representation among all
semantically equivalent representations of a value. Nonicle provides the
contracts to check and establish it, the default sort + dedup algorithm
for sequences, and the ``Canonical`` envelope that certifies it.
"""

import logging

from nonicle.contracts import (
    Canonicalize,
    CanonicalizeInto,
    CanonicalInvariantError,
    CanonicalOrd,
    IsCanonical,
    Ordering,
)
from nonicle.core import (
    Canonical,
    SequenceView,
    canonical_cmp,
    canonical_dedup_cmp,
    canonicalize,
    canonicalize_into,
    is_canonical,
    is_strictly_sorted,
    register_atomic,
    register_canonicalizer,
    register_cmp,
    register_dedup_cmp,
    register_predicate,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Canonical",
    "CanonicalInvariantError",
    "CanonicalOrd",
    "Canonicalize",
    "CanonicalizeInto",
    "IsCanonical",
    "Ordering",
    "SequenceView",
    "__version__",
    "canonical_cmp",
    "canonical_dedup_cmp",
    "canonicalize",
    "canonicalize_into",
    "is_canonical",
    "is_strictly_sorted",
    "register_atomic",
    "register_canonicalizer",
    "register_cmp",
    "register_dedup_cmp",
    "register_predicate",
]
