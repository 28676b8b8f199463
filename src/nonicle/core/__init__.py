# src/nonicle/core/__init__.py
"""Core: ordering dispatch, predicate, canonicalizer, envelope, configuration, logging."""

from nonicle.core.atoms import ATOMIC_TYPES, register_atomic
from nonicle.core.canonicalize import canonicalize, canonicalize_into, register_canonicalizer
from nonicle.core.config import (
    NonicleSettings,
    configure,
    get_settings,
    load_settings,
    override_settings,
    settings_from_env,
)
from nonicle.core.envelope import Canonical
from nonicle.core.logging import configure_logging, reset_logging
from nonicle.core.ordering import (
    canonical_cmp,
    canonical_dedup_cmp,
    is_strictly_sorted,
    register_cmp,
    register_dedup_cmp,
)
from nonicle.core.predicate import is_canonical, register_predicate
from nonicle.core.views import SequenceView

__all__ = [
    "ATOMIC_TYPES",
    "Canonical",
    "NonicleSettings",
    "SequenceView",
    "canonical_cmp",
    "canonical_dedup_cmp",
    "canonicalize",
    "canonicalize_into",
    "configure",
    "configure_logging",
    "get_settings",
    "is_canonical",
    "is_strictly_sorted",
    "load_settings",
    "override_settings",
    "register_atomic",
    "register_canonicalizer",
    "register_cmp",
    "register_dedup_cmp",
    "register_predicate",
    "reset_logging",
    "settings_from_env",
]
