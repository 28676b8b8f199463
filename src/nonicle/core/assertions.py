"""Debug-only assertion layer.

The contract is "trust but verify in development": checks run while
NonicleSettings.debug_assertions is enabled and are skipped otherwise.
A failed check is a programming defect, so it raises
CanonicalInvariantError (an AssertionError) instead of a recoverable error.
"""

import logging
from collections.abc import Callable

from nonicle.contracts.errors import CanonicalInvariantError
from nonicle.core.config import get_settings

logger = logging.getLogger(__name__)


def debug_assertions_enabled() -> bool:
    return get_settings().debug_assertions


def fail_invariant(invariant: str, value: object, message: str | None = None) -> None:
    """Log and raise a violation of the named invariant."""
    value_repr = repr(value)
    if get_settings().log_violations:
        logger.error(
            "Canonical invariant violated: %s",
            invariant,
            extra={"invariant": invariant, "value": value_repr, "detail": message},
        )
    raise CanonicalInvariantError(invariant, value_repr, message)


def debug_assert(
    check: Callable[[], bool],
    invariant: str,
    value: object,
    message: str | None = None,
) -> None:
    """Evaluate check() only when debug assertions are enabled.

    check is a callable so that the (possibly O(n)) verification is not
    even computed when assertions are disabled.

    Raises:
        CanonicalInvariantError: If assertions are enabled and check() is False
    """
    if not debug_assertions_enabled():
        return
    if not check():
        fail_invariant(invariant, value, message)
