"""Invariant violation errors.

There is no recoverable-error taxonomy in nonicle. Canonicalization always
succeeds and the predicate is a plain boolean. The only failure mode is a
broken invariant, which is a programming defect and therefore derives from
AssertionError rather than from a domain exception hierarchy.
"""


class CanonicalInvariantError(AssertionError):
    """Raised when a debug assertion about canonical form fails.

    Only raised while debug assertions are enabled (see
    nonicle.core.config.NonicleSettings). With assertions disabled the
    same misuse silently yields a non-canonical value.

    Attributes:
        invariant: Short name of the broken rule (e.g. "tie")
        value_repr: repr() of the offending value, for diagnostics
    """

    def __init__(self, invariant: str, value_repr: str, message: str | None = None) -> None:
        self.invariant = invariant
        self.value_repr = value_repr
        detail = message or "value is not in canonical form"
        super().__init__(f"Canonical invariant '{invariant}' violated: {detail}: {value_repr}")
