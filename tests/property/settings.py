"""Standardized Hypothesis settings profiles for property tests.

Usage:
    from tests.property.settings import STANDARD_SETTINGS

    @given(values=int_lists)
    @STANDARD_SETTINGS
    def test_something(values):
        ...

Tiers:
- DETERMINISM_SETTINGS: 500 examples - canonical form must be unique
- STANDARD_SETTINGS: 100 examples - Regular property tests
- QUICK_SETTINGS: 20 examples - Fast validation tests
"""

from hypothesis import settings

# Canonical form MUST be unique: same value in, same representation out
DETERMINISM_SETTINGS = settings(max_examples=500)

# Standard property tests - good balance of coverage and speed
STANDARD_SETTINGS = settings(max_examples=100)

# Quick validation tests
QUICK_SETTINGS = settings(max_examples=20)
