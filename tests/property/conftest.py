# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Usage:
    from tests.property.conftest import word_lists, entry_lists

    @given(values=word_lists)
    def test_canonicalize_sorts(values: list[Word]) -> None:
        ...
"""

from __future__ import annotations

from hypothesis import strategies as st

from tests.fixtures.hosts import Entry, Word

# Small alphabet so duplicates and case-only differences are common
word_texts = st.text(alphabet="abcABC", max_size=3)

word_lists = st.lists(word_texts.map(Word), max_size=30)

int_lists = st.lists(st.integers(min_value=-50, max_value=50), max_size=40)

entries = st.builds(Entry, key=st.sampled_from(["a", "b", "c", "d"]), rank=st.integers(min_value=0, max_value=20))

entry_lists = st.lists(entries, max_size=30)
