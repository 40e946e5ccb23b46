"""Tests for prefix suggestions (both backends)."""

from __future__ import annotations

import pytest

from travelctl.domain.types import Country
from travelctl.infrastructure.memory import InMemoryCatalog
from travelctl.infrastructure.tracker import Tracker
from travelctl.services.autocomplete import AutocompleteIndex


class TestAutocompleteIndex:
    def test_prefix_matches_in_catalog_order(self, tracker: Tracker) -> None:
        index = AutocompleteIndex(tracker.catalog)
        assert index.suggest("Uni") == ["United Arab Emirates", "United Kingdom", "United States"]

    def test_prefix_not_substring(self, tracker: Tracker) -> None:
        index = AutocompleteIndex(tracker.catalog)
        # "Equatorial Guinea" contains "guinea" but does not start with it.
        assert index.suggest("guin") == ["Guinea", "Guinea-Bissau"]
        assert index.suggest("kingdom") == []

    def test_case_insensitive(self, tracker: Tracker) -> None:
        assert AutocompleteIndex(tracker.catalog).suggest("FR") == ["France", "French Guiana"]

    @pytest.mark.parametrize("partial", ["", "f", "F", None])
    def test_short_input_returns_nothing(self, tracker: Tracker, partial: str | None) -> None:
        assert AutocompleteIndex(tracker.catalog).suggest(partial) == []

    def test_no_match(self, tracker: Tracker) -> None:
        assert AutocompleteIndex(tracker.catalog).suggest("zz") == []


class TestSuggestionCap:
    def test_at_most_ten(self) -> None:
        catalog = InMemoryCatalog(
            Country(code=f"Q{i:02d}", name=f"Saint Place {i:02d}") for i in range(50)
        )
        names = AutocompleteIndex(catalog).suggest("sa")
        assert len(names) == 10
        assert names[0] == "Saint Place 00"
        assert names[-1] == "Saint Place 09"

    def test_cap_applies_to_store_results(self) -> None:
        class ChattyCatalog(InMemoryCatalog):
            def names_with_prefix(self, prefix: str, limit: int) -> list[str]:
                return [f"Name {i}" for i in range(limit + 5)]

        index = AutocompleteIndex(ChattyCatalog([]))
        assert len(index.suggest("na")) == 10
