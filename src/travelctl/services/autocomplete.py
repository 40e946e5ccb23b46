"""AutocompleteIndex: type-ahead suggestions by strict prefix."""

from __future__ import annotations

from typing import TYPE_CHECKING

from travelctl.domain.matching import MAX_SUGGESTIONS, accepts_suggestion_query, fold

if TYPE_CHECKING:
    from travelctl.infrastructure.stores import CatalogStore


class AutocompleteIndex:
    """Up to ten catalog names starting with the typed text."""

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def suggest(self, partial: str | None) -> list[str]:
        if partial is None or not accepts_suggestion_query(partial):
            return []
        return self._catalog.names_with_prefix(fold(partial), MAX_SUGGESTIONS)[:MAX_SUGGESTIONS]
