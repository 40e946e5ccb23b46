"""Resolver: free text to one catalog entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from travelctl.domain.matching import normalize_query

if TYPE_CHECKING:
    from travelctl.domain.types import Country
    from travelctl.infrastructure.stores import CatalogStore


class Resolver:
    """Lenient substring resolution against the catalog.

    Ambiguous input ("land" matches Finland, Iceland, Ireland...) resolves
    to the first match in catalog order. No ranking is attempted.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def resolve(self, user_text: str | None) -> Country | None:
        """Return the matching country, or None for blank or unmatched input."""
        needle = normalize_query(user_text)
        if not needle:
            return None
        return self._catalog.find_by_name_contains(needle)
