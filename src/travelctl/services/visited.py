"""VisitedSetManager: membership rules for the visited set.

Per code the only states are Absent and Present:

    Absent --add (known code)--> Present --remove--> Absent

Codes are re-validated against the catalog on every add, even when they
came from the Resolver, because they may also arrive directly (CLI,
form posts, storage round trips).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from travelctl.domain.matching import sort_by_name
from travelctl.domain.types import AddOutcome, RemoveOutcome, VisitedEntry, normalize_code
from travelctl.services.resolver import Resolver

if TYPE_CHECKING:
    from travelctl.domain.types import Country
    from travelctl.infrastructure.stores import CatalogStore, VisitedStore

logger = logging.getLogger(__name__)


class VisitedSetManager:
    """Owns the visited set; other components only see it through here."""

    def __init__(self, catalog: CatalogStore, visited: VisitedStore) -> None:
        self._catalog = catalog
        self._visited = visited
        self._resolver = Resolver(catalog)

    def add(self, code: str) -> AddOutcome:
        country = self._catalog.lookup_by_code(code)
        if country is None:
            return AddOutcome.UNKNOWN_COUNTRY
        # Check-and-insert is one store step; a concurrent add sees False.
        if not self._visited.add(country.code):
            return AddOutcome.ALREADY_PRESENT
        logger.debug("Visited set: added %s", country.code)
        return AddOutcome.ADDED

    def add_by_name(self, text: str | None) -> tuple[AddOutcome, Country | None]:
        """Resolve *text* and add the match. The country is None when unresolved."""
        country = self._resolver.resolve(text)
        if country is None:
            return AddOutcome.UNKNOWN_COUNTRY, None
        return self.add(country.code), country

    def remove(self, code: str) -> RemoveOutcome:
        if not self._visited.remove(code):
            return RemoveOutcome.NOT_PRESENT
        logger.debug("Visited set: removed %s", normalize_code(code))
        return RemoveOutcome.REMOVED

    def entries(self) -> list[VisitedEntry]:
        """Visited countries ordered by display name.

        A code whose catalog row has gone away is listed under its raw code.
        """
        codes = self._visited.codes()
        known = self._catalog.lookup_many(codes)
        rows = []
        for code in codes:
            country = known.get(code)
            rows.append(VisitedEntry(code=code, name=country.name if country else code))
        return sort_by_name(rows)

    def reset(self) -> int:
        """Empty the visited set. Returns how many codes were dropped."""
        cleared = self._visited.clear()
        logger.debug("Visited set: reset (%d cleared)", cleared)
        return cleared
