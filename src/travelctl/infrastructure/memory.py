"""Process-memory backend: catalog from CSV, visited set in a Python set."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from travelctl.domain.matching import fold, name_contains, name_starts_with
from travelctl.domain.types import Country, normalize_code
from travelctl.infrastructure.catalog_source import load_catalog

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class InMemoryCatalog:
    """Immutable catalog held as a tuple (catalog order) plus a code index."""

    def __init__(self, countries: Iterable[Country]) -> None:
        ordered: list[Country] = []
        by_code: dict[str, Country] = {}
        for country in countries:
            if country.code in by_code:
                continue
            by_code[country.code] = country
            ordered.append(country)
        self._countries = tuple(ordered)
        self._by_code = by_code

    @classmethod
    def from_csv(cls, path: Path) -> InMemoryCatalog:
        """Load the catalog once from *path* (raises ``CatalogLoadError``)."""
        return cls(load_catalog(path))

    def lookup_by_code(self, code: str) -> Country | None:
        return self._by_code.get(normalize_code(code))

    def lookup_many(self, codes: Iterable[str]) -> dict[str, Country]:
        found: dict[str, Country] = {}
        for code in codes:
            country = self._by_code.get(normalize_code(code))
            if country is not None:
                found[country.code] = country
        return found

    def find_by_name_contains(self, text: str) -> Country | None:
        needle = fold(text)
        return next((c for c in self._countries if name_contains(c.name, needle)), None)

    def names_with_prefix(self, prefix: str, limit: int) -> list[str]:
        folded = fold(prefix)
        names: list[str] = []
        for country in self._countries:
            if len(names) >= limit:
                break
            if name_starts_with(country.name, folded):
                names.append(country.name)
        return names

    def all(self) -> list[Country]:
        return list(self._countries)

    def __len__(self) -> int:
        return len(self._countries)


class InMemoryVisitedStore:
    """Visited codes in a set; each mutation holds the lock for one step."""

    def __init__(self, codes: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._codes: set[str] = {normalize_code(c) for c in codes}

    def add(self, code: str) -> bool:
        key = normalize_code(code)
        with self._lock:
            if key in self._codes:
                return False
            self._codes.add(key)
            return True

    def remove(self, code: str) -> bool:
        key = normalize_code(code)
        with self._lock:
            if key not in self._codes:
                return False
            self._codes.remove(key)
            return True

    def codes(self) -> list[str]:
        with self._lock:
            return list(self._codes)

    def clear(self) -> int:
        with self._lock:
            count = len(self._codes)
            self._codes.clear()
            return count
