"""Capability interfaces shared by the memory and SQL backends.

The service layer talks to these protocols only. Both variants must give
identical answers for identical data, including catalog-order tie-breaks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from travelctl.domain.types import Country


class CatalogStore(Protocol):
    """Read-only reference set of known countries."""

    def lookup_by_code(self, code: str) -> Country | None: ...

    def lookup_many(self, codes: Iterable[str]) -> dict[str, Country]: ...

    def find_by_name_contains(self, text: str) -> Country | None:
        """First country, in catalog order, whose folded name contains *text*."""
        ...

    def names_with_prefix(self, prefix: str, limit: int) -> list[str]:
        """Names whose folded form starts with *prefix*, in catalog order."""
        ...

    def all(self) -> list[Country]: ...

    def __len__(self) -> int: ...


class VisitedStore(Protocol):
    """Mutable set of visited codes.

    ``add`` and ``remove`` are single atomic steps: the return value tells
    whether this call changed membership.
    """

    def add(self, code: str) -> bool: ...

    def remove(self, code: str) -> bool: ...

    def codes(self) -> list[str]: ...

    def clear(self) -> int: ...
