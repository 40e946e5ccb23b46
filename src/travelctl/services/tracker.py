"""TrackerService: every tracker operation as a ServiceResult.

This is the only entry point the CLI and the web app call. Messages on
failed results are the user-facing texts shown by both adapters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from travelctl.domain.types import AddOutcome, RemoveOutcome, normalize_code
from travelctl.services.autocomplete import AutocompleteIndex
from travelctl.services.base import BaseService, guard_storage
from travelctl.services.contracts import (
    AddCountryData,
    CountryListData,
    RemoveCountryData,
    ResetData,
    ResolveData,
    SuggestData,
    dump_validated,
)
from travelctl.services.resolver import Resolver
from travelctl.services.result import ServiceError, ServiceResult
from travelctl.services.visited import VisitedSetManager

if TYPE_CHECKING:
    from travelctl.infrastructure.tracker import Tracker

UNKNOWN_COUNTRY_MESSAGE = "Country's name does not exist, try again"
ALREADY_PRESENT_MESSAGE = "Country has already been added, try again"
NOT_PRESENT_MESSAGE = "Country not found in visited list"
CODE_REQUIRED_MESSAGE = "Country code is required"
NAME_REQUIRED_MESSAGE = "Country name is required"


class TrackerService(BaseService):
    """Resolve, add, remove, list, suggest, and reset visited countries."""

    def __init__(self, tracker: Tracker) -> None:
        super().__init__(tracker)
        self._resolver = Resolver(tracker.catalog)
        self._manager = VisitedSetManager(tracker.catalog, tracker.visited)
        self._index = AutocompleteIndex(tracker.catalog)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @guard_storage("add_country")
    def add_country(self, text: str | None) -> ServiceResult:
        """Resolve free text to a country and mark it visited."""
        op = "add_country"
        query = (text or "").strip()
        if not query:
            return self._fail(op, "INVALID_INPUT", NAME_REQUIRED_MESSAGE)

        outcome, country = self._manager.add_by_name(query)
        if country is None or outcome is AddOutcome.UNKNOWN_COUNTRY:
            return self._fail(
                op,
                "UNKNOWN_COUNTRY",
                UNKNOWN_COUNTRY_MESSAGE,
                {"outcome": str(AddOutcome.UNKNOWN_COUNTRY), "query": query},
            )
        if outcome is AddOutcome.ALREADY_PRESENT:
            return self._fail(
                op,
                "ALREADY_PRESENT",
                ALREADY_PRESENT_MESSAGE,
                {"outcome": str(outcome), "code": country.code, "name": country.name},
            )

        data = dump_validated(
            AddCountryData,
            {"outcome": outcome, "query": query, "code": country.code, "name": country.name},
        )
        return ServiceResult(ok=True, op=op, data=data, meta=self._meta())

    @guard_storage("remove_country")
    def remove_country(self, code: str | None) -> ServiceResult:
        """Drop a code from the visited set."""
        op = "remove_country"
        key = normalize_code(code)
        if not key:
            return self._fail(op, "INVALID_INPUT", CODE_REQUIRED_MESSAGE)

        outcome = self._manager.remove(key)
        if outcome is RemoveOutcome.NOT_PRESENT:
            return self._fail(
                op,
                "NOT_PRESENT",
                NOT_PRESENT_MESSAGE,
                {"outcome": str(outcome), "code": key},
            )

        data = dump_validated(RemoveCountryData, {"outcome": outcome, "code": key})
        return ServiceResult(ok=True, op=op, data=data, meta=self._meta())

    @guard_storage("reset")
    def reset(self) -> ServiceResult:
        """Clear the visited set. No confirmation."""
        cleared = self._manager.reset()
        data = dump_validated(ResetData, {"cleared": cleared})
        return ServiceResult(ok=True, op="reset", data=data, meta=self._meta())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @guard_storage("list_visited")
    def list_visited(self) -> ServiceResult:
        """Visited countries sorted by name."""
        entries = self._manager.entries()
        data = dump_validated(
            CountryListData,
            {"count": len(entries), "items": [e.model_dump() for e in entries]},
        )
        return ServiceResult(ok=True, op="list_visited", data=data, meta=self._meta())

    @guard_storage("suggest")
    def suggest(self, partial: str | None) -> ServiceResult:
        """Prefix suggestions for a type-ahead box (empty below two chars)."""
        names = self._index.suggest(partial)
        data = dump_validated(
            SuggestData,
            {"query": partial or "", "count": len(names), "items": names},
        )
        return ServiceResult(ok=True, op="suggest", data=data, meta=self._meta())

    @guard_storage("resolve")
    def resolve(self, text: str | None) -> ServiceResult:
        """Show which country free text would resolve to, without adding it."""
        country = self._resolver.resolve(text)
        if country is None:
            return self._fail(
                "resolve",
                "NOT_FOUND",
                UNKNOWN_COUNTRY_MESSAGE,
                {"query": (text or "").strip()},
            )
        data = dump_validated(ResolveData, country.model_dump())
        return ServiceResult(ok=True, op="resolve", data=data, meta=self._meta())

    @guard_storage("list_countries")
    def list_countries(self) -> ServiceResult:
        """The full catalog, in catalog order."""
        countries = self._tracker.catalog.all()
        data = dump_validated(
            CountryListData,
            {"count": len(countries), "items": [c.model_dump() for c in countries]},
        )
        return ServiceResult(ok=True, op="list_countries", data=data, meta=self._meta())

    # ------------------------------------------------------------------

    def _fail(
        self,
        op: str,
        code: str,
        message: str,
        detail: dict[str, str] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
            meta=self._meta(),
        )
