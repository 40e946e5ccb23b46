"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``items`` vs ``countries``)
fail fast in tests and during development.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from travelctl.domain.types import AddOutcome, RemoveOutcome

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class CountryItem(BaseModel):
    """One ``{code, name}`` row."""

    code: str
    name: str


class AddCountryData(BaseModel):
    """Payload contract for ``TrackerService.add_country``."""

    outcome: AddOutcome
    query: str
    code: str
    name: str


class RemoveCountryData(BaseModel):
    """Payload contract for ``TrackerService.remove_country``."""

    outcome: RemoveOutcome
    code: str


class CountryListData(BaseModel):
    """Payload contract for ``list_visited`` and ``list_countries``."""

    count: int
    items: list[CountryItem]


class SuggestData(BaseModel):
    """Payload contract for ``TrackerService.suggest``."""

    query: str
    count: int
    items: list[str]


class ResolveData(BaseModel):
    """Payload contract for ``TrackerService.resolve``."""

    code: str
    name: str


class ResetData(BaseModel):
    """Payload contract for ``TrackerService.reset``."""

    cleared: int
