"""Country records, visited entries, and operation outcome enums.

Outcomes are returned as data, never raised. A caller that asks to add a
country that is already visited gets ``AddOutcome.ALREADY_PRESENT`` back,
not an exception.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, field_validator


def normalize_code(code: str | None) -> str:
    """Canonical form of a country code: stripped, upper case."""
    return (code or "").strip().upper()


class Country(BaseModel):
    """One catalog entry. Immutable after the catalog is loaded."""

    model_config = {"frozen": True}

    code: str
    name: str

    @field_validator("code")
    @classmethod
    def _canonical_code(cls, value: str) -> str:
        return normalize_code(value)


class VisitedEntry(BaseModel):
    """A visited code joined against the catalog for display."""

    model_config = {"frozen": True}

    code: str
    name: str


class AddOutcome(StrEnum):
    """Result of adding a code to the visited set."""

    ADDED = "added"
    ALREADY_PRESENT = "already_present"
    UNKNOWN_COUNTRY = "unknown_country"


class RemoveOutcome(StrEnum):
    """Result of removing a code from the visited set."""

    REMOVED = "removed"
    NOT_PRESENT = "not_present"


class StorageBackend(StrEnum):
    """Interchangeable storage variants behind one contract."""

    MEMORY = "memory"
    SQL = "sql"
