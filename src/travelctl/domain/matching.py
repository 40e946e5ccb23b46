"""Name matching and ordering rules shared by both storage backends.

Two match policies coexist on purpose:

- Resolution is lenient **substring** matching, so "franc" finds France.
- Suggestion is strict **prefix** matching, so a type-ahead box only
  offers names that begin with what was typed.

Ties resolve to catalog order (first match wins).
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from travelctl.domain.types import VisitedEntry

MIN_SUGGEST_LENGTH = 2
MAX_SUGGESTIONS = 10


def fold(text: str) -> str:
    """Case-fold a name or query for comparison."""
    return text.lower()


def normalize_query(text: str | None) -> str:
    """Normalize free-text resolution input. Blank input becomes ``""``."""
    return fold((text or "").strip())


def name_contains(name: str, needle: str) -> bool:
    """True if *name* contains the already-folded *needle*."""
    return needle in fold(name)


def name_starts_with(name: str, prefix: str) -> bool:
    """True if *name* begins with the already-folded *prefix*."""
    return fold(name).startswith(prefix)


def accepts_suggestion_query(partial: str) -> bool:
    """Short input would match too broadly; require two characters."""
    return len(partial) >= MIN_SUGGEST_LENGTH


def collation_key(name: str) -> tuple[str, str]:
    """Locale-aware sort key for display names.

    The primary key drops diacritics and case so "Åland Islands" sorts
    among the A's; the exact name breaks ties deterministically.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def sort_by_name(entries: Iterable[VisitedEntry]) -> list[VisitedEntry]:
    """Return *entries* ordered by the collation key of their name."""
    return sorted(entries, key=lambda entry: collation_key(entry.name))
