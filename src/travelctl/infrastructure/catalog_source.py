"""Load the country reference list from a CSV file.

Accepted layouts, with or without a header record:

- ``id,country_code,country_name``
- ``country_code,country_name``

The first non-blank record is a header when it names a known column
(``id``, ``country_code``/``code``, ``country_name``/``name``/``country``)
or its code cell is too long to be a code. Header columns are located by
name; without a header they are positional.
Malformed records (missing code or name) and repeated codes are skipped;
the load only fails when the file cannot be read at all or holds no usable
record.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from travelctl.domain.types import Country, normalize_code

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

_CODE_HEADERS = frozenset({"country_code", "code", "iso_code", "alpha_2"})
_NAME_HEADERS = frozenset({"country_name", "name", "country"})
_OTHER_HEADERS = frozenset({"id"})
# ISO 3166 alpha-2 and alpha-3 codes
_MAX_CODE_LENGTH = 3


class CatalogLoadError(Exception):
    """The catalog source could not be read or held no valid record."""


@dataclass
class CatalogParse:
    """Outcome of parsing catalog records."""

    countries: list[Country] = field(default_factory=list)
    skipped: int = 0
    duplicates: list[str] = field(default_factory=list)


def _positional_columns(row: list[str]) -> tuple[int, int]:
    # id,code,name when there is a leading id column; code,name otherwise
    if len(row) >= 3:
        return 1, 2
    return 0, 1


def _header_columns(row: list[str]) -> tuple[int, int] | None:
    """Return ``(code_idx, name_idx)`` if *row* is a header record.

    A row is a header when any cell is a known column name, or when its
    code cell cannot be a country code. Columns not found by name fall
    back to their positional slot.
    """
    lowered = [cell.strip().lower() for cell in row]
    code_idx = next((i for i, cell in enumerate(lowered) if cell in _CODE_HEADERS), None)
    name_idx = next((i for i, cell in enumerate(lowered) if cell in _NAME_HEADERS), None)
    known = _CODE_HEADERS | _NAME_HEADERS | _OTHER_HEADERS
    default_code, default_name = _positional_columns(row)

    if not any(cell in known for cell in lowered):
        code_cell = lowered[default_code] if default_code < len(lowered) else ""
        if len(code_cell) <= _MAX_CODE_LENGTH:
            return None

    if code_idx is None:
        code_idx = default_code if default_code != name_idx else default_name
    if name_idx is None:
        name_idx = default_name if default_name != code_idx else default_code
    return code_idx, name_idx


def parse_country_rows(rows: Iterable[list[str]]) -> CatalogParse:
    """Turn raw CSV rows into catalog entries, in source order."""
    result = CatalogParse()
    seen: set[str] = set()
    columns: tuple[int, int] | None = None
    first = True

    for row in rows:
        if not row or not any(cell.strip() for cell in row):
            continue
        if first:
            first = False
            columns = _header_columns(row)
            if columns is not None:
                continue
        code_idx, name_idx = columns or _positional_columns(row)
        if max(code_idx, name_idx) >= len(row):
            result.skipped += 1
            continue

        code = normalize_code(row[code_idx])
        name = row[name_idx].strip().strip('"').strip()
        if not code or not name:
            result.skipped += 1
            continue
        if code in seen:
            result.duplicates.append(code)
            result.skipped += 1
            continue

        seen.add(code)
        result.countries.append(Country(code=code, name=name))

    return result


def load_catalog(path: Path) -> list[Country]:
    """Read and parse the catalog CSV at *path*.

    Raises:
        CatalogLoadError: If the file is missing, unreadable, undecodable,
            or contains no valid record.
    """
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            parsed = parse_country_rows(csv.reader(fh))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        msg = f"Cannot read country catalog {path}: {exc}"
        raise CatalogLoadError(msg) from exc

    if not parsed.countries:
        msg = f"Country catalog {path} contains no valid records"
        raise CatalogLoadError(msg)

    if parsed.duplicates:
        logger.warning("Duplicate country codes skipped: %s", ", ".join(parsed.duplicates))
    logger.info(
        "Loaded %d countries from %s (%d skipped)",
        len(parsed.countries),
        path,
        parsed.skipped,
    )
    return parsed.countries
