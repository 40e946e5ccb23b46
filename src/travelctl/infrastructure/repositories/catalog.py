"""Table-backed catalog. Every call is one query; rows come back in id order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Text, func, select

from travelctl.domain.matching import fold
from travelctl.domain.types import Country, normalize_code
from travelctl.infrastructure.database.engine import UNICODE_LOWER
from travelctl.infrastructure.database.schema import countries

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import Row
    from sqlalchemy.engine import Engine


_FOLDED_NAME = getattr(func, UNICODE_LOWER)(countries.c.country_name, type_=Text)


class SqlCatalog:
    """Encapsulates SQL for catalog lookups and name searches."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def lookup_by_code(self, code: str) -> Country | None:
        stmt = select(countries.c.country_code, countries.c.country_name).where(
            countries.c.country_code == normalize_code(code)
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        return _to_country(row) if row is not None else None

    def lookup_many(self, codes: Iterable[str]) -> dict[str, Country]:
        keys = sorted({normalize_code(c) for c in codes})
        if not keys:
            return {}
        stmt = select(countries.c.country_code, countries.c.country_name).where(
            countries.c.country_code.in_(keys)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return {str(row.country_code): _to_country(row) for row in rows}

    def find_by_name_contains(self, text: str) -> Country | None:
        stmt = (
            select(countries.c.country_code, countries.c.country_name)
            .where(_FOLDED_NAME.contains(fold(text), autoescape=True))
            .order_by(countries.c.id)
            .limit(1)
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        return _to_country(row) if row is not None else None

    def names_with_prefix(self, prefix: str, limit: int) -> list[str]:
        stmt = (
            select(countries.c.country_name)
            .where(_FOLDED_NAME.startswith(fold(prefix), autoescape=True))
            .order_by(countries.c.id)
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [str(row.country_name) for row in rows]

    def all(self) -> list[Country]:
        stmt = select(countries.c.country_code, countries.c.country_name).order_by(
            countries.c.id
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_to_country(row) for row in rows]

    def __len__(self) -> int:
        with self._engine.connect() as conn:
            count = conn.execute(select(func.count()).select_from(countries)).scalar_one()
        return int(count or 0)


def _to_country(row: Row[Any]) -> Country:
    return Country(code=str(row.country_code), name=str(row.country_name))
