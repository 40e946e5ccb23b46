"""Table-backed visited set.

Membership changes are single statements whose affected-row count decides
the outcome, so the primary key serializes concurrent adds of one code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from travelctl.domain.types import normalize_code
from travelctl.infrastructure.database.schema import visited_countries

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class SqlVisitedStore:
    """Encapsulates SQL for visited-set mutations and reads."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, code: str) -> bool:
        stmt = (
            sqlite_insert(visited_countries)
            .values(country_code=normalize_code(code))
            .on_conflict_do_nothing(index_elements=[visited_countries.c.country_code])
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount == 1

    def remove(self, code: str) -> bool:
        stmt = delete(visited_countries).where(
            visited_countries.c.country_code == normalize_code(code)
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount > 0

    def codes(self) -> list[str]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(visited_countries.c.country_code)).fetchall()
        return [str(row.country_code) for row in rows]

    def clear(self) -> int:
        with self._engine.begin() as conn:
            result = conn.execute(delete(visited_countries))
        return int(result.rowcount or 0)
