"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used: the tracker issues a handful of
single-statement lookups and inserts per request, with no need for
identity maps or unit-of-work tracking.

SQLite's built-in ``lower()`` only folds ASCII. A Python ``unicode_lower``
function is registered on every connection so name matching folds
"Åland" exactly like the memory backend does.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event, func, insert, select

from travelctl.domain.matching import fold
from travelctl.infrastructure.database.schema import countries, metadata

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from travelctl.domain.types import Country

logger = logging.getLogger(__name__)

UNICODE_LOWER = "unicode_lower"


def _unicode_lower(value: str | None) -> str | None:
    return fold(value) if value is not None else None


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and case folding registered."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.create_function(UNICODE_LOWER, 1, _unicode_lower, deterministic=True)
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(db_path: Path) -> Engine:
    """Create the database at *db_path*.

    Creates parent directories and all tables from :data:`schema.metadata`.
    Idempotent; populate the catalog with :func:`seed_catalog`.

    Returns the engine ready for use.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    return engine


def seed_catalog(engine: Engine, rows: Iterable[Country]) -> int:
    """Insert *rows* into ``countries`` when the table is empty.

    Returns the number of rows inserted (0 if the catalog already existed).
    """
    with engine.begin() as conn:
        existing = conn.execute(select(func.count()).select_from(countries)).scalar_one()
        if existing:
            return 0
        values = [{"country_code": c.code, "country_name": c.name} for c in rows]
        if values:
            conn.execute(insert(countries), values)
    logger.info("Seeded %d countries into the catalog table", len(values))
    return len(values)
