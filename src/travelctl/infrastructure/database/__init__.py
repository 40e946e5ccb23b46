"""SQLite database engine and schema via SQLAlchemy Core."""

from travelctl.infrastructure.database.engine import (
    UNICODE_LOWER,
    create_db_engine,
    init_database,
    seed_catalog,
)
from travelctl.infrastructure.database.schema import countries, metadata, visited_countries

__all__ = [
    "UNICODE_LOWER",
    "countries",
    "create_db_engine",
    "init_database",
    "metadata",
    "seed_catalog",
    "visited_countries",
]
