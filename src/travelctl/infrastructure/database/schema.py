"""SQLAlchemy Core table definitions for the travelctl database."""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, Table, Text

metadata = MetaData()

countries = Table(
    "countries",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),  # catalog order
    Column("country_code", Text, nullable=False, unique=True),
    Column("country_name", Text, nullable=False),
)

# No foreign key: a catalog row removed out-of-band must not take the
# visited entry with it. Listing falls back to the raw code instead.
visited_countries = Table(
    "visited_countries",
    metadata,
    Column("country_code", Text, primary_key=True),
)
