"""Tests for the SQL catalog and visited-set stores."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import delete
from sqlalchemy.engine import Engine

from tests.conftest import sample_countries
from travelctl.domain.types import Country
from travelctl.infrastructure.database.engine import UNICODE_LOWER, init_database, seed_catalog
from travelctl.infrastructure.database.schema import countries
from travelctl.infrastructure.repositories import SqlCatalog, SqlVisitedStore


@pytest.fixture
def engine(tmp_path: Path) -> Generator[Engine]:
    eng = init_database(tmp_path / "t.db")
    seed_catalog(eng, sample_countries())
    try:
        yield eng
    finally:
        eng.dispose()


class TestSqlCatalog:
    def test_lookup_by_code(self, engine: Engine) -> None:
        catalog = SqlCatalog(engine)
        assert catalog.lookup_by_code("de") == Country(code="DE", name="Germany")
        assert catalog.lookup_by_code("ZZ") is None

    def test_lookup_many(self, engine: Engine) -> None:
        found = SqlCatalog(engine).lookup_many(["fr", "ZZ", "GB"])
        assert set(found) == {"FR", "GB"}
        assert SqlCatalog(engine).lookup_many([]) == {}

    def test_contains_folds_unicode(self, engine: Engine) -> None:
        match = SqlCatalog(engine).find_by_name_contains("ÅLAND")
        assert match is not None
        assert match.code == "AX"

    def test_name_folding_uses_registered_function(self) -> None:
        from travelctl.infrastructure.repositories import catalog as catalog_module

        assert catalog_module._FOLDED_NAME.name == UNICODE_LOWER

    def test_contains_first_in_id_order(self, engine: Engine) -> None:
        match = SqlCatalog(engine).find_by_name_contains("guinea")
        assert match is not None
        assert match.code == "GN"

    def test_like_wildcards_are_literal(self, engine: Engine) -> None:
        catalog = SqlCatalog(engine)
        assert catalog.find_by_name_contains("%") is None
        assert catalog.find_by_name_contains("_") is None
        assert catalog.names_with_prefix("%", 10) == []

    def test_names_with_prefix(self, engine: Engine) -> None:
        names = SqlCatalog(engine).names_with_prefix("gu", 10)
        assert names == ["Guinea", "Guinea-Bissau"]

    def test_all_and_len(self, engine: Engine) -> None:
        catalog = SqlCatalog(engine)
        assert len(catalog) == len(sample_countries())
        assert catalog.all() == sample_countries()


class TestSqlVisitedStore:
    def test_add_reports_change(self, engine: Engine) -> None:
        store = SqlVisitedStore(engine)
        assert store.add("fr") is True
        assert store.add("FR") is False
        assert store.codes() == ["FR"]

    def test_remove_reports_change(self, engine: Engine) -> None:
        store = SqlVisitedStore(engine)
        store.add("FR")
        assert store.remove("fr") is True
        assert store.remove("FR") is False

    def test_clear_returns_count(self, engine: Engine) -> None:
        store = SqlVisitedStore(engine)
        store.add("FR")
        store.add("DE")
        assert store.clear() == 2
        assert store.codes() == []

    def test_visited_survives_catalog_row_removal(self, engine: Engine) -> None:
        store = SqlVisitedStore(engine)
        store.add("FR")
        with engine.begin() as conn:
            conn.execute(delete(countries).where(countries.c.country_code == "FR"))
        assert store.codes() == ["FR"]
        assert SqlCatalog(engine).lookup_many(["FR"]) == {}
