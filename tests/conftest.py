"""Shared pytest fixtures and test helpers for travelctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from travelctl.domain.types import Country, StorageBackend
from travelctl.infrastructure.database.engine import init_database, seed_catalog
from travelctl.infrastructure.memory import InMemoryCatalog
from travelctl.infrastructure.repositories import SqlCatalog, SqlVisitedStore
from travelctl.infrastructure.tracker import Tracker

# Catalog order matters: ambiguous matches resolve to the earliest row.
SAMPLE_COUNTRIES: list[tuple[str, str]] = [
    ("AX", "Åland Islands"),
    ("FI", "Finland"),
    ("FR", "France"),
    ("GF", "French Guiana"),
    ("DE", "Germany"),
    ("GN", "Guinea"),
    ("GW", "Guinea-Bissau"),
    ("GQ", "Equatorial Guinea"),
    ("IS", "Iceland"),
    ("IE", "Ireland"),
    ("AE", "United Arab Emirates"),
    ("GB", "United Kingdom"),
    ("US", "United States"),
]


def sample_countries() -> list[Country]:
    return [Country(code=code, name=name) for code, name in SAMPLE_COUNTRIES]


def write_catalog_csv(path: Path, rows: list[tuple[str, str]] | None = None) -> Path:
    """Write an ``id,country_code,country_name`` CSV with a header row."""
    lines = ["id,country_code,country_name"]
    for i, (code, name) in enumerate(rows or SAMPLE_COUNTRIES, start=1):
        cell = f'"{name}"' if "," in name else name
        lines.append(f"{i},{code},{cell}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog_csv(tmp_path: Path) -> Path:
    """The sample catalog written to a CSV file."""
    return write_catalog_csv(tmp_path / "countries.csv")


@pytest.fixture
def memory_tracker() -> Tracker:
    """Memory-backed tracker over the sample catalog."""
    return Tracker.in_memory(InMemoryCatalog(sample_countries()))


@pytest.fixture
def sql_tracker(tmp_path: Path) -> Generator[Tracker]:
    """SQLite-backed tracker seeded with the sample catalog."""
    engine = init_database(tmp_path / "tracker.db")
    seed_catalog(engine, sample_countries())
    tracker = Tracker(
        SqlCatalog(engine),
        SqlVisitedStore(engine),
        backend=StorageBackend.SQL,
        engine=engine,
    )
    try:
        yield tracker
    finally:
        tracker.close()


@pytest.fixture(params=[StorageBackend.MEMORY, StorageBackend.SQL], ids=["memory", "sql"])
def tracker(request: pytest.FixtureRequest) -> Tracker:
    """Run the test once per backend; both must behave identically."""
    name = "memory_tracker" if request.param is StorageBackend.MEMORY else "sql_tracker"
    return request.getfixturevalue(name)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config in effect.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes. The SQL database lands in ``tmp_path/.travelctl/``.
    """
    for var in (
        "TRAVELCTL_CONFIG",
        "TRAVELCTL_BACKEND",
        "TRAVELCTL_CATALOG__CSV_PATH",
        "TRAVELCTL_DATABASE__PATH",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
