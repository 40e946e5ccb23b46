"""Tests for TravelSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from travelctl.config.settings import TravelSettings, bundled_catalog_path
from travelctl.domain.types import StorageBackend


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "TRAVELCTL_CONFIG",
        "TRAVELCTL_BACKEND",
        "TRAVELCTL_DATABASE__PATH",
        "TRAVELCTL_CATALOG__CSV_PATH",
        "TRAVELCTL_WEB__PORT",
    ):
        monkeypatch.delenv(var, raising=False)


class TestTravelSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.backend is StorageBackend.SQL
        assert settings.web.host == "127.0.0.1"
        assert settings.web.port == 3000

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TravelSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_bundled_catalog_by_default(self, tmp_path: Path) -> None:
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.catalog_path == bundled_catalog_path()
        assert settings.catalog_path.is_file()

    def test_database_path_under_root(self, tmp_path: Path) -> None:
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.database_path == tmp_path / ".travelctl" / "travelctl.db"


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "travelctl.toml").write_text(
            'backend = "memory"\n[web]\nport = 8080\n'
        )
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.backend is StorageBackend.MEMORY
        assert settings.web.port == 8080
        assert settings.web.host == "127.0.0.1"  # default preserved

    def test_relative_paths_resolve_against_root(self, tmp_path: Path) -> None:
        (tmp_path / "travelctl.toml").write_text(
            '[catalog]\ncsv_path = "data/c.csv"\n[database]\npath = "db/t.db"\n'
        )
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.catalog_path == tmp_path / "data" / "c.csv"
        assert settings.database_path == tmp_path / "db" / "t.db"

    def test_root_is_config_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "travelctl.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = TravelSettings.from_cli()
        assert settings.config_path == tmp_path / "travelctl.toml"
        assert settings.root == tmp_path

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('backend = "memory"\n')
        settings = TravelSettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.backend is StorageBackend.MEMORY
        assert settings.config_path == custom

    def test_invalid_toml_is_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "travelctl.toml").write_text("backend = [unterminated\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TravelSettings.from_cli(root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "travelctl.toml").write_text('backend = "sql"\n')
        monkeypatch.setenv("TRAVELCTL_BACKEND", "memory")
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.backend is StorageBackend.MEMORY

    def test_nested_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRAVELCTL_WEB__PORT", "5050")
        settings = TravelSettings.from_cli(root=tmp_path)
        assert settings.web.port == 5050

    def test_cli_flag_overrides_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TRAVELCTL_BACKEND", "memory")
        settings = TravelSettings.from_cli(root=tmp_path, backend="sql")
        assert settings.backend is StorageBackend.SQL

    def test_none_flag_does_not_mask_toml(self, tmp_path: Path) -> None:
        (tmp_path / "travelctl.toml").write_text('backend = "memory"\n')
        settings = TravelSettings.from_cli(root=tmp_path, backend=None)
        assert settings.backend is StorageBackend.MEMORY

    def test_cli_output_flags(self, tmp_path: Path) -> None:
        settings = TravelSettings.from_cli(
            root=tmp_path, json_output=True, quiet=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True
