"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, travelctl.toml only contains
overrides. The sections are composed by
:class:`travelctl.config.settings.TravelSettings`.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- travelctl.toml sections ---


class CatalogConfig(BaseModel):
    """[catalog] section."""

    model_config = {"frozen": True}

    # None means the reference list bundled with the package.
    csv_path: str | None = None


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: str = ".travelctl/travelctl.db"


class WebConfig(BaseModel):
    """[web] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 3000
    secret_key: str = "change-me-dev"

