"""Locate the travelctl.toml that applies to a working directory.

The nearest ``travelctl.toml`` at or above the start directory wins.
``TRAVELCTL_CONFIG`` names a file explicitly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "travelctl.toml"
CONFIG_ENV_VAR = "TRAVELCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    An explicit ``TRAVELCTL_CONFIG`` that does not point at a file yields
    None rather than falling back to the search.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
