"""Subcommand modules for travelctl.

Provides register_commands() which uses deferred imports so
``travelctl --help`` never pulls in Flask or SQLAlchemy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the catalog group and the standalone commands on the root group."""
    # --- Groups ---
    from travelctl.commands.catalog import catalog

    cli.add_command(catalog)

    # --- Standalone commands ---
    from travelctl.commands.serve import serve
    from travelctl.commands.visited import add, remove, reset, visited

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(visited)
    cli.add_command(reset)
    cli.add_command(serve)
