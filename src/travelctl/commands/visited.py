"""Commands: add, remove, list, and reset visited countries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from travelctl.commands._base import TravelCommand

if TYPE_CHECKING:
    from travelctl.commands._context import AppContext


@click.command(
    cls=TravelCommand,
    examples="""\
  travelctl add France
  travelctl add "united k"
  travelctl --json add franc""",
)
@click.argument("country", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, country: tuple[str, ...]) -> None:
    """Mark a country visited, matching COUNTRY anywhere in its name."""
    app.emit(app.service.add_country(" ".join(country)))


@click.command(
    cls=TravelCommand,
    examples="""\
  travelctl remove FR
  travelctl --json remove de""",
)
@click.argument("code")
@click.pass_obj
def remove(app: AppContext, code: str) -> None:
    """Remove a country from the visited list by its CODE."""
    app.emit(app.service.remove_country(code))


@click.command(
    cls=TravelCommand,
    examples="""\
  travelctl visited
  travelctl -q visited
  travelctl --json visited""",
)
@click.pass_obj
def visited(app: AppContext) -> None:
    """List visited countries, sorted by name."""
    app.emit(app.service.list_visited())


@click.command(
    cls=TravelCommand,
    examples="""\
  travelctl reset
  travelctl --backend memory reset""",
)
@click.pass_obj
def reset(app: AppContext) -> None:
    """Clear the visited list (no confirmation)."""
    app.emit(app.service.reset())
