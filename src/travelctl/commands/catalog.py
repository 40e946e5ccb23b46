"""Command group: read-only catalog queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from travelctl.commands._base import TravelGroup

if TYPE_CHECKING:
    from travelctl.commands._context import AppContext

_CATALOG_EXAMPLES = """\
  travelctl catalog suggest fr
  travelctl catalog resolve "kingdom"
  travelctl catalog list
  travelctl --json catalog list"""


@click.group(cls=TravelGroup, examples=_CATALOG_EXAMPLES)
@click.pass_obj
def catalog(app: AppContext) -> None:
    """Search and list the country catalog."""


@catalog.command(
    examples="""\
  travelctl catalog suggest ge
  travelctl -q catalog suggest uni"""
)
@click.argument("partial")
@click.pass_obj
def suggest(app: AppContext, partial: str) -> None:
    """Up to 10 country names starting with PARTIAL (2+ characters)."""
    app.emit(app.service.suggest(partial))


@catalog.command(
    examples="""\
  travelctl catalog resolve franc
  travelctl --json catalog resolve south"""
)
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def resolve(app: AppContext, text: tuple[str, ...]) -> None:
    """Show which country TEXT resolves to, without adding it."""
    app.emit(app.service.resolve(" ".join(text)))


@catalog.command(
    "list",
    examples="""\
  travelctl catalog list
  travelctl -q catalog list""",
)
@click.pass_obj
def list_countries(app: AppContext) -> None:
    """List every country in the catalog, in catalog order."""
    app.emit(app.service.list_countries())
