"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from travelctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from travelctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_extract_key(item) for item in items)
    if "code" in result.data:
        return str(result.data["code"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_key(item: Any) -> str:
    """Country rows print their code; suggestion rows are plain names."""
    if isinstance(item, dict):
        return str(item.get("code", ""))
    return str(item)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="travel.ok")
    op = Text(f"  {result.op}", style="travel.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="travel.key")
    if key == "code":
        v = Text(str(value), style="travel.code")
    elif key == "name":
        v = Text(str(value), style="travel.name")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _country_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of ``{code, name}`` rows."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="travel.code", no_wrap=True)
    table.add_column("Country", style="travel.name")
    for item in items:
        table.add_row(str(item.get("code", "")), str(item.get("name", "")))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="travel.error")
    op = Text(f"  {result.op}", style="travel.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/remove/resolve/reset results."""
    _status_line(console, result)
    for key in ("outcome", "code", "name", "cleared"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_country_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render visited or catalog listings as a table."""
    items = result.data.get("items", [])
    count = result.data.get("count", len(items))
    if items:
        console.print(_country_table(items))
        console.print()
    noun = "visited" if result.op == "list_visited" else "countries"
    console.print(Text(f"{count} {noun}", style="travel.count"))
    if verbose:
        _render_meta(console, result)


def _render_suggestions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render suggestion names one per line."""
    items = result.data.get("items", [])
    if not items:
        console.print(Text("No suggestions", style="dim"))
    for name in items:
        console.print(f"  • {name}")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add_country": _render_mutation,
    "remove_country": _render_mutation,
    "resolve": _render_mutation,
    "reset": _render_mutation,
    "list_visited": _render_country_list,
    "list_countries": _render_country_list,
    "suggest": _render_suggestions,
}
