"""serve: run the Flask web app on the configured backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from travelctl.commands._base import TravelCommand

if TYPE_CHECKING:
    from travelctl.commands._context import AppContext


@click.command(
    cls=TravelCommand,
    examples="""\
  # Serve on the address from travelctl.toml (default 127.0.0.1:3000)
  travelctl serve

  # In-memory backend on all interfaces
  travelctl --backend memory serve --host 0.0.0.0 --port 8080""",
)
@click.option("--host", default=None, help="Bind address (default: [web] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [web] port).")
@click.option("--debug", is_flag=True, help="Enable the Flask debugger and reloader.")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None, debug: bool) -> None:
    """Start the web interface."""
    from travelctl.web import create_app

    # Loads the catalog before binding; an unusable catalog aborts startup.
    web_app = create_app(app.tracker, settings=app.settings)
    bind_host = host or app.settings.web.host
    bind_port = port or app.settings.web.port
    click.echo(
        f"travelctl ({app.tracker.backend} backend) running on http://{bind_host}:{bind_port}",
        err=True,
    )
    web_app.run(host=bind_host, port=bind_port, debug=debug, use_reloader=debug)
