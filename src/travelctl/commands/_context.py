"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Tracker construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from travelctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from travelctl.config.settings import TravelSettings
    from travelctl.infrastructure.tracker import Tracker
    from travelctl.services.result import ServiceResult
    from travelctl.services.tracker import TrackerService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The tracker is built on first use so ``--help``, ``--version`` and
    ``--examples`` never load the catalog or open the database.
    """

    def __init__(self, settings: TravelSettings) -> None:
        self.settings = settings
        self._tracker: Tracker | None = None

        from travelctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def tracker(self) -> Tracker:
        """The tracker for the configured backend (created lazily).

        A catalog that cannot be loaded is fatal for every command.
        """
        if self._tracker is None:
            from travelctl.infrastructure.catalog_source import CatalogLoadError
            from travelctl.infrastructure.tracker import Tracker

            try:
                self._tracker = Tracker.from_settings(self.settings)
            except CatalogLoadError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._tracker

    @property
    def service(self) -> TrackerService:
        """A TrackerService bound to :attr:`tracker`."""
        from travelctl.services.tracker import TrackerService

        return TrackerService(self.tracker)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Release the tracker's resources, if one was created."""
        if self._tracker is not None:
            self._tracker.close()
            self._tracker = None
