"""Click base classes that add an eager ``--examples`` flag.

``--help`` stays short; ``travelctl add --examples`` prints sample
invocations and exits without touching the catalog or the database.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Accept ``examples=...`` and expose it through ``--examples``."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value:
                click.echo(f"Examples for '{ctx.command_path}':\n")
                click.echo(examples)
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples.",
            )
        )


class TravelCommand(_ExamplesMixin, click.Command):
    """Click Command that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class TravelGroup(_ExamplesMixin, click.Group):
    """Click Group whose subcommands default to :class:`TravelCommand`."""

    command_class = TravelCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
