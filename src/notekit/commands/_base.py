"""Click classes that carry usage examples.

``--help`` stays short; ``--examples`` prints sample invocations and
exits before arguments are validated, so ``notekit sort --examples``
works without a SOURCE.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when ``examples=`` text is given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class NotekitCommand(_ExamplesMixin, click.Command):
    """A command accepting ``examples=``."""


class NotekitGroup(_ExamplesMixin, click.Group):
    """A group accepting ``examples=``; its subcommands are :class:`NotekitCommand`."""

    command_class = NotekitCommand
