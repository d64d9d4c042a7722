"""Subcommand modules for notekit.

Provides register_commands(), which imports command modules only when the
CLI is assembled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from notekit.commands.field import field
    from notekit.commands.seq import seq

    cli.add_command(field)
    cli.add_command(seq)

    # --- Standalone commands ---
    from notekit.commands.sort import sort

    cli.add_command(sort)
