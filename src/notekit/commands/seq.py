"""Command group: hierarchical sequence numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notekit.commands._base import NotekitGroup
from notekit.services.sequence import SequenceService

if TYPE_CHECKING:
    from notekit.commands._context import AppContext

_SEQ_EXAMPLES = """\
  notekit seq parse 1.2.3a
  notekit seq inc 1.9
  notekit seq inc 1.3 --level 2
  notekit seq inc 1.3.2 --level 1 --remove-deeper
  notekit seq key 1 1.10 1.2 2"""


@click.group(cls=NotekitGroup, examples=_SEQ_EXAMPLES)
def seq() -> None:
    """Parse, increment and sort sequence numbers."""


@seq.command()
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Show the segments and sort key of TEXT."""
    app.emit(SequenceService(app.collection).parse(text))


@seq.command()
@click.argument("text")
@click.option("--level", type=int, default=None, help="Zero-based level to increment (default: deepest).")
@click.option("--remove-deeper", is_flag=True, help="Drop levels below --level first.")
@click.pass_obj
def inc(app: AppContext, text: str, level: int | None, remove_deeper: bool) -> None:
    """Increment TEXT."""
    app.emit(SequenceService(app.collection).increment(text, level=level, remove_deeper=remove_deeper))


@seq.command()
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def key(app: AppContext, texts: tuple[str, ...]) -> None:
    """Print sort keys for TEXTS, in sorted order."""
    app.emit(SequenceService(app.collection).sort_keys(list(texts)))
