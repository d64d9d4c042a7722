"""Command: sort notes given as JSON records."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

import click

from notekit.commands._base import NotekitCommand
from notekit.services.base import INVALID_INPUT
from notekit.services.result import ServiceResult
from notekit.services.sorting import SortService

if TYPE_CHECKING:
    from notekit.commands._context import AppContext


@click.command(
    cls=NotekitCommand,
    examples="""\
  notekit sort notes.json
  notekit sort notes.json --by seq_plus_title
  notekit sort notes.json --by custom --descending
  cat notes.json | notekit --json sort -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--by", "sort_parm", default=None, help="Sort policy name or code (default: from config).")
@click.option("--descending/--ascending", default=None, help="Override the configured direction.")
@click.pass_obj
def sort(app: AppContext, source: TextIO, sort_parm: str | None, descending: bool | None) -> None:
    """Sort the notes in SOURCE, a JSON list of label/text objects ('-' for stdin)."""
    try:
        records = json.load(source)
    except json.JSONDecodeError as exc:
        app.emit(ServiceResult.failure("sort_notes", INVALID_INPUT, f"Invalid JSON: {exc}"))
        return
    app.emit(SortService(app.collection).sort_records(records, sort_parm=sort_parm, descending=descending))
