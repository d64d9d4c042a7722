"""Command group: field label resolution and value parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notekit.commands._base import NotekitGroup
from notekit.services.fields import FieldService

if TYPE_CHECKING:
    from notekit.commands._context import AppContext

_FIELD_EXAMPLES = """\
  notekit field parse Title "  The   Hobbit "
  notekit field parse By "Tolkien, J. R. R. and Christopher Tolkien"
  notekit field parse Notes 42 --type int
  notekit field list
  notekit field types"""


@click.group(cls=NotekitGroup, examples=_FIELD_EXAMPLES)
def field() -> None:
    """Resolve field labels and parse values."""


@field.command(
    examples="""\
  notekit field parse Date "March 5, 2024"
  notekit --json field parse Tags "fiction.fantasy, classics"
  notekit field parse Seq 1.2.10"""
)
@click.argument("label")
@click.argument("text")
@click.option("--type", "type_hint", default=None, help="Force a field type instead of inferring it.")
@click.pass_obj
def parse(app: AppContext, label: str, text: str, type_hint: str | None) -> None:
    """Parse TEXT as the value of field LABEL."""
    app.emit(FieldService(app.collection).parse_field(label, text, type_hint=type_hint))


@field.command("list")
@click.pass_obj
def list_fields(app: AppContext) -> None:
    """List the collection's field definitions."""
    app.emit(FieldService(app.collection).list_fields())


@field.command()
@click.pass_obj
def types(app: AppContext) -> None:
    """List the available field types in match order."""
    app.emit(FieldService(app.collection).list_types())
