"""Rich/JSON output for ServiceResult.

The CLI renders a ServiceResult for humans (Rich tables and styled
key-value lines) or machines (``--json``). Operations that return an
``items`` list render as a table; everything else as key-value pairs.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from notekit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from notekit.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


# Columns shown per op when rendering an items table; others show every key.
_TABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "sort_notes": ("position", "title", "id", "sort_key"),
    "seq_keys": ("value", "sort_key"),
    "list_fields": ("label", "type", "config"),
    "list_types": ("type", "label", "aliases", "hints"),
}


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_items(console: Console, result: ServiceResult, items: list[Any]) -> None:
    columns = _TABLE_COLUMNS.get(result.op)
    if columns is None:
        columns = tuple(items[0].keys()) if items and isinstance(items[0], dict) else ("value",)
    table = Table(show_header=True, header_style="nk.key", box=None, pad_edge=False)
    for column in columns:
        table.add_column(column, style="nk.sortkey" if column == "sort_key" else None, no_wrap=True)
    for item in items:
        if isinstance(item, dict):
            table.add_row(*(_cell(item.get(column, "")) for column in columns))
        else:
            table.add_row(_cell(item))
    console.print(table)


def _render_fields(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        style = "nk.type" if key == "type" else "nk.title" if key == "label" else None
        console.print(Text(f"  {key}: ", style="nk.key"), Text(_cell(value), style=style or ""), sep="")


def _render_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "ERROR"
        console.print(
            Text("ERROR", style="nk.error"),
            Text(f"  {result.op}", style="nk.op"),
            Text(f"  [{code}] {message}"),
            sep="",
        )
        if verbose and result.error and result.error.detail:
            _render_fields(console, result.error.detail)
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="nk.ok"), Text(f"  {result.op}", style="nk.op"), sep="")
    data = dict(result.data)
    items = data.pop("items", None)
    if isinstance(items, list) and items:
        _render_items(console, result, items)
        data.pop("count", None)
    if data:
        _render_fields(console, data)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for key, value in result.meta.items():
            console.print(f"    {key}: {_cell(value)}")
    return get_output(console).rstrip("\n")


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    value = result.data.get("value")
    if value is not None:
        return str(value)
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("id") or item.get("value", "")) for item in items if isinstance(item, dict))
    return f"OK: {result.op}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output switches; defaults to human-readable output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, verbose=settings.verbose)
