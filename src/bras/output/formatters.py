"""Rich/JSON output for ServiceResult.

Three modes, picked by :class:`OutputSettings`:

- ``json_output``: the full ServiceResult as JSON.
- ``quiet``: one line per CPF (or ``OK: op``), for piping.
- default: a Rich status line followed by key/value rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from bras.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bras.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a result should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)
    return _render_rich(result)


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["cpf"]) for item in items)
    if "cpf" in result.data:
        return str(result.data["cpf"])
    return f"OK: {result.op}"


def _render_rich(result: ServiceResult) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="bras.ok"), Text(result.op, style="bras.op"))
        _render_data(console, result.data)
    else:
        msg = result.error.message if result.error else "Unknown error"
        console.print(
            Text("ERROR", style="bras.error"),
            Text(result.op, style="bras.op"),
            Text(f"— {msg}"),
        )
        if result.error and result.error.detail:
            _render_data(console, result.error.detail)
    return get_output(console).rstrip("\n")


def _render_data(console: Console, data: dict[str, Any]) -> None:
    items = data.get("items")
    if isinstance(items, list):
        table = Table(show_header=True, header_style="bras.key", box=None)
        table.add_column("input")
        table.add_column("valid")
        table.add_column("cpf", style="bras.cpf")
        for item in items:
            # cells are user input; Text keeps brackets from being read as markup
            table.add_row(
                Text(str(item["input"])),
                Text("yes" if item["valid"] else "no"),
                Text(item["cpf"] or "-"),
            )
        console.print(table)
        data = {k: v for k, v in data.items() if k != "items"}

    for key, value in data.items():
        style = "bras.cpf" if key == "cpf" else ""
        console.print(Text(f"  {key}: ", style="bras.key"), Text(str(value), style=style), sep="")
