"""Command: validate several CPFs at once."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bras.commands._base import BrasCommand
from bras.services.cpf import CpfService

if TYPE_CHECKING:
    from bras.commands._context import AppContext


@click.command(
    cls=BrasCommand,
    examples="""\
  bras check 98484485439 984.844.854-39
  bras -q check 05119439039 98484485439""",
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, values: tuple[str, ...]) -> None:
    """Validate every VALUE; exit with status 1 if any is invalid."""
    app.emit(CpfService().check(values))
