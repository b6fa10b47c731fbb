"""Command: build a CPF from its numeric value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bras.commands._base import BrasCommand
from bras.services.cpf import CpfService

if TYPE_CHECKING:
    from bras.commands._context import AppContext


@click.command(
    "from-number",
    cls=BrasCommand,
    examples="""\
  bras from-number 98484485439
  bras from-number 1678346063      # zero-padded to 016.783.460-63""",
)
@click.argument("number", type=click.IntRange(min=0))
@click.pass_obj
def from_number(app: AppContext, number: int) -> None:
    """Build a CPF from NUMBER, zero-padding it to 11 digits."""
    app.emit(CpfService().from_number(number))
