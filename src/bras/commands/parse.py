"""Command: parse and describe a single CPF."""

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
  bras parse 98484485439
  bras parse 984.844.854-39
  bras --json parse 05119439039""",
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Validate TEXT and print its canonical form, digits, and number."""
    app.emit(CpfService().parse(text))
