"""Subcommand modules for bras.

Provides register_commands() which uses deferred imports to keep
``bras --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from bras.commands.check import check
    from bras.commands.from_number import from_number
    from bras.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(from_number)
    cli.add_command(check)
