"""Subcommand modules for stubargs.

register_commands() imports lazily so ``stubargs --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from stubargs.commands.generate import generate
    from stubargs.commands.insert import insert
    from stubargs.commands.rules import rules

    cli.add_command(generate)
    cli.add_command(insert)
    cli.add_command(rules)
