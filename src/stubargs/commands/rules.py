"""Command: show the effective type-to-literal rule table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stubargs.commands._base import StubCommand

if TYPE_CHECKING:
    from stubargs.commands._context import AppContext


@click.command(
    cls=StubCommand,
    examples="""\
  stubargs rules
  stubargs --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List literal rules in match order, then the fallback literal."""
    from stubargs.services.generator import GenerateService

    app.emit(GenerateService(app.generator).describe_rules())
