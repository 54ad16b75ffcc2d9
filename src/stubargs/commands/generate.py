"""Command: generate stub arguments for a parameter list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stubargs.commands._base import StubCommand

if TYPE_CHECKING:
    from stubargs.commands._context import AppContext


@click.command(
    cls=StubCommand,
    examples="""\
  stubargs generate x:int
  stubargs generate flag:boolean count:long
  stubargs generate label:java.lang.String
  stubargs generate --signature "int width, java.lang.String title"
  stubargs -q generate amount:java.math.BigDecimal""",
)
@click.argument("params", nargs=-1, metavar="[NAME:TYPE]...")
@click.option(
    "-s",
    "--signature",
    default=None,
    help='Comma-separated declarations, e.g. "int x, java.lang.String label".',
)
@click.pass_obj
def generate(app: AppContext, params: tuple[str, ...], signature: str | None) -> None:
    """Generate stub argument literals for the given parameters."""
    from stubargs.domain.parameters import parse_pair, parse_parameter_list
    from stubargs.services.generator import GenerateService
    from stubargs.services.result import ServiceResult

    try:
        parameters = [parse_pair(p) for p in params]
        if signature:
            parameters.extend(parse_parameter_list(signature))
    except ValueError as exc:
        app.emit(ServiceResult.failure("generate", "INVALID_PARAMETER", str(exc)))
        return

    app.emit(GenerateService(app.generator).generate(parameters))
