"""Command: insert stub arguments into a source file at a caret offset."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from stubargs.commands._base import StubCommand

if TYPE_CHECKING:
    from stubargs.commands._context import AppContext


@click.command(
    cls=StubCommand,
    examples="""\
  stubargs insert Main.java --offset 120
  stubargs insert Main.java --offset 120 --signatures sigs.toml
  stubargs insert Main.java --offset 120 --dry-run
  stubargs -q insert Main.java --offset 120 --check""",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--offset", type=int, required=True, help="Caret offset (characters).")
@click.option(
    "--signatures",
    "signatures_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Extra TOML file with a [signatures] table.",
)
@click.option("--dry-run", is_flag=True, help="Report the insertion without writing the file.")
@click.option("--check", is_flag=True, help="Only report whether the action is available.")
@click.pass_obj
def insert(
    app: AppContext,
    file: Path,
    offset: int,
    signatures_path: Path | None,
    dry_run: bool,
    check: bool,
) -> None:
    """Fill the argument list of the call around OFFSET in FILE."""
    from stubargs.infrastructure.buffer import read_buffer, write_buffer
    from stubargs.services.intention import StubArgumentsIntention
    from stubargs.services.result import ServiceResult

    buffer = read_buffer(file)
    if offset < 0 or offset > len(buffer.text):
        app.emit(
            ServiceResult.failure(
                "insert",
                "BAD_OFFSET",
                f"Offset {offset} is outside {file} ({len(buffer.text)} chars)",
                offset=offset,
            )
        )
        return
    buffer.move_caret(offset)

    intention = StubArgumentsIntention(
        app.signature_registry(signatures_path),
        generator=app.generator,
        plugins=app.plugins,
    )
    if check:
        app.emit(intention.check(buffer))
        return

    result = intention.invoke(buffer)
    if result.ok and not dry_run:
        write_buffer(file, buffer)
    app.emit(result)
