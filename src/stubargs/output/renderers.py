"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from stubargs.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from stubargs.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: just the text a script wants."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "generate":
        return str(result.data.get("arguments", ""))
    if result.op == "insert":
        return str(result.data.get("inserted", ""))
    if result.op == "available":
        return "yes" if result.data.get("available") else "no"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "stub.ok"), (f"  {result.op}", "stub.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "stub.key"), (str(value), style)))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "stub.error"), (f"  {result.op}", "stub.op"), f" — {msg}")
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "arguments", result.data.get("arguments", ""), style="stub.literal")
    _field(console, "count", result.data.get("count", 0))
    if verbose:
        for i, literal in enumerate(result.data.get("literals", []), start=1):
            _field(console, f"#{i}", literal, style="stub.literal")


def _render_insert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "call", result.data.get("call", ""))
    _field(console, "inserted", result.data.get("inserted", ""), style="stub.literal")
    _field(console, "offset", result.data.get("offset", 0))
    _field(console, "caret", result.data.get("caret", 0))
    if verbose:
        _field(console, "count", result.data.get("count", 0))


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Match")
    table.add_column("Type", style="stub.type")
    table.add_column("Literal", style="stub.literal")
    for item in result.data.get("items", []):
        table.add_row(
            Text(str(item.get("position", ""))),
            Text(str(item.get("match", ""))),
            Text(str(item.get("type", ""))),
            Text(str(item.get("literal", ""))),
        )
    console.print(table)
    _field(console, "fallback", result.data.get("fallback", ""), style="stub.literal")


def _render_available(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    available = bool(result.data.get("available"))
    _field(console, "available", available, style="stub.ok" if available else "stub.error")
    if result.data.get("call"):
        _field(console, "call", result.data["call"])
    if verbose:
        _field(console, "offset", result.data.get("offset", 0))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "available": _render_available,
    "generate": _render_generate,
    "insert": _render_insert,
    "rules": _render_rules,
}
