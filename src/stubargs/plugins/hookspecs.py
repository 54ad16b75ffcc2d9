"""Pluggy hook specifications for stubargs.

One setup-time hook lets plugins contribute literal rules; one event hook
fires after stub arguments are inserted into a buffer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from stubargs.domain.rules import TypeLiteralRule

hookspec = pluggy.HookspecMarker("stubargs")


class StubargsHookSpec:
    """Hook specifications for the stubargs plugin system."""

    @hookspec
    def register_type_rules(self) -> list[TypeLiteralRule] | None:
        """Return extra type-to-literal rules, merged ahead of the defaults."""

    @hookspec
    def post_insert(self, call_name: str, offset: int, inserted: str) -> None:
        """Called after stub arguments are inserted at *offset*."""
