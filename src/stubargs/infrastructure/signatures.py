"""Call-target resolution against a registry of known method signatures.

Stands in for an IDE's overload resolution. A call resolves when exactly
one registered overload matches its name; anything else is unresolved
and the insertion is skipped.

TOML layout::

    [signatures]
    "Widget.resize" = ["int width", "int height"]
    log = [["java.lang.String message"], ["java.lang.String fmt", "long value"]]
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from stubargs.domain.parameters import Parameter, parse_declaration

if TYPE_CHECKING:
    from stubargs.domain.calls import CallSite

logger = logging.getLogger(__name__)


class SignatureError(Exception):
    """Raised when a signature table cannot be parsed."""


class ParameterResolver(Protocol):
    """Resolves a call site to its target's ordered parameter list."""

    def resolve(self, call_site: CallSite) -> list[Parameter] | None: ...


def _overloads(name: str, value: Any) -> list[list[Parameter]]:
    if not isinstance(value, list):
        msg = f"signature {name!r} must be a list of declarations"
        raise SignatureError(msg)
    # A list of lists declares several overloads; a flat list declares one.
    groups = value if value and all(isinstance(v, list) for v in value) else [value]
    overloads: list[list[Parameter]] = []
    for group in groups:
        params: list[Parameter] = []
        for decl in group:
            if not isinstance(decl, str):
                msg = f"signature {name!r} has a non-string declaration: {decl!r}"
                raise SignatureError(msg)
            try:
                params.append(parse_declaration(decl))
            except ValueError as exc:
                msg = f"signature {name!r}: {exc}"
                raise SignatureError(msg) from exc
        overloads.append(params)
    return overloads


class SignatureRegistry:
    """Method name to overload list, looked up qualified-first."""

    def __init__(self) -> None:
        self._entries: dict[str, list[list[Parameter]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def register(self, name: str, parameters: Sequence[Parameter]) -> None:
        """Add one overload for *name*."""
        self._entries.setdefault(name, []).append(list(parameters))

    def overloads(self, name: str) -> list[list[Parameter]]:
        return [list(o) for o in self._entries.get(name, [])]

    def resolve(self, call_site: CallSite) -> list[Parameter] | None:
        candidates = self._entries.get(call_site.qualified_name)
        if candidates is None:
            candidates = self._entries.get(call_site.name, [])
        if len(candidates) != 1:
            logger.debug(
                "Cannot resolve %s: %d candidate overloads",
                call_site.qualified_name,
                len(candidates),
            )
            return None
        return list(candidates[0])

    def merge(self, other: SignatureRegistry) -> None:
        for name, overloads in other._entries.items():
            for params in overloads:
                self.register(name, params)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> SignatureRegistry:
        registry = cls()
        for name, value in mapping.items():
            for params in _overloads(name, value):
                registry.register(name, params)
        return registry

    @classmethod
    def from_toml(cls, path: Path) -> SignatureRegistry:
        """Read the ``[signatures]`` table of a TOML file."""
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise SignatureError(msg) from exc
        table = data.get("signatures", {})
        if not isinstance(table, dict):
            msg = f"[signatures] in {path} must be a table"
            raise SignatureError(msg)
        registry = cls.from_mapping(table)
        logger.debug("Loaded %d signatures from %s", len(registry), path)
        return registry
