"""Type-to-literal rules.

The rule table is ordered and first match wins. Exact rules are checked
before suffix rules so a qualified wrapper type never collides with a
primitive keyword.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from stubargs.domain.parameters import Parameter

NULL_LITERAL = "null"


class MatchKind(StrEnum):
    """How a rule compares its type name against a declared type."""

    EXACT = "exact"
    SUFFIX = "suffix"


def capitalize_first(name: str) -> str:
    """Upper-case the first character only. Empty names stay empty."""
    if not name:
        return name
    return name[0].upper() + name[1:]


class TypeLiteralRule(BaseModel):
    """Maps a declared type name (or suffix) to a literal template.

    Templates may reference ``{name}`` (identifier as declared) and
    ``{Name}`` (first character upper-cased).
    """

    model_config = {"frozen": True, "populate_by_name": True}

    match: MatchKind = MatchKind.EXACT
    type_name: str = Field(alias="type")
    template: str = Field(alias="literal")

    @field_validator("type_name")
    @classmethod
    def _type_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "rule type name must not be empty"
            raise ValueError(msg)
        return value

    def matches(self, type_name: str) -> bool:
        if self.match is MatchKind.EXACT:
            return type_name == self.type_name
        return type_name.endswith(self.type_name)

    def render(self, parameter: Parameter) -> str:
        return self.template.replace("{Name}", capitalize_first(parameter.name)).replace(
            "{name}", parameter.name
        )


def _exact(type_name: str, literal: str) -> TypeLiteralRule:
    return TypeLiteralRule(match=MatchKind.EXACT, type_name=type_name, template=literal)


def _suffix(type_name: str, literal: str) -> TypeLiteralRule:
    return TypeLiteralRule(match=MatchKind.SUFFIX, type_name=type_name, template=literal)


DEFAULT_RULES: tuple[TypeLiteralRule, ...] = (
    _exact("boolean", "true"),
    _exact("byte", "(byte)1"),
    _exact("short", "(short)1"),
    _exact("double", "1.0"),
    _exact("float", "1.0f"),
    _exact("char", "'c'"),
    _exact("long", "1L"),
    _exact("int", "1"),
    _suffix(".String", '"test{Name}"'),
    _suffix(".BigDecimal", "BigDecimal.ONE"),
)


def order_rules(rules: Iterable[TypeLiteralRule]) -> tuple[TypeLiteralRule, ...]:
    """Stable reorder: every exact rule ahead of every suffix rule."""
    rules = list(rules)
    exact = [r for r in rules if r.match is MatchKind.EXACT]
    suffix = [r for r in rules if r.match is MatchKind.SUFFIX]
    return (*exact, *suffix)
