"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, stubargs.toml only holds
overrides.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from stubargs.domain.rules import NULL_LITERAL, TypeLiteralRule


class GeneratorConfig(BaseModel):
    """[generator] section.

    ``rules`` entries look like ``{match = "suffix", type = ".List",
    literal = "new ArrayList<>()"}`` and are merged ahead of the
    built-in table.
    """

    model_config = {"frozen": True}

    fallback: str = NULL_LITERAL
    use_defaults: bool = True
    rules: list[TypeLiteralRule] = Field(default_factory=list)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


# [signatures] is a free-form table: method name -> declarations.
SignaturesTable = dict[str, Any]
