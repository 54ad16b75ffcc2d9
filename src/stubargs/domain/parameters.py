"""Parameter records and the declaration parsers that build them.

A parameter is what a resolved call target exposes for each formal
argument: its identifier and the canonical text of its declared type.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class Parameter(BaseModel):
    """One formal parameter of a resolved call target."""

    model_config = {"frozen": True}

    name: str = ""
    type_name: str

    @field_validator("type_name")
    @classmethod
    def _type_not_blank(cls, value: str) -> str:
        value = " ".join(value.split())
        if not value:
            msg = "parameter type name must not be empty"
            raise ValueError(msg)
        return value


def parse_declaration(text: str) -> Parameter:
    """Parse a ``"<type> <name>"`` declaration such as ``"java.lang.String label"``.

    A single token is read as a type with an empty name.
    """
    tokens = text.split()
    if not tokens:
        msg = f"empty parameter declaration: {text!r}"
        raise ValueError(msg)
    if len(tokens) == 1:
        return Parameter(name="", type_name=tokens[0])
    return Parameter(name=tokens[-1], type_name=" ".join(tokens[:-1]))


def parse_pair(text: str) -> Parameter:
    """Parse the ``name:type`` form used on the command line."""
    name, sep, type_name = text.partition(":")
    if not sep:
        msg = f"expected NAME:TYPE, got {text!r}"
        raise ValueError(msg)
    if not type_name.strip():
        msg = f"missing type in {text!r}"
        raise ValueError(msg)
    return Parameter(name=name.strip(), type_name=type_name)


def parse_parameter_list(text: str) -> list[Parameter]:
    """Parse a comma-separated declaration list (``"int x, long y"``)."""
    return [parse_declaration(part) for part in text.split(",") if part.strip()]
