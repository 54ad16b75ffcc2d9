"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so a renamed
key fails in tests rather than in a downstream consumer.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class GenerateResultData(BaseModel):
    """Payload contract for ``GenerateService.generate``."""

    arguments: str
    count: int
    literals: list[str]


class RuleItem(BaseModel):
    """One row of the effective rule table."""

    position: int
    match: Literal["exact", "suffix"]
    type: str
    literal: str


class RulesResultData(BaseModel):
    """Payload contract for ``GenerateService.describe_rules``."""

    count: int
    fallback: str
    items: list[RuleItem]


class InsertResultData(BaseModel):
    """Payload contract for ``StubArgumentsIntention.invoke``."""

    call: str
    offset: int
    caret: int
    inserted: str
    count: int


class AvailableResultData(BaseModel):
    """Payload contract for ``StubArgumentsIntention.check``."""

    available: bool
    call: str | None
    offset: int
