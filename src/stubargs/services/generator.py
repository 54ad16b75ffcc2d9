"""StubValueGenerator — declared type names to stub literal arguments.

The generator is pure: the same parameter list always produces the same
text. ``GenerateService`` wraps it in the ServiceResult contract for the
CLI and other callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from stubargs.domain.rules import DEFAULT_RULES, NULL_LITERAL, TypeLiteralRule, order_rules
from stubargs.services.contracts import GenerateResultData, RulesResultData, dump_validated
from stubargs.services.result import ServiceResult

if TYPE_CHECKING:
    from stubargs.domain.parameters import Parameter

logger = logging.getLogger(__name__)

SEPARATOR = ", "


class StubValueGenerator:
    """Ordered rule lookup, first match wins, ``fallback`` otherwise."""

    def __init__(
        self,
        rules: Iterable[TypeLiteralRule] = DEFAULT_RULES,
        *,
        fallback: str = NULL_LITERAL,
    ) -> None:
        self._rules = tuple(rules)
        self._fallback = fallback

    @property
    def rules(self) -> tuple[TypeLiteralRule, ...]:
        return self._rules

    @property
    def fallback(self) -> str:
        return self._fallback

    def literal_for(self, parameter: Parameter) -> str:
        for rule in self._rules:
            if rule.matches(parameter.type_name):
                return rule.render(parameter)
        return self._fallback

    def literals(self, parameters: Iterable[Parameter]) -> list[str]:
        return [self.literal_for(p) for p in parameters]

    def generate(self, parameters: Iterable[Parameter]) -> str:
        return SEPARATOR.join(self.literals(parameters))


_default_generator = StubValueGenerator()


def generate_stub_arguments(parameters: Iterable[Parameter]) -> str:
    """Generate stub arguments with the built-in rule table."""
    return _default_generator.generate(parameters)


def build_generator(
    extra_rules: Iterable[TypeLiteralRule] = (),
    *,
    use_defaults: bool = True,
    fallback: str = NULL_LITERAL,
) -> StubValueGenerator:
    """Merge extra rules ahead of the defaults, keeping exact-before-suffix order.

    Extra rules come first within their kind, so a configured rule for
    ``int`` overrides the built-in one.
    """
    rules = list(extra_rules)
    if use_defaults:
        rules.extend(DEFAULT_RULES)
    return StubValueGenerator(order_rules(rules), fallback=fallback)


class GenerateService:
    """Service wrapper producing ServiceResult payloads."""

    def __init__(self, generator: StubValueGenerator | None = None) -> None:
        self._generator = generator or _default_generator

    @property
    def generator(self) -> StubValueGenerator:
        return self._generator

    def generate(self, parameters: Sequence[Parameter]) -> ServiceResult:
        literals = self._generator.literals(parameters)
        arguments = SEPARATOR.join(literals)
        logger.debug("Generated %d stub arguments: %s", len(literals), arguments)
        data = dump_validated(
            GenerateResultData,
            {"arguments": arguments, "count": len(literals), "literals": literals},
        )
        return ServiceResult(ok=True, op="generate", data=data)

    def describe_rules(self) -> ServiceResult:
        items = [
            {
                "position": i,
                "match": rule.match.value,
                "type": rule.type_name,
                "literal": rule.template,
            }
            for i, rule in enumerate(self._generator.rules, start=1)
        ]
        data = dump_validated(
            RulesResultData,
            {"count": len(items), "fallback": self._generator.fallback, "items": items},
        )
        return ServiceResult(ok=True, op="rules", data=data)
