"""StubArgumentsIntention — the "Generate stub arguments" editor action.

Availability: the caret sits inside the argument list of a call whose
target resolves to exactly one parameter list. Invocation inserts the
generated arguments at the caret and advances the caret by one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stubargs.domain.calls import CallSite, find_call_at
from stubargs.services.contracts import AvailableResultData, InsertResultData, dump_validated
from stubargs.services.generator import StubValueGenerator
from stubargs.services.result import ServiceResult

if TYPE_CHECKING:
    from stubargs.domain.parameters import Parameter
    from stubargs.infrastructure.buffer import TextBuffer
    from stubargs.infrastructure.signatures import ParameterResolver
    from stubargs.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class StubArgumentsIntention:
    """Editor action that fills a call's argument list with stub literals."""

    text = "Generate stub arguments"
    family_name = "StubMethodArguments"
    start_in_write_action = True

    def __init__(
        self,
        resolver: ParameterResolver,
        generator: StubValueGenerator | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self._resolver = resolver
        self._generator = generator or StubValueGenerator()
        self._plugins = plugins

    def _target(self, buffer: TextBuffer) -> tuple[CallSite | None, list[Parameter] | None]:
        call = find_call_at(buffer.text, buffer.caret)
        if call is None:
            return None, None
        return call, self._resolver.resolve(call)

    def is_available(self, buffer: TextBuffer) -> bool:
        _call, params = self._target(buffer)
        return params is not None

    def check(self, buffer: TextBuffer) -> ServiceResult:
        """Report availability at the caret without touching the buffer."""
        call, params = self._target(buffer)
        data = dump_validated(
            AvailableResultData,
            {
                "available": params is not None,
                "call": call.qualified_name if call else None,
                "offset": buffer.caret,
            },
        )
        return ServiceResult(ok=True, op="available", data=data)

    def invoke(self, buffer: TextBuffer) -> ServiceResult:
        offset = buffer.caret
        call, params = self._target(buffer)
        if call is None:
            return ServiceResult.failure(
                "insert", "NO_CALL", "Caret is not inside a call expression", offset=offset
            )
        if params is None:
            return ServiceResult.failure(
                "insert",
                "UNRESOLVED",
                f"Cannot resolve call target {call.qualified_name!r}",
                call=call.qualified_name,
                offset=offset,
            )

        inserted = self._generator.generate(params)
        buffer.insert_string(offset, inserted)
        buffer.move_caret(offset + 1)
        logger.debug("Inserted %r at %d for %s", inserted, offset, call.qualified_name)

        warnings: list[str] = []
        if self._plugins is not None:
            self._plugins.dispatch_post_insert(call.qualified_name, offset, inserted, warnings)

        data = dump_validated(
            InsertResultData,
            {
                "call": call.qualified_name,
                "offset": offset,
                "caret": buffer.caret,
                "inserted": inserted,
                "count": len(params),
            },
        )
        return ServiceResult(ok=True, op="insert", data=data, warnings=warnings)
