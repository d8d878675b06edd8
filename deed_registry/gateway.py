"""Call-based interface to the registry.

Each call is ``(operation, args, caller)`` and yields a :class:`CallResult`
carrying either the operation's value or a stable error code. Arguments are
bound against the operation signature before it runs. Registry errors are
converted here and nowhere else.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any

from deed_registry.exceptions import (
    InvalidArgumentsError,
    RegistryError,
    UnknownOperationError,
)
from deed_registry.registry import MUTATING_OPERATIONS, READ_OPERATIONS, DeedRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Call:
    """A single operation submitted to the registry."""

    operation: str
    args: dict[str, Any] = field(default_factory=dict)
    caller: str = ""


@dataclass(frozen=True)
class CallResult:
    """Outcome of a call: a value on success, an error code otherwise."""

    ok: bool
    value: Any = None
    error_code: int | None = None
    error_kind: str | None = None
    message: str = ""

    @classmethod
    def success(cls, value: Any) -> CallResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: RegistryError) -> CallResult:
        return cls(ok=False, error_code=error.code, error_kind=error.kind, message=str(error))


class RegistryGateway:
    """Dispatch calls to a :class:`DeedRegistry`.

    Parameters
    ----------
    registry : DeedRegistry
        Target registry. Its clock supplies the height for every call.
    """

    def __init__(self, registry: DeedRegistry) -> None:
        self.registry = registry

    @property
    def height(self) -> int:
        return self.registry.clock.height

    def submit(self, call: Call) -> CallResult:
        """Execute one call at the current height."""
        try:
            return CallResult.success(self._dispatch(call))
        except RegistryError as exc:
            return CallResult.failure(exc)

    def mine_block(self, calls: list[Call]) -> list[CallResult]:
        """Execute calls in order at the current height, then advance one block."""
        results = [self.submit(call) for call in calls]
        logger.debug(
            "Block %d: %d calls, %d failed",
            self.height,
            len(results),
            sum(1 for r in results if not r.ok),
        )
        self.registry.clock.advance()
        return results

    def _dispatch(self, call: Call) -> Any:
        if call.operation in MUTATING_OPERATIONS:
            positional: tuple[Any, ...] = (call.caller,)
        elif call.operation in READ_OPERATIONS:
            positional = ()
        else:
            raise UnknownOperationError(f"Unknown operation: {call.operation!r}")

        method = getattr(self.registry, call.operation)
        try:
            bound = inspect.signature(method).bind(*positional, **call.args)
        except TypeError as exc:
            raise InvalidArgumentsError(f"{call.operation}: {exc}") from exc
        return method(*bound.args, **bound.kwargs)
