"""Monotonic sequence generators."""

from typing import Protocol

from deed_registry.models.keys import Scope

SEQUENCES = "sequences"


class _Reader(Protocol):
    def get(self, name: str, key: Scope, default: int = 0) -> int: ...


class SequenceGenerator:
    """Per-scope counters that mint IDs 1, 2, 3, ...

    The counter is read and incremented inside the caller's transaction, so
    an ID taken by a failed operation is never persisted and will be issued
    again.
    """

    def __init__(self, map_name: str = SEQUENCES) -> None:
        self.map_name = map_name

    def current(self, reader: _Reader, scope: Scope) -> int:
        """Return the last issued ID for a scope (0 if none)."""
        return reader.get(self.map_name, scope, 0)

    def next(self, tx, scope: Scope) -> int:
        """Issue the next ID for a scope."""
        value = tx.get(self.map_name, scope, 0) + 1
        tx.put(self.map_name, scope, value)
        return value
