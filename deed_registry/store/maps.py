"""In-memory map storage with atomic read-modify-write transactions."""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class MapStore:
    """Named key-value maps shared by every registry component.

    Writes only happen through :meth:`transaction`, which serialises callers
    on a re-entrant lock and applies staged writes all at once on success.
    Single reads take the same lock; :meth:`locked` holds it across several.
    """

    _maps: dict[str, dict[Hashable, Any]] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _commits: int = 0

    def get(self, name: str, key: Hashable, default: Any = None) -> Any:
        """Read a committed value."""
        with self._lock:
            return self._maps.get(name, {}).get(key, default)

    def contains(self, name: str, key: Hashable) -> bool:
        """Check whether a committed key exists."""
        with self._lock:
            return key in self._maps.get(name, {})

    def view(self, name: str) -> Mapping[Hashable, Any]:
        """Read-only live view of a committed map.

        Iterate it inside :meth:`locked` when other threads may commit.
        """
        with self._lock:
            return MappingProxyType(self._maps.setdefault(name, {}))

    def size(self, name: str) -> int:
        """Number of committed keys in a map."""
        with self._lock:
            return len(self._maps.get(name, {}))

    @property
    def commit_count(self) -> int:
        """Number of transactions committed so far."""
        return self._commits

    @contextmanager
    def locked(self) -> Iterator[MapStore]:
        """Hold the store lock so several reads see one committed state."""
        with self._lock:
            yield self

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """Open a transaction; commit on normal exit, discard on exception."""
        with self._lock:
            tx = Transaction(self)
            yield tx
            tx.commit()

    def _apply(self, writes: dict[str, dict[Hashable, Any]]) -> None:
        for name, entries in writes.items():
            self._maps.setdefault(name, {}).update(entries)
        self._commits += 1


class Transaction:
    """Staged writes layered over committed state."""

    def __init__(self, store: MapStore) -> None:
        self._store = store
        self._writes: dict[str, dict[Hashable, Any]] = {}
        self._committed = False

    def get(self, name: str, key: Hashable, default: Any = None) -> Any:
        """Read a value, preferring this transaction's own staged writes."""
        staged = self._writes.get(name, {}).get(key, _MISSING)
        if staged is not _MISSING:
            return staged
        return self._store.get(name, key, default)

    def contains(self, name: str, key: Hashable) -> bool:
        return key in self._writes.get(name, {}) or self._store.contains(name, key)

    def put(self, name: str, key: Hashable, value: Any) -> None:
        """Stage a write."""
        if self._committed:
            raise RuntimeError("Transaction already committed")
        self._writes.setdefault(name, {})[key] = value

    @property
    def write_count(self) -> int:
        """Number of staged writes across all maps."""
        return sum(len(entries) for entries in self._writes.values())

    def commit(self) -> None:
        """Apply every staged write to the store."""
        if self._committed:
            raise RuntimeError("Transaction already committed")
        self._store._apply(self._writes)
        self._committed = True
        logger.debug("Committed %d writes across %d maps", self.write_count, len(self._writes))
