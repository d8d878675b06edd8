"""Composite map keys.

NamedTuples compare and hash structurally, so they are used directly as
dictionary keys and sort in (property, sequence) order.
"""

from typing import NamedTuple


class Scope(NamedTuple):
    """Sequence generator scope. ``property_id`` 0 is the global scope."""

    name: str
    property_id: int = 0


class SequenceKey(NamedTuple):
    """Key of a per-property append-only record (transfer, document, status change)."""

    property_id: int
    sequence: int


class OwnerKey(NamedTuple):
    """Key of an owner membership entry."""

    owner: str
    property_id: int


class GrantKey(NamedTuple):
    """Key of an access grant."""

    property_id: int
    accessor: str
