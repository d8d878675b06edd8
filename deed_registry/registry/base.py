"""Shared state and helpers for registry components."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from deed_registry.config import LimitsConfig, PolicyConfig
from deed_registry.environment import BlockClock
from deed_registry.exceptions import PropertyNotFoundError, UnauthorizedError
from deed_registry.models import Event, EventType, PropertyMetadata, Scope
from deed_registry.store import MapStore, SequenceGenerator, Transaction

# Map names
PROPERTIES = "properties"
OWNERS = "owners"
MEMBERSHIP = "owner_membership"
VERIFICATIONS = "verifications"
TRANSFERS = "transfers"
DOCUMENTS = "documents"
STATUS_HISTORY = "status_history"
ACCESS_GRANTS = "access_grants"
COUNTERS = "counters"
EVENTS = "events"

# Global counters
TOTAL_PROPERTIES = "total_properties"
TOTAL_TRANSFERS = "total_transfers"
TOTAL_VERIFIED = "total_verified"

# Sequence scopes
PROPERTY_SCOPE = Scope("property")
EVENT_SCOPE = Scope("event")


@dataclass
class RegistryContext:
    """Collaborators every component shares."""

    store: MapStore
    clock: BlockClock
    sequences: SequenceGenerator
    limits: LimitsConfig
    policy: PolicyConfig


class RegistryComponent:
    """Base class for registry components.

    Subclasses open one transaction per mutating operation and run their
    checks in the order existence, authorization, input shape, business rule
    before staging any write.
    """

    def __init__(self, context: RegistryContext) -> None:
        self.context = context
        self.store = context.store
        self.sequences = context.sequences
        self.limits = context.limits
        self.policy = context.policy

    @property
    def height(self) -> int:
        return self.context.clock.height

    def _require_property(
        self, reader: MapStore | Transaction, property_id: int
    ) -> PropertyMetadata:
        metadata = reader.get(PROPERTIES, property_id)
        if metadata is None:
            raise PropertyNotFoundError(f"Property {property_id} not found")
        return metadata

    @staticmethod
    def _require_caller(caller: str) -> str:
        if not isinstance(caller, str) or not caller:
            raise UnauthorizedError("Caller identity is required")
        return caller

    def _require_owner(self, reader: MapStore | Transaction, property_id: int, caller: str) -> str:
        self._require_caller(caller)
        owner = reader.get(OWNERS, property_id)
        if owner != caller:
            raise UnauthorizedError(f"{caller} is not the owner of property {property_id}")
        return owner

    def _touch(self, tx: Transaction, property_id: int, metadata: PropertyMetadata, **changes: Any) -> PropertyMetadata:
        updated = replace(metadata, last_modified=self.height, **changes)
        tx.put(PROPERTIES, property_id, updated)
        return updated

    @staticmethod
    def _increment(tx: Transaction, counter: str) -> int:
        value = tx.get(COUNTERS, counter, 0) + 1
        tx.put(COUNTERS, counter, value)
        return value

    def _emit(
        self,
        tx: Transaction,
        event_type: EventType,
        caller: str,
        property_id: int,
        **data: Any,
    ) -> Event:
        event = Event(
            event_id=self.sequences.next(tx, EVENT_SCOPE),
            event_type=event_type,
            height=self.height,
            source=caller,
            subject=property_id,
            data=data,
        )
        tx.put(EVENTS, event.event_id, event)
        return event
