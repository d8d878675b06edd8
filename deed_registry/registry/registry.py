"""Deed registry facade exposing every public operation."""

from __future__ import annotations

import functools
import logging
from decimal import Decimal
from typing import Any, Callable, TypeVar

from deed_registry.config import DeedRegistryConfig
from deed_registry.environment import BlockClock
from deed_registry.exceptions import RegistryError
from deed_registry.models import (
    AccessGrant,
    DocumentRecord,
    Event,
    PropertyInfo,
    PropertyMetadata,
    PropertyStatus,
    StatusChange,
    SystemStatistics,
    TransferRecord,
    VerificationRecord,
)
from deed_registry.registry.access import AccessControl
from deed_registry.registry.base import (
    ACCESS_GRANTS,
    DOCUMENTS,
    EVENTS,
    PROPERTIES,
    STATUS_HISTORY,
    TRANSFERS,
    VERIFICATIONS,
    RegistryContext,
)
from deed_registry.registry.documents import DocumentStore
from deed_registry.registry.ledger import OwnershipLedger
from deed_registry.registry.lifecycle import StatusLifecycle
from deed_registry.registry.metadata import PropertyMetadataStore
from deed_registry.registry.verification import VerificationService
from deed_registry.store import MapStore, SequenceGenerator

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

MUTATING_OPERATIONS = frozenset(
    {
        "register",
        "transfer",
        "update_metadata",
        "verify",
        "add_document",
        "change_status",
        "grant_access",
        "revoke_access",
    }
)

READ_OPERATIONS = frozenset(
    {
        "get_property_info",
        "get_owner",
        "owns_property",
        "get_owner_membership",
        "get_verification",
        "get_document",
        "get_documents",
        "get_transfer",
        "get_transfer_history",
        "get_status_history",
        "get_status_change",
        "get_access_grant",
        "check_access",
        "get_property_count",
        "get_system_statistics",
    }
)


def _mutation(method: F) -> F:
    """Log the outcome of a mutating operation with its registry context."""
    name = method.__name__

    @functools.wraps(method)
    def wrapper(self: DeedRegistry, caller: str, *args: Any, **kwargs: Any) -> Any:
        context: dict[str, Any] = {
            "operation": name,
            "caller": caller,
            "height": self.clock.height,
        }
        if name != "register":
            context["property_id"] = args[0] if args else kwargs.get("property_id")
        try:
            result = method(self, caller, *args, **kwargs)
        except RegistryError as exc:
            logger.debug(
                "%s rejected: %s (%s)",
                name,
                exc.kind,
                exc,
                extra={**context, "error_kind": exc.kind},
            )
            raise
        if name == "register":
            context["property_id"] = result
        logger.info(
            "%s by %s on property %s at height %d",
            name,
            caller,
            context["property_id"],
            context["height"],
            extra=context,
        )
        return result

    return wrapper  # type: ignore[return-value]


def _read(method: F) -> F:
    """Run a read against one committed state of the store."""

    @functools.wraps(method)
    def wrapper(self: DeedRegistry, *args: Any, **kwargs: Any) -> Any:
        with self.store.locked():
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class DeedRegistry:
    """Transactional registry of property deeds.

    Every mutating operation runs in a single store transaction: it either
    commits all of its map writes or, on any error, none of them.

    Usage::

        clock = BlockClock()
        registry = DeedRegistry(clock=clock)
        pid = registry.register(alice, "Lot 7", "Corner lot", "7 Elm St",
                                "Residential", 1000, "sqft", alice)
        registry.transfer(alice, pid, bob, "sale", 500)
        assert registry.get_owner(pid) == bob

    Parameters
    ----------
    config : DeedRegistryConfig | None
        Limits and policy switches. Defaults apply when omitted.
    clock : BlockClock | None
        Height source for timestamps.
    store : MapStore | None
        Backing map storage.
    """

    def __init__(
        self,
        config: DeedRegistryConfig | None = None,
        clock: BlockClock | None = None,
        store: MapStore | None = None,
    ) -> None:
        self.config = config or DeedRegistryConfig()
        self.clock = clock or BlockClock(self.config.policy.initial_height)
        self.store = store or MapStore()
        self._context = RegistryContext(
            store=self.store,
            clock=self.clock,
            sequences=SequenceGenerator(),
            limits=self.config.limits,
            policy=self.config.policy,
        )
        self._metadata = PropertyMetadataStore(self._context)
        self._ledger = OwnershipLedger(self._context)
        self._lifecycle = StatusLifecycle(self._context)
        self._verification = VerificationService(self._context)
        self._documents = DocumentStore(self._context)
        self._access = AccessControl(self._context)

    # Mutating operations

    @_mutation
    def register(
        self,
        caller: str,
        title: str,
        description: str,
        location: str,
        category: str,
        area: int,
        unit: str,
        initial_owner: str,
    ) -> int:
        return self._metadata.register(
            caller, title, description, location, category, area, unit, initial_owner
        )

    @_mutation
    def update_metadata(
        self,
        caller: str,
        property_id: int,
        title: str,
        description: str,
        location: str,
        category: str,
        area: int,
        unit: str,
    ) -> PropertyMetadata:
        return self._metadata.update_metadata(
            caller, property_id, title, description, location, category, area, unit
        )

    @_mutation
    def transfer(
        self,
        caller: str,
        property_id: int,
        new_owner: str,
        reason: str,
        amount: int | Decimal | None = None,
    ) -> int:
        return self._ledger.transfer(caller, property_id, new_owner, reason, amount)

    @_mutation
    def verify(self, caller: str, property_id: int, notes: str = "") -> VerificationRecord:
        return self._verification.verify(caller, property_id, notes)

    @_mutation
    def add_document(
        self,
        caller: str,
        property_id: int,
        title: str,
        document_type: str,
        document_hash: str,
        description: str = "",
    ) -> int:
        return self._documents.add_document(
            caller, property_id, title, document_type, document_hash, description
        )

    @_mutation
    def change_status(
        self,
        caller: str,
        property_id: int,
        new_status: PropertyStatus | str | int,
        reason: str = "",
    ) -> int:
        return self._lifecycle.change_status(caller, property_id, new_status, reason)

    @_mutation
    def grant_access(
        self,
        caller: str,
        property_id: int,
        accessor: str,
        level: int,
        expires_at: int | None = None,
    ) -> AccessGrant:
        return self._access.grant_access(caller, property_id, accessor, level, expires_at)

    @_mutation
    def revoke_access(self, caller: str, property_id: int, accessor: str) -> AccessGrant:
        return self._access.revoke_access(caller, property_id, accessor)

    # Read operations

    @_read
    def get_property_info(self, property_id: int) -> PropertyInfo:
        return self._metadata.get_property_info(property_id)

    @_read
    def get_property_count(self) -> int:
        return self._metadata.get_property_count()

    @_read
    def get_owner(self, property_id: int) -> str:
        return self._ledger.get_owner(property_id)

    @_read
    def owns_property(self, property_id: int, owner: str) -> bool:
        return self._ledger.owns_property(property_id, owner)

    @_read
    def get_owner_membership(self, owner: str, property_id: int) -> bool:
        return self._ledger.get_owner_membership(owner, property_id)

    @_read
    def get_transfer(self, property_id: int, transfer_id: int) -> TransferRecord:
        return self._ledger.get_transfer(property_id, transfer_id)

    @_read
    def get_transfer_history(self, property_id: int) -> list[TransferRecord]:
        return self._ledger.get_transfer_history(property_id)

    @_read
    def get_verification(self, property_id: int) -> VerificationRecord:
        return self._verification.get_verification(property_id)

    @_read
    def get_document(self, property_id: int, document_id: int) -> DocumentRecord:
        return self._documents.get_document(property_id, document_id)

    @_read
    def get_documents(self, property_id: int) -> list[DocumentRecord]:
        return self._documents.get_documents(property_id)

    @_read
    def get_status_history(self, property_id: int) -> list[StatusChange]:
        return self._lifecycle.get_status_history(property_id)

    @_read
    def get_status_change(self, property_id: int, change_id: int) -> StatusChange:
        return self._lifecycle.get_status_change(property_id, change_id)

    @_read
    def get_access_grant(self, property_id: int, accessor: str) -> AccessGrant:
        return self._access.get_access_grant(property_id, accessor)

    @_read
    def check_access(self, property_id: int, accessor: str, required_level: int) -> bool:
        return self._access.check_access(property_id, accessor, required_level)

    @_read
    def get_system_statistics(self) -> SystemStatistics:
        return SystemStatistics(
            total_properties=self._metadata.get_property_count(),
            total_transfers=self._ledger.get_total_transfers(),
            total_verified=self._verification.get_total_verified(),
            current_height=self.clock.height,
        )

    @_read
    def events(self, since: int = 0) -> list[Event]:
        """Committed events with ``event_id`` greater than ``since``, oldest first."""
        log = self.store.view(EVENTS)
        return [log[event_id] for event_id in sorted(log) if event_id > since]

    @_read
    def snapshot(self) -> dict[str, list[Any]]:
        """Every committed record grouped by entity type, for export sinks."""
        properties = self.store.view(PROPERTIES)
        return {
            "properties": [self.get_property_info(pid) for pid in sorted(properties)],
            "verifications": [
                record
                for _, record in sorted(self.store.view(VERIFICATIONS).items())
            ],
            "transfers": [record for _, record in sorted(self.store.view(TRANSFERS).items())],
            "documents": [record for _, record in sorted(self.store.view(DOCUMENTS).items())],
            "status_changes": [
                record for _, record in sorted(self.store.view(STATUS_HISTORY).items())
            ],
            "access_grants": [
                record for _, record in sorted(self.store.view(ACCESS_GRANTS).items())
            ],
            "events": self.events(),
        }

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {name: len(records) for name, records in self.snapshot().items()}
