"""Ownership and transfer ledger, plus the owner membership index."""

from decimal import Decimal

from deed_registry.exceptions import InvalidOwnerError, PropertyNotFoundError, TransferNotFoundError
from deed_registry.models import EventType, OwnerKey, Scope, SequenceKey, TransferRecord
from deed_registry.registry.base import (
    COUNTERS,
    MEMBERSHIP,
    OWNERS,
    TOTAL_TRANSFERS,
    TRANSFERS,
    RegistryComponent,
)
from deed_registry.registry.validation import require_amount, require_text


def transfer_scope(property_id: int) -> Scope:
    return Scope("transfer", property_id)


class OwnershipLedger(RegistryComponent):
    """Current owner per property and its append-only transfer history.

    The membership index only answers point queries of the form "does X
    own P"; it cannot list an owner's properties.
    """

    def transfer(
        self,
        caller: str,
        property_id: int,
        new_owner: str,
        reason: str,
        amount: int | Decimal | None = None,
    ) -> int:
        """Move ownership from the caller to ``new_owner``; return the transfer ID."""
        with self.store.transaction() as tx:
            metadata = self._require_property(tx, property_id)
            self._require_owner(tx, property_id, caller)
            if not isinstance(new_owner, str) or not new_owner:
                raise InvalidOwnerError("New owner is required")
            require_text(reason, "reason", self.limits.reason, required=False)
            value = require_amount(amount)
            if new_owner == caller:
                raise InvalidOwnerError(f"{caller} already owns property {property_id}")

            transfer_id = self.sequences.next(tx, transfer_scope(property_id))
            tx.put(
                TRANSFERS,
                SequenceKey(property_id, transfer_id),
                TransferRecord(
                    property_id=property_id,
                    transfer_id=transfer_id,
                    from_owner=caller,
                    to_owner=new_owner,
                    transferred_at=self.height,
                    reason=reason,
                    amount=value,
                ),
            )
            tx.put(OWNERS, property_id, new_owner)
            tx.put(MEMBERSHIP, OwnerKey(caller, property_id), False)
            tx.put(MEMBERSHIP, OwnerKey(new_owner, property_id), True)
            self._touch(tx, property_id, metadata)
            self._increment(tx, TOTAL_TRANSFERS)
            self._emit(
                tx,
                EventType.PROPERTY_TRANSFERRED,
                caller,
                property_id,
                transfer_id=transfer_id,
                from_owner=caller,
                to_owner=new_owner,
                amount=value,
            )
        return transfer_id

    def get_owner(self, property_id: int) -> str:
        owner = self.store.get(OWNERS, property_id)
        if owner is None:
            raise PropertyNotFoundError(f"Property {property_id} not found")
        return owner

    def owns_property(self, property_id: int, owner: str) -> bool:
        """True iff ``owner`` is the current owner. False for unknown properties."""
        current = self.store.get(OWNERS, property_id)
        return current is not None and current == owner

    def get_owner_membership(self, owner: str, property_id: int) -> bool:
        """Point lookup in the membership index. False when no entry exists."""
        return bool(self.store.get(MEMBERSHIP, OwnerKey(owner, property_id), False))

    def get_transfer(self, property_id: int, transfer_id: int) -> TransferRecord:
        self._require_property(self.store, property_id)
        record = self.store.get(TRANSFERS, SequenceKey(property_id, transfer_id))
        if record is None:
            raise TransferNotFoundError(
                f"Transfer {transfer_id} not found for property {property_id}"
            )
        return record

    def get_transfer_history(self, property_id: int) -> list[TransferRecord]:
        """All transfers of a property, oldest first."""
        self._require_property(self.store, property_id)
        count = self.sequences.current(self.store, transfer_scope(property_id))
        return [
            self.store.get(TRANSFERS, SequenceKey(property_id, transfer_id))
            for transfer_id in range(1, count + 1)
        ]

    def get_total_transfers(self) -> int:
        return self.store.get(COUNTERS, TOTAL_TRANSFERS, 0)
