"""Verification subsystem: one-shot attestation per property."""

from deed_registry.exceptions import AlreadyVerifiedError
from deed_registry.models import EventType, VerificationRecord
from deed_registry.registry.base import COUNTERS, TOTAL_VERIFIED, VERIFICATIONS, RegistryComponent
from deed_registry.registry.validation import require_text


class VerificationService(RegistryComponent):
    """The ``verified`` flag moves from False to True exactly once."""

    def verify(self, caller: str, property_id: int, notes: str = "") -> VerificationRecord:
        with self.store.transaction() as tx:
            metadata = self._require_property(tx, property_id)
            self._require_caller(caller)
            require_text(notes, "notes", self.limits.notes, required=False)

            current = tx.get(VERIFICATIONS, property_id)
            if current is not None and current.verified:
                raise AlreadyVerifiedError(
                    f"Property {property_id} was already verified by {current.verifier}"
                )

            record = VerificationRecord(
                property_id=property_id,
                verified=True,
                verifier=caller,
                verified_at=self.height,
                notes=notes,
            )
            tx.put(VERIFICATIONS, property_id, record)
            self._touch(tx, property_id, metadata)
            self._increment(tx, TOTAL_VERIFIED)
            self._emit(tx, EventType.PROPERTY_VERIFIED, caller, property_id, notes=notes)
        return record

    def get_verification(self, property_id: int) -> VerificationRecord:
        self._require_property(self.store, property_id)
        return self.store.get(VERIFICATIONS, property_id)

    def get_total_verified(self) -> int:
        return self.store.get(COUNTERS, TOTAL_VERIFIED, 0)
