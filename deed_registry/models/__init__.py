"""Registry domain models."""

from deed_registry.models.access import MAX_ACCESS_LEVEL, MIN_ACCESS_LEVEL, AccessGrant
from deed_registry.models.base import Event
from deed_registry.models.document import DocumentRecord
from deed_registry.models.enums import EventType, PropertyStatus
from deed_registry.models.keys import GrantKey, OwnerKey, Scope, SequenceKey
from deed_registry.models.property import PropertyInfo, PropertyMetadata, SystemStatistics
from deed_registry.models.status import StatusChange
from deed_registry.models.transfer import TransferRecord
from deed_registry.models.verification import VerificationRecord

__all__ = [
    "AccessGrant",
    "DocumentRecord",
    "Event",
    "EventType",
    "GrantKey",
    "MAX_ACCESS_LEVEL",
    "MIN_ACCESS_LEVEL",
    "OwnerKey",
    "PropertyInfo",
    "PropertyMetadata",
    "PropertyStatus",
    "Scope",
    "SequenceKey",
    "StatusChange",
    "SystemStatistics",
    "TransferRecord",
    "VerificationRecord",
]
