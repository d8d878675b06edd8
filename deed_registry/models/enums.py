"""Enumeration types for registry entities."""

from enum import Enum


class PropertyStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    SUSPENDED = "SUSPENDED"
    ARCHIVED = "ARCHIVED"

    @property
    def code(self) -> int:
        """Numeric status code used on the wire (ACTIVE is 1)."""
        return STATUS_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "PropertyStatus":
        for status, value in STATUS_CODES.items():
            if value == code:
                return status
        raise ValueError(f"Unknown status code: {code}")


STATUS_CODES: dict[PropertyStatus, int] = {
    PropertyStatus.ACTIVE: 1,
    PropertyStatus.PENDING: 2,
    PropertyStatus.SUSPENDED: 3,
    PropertyStatus.ARCHIVED: 4,
}


class EventType(str, Enum):
    PROPERTY_REGISTERED = "property.registered"
    PROPERTY_UPDATED = "property.updated"
    PROPERTY_TRANSFERRED = "property.transferred"
    PROPERTY_VERIFIED = "property.verified"
    DOCUMENT_ADDED = "document.added"
    STATUS_CHANGED = "status.changed"
    ACCESS_GRANTED = "access.granted"
    ACCESS_REVOKED = "access.revoked"
