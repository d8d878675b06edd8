"""Status change record."""

from dataclasses import dataclass

from deed_registry.models.enums import PropertyStatus


@dataclass(frozen=True)
class StatusChange:
    """Append-only audit entry for a status transition."""

    property_id: int
    change_id: int
    old_status: PropertyStatus
    new_status: PropertyStatus
    changed_at: int
    changed_by: str
    reason: str = ""
