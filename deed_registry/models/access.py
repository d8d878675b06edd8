"""Access grant record."""

from dataclasses import dataclass

MIN_ACCESS_LEVEL = 1
MAX_ACCESS_LEVEL = 4


@dataclass(frozen=True)
class AccessGrant:
    """Delegated permission from an owner to a third party.

    Re-granting overwrites the record; revoking clears ``active`` but keeps
    the record.
    """

    property_id: int
    accessor: str
    level: int
    granted_by: str
    granted_at: int
    expires_at: int | None = None
    active: bool = True

    def is_expired(self, height: int) -> bool:
        """Return True once ``height`` has reached the expiry height."""
        return self.expires_at is not None and height >= self.expires_at
