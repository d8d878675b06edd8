"""Access control layer: leveled grants issued by the current owner."""

from dataclasses import replace

from deed_registry.exceptions import (
    GrantNotFoundError,
    InvalidAccessLevelError,
    InvalidPropertyDataError,
)
from deed_registry.models import MAX_ACCESS_LEVEL, MIN_ACCESS_LEVEL, AccessGrant, EventType, GrantKey
from deed_registry.registry.base import ACCESS_GRANTS, OWNERS, PROPERTIES, RegistryComponent


def _require_level(level: int) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidAccessLevelError(f"Access level must be an integer, got {level!r}")
    if not MIN_ACCESS_LEVEL <= level <= MAX_ACCESS_LEVEL:
        raise InvalidAccessLevelError(
            f"Access level must be {MIN_ACCESS_LEVEL}-{MAX_ACCESS_LEVEL}, got {level}"
        )
    return level


class AccessControl(RegistryComponent):
    """Grant, revoke and evaluate per (property, accessor) permissions."""

    def grant_access(
        self,
        caller: str,
        property_id: int,
        accessor: str,
        level: int,
        expires_at: int | None = None,
    ) -> AccessGrant:
        """Create or overwrite a grant. Owner only."""
        with self.store.transaction() as tx:
            self._require_property(tx, property_id)
            self._require_owner(tx, property_id, caller)
            if not isinstance(accessor, str) or not accessor:
                raise InvalidPropertyDataError("Accessor is required")
            if expires_at is not None and (
                isinstance(expires_at, bool) or not isinstance(expires_at, int) or expires_at < 0
            ):
                raise InvalidPropertyDataError(f"Invalid expiry height: {expires_at!r}")
            _require_level(level)

            grant = AccessGrant(
                property_id=property_id,
                accessor=accessor,
                level=level,
                granted_by=caller,
                granted_at=self.height,
                expires_at=expires_at,
                active=True,
            )
            tx.put(ACCESS_GRANTS, GrantKey(property_id, accessor), grant)
            self._emit(
                tx,
                EventType.ACCESS_GRANTED,
                caller,
                property_id,
                accessor=accessor,
                level=level,
                expires_at=expires_at,
            )
        return grant

    def revoke_access(self, caller: str, property_id: int, accessor: str) -> AccessGrant:
        """Deactivate a grant without deleting it. Owner only."""
        with self.store.transaction() as tx:
            self._require_property(tx, property_id)
            self._require_owner(tx, property_id, caller)
            key = GrantKey(property_id, accessor)
            grant = tx.get(ACCESS_GRANTS, key)
            if grant is None:
                raise GrantNotFoundError(
                    f"No access grant for {accessor} on property {property_id}"
                )

            revoked = replace(grant, active=False)
            tx.put(ACCESS_GRANTS, key, revoked)
            self._emit(tx, EventType.ACCESS_REVOKED, caller, property_id, accessor=accessor)
        return revoked

    def get_access_grant(self, property_id: int, accessor: str) -> AccessGrant:
        self._require_property(self.store, property_id)
        grant = self.store.get(ACCESS_GRANTS, GrantKey(property_id, accessor))
        if grant is None:
            raise GrantNotFoundError(f"No access grant for {accessor} on property {property_id}")
        return grant

    def check_access(self, property_id: int, accessor: str, required_level: int) -> bool:
        """Return True if ``accessor`` may act at ``required_level``.

        The current owner always passes. Otherwise the grant must exist, be
        active, be unexpired (when expiry is enforced) and have a level
        numerically >= ``required_level``. Unknown properties yield False.
        A ``required_level`` outside 1-4 raises InvalidAccessLevelError.
        """
        if not self.store.contains(PROPERTIES, property_id):
            return False
        _require_level(required_level)
        if self.store.get(OWNERS, property_id) == accessor:
            return True

        grant = self.store.get(ACCESS_GRANTS, GrantKey(property_id, accessor))
        if grant is None or not grant.active:
            return False
        if self.policy.enforce_access_expiry and grant.is_expired(self.height):
            return False
        return grant.level >= required_level
