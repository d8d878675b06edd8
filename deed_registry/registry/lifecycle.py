"""Status lifecycle: transition table and status-change history."""

from deed_registry.exceptions import InvalidStatusError, StatusChangeNotFoundError
from deed_registry.models import EventType, PropertyStatus, Scope, SequenceKey, StatusChange
from deed_registry.registry.base import STATUS_HISTORY, RegistryComponent
from deed_registry.registry.validation import require_text

# Valid status transitions (from -> to). ARCHIVED is terminal.
VALID_TRANSITIONS: dict[PropertyStatus, frozenset[PropertyStatus]] = {
    PropertyStatus.ACTIVE: frozenset(
        {
            PropertyStatus.PENDING,
            PropertyStatus.SUSPENDED,
            PropertyStatus.ARCHIVED,
            PropertyStatus.ACTIVE,
        }
    ),
    PropertyStatus.PENDING: frozenset({PropertyStatus.ACTIVE, PropertyStatus.SUSPENDED}),
    PropertyStatus.SUSPENDED: frozenset({PropertyStatus.ACTIVE, PropertyStatus.ARCHIVED}),
    PropertyStatus.ARCHIVED: frozenset(),
}


def is_valid_transition(from_status: PropertyStatus, to_status: PropertyStatus) -> bool:
    """Check if a status transition is allowed."""
    return to_status in VALID_TRANSITIONS.get(from_status, frozenset())


def parse_status(value: PropertyStatus | str | int) -> PropertyStatus:
    """Accept a status member, its name, or its numeric code."""
    if isinstance(value, PropertyStatus):
        return value
    try:
        if isinstance(value, bool):
            raise ValueError(value)
        if isinstance(value, int):
            return PropertyStatus.from_code(value)
        return PropertyStatus(str(value).upper())
    except ValueError as exc:
        raise InvalidStatusError(f"Unknown status: {value!r}") from exc


def status_scope(property_id: int) -> Scope:
    return Scope("status", property_id)


class StatusLifecycle(RegistryComponent):
    """Gate status changes through :data:`VALID_TRANSITIONS`."""

    def change_status(
        self,
        caller: str,
        property_id: int,
        new_status: PropertyStatus | str | int,
        reason: str = "",
    ) -> int:
        """Move a property to ``new_status`` and return the status-change ID.

        Any caller may change status unless
        ``PolicyConfig.restrict_status_changes_to_owner`` is set.
        """
        with self.store.transaction() as tx:
            metadata = self._require_property(tx, property_id)
            if self.policy.restrict_status_changes_to_owner:
                self._require_owner(tx, property_id, caller)
            else:
                self._require_caller(caller)
            target = parse_status(new_status)
            require_text(reason, "reason", self.limits.reason, required=False)

            current = metadata.status
            if not is_valid_transition(current, target):
                raise InvalidStatusError(
                    f"Invalid status transition: {current.value} -> {target.value}"
                )

            change_id = self.sequences.next(tx, status_scope(property_id))
            tx.put(
                STATUS_HISTORY,
                SequenceKey(property_id, change_id),
                StatusChange(
                    property_id=property_id,
                    change_id=change_id,
                    old_status=current,
                    new_status=target,
                    changed_at=self.height,
                    changed_by=caller,
                    reason=reason,
                ),
            )
            self._touch(tx, property_id, metadata, status=target)
            self._emit(
                tx,
                EventType.STATUS_CHANGED,
                caller,
                property_id,
                old_status=current,
                new_status=target,
            )
        return change_id

    def get_status_change(self, property_id: int, change_id: int) -> StatusChange:
        self._require_property(self.store, property_id)
        record = self.store.get(STATUS_HISTORY, SequenceKey(property_id, change_id))
        if record is None:
            raise StatusChangeNotFoundError(
                f"Status change {change_id} not found for property {property_id}"
            )
        return record

    def get_status_history(self, property_id: int) -> list[StatusChange]:
        """All status changes of a property, oldest first."""
        self._require_property(self.store, property_id)
        count = self.sequences.current(self.store, status_scope(property_id))
        return [
            self.store.get(STATUS_HISTORY, SequenceKey(property_id, change_id))
            for change_id in range(1, count + 1)
        ]
