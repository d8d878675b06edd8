"""Property metadata store: registration and metadata updates."""

from deed_registry.exceptions import InvalidOwnerError
from deed_registry.models import (
    EventType,
    OwnerKey,
    PropertyInfo,
    PropertyMetadata,
    PropertyStatus,
    VerificationRecord,
)
from deed_registry.registry.base import (
    COUNTERS,
    MEMBERSHIP,
    OWNERS,
    PROPERTIES,
    PROPERTY_SCOPE,
    TOTAL_PROPERTIES,
    VERIFICATIONS,
    RegistryComponent,
)
from deed_registry.registry.validation import require_positive_int, require_text


class PropertyMetadataStore(RegistryComponent):
    """Canonical deed records keyed by sequential property ID."""

    def _validate_fields(
        self,
        title: str,
        description: str,
        location: str,
        category: str,
        area: int,
        unit: str,
    ) -> None:
        require_text(title, "title", self.limits.title)
        require_text(description, "description", self.limits.description)
        require_text(location, "location", self.limits.location)
        require_text(category, "category", self.limits.category)
        require_positive_int(area, "area")
        require_text(unit, "unit", self.limits.unit)

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
        """Register a property and return its new ID.

        Registration is open to any caller. Metadata, ownership, membership,
        the unverified verification record and the property counter are
        written in one transaction.
        """
        self._require_caller(caller)
        self._validate_fields(title, description, location, category, area, unit)
        if not isinstance(initial_owner, str) or not initial_owner:
            raise InvalidOwnerError("Initial owner is required")

        with self.store.transaction() as tx:
            property_id = self.sequences.next(tx, PROPERTY_SCOPE)
            height = self.height
            tx.put(
                PROPERTIES,
                property_id,
                PropertyMetadata(
                    title=title,
                    description=description,
                    location=location,
                    category=category,
                    total_area=area,
                    area_unit=unit,
                    registered_at=height,
                    last_modified=height,
                    status=PropertyStatus.ACTIVE,
                ),
            )
            tx.put(OWNERS, property_id, initial_owner)
            tx.put(MEMBERSHIP, OwnerKey(initial_owner, property_id), True)
            tx.put(VERIFICATIONS, property_id, VerificationRecord(property_id=property_id))
            self._increment(tx, TOTAL_PROPERTIES)
            self._emit(
                tx,
                EventType.PROPERTY_REGISTERED,
                caller,
                property_id,
                owner=initial_owner,
                title=title,
            )
        return property_id

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
        """Replace the descriptive fields of a property. Owner only; status is kept."""
        with self.store.transaction() as tx:
            metadata = self._require_property(tx, property_id)
            self._require_owner(tx, property_id, caller)
            self._validate_fields(title, description, location, category, area, unit)

            updated = self._touch(
                tx,
                property_id,
                metadata,
                title=title,
                description=description,
                location=location,
                category=category,
                total_area=area,
                area_unit=unit,
            )
            self._emit(tx, EventType.PROPERTY_UPDATED, caller, property_id, title=title)
        return updated

    def get_property_info(self, property_id: int) -> PropertyInfo:
        metadata = self._require_property(self.store, property_id)
        return PropertyInfo(
            property_id=property_id,
            owner=self.store.get(OWNERS, property_id),
            metadata=metadata,
        )

    def get_property_count(self) -> int:
        return self.store.get(COUNTERS, TOTAL_PROPERTIES, 0)
