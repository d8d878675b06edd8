"""Property metadata models."""

from dataclasses import dataclass

from deed_registry.models.enums import PropertyStatus


@dataclass(frozen=True)
class PropertyMetadata:
    """Canonical deed record for a property.

    ``registered_at`` and ``last_modified`` are block heights, not wall-clock
    times. The record is never deleted; ``ARCHIVED`` is its terminal status.
    """

    title: str
    description: str
    location: str
    category: str  # Residential, Commercial, ...
    total_area: int
    area_unit: str  # sqft, sqm, acre
    registered_at: int
    last_modified: int
    status: PropertyStatus = PropertyStatus.ACTIVE


@dataclass(frozen=True)
class PropertyInfo:
    """Read view combining a property's ID, current owner and metadata."""

    property_id: int
    owner: str
    metadata: PropertyMetadata


@dataclass(frozen=True)
class SystemStatistics:
    """Process-wide registry counters."""

    total_properties: int
    total_transfers: int
    total_verified: int
    current_height: int
