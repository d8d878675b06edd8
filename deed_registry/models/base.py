"""Base models shared across the registry."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from deed_registry.models.enums import EventType


@dataclass(frozen=True)
class Event:
    """Standard event envelope for registry mutations.

    ``data`` is copied on construction and exposed read-only.
    """

    event_id: int
    event_type: EventType  # entity.action (e.g., property.transferred)
    height: int  # Block height at which the mutation committed
    source: str  # Caller that performed the mutation
    subject: int  # Property ID affected
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
