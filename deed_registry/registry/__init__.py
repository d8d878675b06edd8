"""Registry state machine: components and the DeedRegistry facade."""

from deed_registry.registry.lifecycle import VALID_TRANSITIONS, is_valid_transition
from deed_registry.registry.registry import MUTATING_OPERATIONS, READ_OPERATIONS, DeedRegistry

__all__ = [
    "DeedRegistry",
    "MUTATING_OPERATIONS",
    "READ_OPERATIONS",
    "VALID_TRANSITIONS",
    "is_valid_transition",
]
