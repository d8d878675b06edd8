"""deed-registry: transactional registry of land and property deeds."""

from deed_registry.environment import BlockClock
from deed_registry.gateway import Call, CallResult, RegistryGateway
from deed_registry.registry import DeedRegistry

__version__ = "0.1.0"

__all__ = [
    "BlockClock",
    "Call",
    "CallResult",
    "DeedRegistry",
    "RegistryGateway",
    "__version__",
]
