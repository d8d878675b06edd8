"""Pytest configuration and fixtures."""

import pytest

from deed_registry import BlockClock, DeedRegistry, RegistryGateway

ALICE = "SP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJ7"
BOB = "SP3FBR2AGK5H9QBDH3EEN6DF8EK8JY7RX8QJ5SVTE"
CAROL = "SP1HTBVD3JG9C05J7HBJTHGR0GGW7KXW28M5JS8QE"


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def alice() -> str:
    return ALICE


@pytest.fixture
def bob() -> str:
    return BOB


@pytest.fixture
def carol() -> str:
    return CAROL


@pytest.fixture
def clock() -> BlockClock:
    """Clock starting at height 1."""
    return BlockClock()


@pytest.fixture
def registry(clock: BlockClock) -> DeedRegistry:
    """Create a fresh registry for each test."""
    return DeedRegistry(clock=clock)


@pytest.fixture
def gateway(registry: DeedRegistry) -> RegistryGateway:
    return RegistryGateway(registry)


@pytest.fixture
def property_id(registry: DeedRegistry, alice: str) -> int:
    """A property registered and owned by alice."""
    return registry.register(
        alice,
        "Test Property",
        "A test property description",
        "123 Test Street",
        "Residential",
        1000,
        "sqft",
        alice,
    )
