"""Title chain scenario: a populated registry with realistic deed histories."""

from __future__ import annotations

import logging
import random
from decimal import Decimal
from typing import Any

from deed_registry.config import DeedRegistryConfig, ScenarioConfig
from deed_registry.gateway import Call, RegistryGateway
from deed_registry.generators import DocumentGenerator, PrincipalGenerator, PropertyGenerator
from deed_registry.models import PropertyStatus
from deed_registry.registry import DeedRegistry, VALID_TRANSITIONS

logger = logging.getLogger(__name__)


class TitleChainScenario:
    """Generate a registry whose properties carry full audit trails.

    This scenario creates:
    - A pool of account principals
    - Properties registered by random principals, one block per registration
    - Chains of ownership transfers with sale amounts
    - One-time verifications by third-party principals
    - Document attachments by the owner at each point in the chain
    - Status changes walking the lifecycle table
    - Access grants from owners to other principals
    """

    def __init__(
        self,
        num_properties: int = 50,
        num_principals: int = 20,
        max_transfers_per_property: int = 3,
        verification_rate: float = 0.6,
        documents_per_property: int = 2,
        status_change_rate: float = 0.2,
        access_grant_rate: float = 0.3,
        seed: int | None = None,
        *,
        config: ScenarioConfig | None = None,
        registry_config: DeedRegistryConfig | None = None,
    ) -> None:
        """Initialize title chain scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to register.
        num_principals : int
            Size of the principal pool (at least 2).
        max_transfers_per_property : int
            Upper bound of transfers per property.
        verification_rate : float
            Share of properties that get verified (0.0 to 1.0).
        documents_per_property : int
            Upper bound of documents attached per property.
        status_change_rate : float
            Share of properties that go through status changes.
        access_grant_rate : float
            Share of properties whose owner grants access to someone.
        seed : int | None
            Random seed for reproducibility.
        config : ScenarioConfig | None
            Optional scenario configuration. If provided, overrides the
            numeric arguments above.
        registry_config : DeedRegistryConfig | None
            Configuration for the registry being populated.
        """
        if config is not None:
            num_properties = config.num_properties
            num_principals = config.num_principals
            max_transfers_per_property = config.max_transfers_per_property
            verification_rate = config.verification_rate
            documents_per_property = config.documents_per_property
            status_change_rate = config.status_change_rate
            access_grant_rate = config.access_grant_rate
        if num_principals < 2:
            raise ValueError("A title chain needs at least two principals")

        self.config = config
        self.num_properties = num_properties
        self.num_principals = num_principals
        self.max_transfers_per_property = max_transfers_per_property
        self.verification_rate = verification_rate
        self.documents_per_property = documents_per_property
        self.status_change_rate = status_change_rate
        self.access_grant_rate = access_grant_rate
        self.seed = seed

        self._random = random.Random(seed)
        self.registry = DeedRegistry(config=registry_config)
        self.gateway = RegistryGateway(self.registry)
        limits = self.registry.config.limits
        self._principal_gen = PrincipalGenerator(seed=seed)
        self._property_gen = PropertyGenerator(seed=seed, limits=limits)
        self._document_gen = DocumentGenerator(seed=seed, limits=limits)
        self.principals: list[str] = []
        self._rejected = 0

    def generate(self) -> DeedRegistry:
        """Populate the registry.

        Returns
        -------
        DeedRegistry
            Registry containing all generated records.
        """
        logger.info(
            "Starting title chain scenario: %d properties, %d principals",
            self.num_properties,
            self.num_principals,
        )
        self.principals = self._principal_gen.generate_many(self.num_principals)

        registered = (self._register_one() for _ in range(self.num_properties))
        property_ids = [pid for pid in registered if pid is not None]
        logger.info("Registered %d properties", len(property_ids))

        for property_id in property_ids:
            self._attach_documents(property_id)
            if self._random.random() < self.verification_rate:
                self._verify(property_id)
            self._transfer_chain(property_id)
            if self._random.random() < self.access_grant_rate:
                self._grant_access(property_id)
            if self._random.random() < self.status_change_rate:
                self._walk_status(property_id)

        logger.info("Scenario complete: %s", self.registry.get_system_statistics())
        return self.registry

    def _submit(self, operation: str, caller: str, **args: Any) -> Any:
        """Submit a single call in its own block; return its value or None."""
        (result,) = self.gateway.mine_block([Call(operation, args, caller)])
        if not result.ok:
            self._rejected += 1
            logger.debug("%s rejected: %s", operation, result.error_kind)
            return None
        return result.value

    def _register_one(self) -> int:
        draft = self._property_gen.generate()
        owner = self._random.choice(self.principals)
        return self._submit(
            "register",
            owner,
            title=draft.title,
            description=draft.description,
            location=draft.location,
            category=draft.category,
            area=draft.area,
            unit=draft.unit,
            initial_owner=owner,
        )

    def _attach_documents(self, property_id: int) -> None:
        owner = self.registry.get_owner(property_id)
        for _ in range(self._random.randint(0, self.documents_per_property)):
            draft = self._document_gen.generate()
            self._submit(
                "add_document",
                owner,
                property_id=property_id,
                title=draft.title,
                document_type=draft.document_type,
                document_hash=draft.document_hash,
                description=draft.description,
            )

    def _verify(self, property_id: int) -> None:
        verifier = self._random.choice(self.principals)
        self._submit("verify", verifier, property_id=property_id, notes="Title search completed")

    def _transfer_chain(self, property_id: int) -> None:
        price = Decimal(self._random.randint(80, 900) * 1000)
        for _ in range(self._random.randint(0, self.max_transfers_per_property)):
            owner = self.registry.get_owner(property_id)
            buyer = self._random.choice([p for p in self.principals if p != owner])
            price = (price * Decimal(self._random.uniform(0.95, 1.25))).quantize(Decimal("1"))
            self._submit(
                "transfer",
                owner,
                property_id=property_id,
                new_owner=buyer,
                reason=self._random.choice(["Sale", "Inheritance", "Gift", "Foreclosure"]),
                amount=price,
            )

    def _grant_access(self, property_id: int) -> None:
        owner = self.registry.get_owner(property_id)
        accessor = self._random.choice([p for p in self.principals if p != owner])
        expires_at = self.gateway.height + self._random.randint(10, 500)
        self._submit(
            "grant_access",
            owner,
            property_id=property_id,
            accessor=accessor,
            level=self._random.randint(1, 4),
            expires_at=expires_at,
        )

    def _walk_status(self, property_id: int) -> None:
        actor = self._random.choice(self.principals)
        status = self.registry.get_property_info(property_id).metadata.status
        for _ in range(self._random.randint(1, 3)):
            options = sorted(VALID_TRANSITIONS[status] - {status}, key=lambda s: s.code)
            if not options:
                break
            status = self._random.choice(options)
            if self._submit(
                "change_status",
                actor,
                property_id=property_id,
                new_status=status,
                reason="Scenario lifecycle step",
            ) is None:
                break

    def get_summary(self) -> dict[str, Any]:
        """Return scenario summary statistics."""
        stats = self.registry.get_system_statistics()
        status_distribution: dict[str, int] = {s.value: 0 for s in PropertyStatus}
        for info in self.registry.snapshot()["properties"]:
            status_distribution[info.metadata.status.value] += 1

        return {
            "total_properties": stats.total_properties,
            "total_transfers": stats.total_transfers,
            "total_verified": stats.total_verified,
            "final_height": stats.current_height,
            "rejected_calls": self._rejected,
            "status_distribution": status_distribution,
            **self.registry.summary(),
        }
