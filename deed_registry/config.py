"""Configuration management for deed-registry."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from deed_registry.exceptions import ConfigurationError


@dataclass
class LimitsConfig:
    """Maximum lengths for textual registry inputs."""

    title: int = 100
    description: int = 500
    location: int = 200
    category: int = 50
    unit: int = 20
    reason: int = 200
    notes: int = 300
    document_hash: int = 64

    def __post_init__(self) -> None:
        for name, value in self.__dict__.items():
            if value <= 0:
                raise ConfigurationError(f"Limit {name} must be positive, got {value}")


@dataclass
class PolicyConfig:
    """Registry policy switches."""

    enforce_access_expiry: bool = True
    restrict_status_changes_to_owner: bool = False
    initial_height: int = 1


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False
    topic_prefix: str = "dev.deeds"


@dataclass
class ScenarioConfig:
    """Configuration for synthetic scenario execution."""

    name: str
    num_properties: int = 50
    num_principals: int = 20
    max_transfers_per_property: int = 3
    verification_rate: float = 0.6
    documents_per_property: int = 2
    status_change_rate: float = 0.2
    access_grant_rate: float = 0.3
    labels: dict[str, Any] = field(default_factory=dict)


@dataclass
class DeedRegistryConfig:
    """Main configuration for deed-registry."""

    limits: LimitsConfig = field(default_factory=LimitsConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    scenario: ScenarioConfig | None = None
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DeedRegistryConfig":
        """Create config from environment variables."""
        import os

        def _flag(name: str, default: str) -> bool:
            return os.getenv(name, default).lower() == "true"

        try:
            policy = PolicyConfig(
                enforce_access_expiry=_flag("REGISTRY_ENFORCE_ACCESS_EXPIRY", "true"),
                restrict_status_changes_to_owner=_flag("REGISTRY_OWNER_ONLY_STATUS", "false"),
                initial_height=int(os.getenv("REGISTRY_INITIAL_HEIGHT", "1")),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric environment value: {exc}") from exc

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_flag("PRETTY_JSON", "false"),
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.deeds"),
        )

        return cls(
            policy=policy,
            kafka=kafka,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
