"""Kafka sink for publishing registry events and snapshots."""

import json
import logging
import time
from dataclasses import dataclass, is_dataclass
from typing import Any, Iterable

from confluent_kafka import Producer
from confluent_kafka.serialization import MessageField, SerializationContext

from deed_registry.sinks.serialization import to_dict

logger = logging.getLogger(__name__)

# Constants
SCHEMA_NAMESPACE = "com.deedregistry"
DEFAULT_SCHEMA_REGISTRY_URL = "http://localhost:8081"

# Avro schemas keyed by entity type
AVRO_SCHEMAS = {
    "events": {
        "type": "record",
        "name": "RegistryEvent",
        "namespace": SCHEMA_NAMESPACE,
        "fields": [
            {"name": "event_id", "type": "long"},
            {"name": "event_type", "type": "string"},
            {"name": "height", "type": "long"},
            {"name": "source", "type": "string"},
            {"name": "subject", "type": "long"},
            {"name": "data", "type": "string"},  # JSON-encoded payload
        ],
    },
}


@dataclass
class ProducerConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str
    schema_registry_url: str | None = None
    acks: str = "all"  # "0", "1", "all"
    batch_size: int = 16384  # bytes
    linger_ms: int = 5  # ms to wait for batching
    compression: str = "snappy"  # none, gzip, snappy, lz4
    retries: int = 3


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0

    @property
    def throughput(self) -> float:
        """Calculate events per second achieved."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        duration = self.end_time - self.start_time
        return self.sent / duration if duration > 0 else 0.0


class KafkaSink:
    """Publish registry records to Kafka topics keyed by property."""

    # Entity type to key field mapping; every record is keyed by its property
    KEY_FIELDS = {
        "events": "subject",
        "properties": "property_id",
        "verifications": "property_id",
        "transfers": "property_id",
        "documents": "property_id",
        "status_changes": "property_id",
        "access_grants": "property_id",
    }

    def __init__(self, config: ProducerConfig | str, topic_prefix: str = "dev.deeds") -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : ProducerConfig | str
            Producer configuration or bootstrap servers string.
        topic_prefix : str
            Prefix joined to the entity type to form topic names.
        """
        if isinstance(config, str):
            config = ProducerConfig(bootstrap_servers=config)

        self.config = config
        self.topic_prefix = topic_prefix
        self.producer = self._create_producer()
        self.stats = ProducerStats()
        self._avro_serializers: dict[str, Any] = {}

        if config.schema_registry_url:
            self._init_avro_serializers()

    def _create_producer(self) -> Producer:
        """Create Kafka producer with configuration."""
        return Producer(
            {
                "bootstrap.servers": self.config.bootstrap_servers,
                "acks": self.config.acks,
                "retries": self.config.retries,
                "linger.ms": self.config.linger_ms,
                "batch.size": self.config.batch_size,
                "compression.type": self.config.compression,
            }
        )

    def _init_avro_serializers(self) -> None:
        """Initialize Avro serializers for each entity type."""
        try:
            from confluent_kafka.schema_registry import SchemaRegistryClient
            from confluent_kafka.schema_registry.avro import AvroSerializer

            schema_registry_client = SchemaRegistryClient({"url": self.config.schema_registry_url})

            for entity_type, schema in AVRO_SCHEMAS.items():
                self._avro_serializers[entity_type] = AvroSerializer(
                    schema_registry_client,
                    json.dumps(schema),
                    to_dict=self._to_avro_dict,
                )
            logger.info("Avro serializers initialized for: %s", list(AVRO_SCHEMAS.keys()))
        except ImportError:
            logger.warning(
                "confluent-kafka[avro] not installed. Using JSON serialization. "
                "Install with: pip install 'confluent-kafka[avro]'"
            )

    def _to_avro_dict(self, obj: Any, ctx: SerializationContext) -> dict:
        """Convert an event to an Avro-compatible dict."""
        data = to_dict(obj)
        data["data"] = json.dumps(data.get("data", {}), default=str)
        return data

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def topic_for(self, entity_type: str) -> str:
        """Build the topic name for an entity type (status_changes -> prefix.status-changes)."""
        return f"{self.topic_prefix}.{entity_type.replace('_', '-')}"

    def _get_entity_type(self, topic: str) -> str:
        """Extract entity type from topic name."""
        return topic.split(".")[-1].replace("-", "_")

    def _get_key(self, entity_type: str, record: Any) -> str | None:
        """Extract message key from record based on entity type."""
        key_field = self.KEY_FIELDS.get(entity_type)
        if not key_field:
            return None

        if is_dataclass(record):
            value = getattr(record, key_field, None)
        elif isinstance(record, dict):
            value = record.get(key_field)
        else:
            value = None
        return str(value) if value is not None else None

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single record to a Kafka topic."""
        entity_type = self._get_entity_type(topic)

        if entity_type in self._avro_serializers:
            serializer = self._avro_serializers[entity_type]
            value = serializer(record, SerializationContext(topic, MessageField.VALUE))
        else:
            value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(entity_type, record)

        self.producer.produce(
            topic=topic,
            key=key.encode("utf-8") if key else None,
            value=value,
            callback=self._delivery_callback,
        )
        self.stats.sent += 1
        self.producer.poll(0)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to the entity type's topic."""
        topic = self.topic_for(entity_type)
        logger.info("Writing batch to %s: %d records", topic, len(records))

        for record in records:
            self.send(topic, record)

        self.flush()
        logger.info(
            "Batch complete: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )

    def write_snapshot(self, snapshot: dict[str, list[Any]]) -> None:
        """Publish every entity batch of a registry snapshot."""
        for entity_type, records in snapshot.items():
            self.write_batch(entity_type, records)

    def write_stream(self, topic: str, events: Iterable[Any]) -> ProducerStats:
        """Publish registry events in order and return delivery statistics."""
        logger.info("Starting event stream to %s", topic)

        self.stats = ProducerStats()
        self.stats.start_time = time.time()

        for i, event in enumerate(events):
            self.send(topic, event)
            # Log progress every 1000 records
            if (i + 1) % 1000 == 0:
                logger.debug("Progress: %d records", i + 1)

        self.flush()
        self.stats.end_time = time.time()

        logger.info(
            "Stream complete: sent=%d, delivered=%d, failed=%d, throughput=%.1f/sec",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
            self.stats.throughput,
        )
        return self.stats

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
