"""Tests for sinks."""

import json
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from deed_registry import DeedRegistry
from deed_registry.exceptions import SinkError
from deed_registry.models import TransferRecord
from deed_registry.sinks.console import ConsoleSink
from deed_registry.sinks.json_file import JsonFileSink
from deed_registry.sinks.kafka import KafkaSink, ProducerConfig, ProducerStats


@pytest.fixture
def populated(registry: DeedRegistry, alice: str, bob: str, property_id: int) -> DeedRegistry:
    """Registry with one transferred, documented property."""
    registry.add_document(alice, property_id, "Deed", "Deed", "ab" * 32)
    registry.transfer(alice, property_id, bob, "sale", Decimal("500"))
    return registry


@pytest.fixture
def transfer_record() -> TransferRecord:
    return TransferRecord(
        property_id=1,
        transfer_id=1,
        from_owner="alice",
        to_owner="bob",
        transferred_at=2,
        reason="sale",
        amount=Decimal("100.50"),
    )


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        """Test default initialization."""
        sink = ConsoleSink()

        assert sink.pretty is True
        assert sink.max_records is None
        assert sink._counts == {}

    def test_write_batch_dataclass(
        self, capsys: pytest.CaptureFixture, transfer_record: TransferRecord
    ) -> None:
        """Test writing batch of dataclass objects."""
        sink = ConsoleSink(pretty=False)

        sink.write_batch("transfers", [transfer_record])
        captured = capsys.readouterr()

        assert "transfers" in captured.out
        assert "1 records" in captured.out
        assert '"amount": "100.50"' in captured.out
        assert sink._counts["transfers"] == 1

    def test_write_batch_max_records(self, capsys: pytest.CaptureFixture) -> None:
        """Test truncation of long batches."""
        sink = ConsoleSink(pretty=False, max_records=2)

        sink.write_batch("events", [{"id": i} for i in range(5)])
        captured = capsys.readouterr()

        assert "... and 3 more records" in captured.out
        assert sink._counts["events"] == 5

    def test_write_snapshot(self, capsys: pytest.CaptureFixture, populated: DeedRegistry) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_snapshot(populated.snapshot())
        sink.close()
        captured = capsys.readouterr()

        assert "Entity: properties (1 records)" in captured.out
        assert "Entity: transfers (1 records)" in captured.out
        assert "Console Sink Summary" in captured.out

    def test_write_stream(self, capsys: pytest.CaptureFixture, populated: DeedRegistry) -> None:
        sink = ConsoleSink(pretty=False)

        count = sink.write_stream("dev.deeds.events", populated.events())
        captured = capsys.readouterr()

        assert count == 3
        assert "property.transferred" in captured.out
        assert sink._counts["dev.deeds.events"] == 3


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_write_batch(self, tmp_path: Path, transfer_record: TransferRecord) -> None:
        sink = JsonFileSink(tmp_path)

        file_path = sink.write_batch("transfers", [transfer_record])

        assert file_path == tmp_path / "transfers.json"
        data = json.loads(file_path.read_text(encoding="utf-8"))
        assert data[0]["to_owner"] == "bob"
        assert data[0]["amount"] == "100.50"

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        JsonFileSink(tmp_path / "nested" / "out")

        assert (tmp_path / "nested" / "out").is_dir()

    def test_write_snapshot(self, tmp_path: Path, populated: DeedRegistry) -> None:
        sink = JsonFileSink(tmp_path, pretty=True)

        sink.write_snapshot(populated.snapshot())

        properties = json.loads((tmp_path / "properties.json").read_text(encoding="utf-8"))
        assert properties[0]["metadata"]["status"] == "ACTIVE"
        documents = json.loads((tmp_path / "documents.json").read_text(encoding="utf-8"))
        assert documents[0]["document_hash"] == "ab" * 32

    def test_write_stream_appends_jsonl(self, tmp_path: Path, populated: DeedRegistry) -> None:
        sink = JsonFileSink(tmp_path)

        assert sink.write_stream("dev.deeds.events", populated.events()) == 3
        assert sink.write_stream("dev.deeds.events", populated.events(since=2)) == 1

        lines = (tmp_path / "dev_deeds_events.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 4
        assert json.loads(lines[0])["event_type"] == "property.registered"
        assert json.loads(lines[-1])["data"]["amount"] == "500"

    def test_write_failure(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        (tmp_path / "transfers.json").mkdir()

        with pytest.raises(SinkError):
            sink.write_batch("transfers", [])


class TestProducerStats:
    """Tests for ProducerStats."""

    def test_success_rate(self) -> None:
        assert ProducerStats(sent=100, delivered=90, failed=10).success_rate == 0.9
        assert ProducerStats().success_rate == 0.0

    def test_throughput(self) -> None:
        assert ProducerStats(sent=100, start_time=0.0, end_time=10.0).throughput == 10.0
        assert ProducerStats(sent=100).throughput == 0.0
        assert ProducerStats(sent=100, start_time=5.0, end_time=5.0).throughput == 0.0


class TestKafkaSink:
    """Tests for KafkaSink with a mocked producer."""

    @patch("deed_registry.sinks.kafka.Producer")
    def test_init_with_string(self, mock_producer_class: MagicMock) -> None:
        """Test KafkaSink initialization with string."""
        sink = KafkaSink("localhost:9092")

        assert sink.config.bootstrap_servers == "localhost:9092"
        assert sink.topic_prefix == "dev.deeds"
        mock_producer_class.assert_called_once()

    @patch("deed_registry.sinks.kafka.Producer")
    def test_init_with_config(self, mock_producer_class: MagicMock) -> None:
        config = ProducerConfig(bootstrap_servers="kafka:9092", acks="1")

        sink = KafkaSink(config, topic_prefix="prod.deeds")

        assert sink.config == config
        producer_settings = mock_producer_class.call_args[0][0]
        assert producer_settings["bootstrap.servers"] == "kafka:9092"
        assert producer_settings["acks"] == "1"

    @patch("deed_registry.sinks.kafka.Producer")
    def test_topic_names(self, mock_producer_class: MagicMock) -> None:
        sink = KafkaSink("localhost:9092")

        assert sink.topic_for("status_changes") == "dev.deeds.status-changes"
        assert sink._get_entity_type("dev.deeds.status-changes") == "status_changes"

    @patch("deed_registry.sinks.kafka.Producer")
    def test_send_keys_by_property(
        self, mock_producer_class: MagicMock, transfer_record: TransferRecord
    ) -> None:
        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")

        sink.send("dev.deeds.transfers", transfer_record)

        call_kwargs = mock_producer.produce.call_args[1]
        assert call_kwargs["topic"] == "dev.deeds.transfers"
        assert call_kwargs["key"] == b"1"
        assert json.loads(call_kwargs["value"])["amount"] == "100.50"
        assert sink.stats.sent == 1

    @patch("deed_registry.sinks.kafka.Producer")
    def test_send_unknown_entity_without_key(self, mock_producer_class: MagicMock) -> None:
        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")

        sink.send("test_topic", {"id": 1})

        assert mock_producer.produce.call_args[1]["key"] is None

    @patch("deed_registry.sinks.kafka.Producer")
    def test_write_snapshot(self, mock_producer_class: MagicMock, populated: DeedRegistry) -> None:
        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")
        snapshot = populated.snapshot()
        snapshot.pop("events")

        sink.write_snapshot(snapshot)

        topics = {c[1]["topic"] for c in mock_producer.produce.call_args_list}
        assert "dev.deeds.properties" in topics
        assert "dev.deeds.transfers" in topics
        assert mock_producer.produce.call_count == sum(len(v) for v in snapshot.values())

    @patch("deed_registry.sinks.kafka.Producer")
    def test_write_stream(self, mock_producer_class: MagicMock, populated: DeedRegistry) -> None:
        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")

        stats = sink.write_stream("dev.deeds.events", populated.events())

        assert stats.sent == 3
        assert stats.start_time is not None
        assert stats.end_time is not None
        keys = [c[1]["key"] for c in mock_producer.produce.call_args_list]
        assert keys == [b"1", b"1", b"1"]
        mock_producer.flush.assert_called_once()

    @patch("deed_registry.sinks.kafka.Producer")
    def test_delivery_callbacks(self, mock_producer_class: MagicMock) -> None:
        sink = KafkaSink("localhost:9092")
        mock_msg = MagicMock()
        mock_msg.topic.return_value = "dev.deeds.events"
        mock_msg.partition.return_value = 0
        mock_msg.offset.return_value = 1

        sink._delivery_callback(None, mock_msg)
        sink._delivery_callback("Connection error", None)

        assert sink.stats.delivered == 1
        assert sink.stats.failed == 1

    @patch("deed_registry.sinks.kafka.Producer")
    def test_avro_dict_encodes_payload(self, mock_producer_class: MagicMock, populated: DeedRegistry) -> None:
        sink = KafkaSink("localhost:9092")
        event = populated.events()[-1]

        result = sink._to_avro_dict(event, None)

        assert json.loads(result["data"])["to_owner"] == event.data["to_owner"]
        assert result["event_type"] == "property.transferred"

    @patch("deed_registry.sinks.kafka.Producer")
    def test_close_flushes(self, mock_producer_class: MagicMock) -> None:
        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")

        sink.close()

        mock_producer.flush.assert_called_once_with(30.0)
