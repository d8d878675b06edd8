"""JSON file sink for exporting registry records to files."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from deed_registry.exceptions import SinkError
from deed_registry.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output registry records to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        return file_path

    def write_snapshot(self, snapshot: dict[str, list[Any]]) -> None:
        """Write every entity batch of a registry snapshot."""
        for entity_type, records in snapshot.items():
            self.write_batch(entity_type, records)

    def write_stream(self, topic: str, events: Iterable[Any]) -> int:
        """Append events to a JSON Lines file named after the topic."""
        # Use topic name as filename (replace dots with underscores)
        file_path = self.output_dir / (topic.replace(".", "_") + ".jsonl")
        count = 0

        try:
            with open(file_path, "a", encoding="utf-8") as f:
                for event in events:
                    f.write(json.dumps(to_dict(event), ensure_ascii=False, default=str) + "\n")
                    count += 1
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[topic] = self._counts.get(topic, 0) + count
        return count

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
