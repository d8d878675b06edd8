"""Console sink for debugging and development."""

import json
import time
from typing import Any, Iterable

from deed_registry.sinks.serialization import to_dict


class ConsoleSink:
    """Output registry records to console (stdout) for debugging."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def _dumps(self, record: Any) -> str:
        if self.pretty:
            return json.dumps(to_dict(record), indent=2, ensure_ascii=False, default=str)
        return json.dumps(to_dict(record), ensure_ascii=False, default=str)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console."""
        print(f"\n{'='*60}")
        print(f"Entity: {entity_type} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            print(self._dumps(record))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def write_snapshot(self, snapshot: dict[str, list[Any]]) -> None:
        """Write every entity batch of a registry snapshot."""
        for entity_type, records in snapshot.items():
            self.write_batch(entity_type, records)

    def write_stream(self, topic: str, events: Iterable[Any]) -> int:
        """Print events one per line; return the number printed."""
        print(f"\n{'='*60}")
        print(f"Streaming to: {topic}")
        print("=" * 60)

        start_time = time.time()
        count = 0
        for event in events:
            print(self._dumps(event))
            count += 1

        self._counts[topic] = self._counts.get(topic, 0) + count
        print(f"\nStreamed {count} records in {time.time() - start_time:.2f}s")
        return count

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
