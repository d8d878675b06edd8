"""Output sinks for exporting registry records and events."""

from deed_registry.sinks.console import ConsoleSink
from deed_registry.sinks.json_file import JsonFileSink
from deed_registry.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
