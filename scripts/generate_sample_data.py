#!/usr/bin/env python3
"""Generate a sample deed registry and export it.

This script runs the title chain scenario and writes the resulting registry to:
- console: pretty-printed records for inspection
- json: one ``<entity>.json`` file per entity plus a JSON Lines event log
- kafka: one topic per entity plus an ordered event topic
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from deed_registry.config import DeedRegistryConfig, ScenarioConfig
from deed_registry.exceptions import ConfigurationError, DeedRegistryError
from deed_registry.logging import get_logger, setup_logging
from deed_registry.scenarios import TitleChainScenario
from deed_registry.sinks import ConsoleSink, JsonFileSink, KafkaSink
from deed_registry.sinks.kafka import ProducerConfig

logger = get_logger("generate_sample_data")


def build_sink(args: argparse.Namespace, config: DeedRegistryConfig):
    """Create the sink selected on the command line."""
    if args.sink == "console":
        return ConsoleSink(pretty=True, max_records=args.max_records)
    if args.sink == "json":
        output_dir = Path(args.output_dir) if args.output_dir else config.output.json_output_dir
        return JsonFileSink(output_dir, pretty=config.output.pretty_json)
    if args.sink == "kafka":
        producer_config = ProducerConfig(
            bootstrap_servers=config.kafka.bootstrap_servers,
            schema_registry_url=args.schema_registry,
            acks=config.kafka.acks,
        )
        return KafkaSink(producer_config, topic_prefix=config.output.topic_prefix)
    raise ConfigurationError(f"Unknown sink: {args.sink}")


def main() -> int:
    """Generate and export a sample registry."""
    parser = argparse.ArgumentParser(description="Generate a sample deed registry")
    parser.add_argument(
        "--properties", type=int, default=50, help="Number of properties (default: 50)"
    )
    parser.add_argument(
        "--principals", type=int, default=20, help="Number of principals (default: 20)"
    )
    parser.add_argument(
        "--max-transfers",
        type=int,
        default=3,
        help="Maximum transfers per property (default: 3)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: $SEED)")
    parser.add_argument(
        "--sink",
        choices=["console", "json", "kafka"],
        default="console",
        help="Output sink (default: console)",
    )
    parser.add_argument("--output-dir", default=None, help="Directory for the json sink")
    parser.add_argument(
        "--max-records",
        type=int,
        default=5,
        help="Records printed per entity by the console sink (default: 5)",
    )
    parser.add_argument(
        "--schema-registry",
        default=None,
        help="Schema Registry URL; enables Avro for the event topic",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format (default: standard)",
    )
    args = parser.parse_args()

    try:
        config = DeedRegistryConfig.from_env()
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, args.log_format)
    seed = args.seed if args.seed is not None else config.seed

    scenario = TitleChainScenario(
        seed=seed,
        config=ScenarioConfig(
            name="title-chain",
            num_properties=args.properties,
            num_principals=args.principals,
            max_transfers_per_property=args.max_transfers,
        ),
        registry_config=config,
    )

    start = time.time()
    registry = scenario.generate()
    logger.info("Generated registry in %.2fs", time.time() - start)

    sink = build_sink(args, config)
    try:
        snapshot = registry.snapshot()
        events = snapshot.pop("events")
        sink.write_snapshot(snapshot)
        sink.write_stream(f"{config.output.topic_prefix}.events", events)
    except DeedRegistryError as exc:
        logger.error("Export failed: %s", exc)
        return 1
    finally:
        sink.close()

    for key, value in scenario.get_summary().items():
        logger.info("%s: %s", key, value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
