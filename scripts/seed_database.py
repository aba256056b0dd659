#!/usr/bin/env python3
"""Seed a psa-core store with development data.

Creates the fixture set (countries, Brazilian states and cities, addresses,
users, police departments, occurrences) through the create-command handlers,
optionally followed by Faker-generated occurrences. Settings default to the
environment (see ``PsaConfig.from_env``); command-line flags override them.
"""

import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from psa_core.config import PsaConfig
from psa_core.context import CoreContext
from psa_core.exceptions import PsaError
from psa_core.logging import setup_logging
from psa_core.seed import DatabaseSeeder
from psa_core.serialization import to_dict

logger = logging.getLogger(__name__)


def dump_entities(context: CoreContext, path: Path) -> None:
    """Write every stored entity to ``path`` as JSON, keyed by table."""
    repositories = {
        "countries": context.countries,
        "states": context.states,
        "cities": context.cities,
        "addresses": context.addresses,
        "users": context.users,
        "police_departments": context.police_departments,
        "occurrences": context.occurrences,
    }
    data = {
        table: [to_dict(entity) for entity in repository.get_all().result()]
        for table, repository in repositories.items()
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info("Dumped %d tables to %s", len(data), path)


def build_config(args: argparse.Namespace) -> PsaConfig:
    """Merge command-line flags over the environment configuration.

    A PostgreSQL URL without an explicit backend selects ``postgres``.
    """
    config = PsaConfig.from_env()
    if args.backend:
        config = replace(config, storage_backend=args.backend)
    elif args.postgres_url:
        config = replace(config, storage_backend="postgres")
    if args.workers is not None:
        config = replace(config, executor=replace(config.executor, max_workers=args.workers))
    if args.synthetic is not None:
        config.seed.synthetic_occurrences = args.synthetic
    if args.seed is not None:
        config.seed.seed = args.seed
    # Seeding runs once in main(), not again inside CoreContext.from_config
    config.seed.enabled = False
    return config


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed a psa-core store with development data")
    parser.add_argument(
        "--backend",
        type=str,
        choices=["memory", "postgres"],
        default=None,
        help="Storage backend (default: $STORAGE_BACKEND or memory)",
    )
    parser.add_argument(
        "--postgres-url",
        type=str,
        default=None,
        help="PostgreSQL URL (overrides POSTGRES_*, implies --backend postgres)",
    )
    parser.add_argument(
        "--synthetic",
        type=int,
        default=None,
        help="Number of extra Faker-generated occurrences (default: $SEED_SYNTHETIC_OCCURRENCES)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads for repository calls (default: $EXECUTOR_MAX_WORKERS or 8)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )
    parser.add_argument(
        "--truncate",
        action="store_true",
        help="Truncate PostgreSQL tables before seeding (allows re-running)",
    )
    parser.add_argument(
        "--dump-json",
        type=Path,
        default=None,
        help="Write all stored entities to this JSON file after seeding",
    )
    args = parser.parse_args()

    try:
        config = build_config(args)
    except PsaError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)

    if args.postgres_url and config.storage_backend != "postgres":
        logger.warning("--postgres-url ignored with the %s backend", config.storage_backend)

    t0 = time.perf_counter()
    try:
        if args.postgres_url and config.storage_backend == "postgres":
            from psa_core.store.postgres import PostgresRowStore

            store = PostgresRowStore(args.postgres_url)
            try:
                store.create_tables()
            except BaseException:
                store.close()
                raise
            context = CoreContext(store, config.executor)
        else:
            context = CoreContext.from_config(config)

        with context:
            if args.truncate:
                if config.storage_backend == "postgres":
                    context.store.truncate_tables()
                else:
                    logger.warning("--truncate only applies to the postgres backend")

            seeder = DatabaseSeeder(context, seed=config.seed.seed, locale=config.seed.locale)
            seeder.seed()
            if config.seed.synthetic_occurrences > 0:
                seeder.seed_synthetic(config.seed.synthetic_occurrences)

            for table, count in context.store.summary().items():
                logger.info("  %-20s %d", table, count)
            if args.dump_json:
                dump_entities(context, args.dump_json)
    except PsaError as e:
        logger.error("Seeding failed: %s", e)
        sys.exit(1)

    logger.info("Done in %.1fs", time.perf_counter() - t0)


if __name__ == "__main__":
    main()
