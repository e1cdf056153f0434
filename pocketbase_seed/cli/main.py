"""CLI commands for pocketbase-seed."""

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

import click

from pocketbase_seed.client import PocketBaseClient
from pocketbase_seed.config import Config
from pocketbase_seed.core.generator import RecordGenerator
from pocketbase_seed.core.models import Schema
from pocketbase_seed.exceptions import (
    AuthenticationError,
    ConfigError,
    SchemaError,
    UnsupportedFileTypeError,
)
from pocketbase_seed.pipeline import import_file, seed
from pocketbase_seed.readers import get_reader

logger = logging.getLogger("pocketbase_seed")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
QUIET_LOGGERS = ("httpx", "httpcore")


def load_config(path: str) -> Config:
    """Load config or exit with status 1."""
    try:
        return Config.from_file(path)
    except ConfigError as e:
        logger.error(f"Reading config failed: {e}")
        sys.exit(1)


@contextmanager
def connect(config: Config) -> Iterator[PocketBaseClient]:
    """Yield an authenticated client; authentication failure is fatal."""
    with PocketBaseClient(config) as client:
        try:
            client.authenticate(config.email, config.password)
        except AuthenticationError as e:
            logger.critical(str(e))
            sys.exit(1)
        yield client


@contextmanager
def timed(label: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.info(f"{label} finished in {time.perf_counter() - start:.2f}s")


@click.group()
@click.version_option(package_name="pocketbase-seed")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="DEBUG",
    show_default=True,
    help="Logging level",
)
def cli(log_level: str) -> None:
    """pocketbase-seed - Seed a PocketBase database with fake or imported records."""
    logging.basicConfig(
        level=log_level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )
    # Keep per-request transport chatter out of the tool's own log
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@cli.command("seed")
@click.option("--config", "config_path", required=True, metavar="FILE", help="Load configuration from FILE")
@click.option("--collection", required=True, help="Collection to seed")
@click.option("--schema", "schema_path", required=True, metavar="FILE", help="Load schema from FILE")
@click.option("--count", type=click.IntRange(min=0), default=10, show_default=True, help="Number of records to seed")
@click.option("--batch", type=int, default=0, help="Number of records to seed in a batch (not used yet)")
@click.option("--strict", is_flag=True, help="Fail on fake templates that can't be rendered")
def seed_command(
    config_path: str,
    collection: str,
    schema_path: str,
    count: int,
    batch: int,
    strict: bool,
) -> None:
    """Seed a collection with generated records."""
    config = load_config(config_path)

    try:
        schema = Schema.from_file(schema_path)
    except SchemaError as e:
        logger.error(f"Reading schema failed: {e}")
        sys.exit(1)

    with timed("seed"), connect(config) as client:
        # TODO: send records through the batch API once --batch is wired up
        logger.info(f"Batch size: {batch}")

        generator = RecordGenerator(client, strict=strict)
        result = seed(client, generator, schema, collection, count)

        logger.info(f"Created {len(result.created)} of {count} records in '{collection}'")


@cli.command("import")
@click.option("--config", "config_path", required=True, metavar="FILE", help="Load configuration from FILE")
@click.option("--collection", required=True, help="Collection to import into")
@click.option("--file", "file_path", required=True, metavar="FILE", help="Load records from FILE (.json or .csv)")
def import_command(config_path: str, collection: str, file_path: str) -> None:
    """Import records from a JSON or CSV file."""
    try:
        get_reader(file_path)
    except UnsupportedFileTypeError as e:
        raise click.UsageError(str(e)) from e

    config = load_config(config_path)

    with timed("import"), connect(config) as client:
        result = import_file(client, collection, file_path)
        logger.info(
            f"Created {len(result.created)} of {result.total} records in '{collection}'"
        )


if __name__ == "__main__":
    cli()
