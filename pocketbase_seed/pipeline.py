"""Seed and import pipelines.

Records flow through two stages running in their own threads:

    producer (generate / read) --hand-off--> consumer (create) --queue--> caller (log)

Each stage stops at its first error and closes its output queue with a
sentinel, so downstream stages simply run out of input. The producer only
builds the next record once the consumer has taken the previous one, so a
failed creation leaves at most one extra record generated.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pocketbase_seed.client import PocketBaseClient
from pocketbase_seed.core.generator import RecordGenerator
from pocketbase_seed.core.models import Record, Schema
from pocketbase_seed.readers import read_records

logger = logging.getLogger(__name__)

_DONE = object()


def _drain(items: queue.Queue) -> None:
    """Release a producer blocked on hand-off until it sends the sentinel."""
    while True:
        item = items.get()
        items.task_done()
        if item is _DONE:
            return


@dataclass
class PipelineResult:
    """
    Outcome of a pipeline run.

    Attributes:
        created: Records returned by the API, in creation order
        total: Records requested (seed) or read from file (import)
        error: First error that stopped a stage, if any
    """

    created: list[Record] = field(default_factory=list)
    total: int = 0
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_pipeline(
    records: Iterable[Record],
    create: Callable[[Record], Record],
) -> PipelineResult:
    """
    Push records through ``create`` using a producer and a consumer thread.

    Args:
        records: Record source; iterated in the producer thread
        create: Called once per record in the consumer thread

    Returns:
        PipelineResult with created records and the first error, if any
    """
    result = PipelineResult()
    items: queue.Queue = queue.Queue(maxsize=1)
    created: queue.Queue = queue.Queue()
    # Each stage writes only its own slot
    errors: dict[str, Exception] = {}
    stopped = threading.Event()

    def produce() -> None:
        try:
            for record in records:
                items.put(record)
                # Wait until the consumer has taken it
                items.join()
                if stopped.is_set():
                    break
        except Exception as e:
            logger.error(f"Producing record failed: {e}")
            errors["producer"] = e
        finally:
            items.put(_DONE)

    def consume() -> None:
        try:
            while True:
                item = items.get()
                items.task_done()
                if item is _DONE:
                    break
                logger.debug(f"Processing record: {item}")
                try:
                    created.put(create(item))
                except Exception as e:
                    logger.error(f"Creating record failed: {e}")
                    errors["consumer"] = e
                    stopped.set()
                    _drain(items)
                    break
        finally:
            created.put(_DONE)

    producer = threading.Thread(target=produce, name="pipeline-producer", daemon=True)
    consumer = threading.Thread(target=consume, name="pipeline-consumer", daemon=True)
    producer.start()
    consumer.start()

    while True:
        record = created.get()
        if record is _DONE:
            break
        logger.info(f"Record created: {record}")
        result.created.append(record)

    consumer.join()
    producer.join()

    result.error = errors.get("producer") or errors.get("consumer")
    return result


def seed(
    client: PocketBaseClient,
    generator: RecordGenerator,
    schema: Schema,
    collection: str,
    count: int,
) -> PipelineResult:
    """
    Generate ``count`` records from ``schema`` and create them in ``collection``.

    Generation stops at the first failing record; creation stops at the first
    rejected record.
    """
    logger.info(f"Seeding {count} records into '{collection}'")
    result = run_pipeline(
        generator.generate_many(schema, count),
        lambda record: client.create_record(collection, record),
    )
    result.total = count
    return result


def import_file(
    client: PocketBaseClient,
    collection: str,
    path: str | Path,
) -> PipelineResult:
    """
    Read records from a .json or .csv file and create them in ``collection``.

    Raises:
        UnsupportedFileTypeError: Before anything is created, for other extensions
    """
    items = read_records(path)
    logger.info(f"Importing {len(items)} records into '{collection}'")
    result = run_pipeline(
        items,
        lambda record: client.create_record(collection, record),
    )
    result.total = len(items)
    return result
