"""Schema-driven fake record generator."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from faker import Faker

from pocketbase_seed.core.models import FieldDefinition, FieldType, Record, Schema
from pocketbase_seed.exceptions import FieldGenerationError

if TYPE_CHECKING:
    from pocketbase_seed.client import PocketBaseClient

logger = logging.getLogger(__name__)


class RecordGenerator:
    """
    Build records from a schema.

    Fields are resolved in schema order into an accumulator:
        - fake: Faker template, e.g. ``{{name}}`` or ``INV-####-??``
        - dependent: copy of the value already stored under ``value``
        - custom: literal ``value``
        - relation: id of a random record from collection ``value``

    Relation lookups go through the client, so the client must already be
    authenticated.
    """

    def __init__(
        self,
        client: PocketBaseClient,
        faker: Faker | None = None,
        strict: bool = False,
    ):
        """
        Initialize generator.

        Args:
            client: Authenticated API client used for relation lookups
            faker: Faker instance (a fresh unseeded one by default)
            strict: Raise FieldGenerationError on bad fake templates instead
                of storing an empty string
        """
        self.client = client
        self.faker = faker or Faker()
        self.strict = strict

    def generate(self, schema: Schema) -> Record:
        """
        Generate one record.

        Args:
            schema: Field definitions in resolution order

        Returns:
            Completed record

        Raises:
            NoRecordsFoundError: If a relation's collection is empty
            APIError: If a relation lookup is rejected
            TransportError: If a relation lookup fails
            FieldGenerationError: If a fake template fails and strict is set
        """
        record: Record = {}

        for definition in schema.fields:
            field_type = definition.field_type

            if field_type is FieldType.FAKE:
                record[definition.name] = self._fake(definition)
            elif field_type is FieldType.DEPENDENT:
                record[definition.name] = record.get(definition.value)
            elif field_type is FieldType.CUSTOM:
                record[definition.name] = definition.value
            elif field_type is FieldType.RELATION:
                related = self.client.fetch_random_record(definition.value)
                logger.debug(f"Random record from {definition.value}: {related}")
                record[definition.name] = related.get("id")
            else:
                logger.warning(
                    f"Skipping field '{definition.name}' with unknown type '{definition.type}'"
                )

        return record

    def generate_many(self, schema: Schema, count: int) -> Iterator[Record]:
        """Lazily generate ``count`` records."""
        for _ in range(count):
            yield self.generate(schema)

    def _fake(self, definition: FieldDefinition) -> str:
        try:
            return self.faker.pystr_format(definition.value)
        except (AttributeError, TypeError, ValueError) as e:
            if self.strict:
                raise FieldGenerationError(definition.name, definition.value, str(e)) from e
            logger.warning(
                f"Could not render fake value for '{definition.name}' "
                f"from '{definition.value}': {e}"
            )
            return ""
