"""
Core data models for pocketbase-seed.

Defines the record schema used to generate synthetic records: an ordered
list of field definitions, each describing how one record field is computed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from pocketbase_seed.config import load_document
from pocketbase_seed.exceptions import SchemaError

logger = logging.getLogger(__name__)

# Records are loose, untyped mappings once created
Record = dict[str, Any]


class FieldType(str, Enum):
    """How a field's value is resolved."""

    FAKE = "fake"
    RELATION = "relation"
    DEPENDENT = "dependent"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FieldDefinition:
    """
    One schema entry.

    The meaning of ``value`` depends on ``type``:
    - fake: Faker template, e.g. ``{{first_name}} {{last_name}}`` or ``SKU-####``
    - relation: collection to pick a random record id from
    - dependent: name of an earlier field whose value is copied
    - custom: literal string stored as is
    """

    name: str
    type: str
    value: str = ""

    @property
    def field_type(self) -> FieldType | None:
        """Resolved FieldType, or None for types the generator doesn't know."""
        try:
            return FieldType(self.type)
        except ValueError:
            return None


@dataclass
class Schema:
    """
    Ordered list of field definitions.

    Fields are resolved in declaration order. A dependent field must be
    listed after the field it copies; this is not checked.
    """

    fields: list[FieldDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schema:
        """Build a schema from a parsed ``{"fields": [...]}`` document."""
        fields = []
        for item in data.get("fields") or []:
            value = item.get("value")
            fields.append(
                FieldDefinition(
                    name=str(item["name"]),
                    type=str(item["type"]),
                    value="" if value is None else str(value),
                )
            )
        return cls(fields=fields)

    @classmethod
    def from_file(cls, path: Path | str) -> Schema:
        """
        Load schema from a YAML, JSON or TOML file.

        Args:
            path: Path to schema file

        Returns:
            Schema instance

        Raises:
            SchemaError: If the file is missing or cannot be parsed
        """
        schema_path = Path(path)
        if not schema_path.exists():
            raise SchemaError(str(schema_path), "file not found")

        try:
            data = load_document(schema_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise SchemaError(str(schema_path), str(e)) from e

        if not isinstance(data, dict):
            raise SchemaError(str(schema_path), "expected a mapping with a 'fields' list")

        try:
            schema = cls.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise SchemaError(str(schema_path), f"malformed field definition: {e}") from e

        logger.debug(f"Loaded schema with {len(schema.fields)} fields from {schema_path}")
        return schema

    def __len__(self) -> int:
        return len(self.fields)
