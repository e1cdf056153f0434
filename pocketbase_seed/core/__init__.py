"""Core functionality for pocketbase-seed."""

from pocketbase_seed.core.generator import RecordGenerator
from pocketbase_seed.core.models import FieldDefinition, FieldType, Record, Schema

__all__ = [
    "FieldDefinition",
    "FieldType",
    "Record",
    "RecordGenerator",
    "Schema",
]
