"""
pocketbase-seed - Seed and import records into PocketBase collections.

This package provides tools for:
- Generating fake records from a declarative field schema
- Importing records from JSON and CSV files
- Posting records through the PocketBase REST API
"""

__version__ = "0.1.0"

from pocketbase_seed.client import AuthResponse, PocketBaseClient
from pocketbase_seed.config import Config
from pocketbase_seed.core.generator import RecordGenerator
from pocketbase_seed.core.models import FieldDefinition, FieldType, Record, Schema
from pocketbase_seed.pipeline import PipelineResult, import_file, run_pipeline, seed
from pocketbase_seed.readers import read_csv, read_json, read_records

__all__ = [
    "AuthResponse",
    "Config",
    "FieldDefinition",
    "FieldType",
    "PipelineResult",
    "PocketBaseClient",
    "Record",
    "RecordGenerator",
    "Schema",
    "__version__",
    "import_file",
    "read_csv",
    "read_json",
    "read_records",
    "run_pipeline",
    "seed",
]
