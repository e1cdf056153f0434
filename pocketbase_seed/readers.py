"""Record readers for JSON and CSV import files.

Both readers log and return an empty list on failure, so callers cannot
tell an unreadable file apart from an empty one.
"""

import csv
import json
import logging
from collections.abc import Callable
from pathlib import Path

from pocketbase_seed.core.models import Record
from pocketbase_seed.exceptions import UnsupportedFileTypeError

logger = logging.getLogger(__name__)


def read_json(path: str | Path) -> list[Record]:
    """
    Read a JSON array of objects.

    Args:
        path: Path to JSON file

    Returns:
        Records in file order, or [] if the file can't be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            items = json.load(f)
    except OSError as e:
        logger.error(f"Reading JSON file {path} failed: {e}")
        return []
    except ValueError as e:
        logger.error(f"Parsing JSON file {path} failed: {e}")
        return []

    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        logger.error(f"JSON file {path} must contain an array of objects")
        return []

    return items


def read_csv(path: str | Path) -> list[Record]:
    """
    Read a CSV file with a header row.

    Each data row is zipped against the header: values past the header
    length are dropped and missing trailing values are left out. All values
    are strings.

    Args:
        path: Path to CSV file

    Returns:
        One record per data row, or [] if the file can't be read or has no
        data rows
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            # Blank lines are skipped
            rows = [row for row in csv.reader(f) if row]
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        logger.error(f"Reading CSV file {path} failed: {e}")
        return []

    if len(rows) < 2:
        logger.error(f"CSV file {path} must have headers and at least one record")
        return []

    headers = rows[0]
    return [dict(zip(headers, row)) for row in rows[1:]]


READERS: dict[str, Callable[[Path], list[Record]]] = {
    ".json": read_json,
    ".csv": read_csv,
}


def get_reader(path: str | Path) -> Callable[[Path], list[Record]]:
    """
    Pick the reader for a file by its (case-insensitive) extension.

    Raises:
        UnsupportedFileTypeError: If the extension is not .json or .csv
    """
    extension = Path(path).suffix.lower()
    reader = READERS.get(extension)
    if reader is None:
        raise UnsupportedFileTypeError(extension)
    return reader


def read_records(path: str | Path) -> list[Record]:
    """Read records using the reader matching the file extension."""
    return get_reader(path)(Path(path))
