"""Schema loading and record validation."""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

_SCHEMA_DIR = Path(__file__).resolve().parent

PAIR_RECORD_SCHEMA = "pair_record.schema.json"


def load_schema(path: Path) -> dict:
    """Load a JSON Schema file and return as dict."""
    with open(path) as f:
        return json.load(f)


@lru_cache(maxsize=None)
def _packaged_schema(name: str) -> dict:
    return load_schema(_SCHEMA_DIR / name)


def validate_record(record: dict, schema_name: str = PAIR_RECORD_SCHEMA) -> None:
    """Validate a record against a packaged schema.

    Raises jsonschema.ValidationError on mismatch.
    """
    jsonschema.validate(record, _packaged_schema(schema_name))
