"""JSON Schema checks for exported files."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError


CATALOG_SCHEMA = "catalog.schema.json"


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> Draft7Validator:
    with schema_path.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft7Validator.check_schema(schema)
    return Draft7Validator(schema)


def _location(error: ValidationError) -> str:
    """Dotted path to the failing value, e.g. ``phonemes.0.kind``."""
    return ".".join(str(part) for part in error.absolute_path) or "root"


def validate_against_schema(data: Any, schema: dict[str, Any] | Path) -> list[str]:
    """
    Validate data against a schema given as a dict or a schema file.

    Returns:
        "location: message" strings ordered by location (empty if valid)
    """
    if isinstance(schema, dict):
        validator = Draft7Validator(schema)
    else:
        validator = _validator(Path(schema))
    found = sorted(validator.iter_errors(data), key=lambda e: (_location(e), e.message))
    return [f"{_location(error)}: {error.message}" for error in found]


def validate_catalog(data: dict[str, Any], schema_dir: Path) -> list[str]:
    """Validate an exported catalog against catalog.schema.json in `schema_dir`."""
    return validate_against_schema(data, Path(schema_dir) / CATALOG_SCHEMA)
