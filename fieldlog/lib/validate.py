"""
Schema validation for fieldlog.

Catalog override files are checked against a JSON Schema before any of
their text reaches the display layer. Every violation in a document is
reported at once so a user can fix a catalog file in one pass.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import jsonschema

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


class ValidationError(Exception):
    """A document doesn't match its schema."""

    def __init__(self, schema_name: str, message: str, path: Optional[str] = None):
        self.schema_name = schema_name
        self.path = path
        super().__init__(f"[{schema_name}] {message}" + (f" at {path}" if path else ""))


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> jsonschema.Draft7Validator:
    """Compile the named schema from the schemas directory once."""
    schema_path = SCHEMAS_DIR / f"{schema_name}.schema.json"
    if not schema_path.exists():
        raise ValidationError(schema_name, f"Schema file not found: {schema_path}")
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    return jsonschema.Draft7Validator(schema)


def _location(error: jsonschema.ValidationError) -> str:
    return ".".join(str(p) for p in error.absolute_path) or "(root)"


def validate(data: Any, schema_name: str, source: Optional[Path] = None) -> None:
    """
    Validate data against named schema.

    Args:
        data: Parsed document to validate
        schema_name: Schema name (e.g., "catalog")
        source: File the document came from, named in the error

    Raises:
        ValidationError: listing every violation, first one's location as path
    """
    errors = sorted(
        get_validator(schema_name).iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if not errors:
        return

    message = "; ".join(f"{_location(e)}: {e.message}" for e in errors)
    if source is not None:
        message = f"{source}: {message}"
    raise ValidationError(schema_name, message, _location(errors[0]))
