"""Schema validation for quiz answer sets and assessment records."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_answers(data: dict) -> None:
    """Validate a submitted answer set. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("quiz_answers")
    jsonschema.validate(data, schema)


def validate_assessment(data: dict) -> None:
    """Validate an assessment record before storage. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("assessment")
    jsonschema.validate(data, schema)
