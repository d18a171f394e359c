"""
Schema Validation Utilities

Validates stored label design payloads (the editor's JSON format) before
they are turned into LabelDesign objects.

Two layers:
- Structural validation against ``label_design.schema.json`` (jsonschema)
- Cross-reference checks the schema cannot express (duplicate ids)

Elements referencing unknown sections are NOT an error here: the page
planner ignores them, and the editor can legitimately hold such state
while a section is being deleted.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


DESIGN_SCHEMA_VERSION = 2


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_design(data: Any) -> None:
    """
    Validate a stored design payload.

    Args:
        data: Decoded JSON payload

    Raises:
        ValidationError: If the payload violates the schema or holds
            duplicate section/element ids. ``errors`` lists every schema
            violation found, ``path`` points at the first one.
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Design must be an object, got {type(data).__name__}",
            path="",
        )

    schema = _load_schema("label_design")
    validator = jsonschema.Draft7Validator(schema)
    violations = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if violations:
        first = violations[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=_format_path(first.absolute_path),
            errors=[f"{_format_path(e.absolute_path) or '<root>'}: {e.message}" for e in violations],
        )

    _check_unique_ids(data["sections"], "sections")
    _check_unique_ids(data["elements"], "elements")


def _check_unique_ids(items: list[dict[str, Any]], path: str) -> None:
    """Reject repeated ids within one collection."""
    seen: set[str] = set()
    for i, item in enumerate(items):
        item_id = item["id"]
        if item_id in seen:
            raise ValidationError(
                f"Duplicate id in {path}: {item_id!r}",
                path=f"{path}[{i}].id",
            )
        seen.add(item_id)


def _format_path(parts) -> str:
    """Render a jsonschema path deque as ``sections[0].id``."""
    out = ""
    for part in parts:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out
