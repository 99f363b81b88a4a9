"""Schema validation against packaged JSON schemas."""

from __future__ import annotations

import json
from functools import cache
from importlib.resources import files
from typing import Any

from jsonschema.validators import Draft202012Validator


@cache
def load_schema(schema_name: str) -> dict[str, Any]:
    """Load ``<schema_name>.schema.json`` from package data.

    Raises:
        KeyError: If no such schema ships with hookx
    """
    resource = files("hookx.schemas") / f"{schema_name}.schema.json"
    if not resource.is_file():
        raise KeyError(f"schema not found in package data: {schema_name}")
    return json.loads(resource.read_text(encoding="utf-8"))


def validate_data(data: Any, schema_name: str) -> list[str]:
    """Validate ``data`` and return readable error messages (empty when valid)."""
    validator = Draft202012Validator(load_schema(schema_name))
    return [
        f"{'.'.join(str(p) for p in error.path)}: {error.message}" if error.path else error.message
        for error in sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    ]
