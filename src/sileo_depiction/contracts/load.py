"""Load and validate rendered depictions against the bundled schemas.

Usage::

    from sileo_depiction.contracts.load import validate_instance, validate_file

    validate_instance(tab.to_dict(), "depiction.schema.json")
    validate_file(Path("out/depiction.json"))
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"
DEFAULT_SCHEMA = "depiction.schema.json"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/sileo_depiction/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(
        resources.files("sileo_depiction") / SCHEMA_DIR / name
    ) as p:
        if p.exists():
            return p

    raise FileNotFoundError(f"unknown schema: {name}")


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str = DEFAULT_SCHEMA) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)


def validate_file(instance_path: Path, schema_name: str = DEFAULT_SCHEMA) -> None:
    """Load a JSON file and validate it against the named schema."""
    instance = json.loads(instance_path.read_text(encoding="utf-8"))
    validate_instance(instance, schema_name)
