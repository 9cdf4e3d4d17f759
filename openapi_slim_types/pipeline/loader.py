"""
Document loading.

Both the schema document and the filter specification may be written in
JSON or YAML; the format is detected from the content.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..errors import GenerationError, MalformedDocumentError


def load_document(text: str, what: str = "document", error: type[GenerationError] = MalformedDocumentError) -> Any:
    """Parse JSON or YAML text into a plain tree.

    Args:
        text: The raw document text
        what: Human readable name used in error messages
        error: Exception class raised on parse failures

    Returns:
        The parsed tree (dicts keep their source key order)
    """
    if text.lstrip().startswith("{"):
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise error(f"Failed to parse {what} as JSON: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise error(f"Failed to parse {what} as YAML: {e}") from e


def load_document_file(path: str | Path, what: str = "document", error: type[GenerationError] = MalformedDocumentError) -> Any:
    """Read a JSON or YAML file and parse it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise error(f"Cannot read {what} {path}: {e}") from e
    return load_document(text, what, error)


def component_schemas(document: Any) -> dict[str, Any]:
    """Return the components.schemas mapping of an OpenAPI document."""
    if not isinstance(document, dict):
        raise MalformedDocumentError("OpenAPI document root must be a mapping")
    components = document.get("components")
    if not isinstance(components, dict):
        raise MalformedDocumentError("OpenAPI document has no 'components' mapping")
    schemas = components.get("schemas")
    if not isinstance(schemas, dict):
        raise MalformedDocumentError("OpenAPI document has no 'components.schemas' mapping")
    return schemas
