"""Document reading and writing utilities.

Documents are JSON or YAML files with the version stored at info.version,
as in AsyncAPI and OpenAPI descriptions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .exceptions import DocumentError

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def load_document(path: str | Path) -> Any:
    """Load and parse a JSON or YAML document.

    Raises:
        DocumentError: If the file cannot be read or parsed, or has an
            unsupported extension.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise DocumentError(f"Unsupported document type: {path}")

    try:
        text = path.read_text()
    except OSError as e:
        raise DocumentError(f"Cannot read {path}: {e}") from e

    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentError(f"Cannot parse {path}: {e}") from e


def save_document(path: str | Path, doc: Any) -> None:
    """Write a document back in the format its extension names."""
    path = Path(path)
    if path.suffix.lower() in JSON_SUFFIXES:
        path.write_text(json.dumps(doc, indent=2, ensure_ascii=False) + "\n")
    else:
        path.write_text(yaml.safe_dump(doc, sort_keys=False, allow_unicode=True))


def get_document_version(doc: Any) -> str:
    """Extract info.version from a document.

    Raises:
        DocumentError: If the document has no info.version.
    """
    info = doc.get("info") if isinstance(doc, dict) else None
    version = info.get("version") if isinstance(info, dict) else None
    if version is None:
        raise DocumentError("Document has no info.version")
    return str(version)


def set_document_version(doc: Any, version: str) -> None:
    """Set info.version in place."""
    if not isinstance(doc, dict) or not isinstance(doc.get("info"), dict):
        raise DocumentError("Document has no info section")
    doc["info"]["version"] = version
