"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def nested_document() -> dict:
    """A document with references at several depths."""
    return {
        "test": {
            "$ref": "./1.json",
            "test": {"$ref": "./2.json"},
        },
        "test2": {"$ref": "./3.json"},
    }


@pytest.fixture
def api_workspace(tmp_path: Path) -> Path:
    """Create an AsyncAPI document referencing component files.

    asyncapi.json → components/messages.json → components/schemas.yaml
    """
    components = tmp_path / "components"
    components.mkdir()
    (tmp_path / "asyncapi.json").write_text(
        json.dumps(
            {
                "asyncapi": "2.6.0",
                "info": {"title": "Test", "version": "1.2.3"},
                "components": {
                    "messages": {"$ref": "./components/messages.json#/messages"},
                    "local": {"$ref": "#/components/messages"},
                },
            },
            indent=2,
        )
    )
    (components / "messages.json").write_text(
        json.dumps({"messages": {"Ping": {"payload": {"$ref": "schemas.yaml#/Ping"}}}})
    )
    (components / "schemas.yaml").write_text(
        "Ping:\n  type: object\n  properties:\n    at:\n      type: string\n"
    )
    return tmp_path
