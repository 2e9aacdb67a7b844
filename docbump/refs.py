"""Reference collection from nested documents.

API description documents point at other files with `$ref` pointers. These
helpers find those pointers, turn them into file paths, and follow them
across files so that a change to any referenced file counts as a change to
the document.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from typing import Any

from .exceptions import DocumentError

REF_KEY = "$ref"

# "http://", "https://", "file://", ...
_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def collect_references(document: Any, base_path: str | None = None) -> list[str]:
    """Collect every `$ref` value in a document, depth-first.

    A mapping's own `$ref` is recorded before anything nested under it, and
    nested values are visited in key order. Duplicates are kept. Non-string
    `$ref` values are ignored.

    Args:
        document: Nested mappings/sequences, e.g. from json.load.
        base_path: If given, each pointer is resolved against it to an
            absolute path.

    Example:
        {"a": {"$ref": "x", "b": {"$ref": "y"}}, "c": {"$ref": "z"}}
        → ["x", "y", "z"]
    """
    refs: list[str] = []
    _walk(document, refs)
    if base_path is not None:
        return [os.path.abspath(os.path.join(base_path, ref)) for ref in refs]
    return refs


def _walk(node: Any, refs: list[str]) -> None:
    if isinstance(node, dict):
        ref = node.get(REF_KEY)
        if isinstance(ref, str):
            refs.append(ref)
        for value in node.values():
            _walk(value, refs)
    elif isinstance(node, list):
        for item in node:
            _walk(item, refs)


def split_reference(ref: str) -> tuple[str, str]:
    """Split a pointer into its file part and its JSON-pointer fragment.

    Examples:
        "./common.json#/components/Msg" → ("./common.json", "/components/Msg")
        "#/components/Msg" → ("", "/components/Msg")
        "schema.yaml" → ("schema.yaml", "")
    """
    file_part, _, fragment = ref.partition("#")
    return file_part, fragment


def referenced_files(document: Any, base_path: str) -> list[str]:
    """Return the distinct local files a document points at.

    Internal pointers ("#/...") and remote URLs are dropped, fragments are
    stripped, and the remaining paths are resolved against base_path. Order
    is first-occurrence order.
    """
    files: list[str] = []
    seen: set[str] = set()
    for ref in collect_references(document):
        file_part, _ = split_reference(ref)
        if not file_part or _URL_RE.match(file_part):
            continue
        path = os.path.abspath(os.path.join(base_path, file_part))
        if path not in seen:
            seen.add(path)
            files.append(path)
    return files


def collect_reference_graph(
    document_path: str,
    load: Callable[[str], Any],
    on_missing: Callable[[str], None] | None = None,
    on_unreadable: Callable[[str, DocumentError], None] | None = None,
) -> list[str]:
    """Follow file references transitively, starting from a document.

    Each referenced file is loaded with `load` and its own references are
    followed in turn. Files already visited are not loaded again, so cyclic
    reference graphs terminate.

    Args:
        document_path: Path of the root document.
        load: Callable returning the parsed content of a path.
        on_missing: Called with the path of each referenced file that does
            not exist. Missing files stay in the result (their history may
            still matter) but are not followed.
        on_unreadable: Called with the path and error of each referenced file
            `load` rejects (e.g. an Avro schema or a broken file). Like missing
            files, these stay in the result but are not followed.

    Returns:
        Absolute paths of every reachable referenced file in discovery
        order, excluding the root document itself.
    """
    root = os.path.abspath(document_path)
    visited = {root}
    order: list[str] = []
    queue = [root]

    while queue:
        current = queue.pop(0)
        if current != root and not os.path.isfile(current):
            if on_missing is not None:
                on_missing(current)
            continue
        try:
            doc = load(current)
        except DocumentError as e:
            if current == root:
                raise
            if on_unreadable is not None:
                on_unreadable(current, e)
            continue
        for path in referenced_files(doc, os.path.dirname(current)):
            if path not in visited:
                visited.add(path)
                order.append(path)
                queue.append(path)

    return order
