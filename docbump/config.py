"""Configuration loading from pyproject.toml.

Settings live in a [tool.docbump] table:

    [tool.docbump]
    document = "asyncapi.yaml"
    major-label = "feat!"
    minor-label = "feat"
    patch-label = "fix"
    prerelease-label = "pre"
    prerelease-id = "rc"

Uses tomlkit to read the file, the same parser used when editing it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, ValidationError
from tomlkit.exceptions import TOMLKitError

from .exceptions import ConfigError


class BumpConfig(BaseModel):
    """Settings for one version computation.

    Attributes:
        document: Path of the versioned document.
        major_label: Commit prefix that triggers a major bump.
        minor_label: Commit prefix that triggers a minor bump.
        patch_label: Commit prefix that triggers a patch bump.
        prerelease_label: Commit prefix that triggers a pre-release bump.
            Empty disables it.
        prerelease_id: Identifier for new pre-releases (e.g. "rc").
        from_ref: Only consider commits after this git ref.
    """

    model_config = ConfigDict(extra="forbid")

    document: str = "asyncapi.json"
    major_label: str = "feat!"
    minor_label: str = "feat"
    patch_label: str = "fix"
    prerelease_label: str = ""
    prerelease_id: str = "rc"
    from_ref: str | None = None

    def merged(self, **overrides: Any) -> BumpConfig:
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate(self.model_dump() | updates)


def load_config(root: Path | None = None) -> BumpConfig:
    """Read [tool.docbump] from root/pyproject.toml.

    Missing file or table yields the defaults. Keys may be written with
    dashes or underscores.

    Raises:
        ConfigError: If the table has unknown keys or values of the wrong type.
    """
    pyproject = (root or Path.cwd()) / "pyproject.toml"
    if not pyproject.exists():
        return BumpConfig()

    try:
        doc = tomlkit.parse(pyproject.read_text())
    except TOMLKitError as e:
        raise ConfigError(f"Cannot parse {pyproject}: {e}") from e

    # unwrap() turns tomlkit items into plain Python values
    tool = doc.unwrap().get("tool", {})
    raw = tool.get("docbump", {}) if isinstance(tool, dict) else {}
    if not isinstance(raw, dict):
        raise ConfigError(f"[tool.docbump] in {pyproject} must be a table")
    settings = {key.replace("-", "_"): value for key, value in raw.items()}

    try:
        return BumpConfig.model_validate(settings)
    except ValidationError as e:
        raise ConfigError(f"Invalid [tool.docbump] in {pyproject}:\n{e}") from e
