"""Data models for docbump.

These Pydantic models represent the values passed between the history
provider, the relevance filter, the classifier and the version bumper.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Severities in priority order, highest first.
SEVERITIES = ("major", "minor", "patch", "prerelease")


class CommitRecord(BaseModel):
    """A single commit from the repository history.

    Attributes:
        message: Full commit message, as stored by git.
        modified_paths: Paths touched by the commit, relative to the
            repository root.
        sha: Commit hash, when the record came from git.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    modified_paths: list[str] = Field(default_factory=list)
    sha: str | None = None


class BumpDecision(BaseModel):
    """Which severities the analysed commits call for.

    Several flags may be true at once when different commits trigger
    different severities; `selected` resolves them by priority.
    """

    major: bool = False
    minor: bool = False
    patch: bool = False
    prerelease: bool = False

    @property
    def selected(self) -> str | None:
        """The highest-priority severity that is set, or None."""
        for severity in SEVERITIES:
            if getattr(self, severity):
                return severity
        return None


class VersionBump(BaseModel):
    """Records a version change for a document.

    Attributes:
        old: The version before bumping.
        new: The version after bumping.
    """

    old: str
    new: str

    @property
    def changed(self) -> bool:
        return self.old != self.new
