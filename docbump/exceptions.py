"""Exceptions raised by docbump.

Everything derives from DocBumpError so the CLI can catch a single type and
turn it into a fatal exit.
"""

from __future__ import annotations


class DocBumpError(Exception):
    """Base class for all docbump errors."""


class NoHistoryFoundError(DocBumpError):
    """The history provider returned no commits at all.

    Distinct from finding commits of which none are relevant, which is a
    valid empty result.
    """


class VersionParseError(DocBumpError, ValueError):
    """A version string is not of the form MAJOR.MINOR.PATCH[-ID.NUM]."""


class VersionBumpError(DocBumpError):
    """A bump was requested that cannot be computed."""


class DocumentError(DocBumpError):
    """A document could not be loaded, written, or lacks a version."""


class ConfigError(DocBumpError):
    """The [tool.docbump] configuration is invalid."""


class GitError(DocBumpError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr
