"""Version parsing and bumping utilities.

Versions have the shape MAJOR.MINOR.PATCH or MAJOR.MINOR.PATCH-ID.NUM, where
ID names a pre-release line (e.g. "rc") and NUM counts builds on it. The
semver library validates the string; SemanticVersion holds the split-out
pre-release identifier and counter.
"""

from __future__ import annotations

import semver
from pydantic import BaseModel, ConfigDict, model_validator

from .exceptions import VersionBumpError, VersionParseError


class SemanticVersion(BaseModel):
    """A parsed version with an optional ID.NUM pre-release suffix."""

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    patch: int
    prerelease_id: str | None = None
    prerelease_num: int | None = None

    @model_validator(mode="after")
    def _check_prerelease(self) -> SemanticVersion:
        if (self.prerelease_id is None) != (self.prerelease_num is None):
            raise ValueError("prerelease_id and prerelease_num must be set together")
        return self

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease_id is not None

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.is_prerelease:
            return f"{core}-{self.prerelease_id}.{self.prerelease_num}"
        return core


def parse_version(version_str: str) -> SemanticVersion:
    """Parse a version string into a SemanticVersion.

    Examples:
        "1.2.3" → 1.2.3 (release)
        "0.0.1-pre.4" → 0.0.1, prerelease_id "pre", prerelease_num 4

    Raises:
        VersionParseError: If the string is not valid semver, carries build
            metadata, or has a pre-release that is not exactly ID.NUM.
    """
    try:
        parsed = semver.Version.parse(version_str)
    except (ValueError, TypeError) as e:
        raise VersionParseError(f"Invalid version: {version_str!r}") from e

    if parsed.build is not None:
        raise VersionParseError(f"Build metadata is not supported: {version_str!r}")

    if parsed.prerelease is None:
        return SemanticVersion(major=parsed.major, minor=parsed.minor, patch=parsed.patch)

    prerelease_id, sep, num = parsed.prerelease.rpartition(".")
    if not sep or "." in prerelease_id or not num.isdigit():
        raise VersionParseError(
            f"Pre-release must be of the form ID.NUM, got {parsed.prerelease!r} "
            f"in {version_str!r}"
        )
    return SemanticVersion(
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        prerelease_id=prerelease_id,
        prerelease_num=int(num),
    )


def bump_version(
    current_version: str,
    do_major: bool,
    do_minor: bool,
    do_patch: bool,
    do_prerelease: bool,
    prerelease_id: str | None = None,
) -> str:
    """Compute the next version string.

    Only the highest-priority flag acts (major > minor > patch > prerelease).
    A prerelease bump on a release moves to the next patch with counter 0;
    on a pre-release it increments the counter when the identifier is the
    same and restarts at 0 when it changes.

    Examples:
        bump_version("0.0.0", True, False, False, False) → "1.0.0"
        bump_version("0.0.0", False, False, False, True, "pre") → "0.0.1-pre.0"
        bump_version("0.0.1-pre.0", False, False, False, True, "pre") → "0.0.1-pre.1"
        bump_version("0.0.1-pre.0", False, False, False, True, "pre2") → "0.0.1-pre2.0"

    Raises:
        VersionParseError: If current_version cannot be parsed.
        VersionBumpError: If a prerelease bump has no identifier to use.
    """
    v = parse_version(current_version)

    if do_major:
        return str(SemanticVersion(major=v.major + 1, minor=0, patch=0))
    if do_minor:
        return str(SemanticVersion(major=v.major, minor=v.minor + 1, patch=0))
    if do_patch:
        return str(SemanticVersion(major=v.major, minor=v.minor, patch=v.patch + 1))
    if not do_prerelease:
        return current_version

    if not v.is_prerelease:
        if not prerelease_id:
            raise VersionBumpError(
                f"A pre-release identifier is required to bump release {current_version}"
            )
        return str(
            v.model_copy(
                update={"patch": v.patch + 1, "prerelease_id": prerelease_id, "prerelease_num": 0}
            )
        )

    if not prerelease_id or prerelease_id == v.prerelease_id:
        return str(v.model_copy(update={"prerelease_num": v.prerelease_num + 1}))
    return str(v.model_copy(update={"prerelease_id": prerelease_id, "prerelease_num": 0}))
