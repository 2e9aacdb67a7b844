"""Commit relevance filtering and change classification.

Two steps sit between the raw history and the version bumper:

1. get_related_git_commits() keeps the messages of commits that touched the
   document or any file it references.
2. analyse_version_change() maps those messages onto bump severities using
   caller-configured labels such as "feat!", "feat" and "fix".
"""

from __future__ import annotations

import posixpath
import re
from collections.abc import Iterable, Sequence

from .exceptions import NoHistoryFoundError
from .models import SEVERITIES, BumpDecision, CommitRecord

# A label must be followed by end-of-message or a non-word character, so
# "feat" matches "feat: x", "feat(api): x" and "feat!: x" but not "feature: x".
_WORD_CHAR = re.compile(r"[\w-]")


def normalize_path(path: str, workspace_root: str = "") -> str:
    """Express a path relative to the workspace root, as git reports it.

    Absolute paths under workspace_root have the root stripped; anything else
    is kept. The result is normalized so "./a.json" and "a.json" compare equal.

    Examples:
        normalize_path("/repo/api/asyncapi.json", "/repo") → "api/asyncapi.json"
        normalize_path("./asyncapi.json", "/repo") → "asyncapi.json"
        normalize_path("asyncapi.json") → "asyncapi.json"
    """
    if workspace_root:
        prefix = posixpath.normpath(workspace_root).rstrip("/") + "/"
        if path.startswith(prefix):
            path = path[len(prefix) :]
    return posixpath.normpath(path)


def get_related_git_commits(
    target_file_path: str,
    referenced_file_paths: Iterable[str],
    commit_history: Sequence[CommitRecord],
    workspace_root: str = "",
) -> list[str]:
    """Return the messages of commits that touched the target or its references.

    Commits are kept in the order given and each contributes its message at
    most once, however many relevant files it modified. Messages are returned
    newline-terminated, the way git renders a commit body.

    Args:
        target_file_path: The versioned document.
        referenced_file_paths: Files the document references.
        commit_history: Commits from the history provider.
        workspace_root: Repository root used to relativize the paths above.

    Returns:
        Relevant commit messages; empty if no commit touched a relevant file.

    Raises:
        NoHistoryFoundError: If commit_history is empty. Finding history with
            no relevant commit is not an error.
    """
    if not commit_history:
        raise NoHistoryFoundError("No commits found in the repository history")

    relevant = {normalize_path(target_file_path, workspace_root)}
    relevant.update(normalize_path(p, workspace_root) for p in referenced_file_paths)

    messages: list[str] = []
    for commit in commit_history:
        if any(posixpath.normpath(p) in relevant for p in commit.modified_paths):
            message = commit.message
            messages.append(message if message.endswith("\n") else message + "\n")
    return messages


def split_labels(label: str | None) -> list[str]:
    """Split a trigger label into its comma-separated alternatives.

    Empty or missing labels yield no alternatives, disabling the severity.
    """
    if not label:
        return []
    return [part.strip() for part in label.split(",") if part.strip()]


def message_matches(message: str, label: str) -> bool:
    """Check whether a commit message starts with a trigger label."""
    if not label or not message.startswith(label):
        return False
    following = message[len(label) : len(label) + 1]
    return not following or not _WORD_CHAR.match(following)


def _ordered_triggers(labels: dict[str, str | None]) -> list[tuple[str, str]]:
    """(severity, label) pairs, most specific label first.

    Longer labels are tried before shorter ones so that "feat!" wins over
    "feat"; severity priority breaks ties between equal lengths.
    """
    triggers = [
        (severity, alt) for severity in SEVERITIES for alt in split_labels(labels[severity])
    ]
    return sorted(triggers, key=lambda t: (-len(t[1]), SEVERITIES.index(t[0])))


def classify_message(message: str, triggers: Sequence[tuple[str, str]]) -> str | None:
    """Return the severity of the first trigger that matches, or None."""
    for severity, label in triggers:
        if message_matches(message, label):
            return severity
    return None


def analyse_version_change(
    major_label: str | None,
    minor_label: str | None,
    patch_label: str | None,
    prerelease_label: str | None,
    commit_messages: Iterable[str],
) -> BumpDecision:
    """Decide which severities the commit messages call for.

    Each message resolves to at most one severity: the one whose label
    matches most specifically. A flag is set when any message resolves to it.

    Example:
        analyse_version_change("feat!", "feat", "", "", ["feat: x"])
        → BumpDecision(minor=True)
    """
    triggers = _ordered_triggers(
        {
            "major": major_label,
            "minor": minor_label,
            "patch": patch_label,
            "prerelease": prerelease_label,
        }
    )
    flags: dict[str, bool] = {}
    for message in commit_messages:
        severity = classify_message(message, triggers)
        if severity is not None:
            flags[severity] = True
    return BumpDecision(**flags)
