"""Version pipeline: load → references → history → classify → bump.

This module wires the collaborators to the pure core:
1. Load the document and read its current version
2. Follow its $ref pointers to every referenced file
3. Read the git history of the document and its references
4. Keep the commits that touched any of those files
5. Classify their messages into a bump severity
6. Compute (and optionally write) the next version
"""

from __future__ import annotations

import os
from pathlib import Path

from .commits import analyse_version_change, get_related_git_commits
from .config import BumpConfig
from .documents import (
    get_document_version,
    load_document,
    save_document,
    set_document_version,
)
from .history import has_commits, read_commit_history, workspace_root
from .models import VersionBump
from .refs import collect_reference_graph
from .shell import info, step
from .versions import bump_version


def compute_next_version(
    config: BumpConfig,
    *,
    root: Path | None = None,
    write: bool = False,
    quiet: bool = False,
) -> VersionBump:
    """Determine the next version of the configured document.

    Args:
        config: Labels, pre-release identifier and document path.
        root: Directory the document path is relative to; defaults to cwd.
        write: If True, store the new version in the document.
        quiet: If True, print nothing.

    Returns:
        The old and new version; equal when no relevant commit calls for a bump.

    Raises:
        NoHistoryFoundError: If the repository has no commits at all.
        DocumentError: If the document cannot be loaded or has no version.
        VersionParseError: If the current version is malformed.
    """
    log = (lambda msg: None) if quiet else info
    if not quiet:
        step(f"Analysing {config.document}")

    base = root or Path.cwd()
    document_path = os.path.realpath(base / config.document)
    doc = load_document(document_path)
    current = get_document_version(doc)
    log(f"  current version: {current}")

    references = collect_reference_graph(
        document_path,
        load_document,
        on_missing=lambda p: log(f"  warning: referenced file not found: {p}"),
        on_unreadable=lambda p, e: log(f"  warning: not following {p}: {e}"),
    )
    for ref in references:
        log(f"  references {ref}")

    repo_root = os.path.realpath(workspace_root(cwd=str(base)))
    history = read_commit_history(
        [document_path, *references], from_ref=config.from_ref, cwd=repo_root
    )
    if history or not has_commits(cwd=repo_root):
        messages = get_related_git_commits(
            document_path, references, history, repo_root
        )
    else:
        # the repository has commits, none of them in range touching these files
        messages = []
    log(f"  {len(messages)} related commits")

    decision = analyse_version_change(
        config.major_label,
        config.minor_label,
        config.patch_label,
        config.prerelease_label,
        messages,
    )
    new = bump_version(
        current,
        decision.major,
        decision.minor,
        decision.patch,
        decision.prerelease,
        config.prerelease_id,
    )
    bump = VersionBump(old=current, new=new)
    log(f"  {decision.selected or 'no'} bump: {bump.old} → {bump.new}")

    if write and bump.changed:
        set_document_version(doc, bump.new)
        save_document(document_path, doc)
        log(f"  wrote {bump.new} to {config.document}")

    return bump
