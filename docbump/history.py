"""Commit history provider backed by git log."""

from __future__ import annotations

from collections.abc import Sequence

from .models import CommitRecord
from .shell import git

# NUL separates hash, body and file list; it cannot appear in any of them.
_SEP = "\x00"
LOG_FORMAT = "%x00%H%x00%B%x00"


def parse_git_log(output: str) -> list[CommitRecord]:
    """Parse `git log --format=LOG_FORMAT --name-only` output.

    Each commit renders as NUL, hash, NUL, body, NUL followed by the list of
    modified files, one per line.
    """
    parts = output.split(_SEP)
    # parts[0] is whatever precedes the first commit (empty)
    records: list[CommitRecord] = []
    for i in range(1, len(parts) - 2, 3):
        sha, body, files = parts[i], parts[i + 1], parts[i + 2]
        records.append(
            CommitRecord(
                sha=sha.strip(),
                message=body,
                modified_paths=[line for line in files.splitlines() if line.strip()],
            )
        )
    return records


def read_commit_history(
    paths: Sequence[str] = (),
    from_ref: str | None = None,
    cwd: str | None = None,
) -> list[CommitRecord]:
    """Read commits from git, oldest first.

    Args:
        paths: Restrict the log to commits touching these paths.
        from_ref: Only include commits after this ref (e.g. the last tag).
        cwd: Directory inside the repository.
    """
    args = ["log", "--reverse", f"--format={LOG_FORMAT}", "--name-only"]
    if from_ref:
        args.append(f"{from_ref}..HEAD")
    if paths:
        args.extend(["--", *paths])
    return parse_git_log(git(*args, cwd=cwd))


def workspace_root(cwd: str | None = None) -> str:
    """Return the top-level directory of the git repository."""
    return git("rev-parse", "--show-toplevel", cwd=cwd)


def has_commits(cwd: str | None = None) -> bool:
    """Check whether the repository has any commit at all.

    An empty log for a ref range or pathspec only means nothing relevant
    changed; an unborn HEAD means there is no history to search.
    """
    return bool(git("rev-parse", "--verify", "--quiet", "HEAD", check=False, cwd=cwd))
