"""Shell and git utilities.

Provides a thin wrapper around git plus the output helpers used by the
pipeline and the CLI.
"""

from __future__ import annotations

import subprocess
import sys
from typing import NoReturn

from .exceptions import GitError


def git(*args: str, check: bool = True, cwd: str | None = None) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "log", "--name-only").
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail.
        cwd: Directory to run git in; defaults to the current directory.

    Returns:
        Stripped stdout from the git command.

    Raises:
        GitError: If git exits non-zero and check is True, or git is missing.
    """
    try:
        result = subprocess.run(
            ["git", *args], capture_output=True, text=True, check=check, cwd=cwd
        )
    except subprocess.CalledProcessError as e:
        raise GitError(
            f"git {args[0] if args else ''} failed with exit code {e.returncode}",
            stderr=e.stderr,
        ) from e
    except FileNotFoundError as e:
        raise GitError("git executable not found") from e
    return result.stdout.strip()


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    """Print an informational line."""
    print(msg)


def format_fatal(msg: str) -> str:
    return f"✖  fatal     {msg}"


def fatal(msg: str) -> NoReturn:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the program.
    """
    print(format_fatal(msg), file=sys.stderr)
    sys.exit(1)
