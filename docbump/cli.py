"""CLI entry point for docbump."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from .config import load_config
from .exceptions import DocBumpError
from .models import VersionBump
from .pipeline import compute_next_version
from .shell import fatal


def _config_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command; each overrides [tool.docbump]."""
    options = [
        click.option("--document", "-d", help="Path of the versioned document."),
        click.option("--major-label", help="Commit prefix triggering a major bump."),
        click.option("--minor-label", help="Commit prefix triggering a minor bump."),
        click.option("--patch-label", help="Commit prefix triggering a patch bump."),
        click.option(
            "--prerelease-label", help="Commit prefix triggering a pre-release bump."
        ),
        click.option("--prerelease-id", help="Identifier for pre-releases (e.g. rc)."),
        click.option("--from-ref", help="Only consider commits after this git ref."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run(overrides: dict[str, Any], *, write: bool, quiet: bool) -> VersionBump:
    root = Path.cwd()
    try:
        config = load_config(root).merged(**overrides)
        return compute_next_version(config, root=root, write=write, quiet=quiet)
    except DocBumpError as e:
        fatal(str(e))


@click.group()
@click.version_option(package_name="docbump")
def cli() -> None:
    """Compute the next semantic version of a versioned document."""


@cli.command(name="next")
@_config_options
def next_version(**overrides: Any) -> None:
    """Print the next version without changing anything."""
    bump = _run(overrides, write=False, quiet=True)
    click.echo(bump.new)


@cli.command()
@_config_options
def bump(**overrides: Any) -> None:
    """Compute the next version and write it into the document."""
    result = _run(overrides, write=True, quiet=False)
    click.echo()
    if result.changed:
        click.echo(f"✓ {result.old} → {result.new}")
    else:
        click.echo(f"✓ {result.old} (no relevant changes)")
