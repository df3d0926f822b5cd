"""Service helpers for refreshing existing mirror clones."""

from __future__ import annotations

import os

import typer

from ...core.catalog import list_local_entries
from ...core.git_client import VersionControl
from ...core.types import Verbosity


def update_repos(dest: str, git: VersionControl, verbosity: int = Verbosity.quiet) -> tuple[int, int]:
    """Fetch every clone directly under dest. One failure never stops the loop.

    Only non-hidden directories count as clones; plain files and dot-entries are skipped.
    Returns (succeeded, attempted).
    """
    entries = list_local_entries(dest)
    ok = 0
    for name in entries:
        if verbosity > Verbosity.quiet:
            typer.echo(f"Updating {name}")
        success, err = git.fetch(os.path.join(dest, name), verbose=verbosity >= Verbosity.debug)
        ok += 1 if success else 0
        if not success:
            typer.echo(f"[update fail] {name}: {err}", err=True)
    if verbosity > Verbosity.quiet:
        typer.echo(f"Updated {ok}/{len(entries)} existing clones.")
    return ok, len(entries)
