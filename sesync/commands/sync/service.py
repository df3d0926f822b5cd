"""Services for the sync command: update, list, filter, clone and rename."""

from __future__ import annotations

import os
from typing import Sequence

import typer

from ...config.settings import Settings
from ...core.catalog import filter_clone_urls, has_truncated_clone, list_local_entries
from ...core.constants import METADATA_REVISION
from ...core.errors import RateLimitExhausted
from ...core.git_client import VersionControl
from ...core.github_client import GitHubClient
from ...core.identifier import IdentifierError, canonical_name_from_opf
from ...core.types import RemoteRepoRef, SyncConfig, SyncResult, Verbosity
from ..update.service import update_repos


def known_origins(dest: str, git: VersionControl) -> set[str]:
    """Origin URLs of the clones already under dest, whatever their directory name."""
    origins = set()
    for name in list_local_entries(dest):
        url = git.origin_url(os.path.join(dest, name))
        if url:
            origins.add(url)
    return origins


def rename_to_canonical(
    dest: str,
    repo_name: str,
    git: VersionControl,
    settings: Settings,
    verbosity: int = Verbosity.quiet,
) -> str | None:
    """Move a fresh clone to the name in its metadata. Returns the new name, or None if it stays."""
    repo_dir = os.path.join(dest, repo_name)
    opf = git.show_file(repo_dir, METADATA_REVISION, settings.metadata_path)
    if opf is None:
        typer.echo(f"Could not read {settings.metadata_path} in {repo_name}; leaving it as is.", err=True)
        return None
    try:
        proper_name = canonical_name_from_opf(opf, settings.identifier_prefix)
    except IdentifierError as e:
        typer.echo(f"Could not determine identifier for {repo_name}: {e}", err=True)
        return None

    if proper_name == repo_name:
        return None
    target = os.path.join(dest, proper_name)
    if os.path.exists(target):
        typer.echo(f"Cannot rename {repo_name} to {proper_name}: target already exists.", err=True)
        return None
    if verbosity > Verbosity.quiet:
        typer.echo(f"Moving {repo_name} to {proper_name}")
    try:
        os.rename(repo_dir, target)
    except OSError as e:
        typer.echo(f"Could not rename {repo_name} to {proper_name}: {e}", err=True)
        return None
    return proper_name


def clone_new(
    dest: str,
    repos: Sequence[RemoteRepoRef],
    git: VersionControl,
    settings: Settings,
    verbosity: int = Verbosity.quiet,
) -> SyncResult:
    """Clone every repository not yet present, then rename it to its canonical identifier."""
    result = SyncResult()
    origins = known_origins(dest, git)

    for repo in repos:
        repo_name = repo.derived_name
        if (
            os.path.isdir(os.path.join(dest, repo_name))
            or has_truncated_clone(dest, repo_name, settings.long_name_threshold)
            or repo.clone_url in origins
        ):
            result.skipped += 1
            continue

        if verbosity > Verbosity.quiet:
            typer.echo(f"Cloning {repo.clone_url}")
        git.clone_mirror(repo.clone_url, os.path.join(dest, repo_name), verbose=verbosity >= Verbosity.debug)
        if not os.path.isdir(os.path.join(dest, repo_name)):
            typer.echo(f"Failed to clone {repo.clone_url}.", err=True)
            result.failed += 1
            continue

        result.cloned += 1
        origins.add(repo.clone_url)
        if rename_to_canonical(dest, repo_name, git, settings, verbosity):
            result.renamed += 1

    if verbosity > Verbosity.quiet:
        typer.echo(
            f"Done. cloned={result.cloned}, renamed={result.renamed}, "
            f"skipped={result.skipped}, failed={result.failed}."
        )
    return result


def sync_ebooks(
    config: SyncConfig,
    settings: Settings,
    git: VersionControl,
    github: GitHubClient,
) -> SyncResult | None:
    """Refresh local clones, then add new ones unless update-only.

    Returns None when the run stopped before cloning (update-only or rate limit).
    Raises TransportError if the catalog cannot be fetched.
    """
    dest = config.target_directory
    update_repos(dest, git, config.verbosity)
    if config.update_only:
        return None

    if config.verbosity > Verbosity.quiet:
        typer.echo(f"Fetching repositories of {settings.github_org}")
    try:
        urls = github.list_clone_urls(settings.github_org)
    except RateLimitExhausted as e:
        when = e.reset_at.strftime("%Y-%m-%d %H:%M:%S") if e.reset_at else "the limit resets"
        typer.echo(f"Rate limit exceeded. Try again after {when}, or pass a GitHub access token with --token.")
        return None

    repos = filter_clone_urls(urls, settings.excluded_repos)
    return clone_new(dest, repos, git, settings, config.verbosity)
