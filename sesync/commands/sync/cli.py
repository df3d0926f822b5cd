"""CLI for mirroring the Standard Ebooks organisation into a local directory."""

from __future__ import annotations

import os
import re
from typing import NoReturn

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand

from ...config.settings import Settings, get_settings
from ...core.constants import TOKEN_PATTERN, VERBOSITY_PATTERN
from ...core.errors import ConfigurationError, SyncError
from ...core.git_client import GitClient, VersionControl
from ...core.github_client import GitHubClient
from ...core.types import SyncConfig, Verbosity
from .service import sync_ebooks

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Sync Standard Ebooks repositories: update existing mirror clones, then clone new books.",
)


def check_flags(verbosity: str | None, token: str | None) -> None:
    if verbosity is not None and not re.fullmatch(VERBOSITY_PATTERN, verbosity):
        raise ConfigurationError(f"Verbosity must be a non-negative integer, got {verbosity!r}.")
    if token is not None and not re.fullmatch(TOKEN_PATTERN, token):
        raise ConfigurationError("Access token must only contain letters and digits.")


def resolve_config(
    directory: str,
    *,
    verbose: int = 0,
    verbosity: str | None = None,
    update_only: bool = False,
    token: str | None = None,
    settings: Settings | None = None,
) -> SyncConfig:
    """Validate raw flag values and the target directory.

    --verbosity wins over -v. A missing --token falls back to settings.github_token.
    """
    check_flags(verbosity, token)
    level = int(verbosity) if verbosity is not None else verbose
    if token is None and settings is not None:
        token = settings.github_token

    if not os.path.isdir(directory):
        raise ConfigurationError(f"Directory {directory!r} does not exist.")
    if not os.access(directory, os.R_OK | os.X_OK):
        raise ConfigurationError(f"Couldn't access directory {directory!r}.")

    return SyncConfig(
        verbosity=Verbosity.clamp(level),
        update_only=update_only,
        access_token=token or None,
        target_directory=os.path.abspath(directory),
    )


def make_clients(config: SyncConfig, settings: Settings) -> tuple[VersionControl, GitHubClient]:
    git = GitClient()
    git.ensure_available()
    return git, GitHubClient(token=config.access_token, api_base=settings.api_base)


def _fail(message: str) -> NoReturn:
    typer.secho("Error:", fg=typer.colors.RED, bold=True, err=True, nl=False)
    typer.echo(f" {message}", err=True)
    raise typer.Exit(code=1)


class SyncCommand(TyperCommand):
    """Reports bad or unknown flags with the same Error: line and exit code as other fatal errors."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            _fail(e.format_message())


@app.command(cls=SyncCommand)
def sync(
    ctx: typer.Context,
    directory: str | None = typer.Argument(None, metavar="DIRECTORY", help="Directory holding the mirror clones"),
    verbose: int = typer.Option(0, "-v", count=True, help="Increase verbosity (-v, -vv)"),
    verbosity: str | None = typer.Option(None, "--verbosity", metavar="N", help="Set verbosity level (0-2)"),
    update_only: bool = typer.Option(False, "-u", "--update-only", help="Only update existing repositories"),
    token: str | None = typer.Option(None, "--token", help="GitHub access token (env GITHUB_TOKEN used if not set)"),
):
    """Update every repository in DIRECTORY, then clone the books not yet there."""
    try:
        check_flags(verbosity, token)
        if not directory:
            typer.echo(ctx.get_help())
            raise typer.Exit(code=0)

        try:
            settings = get_settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e
        config = resolve_config(
            directory,
            verbose=verbose,
            verbosity=verbosity,
            update_only=update_only,
            token=token,
            settings=settings,
        )
        git, github = make_clients(config, settings)
        sync_ebooks(config, settings, git, github)
    except SyncError as e:
        _fail(str(e))
