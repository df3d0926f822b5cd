"""CLI entrypoint exposing the sync command as the top-level program."""

from ..commands.sync.cli import app

__all__ = ["app"]
