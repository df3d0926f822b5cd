"""Exceptions raised by sesync."""

from __future__ import annotations

from datetime import datetime


class SyncError(RuntimeError):
    pass


class ConfigurationError(SyncError):
    """Bad flags, an unusable target directory, or a missing tool."""


class TransportError(SyncError):
    """The listing request could not be made or returned an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitExhausted(Exception):
    """The API reported zero remaining requests. Not an error: the run stops cleanly."""

    def __init__(self, reset_at: datetime | None = None) -> None:
        super().__init__("GitHub API rate limit exhausted")
        self.reset_at = reset_at
