"""Small types and Enums used by sesync."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping


class Verbosity(IntEnum):
    """Output levels selected with -v/-vv/--verbosity."""

    quiet = 0
    progress = 1
    debug = 2

    @classmethod
    def clamp(cls, level: int) -> "Verbosity":
        return cls(min(max(level, cls.quiet), cls.debug))


@dataclass(frozen=True)
class SyncConfig:
    verbosity: Verbosity
    update_only: bool
    access_token: str | None
    target_directory: str


@dataclass(frozen=True)
class RemoteRepoRef:
    clone_url: str

    @property
    def derived_name(self) -> str:
        return self.clone_url.rstrip("/").rsplit("/", 1)[-1]


@dataclass
class HttpResponse:
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


@dataclass
class SyncResult:
    cloned: int = 0
    renamed: int = 0
    skipped: int = 0
    failed: int = 0
