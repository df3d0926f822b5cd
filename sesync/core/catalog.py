"""Helpers for turning the remote catalog into local directory names."""

from __future__ import annotations

import os
from typing import Iterable, Sequence

from .constants import EXCLUDED_REPOS
from .types import RemoteRepoRef


def is_excluded(url: str, excluded: Sequence[str] = EXCLUDED_REPOS) -> bool:
    return any(url.endswith(f"/{name}.git") for name in excluded)


def filter_clone_urls(urls: Iterable[str], excluded: Sequence[str] = EXCLUDED_REPOS) -> list[RemoteRepoRef]:
    """Drop blank entries and repositories that are not books. Order is preserved."""
    return [RemoteRepoRef(u) for u in urls if u.strip() and not is_excluded(u, excluded)]


def list_local_entries(dest: str) -> list[str]:
    """Sorted names of the non-hidden directories directly under dest."""
    return sorted(
        name for name in os.listdir(dest) if not name.startswith(".") and os.path.isdir(os.path.join(dest, name))
    )


def has_truncated_clone(dest: str, repo_name: str, threshold: int) -> bool:
    """True when a long name may already exist on disk under a shortened form."""
    stem = repo_name[: -len(".git")] if repo_name.endswith(".git") else repo_name
    if len(stem) < threshold:
        return False
    return any(name.startswith(stem) for name in list_local_entries(dest))
