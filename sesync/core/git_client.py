"""Small helpers for running Git commands against local mirror clones."""

from __future__ import annotations

import shutil
import subprocess
from typing import Protocol

from .errors import ConfigurationError


class VersionControl(Protocol):
    def fetch(self, repo_dir: str, verbose: bool = False) -> tuple[bool, str | None]: ...

    def clone_mirror(self, url: str, target: str, verbose: bool = False) -> tuple[bool, str | None]: ...

    def show_file(self, repo_dir: str, revision: str, path: str) -> bytes | None: ...

    def origin_url(self, repo_dir: str) -> str | None: ...


class GitClient:
    # ---------- process helpers ----------
    @staticmethod
    def _run(cmd: list[str], cwd: str | None = None) -> tuple[bool, str | None]:
        try:
            subprocess.check_call(cmd, cwd=cwd)
            return True, None
        except subprocess.CalledProcessError as e:
            return False, f"{e}"

    @staticmethod
    def _run_raw(cmd: list[str], cwd: str | None = None) -> tuple[bool, bytes]:
        try:
            return True, subprocess.check_output(cmd, cwd=cwd, stderr=subprocess.DEVNULL)
        except subprocess.CalledProcessError as e:
            return False, e.output or b""

    @classmethod
    def _run_out(cls, cmd: list[str], cwd: str | None = None) -> tuple[bool, str]:
        ok, out = cls._run_raw(cmd, cwd=cwd)
        return ok, out.decode("utf-8", "replace")

    @staticmethod
    def ensure_available() -> None:
        if not shutil.which("git"):
            raise ConfigurationError("git not found. Install it from https://git-scm.com/ and make sure it is on PATH.")

    # ---------- sync ----------
    def fetch(self, repo_dir: str, verbose: bool = False) -> tuple[bool, str | None]:
        return self._run(["git", "-C", repo_dir, "fetch", "-v" if verbose else "-q"])

    def clone_mirror(self, url: str, target: str, verbose: bool = False) -> tuple[bool, str | None]:
        # no credential prompts: fail fast instead of hanging on a missing repo
        cmd = ["git", "-c", "credential.helper=", "clone", "--mirror", "-v" if verbose else "-q", url, target]
        return self._run(cmd)

    # ---------- per-repo reads ----------
    def show_file(self, repo_dir: str, revision: str, path: str) -> bytes | None:
        """Raw file content at a revision; decoding is left to the XML parser."""
        ok, out = self._run_raw(["git", "-C", repo_dir, "show", f"{revision}:{path}"])
        return out if ok else None

    def origin_url(self, repo_dir: str) -> str | None:
        ok, out = self._run_out(["git", "-C", repo_dir, "remote", "get-url", "origin"])
        return out.strip() if ok and out.strip() else None
