import os

import pytest

from sesync.config.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's token or overrides out of the tests."""
    for key in list(os.environ):
        if key == "GITHUB_TOKEN" or key.startswith("SESYNC_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(github_token=None)


@pytest.fixture
def dest(tmp_path) -> str:
    d = tmp_path / "ebooks"
    d.mkdir()
    return str(d)
