"""Tests for environment-driven settings."""

import pytest

from sesync.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self) -> None:
        s = get_settings()

        assert s.github_token is None
        assert s.github_org == "standardebooks"
        assert s.api_base == "https://api.github.com"
        assert s.metadata_path == "src/epub/content.opf"
        assert s.excluded_repos == ["tools", "web", "manual"]
        assert s.long_name_threshold == 100

    def test_token_from_github_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "abc")

        assert get_settings().github_token == "abc"

    def test_prefixed_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESYNC_GITHUB_ORG", "books")
        monkeypatch.setenv("SESYNC_LONG_NAME_THRESHOLD", "50")
        monkeypatch.setenv("SESYNC_EXCLUDED_REPOS", '["tools", "drafts"]')

        s = Settings()

        assert s.github_org == "books"
        assert s.long_name_threshold == 50
        assert s.excluded_repos == ["tools", "drafts"]

    def test_rejects_zero_threshold(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESYNC_LONG_NAME_THRESHOLD", "0")

        with pytest.raises(ValueError):
            Settings()
