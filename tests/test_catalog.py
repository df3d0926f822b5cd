"""Tests for catalog filtering and local name helpers."""

import os

from sesync.core.catalog import filter_clone_urls, has_truncated_clone, list_local_entries
from sesync.core.types import RemoteRepoRef

BASE = "https://github.com/standardebooks"


class TestFilterCloneUrls:
    def test_drops_non_books_and_blanks(self) -> None:
        urls = [
            "https://github.com/x/tools.git",
            "https://github.com/y/web.git",
            "https://github.com/z/manual.git",
            "https://github.com/a/book.git",
            "   ",
        ]

        assert filter_clone_urls(urls) == [RemoteRepoRef("https://github.com/a/book.git")]

    def test_preserves_order(self) -> None:
        urls = [f"{BASE}/c.git", f"{BASE}/a.git", "", f"{BASE}/b.git"]

        assert [r.derived_name for r in filter_clone_urls(urls)] == ["c.git", "a.git", "b.git"]

    def test_match_is_case_sensitive_and_anchored(self) -> None:
        urls = [
            f"{BASE}/Tools.git",
            f"{BASE}/my-tools.git",
            f"{BASE}/web.git.bak",
        ]

        assert [r.clone_url for r in filter_clone_urls(urls)] == urls

    def test_custom_exclusions(self) -> None:
        urls = [f"{BASE}/tools.git", f"{BASE}/drafts.git"]

        assert [r.derived_name for r in filter_clone_urls(urls, ["drafts"])] == ["tools.git"]


class TestRemoteRepoRef:
    def test_derived_name_is_last_segment(self) -> None:
        ref = RemoteRepoRef(f"{BASE}/jane-austen_pride-and-prejudice.git")

        assert ref.derived_name == "jane-austen_pride-and-prejudice.git"


class TestLocalEntries:
    def test_lists_visible_directories_only(self, dest: str) -> None:
        for name in ("b.git", "a.git", ".cache"):
            os.mkdir(os.path.join(dest, name))
        with open(os.path.join(dest, "notes.txt"), "w") as f:
            f.write("x")

        assert list_local_entries(dest) == ["a.git", "b.git"]


class TestTruncatedClone:
    def test_long_name_matches_prefix(self, dest: str) -> None:
        stem = "a" * 100
        os.mkdir(os.path.join(dest, stem[:100] + "-truncated"))

        assert has_truncated_clone(dest, stem + ".git", threshold=100)

    def test_long_name_without_match(self, dest: str) -> None:
        os.mkdir(os.path.join(dest, "other.git"))

        assert not has_truncated_clone(dest, "a" * 120 + ".git", threshold=100)

    def test_short_name_never_checked(self, dest: str) -> None:
        os.mkdir(os.path.join(dest, "short-name-extra.git"))

        assert not has_truncated_clone(dest, "short-name.git", threshold=100)

    def test_threshold_is_configurable(self, dest: str) -> None:
        os.mkdir(os.path.join(dest, "short-name-extra.git"))

        assert has_truncated_clone(dest, "short-name.git", threshold=5)
