"""Tests for subdirectory scanning."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from readme_toc.exceptions import ReadmeIOError
from readme_toc.scanner import scan_subdirectories


class TestScanSubdirectories:
    """Tests for scan_subdirectories function."""

    def test_empty_root(self, tmp_path: Path) -> None:
        """No subdirectories yields no entries."""
        (tmp_path / "README.md").write_text("x")

        assert scan_subdirectories(tmp_path) == []

    def test_sorted_by_default(self, tmp_path: Path, make_dir) -> None:
        """Entries are sorted by name."""
        for name in ("mutability", "boxing", "jsbridge"):
            make_dir(tmp_path, name)

        names = [entry.name for entry in scan_subdirectories(tmp_path)]

        assert names == ["boxing", "jsbridge", "mutability"]

    def test_unsorted_keeps_filesystem_order(self, tmp_path: Path, make_dir) -> None:
        """With sorting disabled the scandir order is used."""
        for name in ("c", "a", "b"):
            make_dir(tmp_path, name)
        expected = [entry.name for entry in os.scandir(tmp_path) if entry.is_dir()]

        names = [entry.name for entry in scan_subdirectories(tmp_path, sort=False)]

        assert names == expected

    def test_skips_files_and_hidden_directories(self, tmp_path: Path, make_dir) -> None:
        """Plain files and dot-directories are not listed by default."""
        make_dir(tmp_path, "notes")
        make_dir(tmp_path, ".git")
        (tmp_path / "file.md").write_text("x")

        assert [entry.name for entry in scan_subdirectories(tmp_path)] == ["notes"]

    def test_include_hidden(self, tmp_path: Path, make_dir) -> None:
        """Dot-directories are listed on request."""
        make_dir(tmp_path, "notes")
        make_dir(tmp_path, ".github")

        names = [entry.name for entry in scan_subdirectories(tmp_path, include_hidden=True)]

        assert names == [".github", "notes"]

    def test_reads_and_trims_nested_readme(self, tmp_path: Path, make_dir) -> None:
        """Nested README content is loaded and trimmed."""
        make_dir(tmp_path, "boxing", "\n\n  Hello  \n\n")
        make_dir(tmp_path, "empty")

        entries = {entry.name: entry.readme for entry in scan_subdirectories(tmp_path)}

        assert entries == {"boxing": "Hello", "empty": None}

    def test_symlinked_directory_is_skipped(self, tmp_path: Path, make_dir) -> None:
        """Symlinks to directories are not followed."""
        target = make_dir(tmp_path, "real")
        try:
            (tmp_path / "alias").symlink_to(target, target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported")

        assert [entry.name for entry in scan_subdirectories(tmp_path)] == ["real"]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        """An unreadable root is reported as ReadmeIOError."""
        with pytest.raises(ReadmeIOError, match="Cannot list directory"):
            scan_subdirectories(tmp_path / "missing")
