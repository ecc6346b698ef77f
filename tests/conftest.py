"""Test setup for readme_toc."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

MARKER = "<!-- FOLDER LINKS -->"


@pytest.fixture
def marker() -> str:
    """Default placeholder marker."""
    return MARKER


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with a README holding only a title and the marker."""
    (tmp_path / "README.md").write_text(f"# Notes\n\nIntro text.\n\n{MARKER}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_dir() -> Callable[..., Path]:
    """Factory creating a subdirectory, optionally with its own README.md."""

    def _make(root: Path, name: str, readme: str | None = None) -> Path:
        path = root / name
        path.mkdir()
        if readme is not None:
            (path / "README.md").write_text(readme, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def link() -> Callable[..., str]:
    """Factory rendering canonical link markup for a directory."""

    def _link(name: str, title: str | None = None) -> str:
        return (
            f'<a href="./{name}/" style="font-weight: bold; margin-bottom:200px;">'
            f"❉ {title or name}</a></br>"
        )

    return _link
