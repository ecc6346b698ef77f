"""File helpers for reading and safely replacing README files."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from readme_toc.config import DEFAULT_ENCODING
from readme_toc.exceptions import ReadmeIOError


def read_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a text file without newline translation, wrapping OS errors.

    Raises:
        ReadmeIOError: If the file is missing, unreadable or not valid text.
    """
    try:
        with path.open(encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadmeIOError(f"Cannot read {path}: {exc}") from exc


def write_text_atomic(path: Path, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Replace ``path`` with ``content`` via a temporary sibling file.

    The target is either left untouched or fully replaced; its permission
    bits are carried over to the new file.

    Raises:
        ReadmeIOError: If the temporary file cannot be written or moved.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise ReadmeIOError(f"Cannot write {path}: {exc}") from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise ReadmeIOError(f"Cannot write {path}: {exc}") from exc
