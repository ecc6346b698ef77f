"""Discover top-level project directories and their READMEs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from readme_toc.config import DEFAULT_README_NAME
from readme_toc.exceptions import ReadmeIOError
from readme_toc.file_utils import read_text
from readme_toc.schemas import SubdirectoryEntry

logger = logging.getLogger(__name__)


def scan_subdirectories(
    project_root: Path,
    *,
    sort: bool = True,
    include_hidden: bool = False,
    readme_name: str = DEFAULT_README_NAME,
) -> list[SubdirectoryEntry]:
    """List the immediate subdirectories of ``project_root``.

    Symlinks are not followed. Names are compared case-sensitively; with
    ``sort`` disabled the filesystem iteration order is kept.

    Args:
        project_root: Directory to scan.
        sort: Sort entries by name for reproducible output.
        include_hidden: Include directories whose name starts with a dot.
        readme_name: File name of the per-directory README.

    Returns:
        One entry per directory, with its trimmed README text when present.

    Raises:
        ReadmeIOError: If the root or a nested README cannot be read.
    """
    try:
        with os.scandir(project_root) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_dir(follow_symlinks=False)
            ]
    except OSError as exc:
        raise ReadmeIOError(f"Cannot list directory {project_root}: {exc}") from exc

    if sort:
        names.sort()

    result: list[SubdirectoryEntry] = []
    for name in names:
        if name.startswith(".") and not include_hidden:
            logger.debug("Skipping hidden directory %s", name)
            continue
        path = Path(project_root) / name
        readme_path = path / readme_name
        readme = read_text(readme_path).strip() if readme_path.is_file() else None
        result.append(SubdirectoryEntry(name=name, path=path, readme=readme))
    return result
